from __future__ import annotations
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Iterable

from filmgraph.domain.entities.film import Film
from filmgraph.domain.entities.user import User


class FilmStorePort(Protocol):
    def create(self, candidate: Film) -> Film: ...
    def update(self, entity: Film) -> Film: ...
    def get_by_id(self, film_id: Optional[int]) -> Optional[Film]: ...
    def exists_by_id(self, film_id: Optional[int]) -> bool: ...
    def all(self) -> List[Film]: ...
    def get_by_title_and_year(self, title: Optional[str], year: Optional[int]) -> Optional[Film]: ...
    def exists_by_title_and_year(self, title: Optional[str], year: Optional[int]) -> bool: ...
    def modify(self, ids: Sequence[int], mutate: Callable[[Dict[int, Film]], Iterable[int]]) -> Dict[int, Film]: ...


class UserStorePort(Protocol):
    def create(self, candidate: User) -> User: ...
    def update(self, entity: User) -> User: ...
    def get_by_id(self, user_id: Optional[int]) -> Optional[User]: ...
    def exists_by_id(self, user_id: Optional[int]) -> bool: ...
    def all(self) -> List[User]: ...
    def get_by_email(self, email: Optional[str]) -> Optional[User]: ...
    def get_by_login(self, login: Optional[str]) -> Optional[User]: ...
    def exists_by_email(self, email: Optional[str]) -> bool: ...
    def exists_by_login(self, login: Optional[str]) -> bool: ...
    def modify(self, ids: Sequence[int], mutate: Callable[[Dict[int, User]], Iterable[int]]) -> Dict[int, User]: ...
