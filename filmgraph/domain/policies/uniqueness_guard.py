# filmgraph/domain/policies/uniqueness_guard.py
from __future__ import annotations

from typing import Optional

from filmgraph.common.logging import get_logger
from filmgraph.common.settings import MessagesConfig, get_settings
from filmgraph.common.strings.normalize import fold, title_year_key
from filmgraph.domain.entities.film import Film
from filmgraph.domain.entities.user import User
from filmgraph.domain.errors import DuplicateConflictError, NotFoundError
from filmgraph.domain.ports.stores import FilmStorePort, UserStorePort

logger = get_logger(__name__)


class FilmGuard:
    """
    Pre-write checks for films: existence and (title, year) uniqueness.
    Holds no state of its own; every answer comes from the store.
    """

    def __init__(self, films: FilmStorePort, messages: Optional[MessagesConfig] = None) -> None:
        self.films = films
        self.messages = messages or get_settings().messages

    def require(self, film_id: Optional[int]) -> Film:
        film = self.films.get_by_id(film_id)
        if film is None:
            raise NotFoundError(self.messages.film_not_found.format(id=film_id))
        return film

    def validate_for_create(self, candidate: Film) -> None:
        self._check_title_year(candidate.title, candidate.release_year)

    def validate_for_update(self, candidate: Film) -> Film:
        """
        Resolve the stored film, then probe uniqueness only if the
        (normalized title, year) key actually moved. Returns the stored film.
        """
        existing = self.require(candidate.id)
        if title_year_key(candidate.title, candidate.release_year) != existing.index_key():
            self._check_title_year(candidate.title, candidate.release_year)
        return existing

    def _check_title_year(self, title: str, year: int) -> None:
        logger.debug("Checking film uniqueness: %s (%s)", title, year)
        if self.films.exists_by_title_and_year(title, year):
            raise DuplicateConflictError(self.messages.film_duplicate.format(title=title, year=year))


class UserGuard:
    """
    Pre-write checks for users. Email is checked before login so the
    reported conflict is deterministic when both collide.
    """

    def __init__(self, users: UserStorePort, messages: Optional[MessagesConfig] = None) -> None:
        self.users = users
        self.messages = messages or get_settings().messages

    def require(self, user_id: Optional[int]) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(self.messages.user_not_found.format(id=user_id))
        return user

    def validate_for_create(self, candidate: User) -> None:
        self._check_email(candidate.email)
        self._check_login(candidate.login)

    def validate_for_update(self, candidate: User) -> User:
        existing = self.require(candidate.id)
        if fold(candidate.email) != existing.email_key:
            self._check_email(candidate.email)
        if fold(candidate.login) != existing.login_key:
            self._check_login(candidate.login)
        return existing

    def _check_email(self, email: str) -> None:
        if self.users.exists_by_email(email):
            raise DuplicateConflictError(self.messages.email_duplicate.format(email=email))

    def _check_login(self, login: str) -> None:
        if self.users.exists_by_login(login):
            raise DuplicateConflictError(self.messages.login_duplicate.format(login=login))
