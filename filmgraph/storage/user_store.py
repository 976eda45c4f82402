# filmgraph/storage/user_store.py
from __future__ import annotations

from typing import Optional

from filmgraph.common.concurrency.id_allocator import IdentityAllocator
from filmgraph.common.strings.normalize import fold
from filmgraph.domain.entities.user import User
from filmgraph.storage.indexed_store import IndexedStore, SecondaryIndex

EMAIL = "email"
LOGIN = "login"


class UserStore(IndexedStore[User]):
    """Users keyed by id, unique on case-folded email and on case-folded login."""

    kind = "User"

    def __init__(self, *, id_start: int = 1, allocator: Optional[IdentityAllocator] = None) -> None:
        super().__init__(
            indexes=[
                SecondaryIndex(EMAIL, lambda u: u.email_key),
                SecondaryIndex(LOGIN, lambda u: u.login_key),
            ],
            preserved_fields=("friends",),
            allocator=allocator,
            id_start=id_start,
        )

    def get_by_email(self, email: Optional[str]) -> Optional[User]:
        return self.get_by_key(EMAIL, fold(email))

    def get_by_login(self, login: Optional[str]) -> Optional[User]:
        return self.get_by_key(LOGIN, fold(login))

    def exists_by_email(self, email: Optional[str]) -> bool:
        return self.exists_by_key(EMAIL, fold(email))

    def exists_by_login(self, login: Optional[str]) -> bool:
        return self.exists_by_key(LOGIN, fold(login))
