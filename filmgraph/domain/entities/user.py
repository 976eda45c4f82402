# filmgraph/domain/entities/user.py
from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from datetime import date
from typing import Any, Optional, Set

from filmgraph.common.strings.normalize import fold
from filmgraph.domain.errors import InvalidArgumentError


@dataclass
class User:
    """
    A person who can befriend other users and like films.

    `friends is None` means "not supplied" (see Film.likes).
    """

    email: str = ""
    login: str = ""
    id: Optional[int] = None
    name: Optional[str] = None
    birthday: Optional[date] = None
    friends: Optional[Set[int]] = None

    def __post_init__(self):
        if not self.email or not str(self.email).strip():
            raise InvalidArgumentError("User.email is required")
        if not self.login or not str(self.login).strip():
            raise InvalidArgumentError("User.login is required")
        if self.friends is not None:
            self.friends = {int(x) for x in self.friends}

    @property
    def display_name(self) -> str:
        """Name shown to others; falls back to the login when blank."""
        if self.name is None or not self.name.strip():
            return self.login
        return self.name

    @property
    def email_key(self) -> Optional[str]:
        return fold(self.email)

    @property
    def login_key(self) -> Optional[str]:
        return fold(self.login)

    def clone(self, **changes: Any) -> "User":
        fields: dict = {"friends": set(self.friends) if self.friends is not None else None}
        fields.update(changes)
        return replace(self, **fields)

    def as_dict(self):
        return asdict(self)
