# filmgraph/services/mappers/user.py
from __future__ import annotations

from filmgraph.domain.entities.user import User
from filmgraph.services.schemas.users import UserCreate, UserRead, UserUpdate


def to_domain_from_create(s: UserCreate) -> User:
    return User(email=str(s.email), login=s.login, name=s.name, birthday=s.birthday)


def to_domain_from_update(s: UserUpdate) -> User:
    return User(
        id=s.id,
        email=str(s.email),
        login=s.login,
        name=s.name,
        birthday=s.birthday,
        friends=set(s.friends) if s.friends is not None else None,
    )


def to_read_schema(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        email=user.email,
        login=user.login,
        name=user.display_name,
        birthday=user.birthday,
        friends=sorted(user.friends or ()),
    )
