from filmgraph.services.schemas.films import (
    FilmCreate,
    FilmUpdate,
    FilmRead,
)
from filmgraph.services.schemas.users import (
    UserCreate,
    UserUpdate,
    UserRead,
)
__all__ = [
    "FilmCreate",
    "FilmUpdate",
    "FilmRead",
    "UserCreate",
    "UserUpdate",
    "UserRead",
]
