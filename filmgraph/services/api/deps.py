# filmgraph/services/api/deps.py
from __future__ import annotations

from fastapi import Depends, Request

from filmgraph.services.core import Filmgraph
from filmgraph.services.films import FilmService
from filmgraph.services.users import UserService


def get_core(request: Request) -> Filmgraph:
    """The core instance owned by the running app (see create_app)."""
    return request.app.state.core


def get_film_service(core: Filmgraph = Depends(get_core)) -> FilmService:
    return core.film_service


def get_user_service(core: Filmgraph = Depends(get_core)) -> UserService:
    return core.user_service
