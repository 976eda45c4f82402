# filmgraph/services/api/routers/films.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from filmgraph.services.api.deps import get_film_service
from filmgraph.services.films import FilmService
from filmgraph.services.mappers import film as mapper
from filmgraph.services.schemas.films import FilmCreate, FilmRead, FilmUpdate

router = APIRouter(prefix="/films", tags=["films"])


@router.post("", response_model=FilmRead, status_code=HTTPStatus.CREATED)
def create_film(payload: FilmCreate, svc: FilmService = Depends(get_film_service)) -> FilmRead:
    return mapper.to_read_schema(svc.create(mapper.to_domain_from_create(payload)))


@router.get("", response_model=List[FilmRead])
def list_films(svc: FilmService = Depends(get_film_service)) -> List[FilmRead]:
    return [mapper.to_read_schema(f) for f in svc.list_all()]


@router.put("", response_model=FilmRead)
def update_film(payload: FilmUpdate, svc: FilmService = Depends(get_film_service)) -> FilmRead:
    return mapper.to_read_schema(svc.update(mapper.to_domain_from_update(payload)))


# must be declared before /{film_id}
@router.get("/popular", response_model=List[FilmRead])
def popular_films(
    count: Optional[int] = Query(None, description="How many films; missing or <= 0 uses the default"),
    svc: FilmService = Depends(get_film_service),
) -> List[FilmRead]:
    return [mapper.to_read_schema(f) for f in svc.popular(count)]


@router.get("/{film_id}", response_model=FilmRead)
def get_film(film_id: int = Path(...), svc: FilmService = Depends(get_film_service)) -> FilmRead:
    return mapper.to_read_schema(svc.get(film_id))


@router.put("/{film_id}/like/{user_id}", status_code=HTTPStatus.NO_CONTENT)
def like_film(film_id: int, user_id: int, svc: FilmService = Depends(get_film_service)) -> None:
    svc.add_like(film_id, user_id)
    return None


@router.delete("/{film_id}/like/{user_id}", status_code=HTTPStatus.NO_CONTENT)
def unlike_film(film_id: int, user_id: int, svc: FilmService = Depends(get_film_service)) -> None:
    svc.remove_like(film_id, user_id)
    return None
