# filmgraph/services/mappers/film.py
from __future__ import annotations

from filmgraph.domain.entities.film import Film
from filmgraph.services.schemas.films import FilmCreate, FilmRead, FilmUpdate


def to_domain_from_create(s: FilmCreate) -> Film:
    return Film(
        title=s.title,
        description=s.description,
        release_date=s.release_date,
        duration=s.duration,
        mpa=s.mpa,
    )


def to_domain_from_update(s: FilmUpdate) -> Film:
    return Film(
        id=s.id,
        title=s.title,
        description=s.description,
        release_date=s.release_date,
        duration=s.duration,
        mpa=s.mpa,
        likes=set(s.likes) if s.likes is not None else None,
    )


def to_read_schema(film: Film) -> FilmRead:
    return FilmRead(
        id=film.id,
        title=film.title,
        description=film.description,
        release_date=film.release_date,
        duration=film.duration,
        mpa=film.mpa,
        likes=sorted(film.likes or ()),
    )
