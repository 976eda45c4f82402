# filmgraph/services/schemas/films.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filmgraph.domain.enums import MpaRating


class FilmBase(BaseModel):
    """
    Shape and types only. Length, date and required-rating rules belong to
    the core and are applied by FilmService with the core's own settings.
    """
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    release_date: date
    duration: Optional[int] = Field(default=None, gt=0)
    mpa: Optional[MpaRating] = None

    @field_validator("mpa", mode="before")
    @classmethod
    def _mpa(cls, v):
        if v is None or isinstance(v, MpaRating):
            return v
        return MpaRating.from_string(v)


class FilmCreate(FilmBase):
    # any client-sent id is ignored
    pass


class FilmUpdate(FilmBase):
    id: int
    # omitted -> keep stored likes; list -> replace them
    likes: Optional[List[int]] = None


class FilmRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    release_date: date
    duration: Optional[int] = None
    mpa: Optional[MpaRating] = None
    likes: List[int] = []
