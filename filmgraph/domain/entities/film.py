# filmgraph/domain/entities/film.py
from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from datetime import date
from typing import Any, Optional, Set, Tuple

from filmgraph.common.strings.normalize import title_year_key
from filmgraph.domain.enums.mpa_rating import MpaRating
from filmgraph.domain.errors import InvalidArgumentError


@dataclass
class Film:
    """
    Core domain entity for a film.

    Invariants kept here are structural only (required fields present,
    likes is an independent set). Length/date bounds live in
    domain.policies.field_rules so they can be reported as violations.

    `likes is None` means "not supplied": the store preserves the stored
    set on update and starts an empty set on create.
    """

    title: str = ""
    release_date: Optional[date] = None
    id: Optional[int] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    mpa: Optional[MpaRating] = None
    likes: Optional[Set[int]] = None

    def __post_init__(self):
        if not self.title or not str(self.title).strip():
            raise InvalidArgumentError("Film.title is required")
        if self.release_date is None:
            raise InvalidArgumentError("Film.release_date is required")
        if self.mpa is not None and not isinstance(self.mpa, MpaRating):
            self.mpa = MpaRating.from_string(self.mpa)
        if self.likes is not None:
            # never alias a caller's collection
            self.likes = {int(x) for x in self.likes}

    @property
    def release_year(self) -> int:
        return self.release_date.year  # type: ignore[union-attr]

    def index_key(self) -> Optional[Tuple[str, int]]:
        return title_year_key(self.title, self.release_year)

    def like_count(self) -> int:
        return len(self.likes or ())

    def clone(self, **changes: Any) -> "Film":
        fields: dict = {"likes": set(self.likes) if self.likes is not None else None}
        fields.update(changes)
        return replace(self, **fields)

    def as_dict(self):
        return asdict(self)
