# filmgraph/storage/film_store.py
from __future__ import annotations

from typing import Optional

from filmgraph.common.concurrency.id_allocator import IdentityAllocator
from filmgraph.common.strings.normalize import title_year_key
from filmgraph.domain.entities.film import Film
from filmgraph.storage.indexed_store import IndexedStore, SecondaryIndex

TITLE_YEAR = "title+year"


class FilmStore(IndexedStore[Film]):
    """Films keyed by id, unique on (normalized title, release year)."""

    kind = "Film"

    def __init__(self, *, id_start: int = 1, allocator: Optional[IdentityAllocator] = None) -> None:
        super().__init__(
            indexes=[SecondaryIndex(TITLE_YEAR, Film.index_key)],
            preserved_fields=("likes",),
            allocator=allocator,
            id_start=id_start,
        )

    def get_by_title_and_year(self, title: Optional[str], year: Optional[int]) -> Optional[Film]:
        return self.get_by_key(TITLE_YEAR, title_year_key(title, year))

    def exists_by_title_and_year(self, title: Optional[str], year: Optional[int]) -> bool:
        return self.exists_by_key(TITLE_YEAR, title_year_key(title, year))

    def duplicate_message(self, index: str, candidate: Film) -> str:
        title, year = candidate.title, candidate.release_year
        return f"Film with title '{title}' and release year {year} already exists"
