# filmgraph/domain/policies/ranking.py
from __future__ import annotations

from typing import Iterable, List, Optional

from filmgraph.domain.entities.film import Film
from filmgraph.domain.ports.stores import FilmStorePort

DEFAULT_POPULAR_COUNT = 10


def effective_count(count: Optional[int], default: int = DEFAULT_POPULAR_COUNT) -> int:
    if count is None or count <= 0:
        return default
    return count


def rank_by_likes(films: Iterable[Film], count: Optional[int], default: int = DEFAULT_POPULAR_COUNT) -> List[Film]:
    """
    Most-liked first. Ties go to the lower id so the order is stable
    across calls on unchanged data.
    """
    ordered = sorted(films, key=lambda f: (-f.like_count(), f.id))
    return ordered[: effective_count(count, default)]


class RankingEngine:
    def __init__(self, films: FilmStorePort, default_count: int = DEFAULT_POPULAR_COUNT) -> None:
        self.films = films
        self.default_count = default_count

    def popular(self, count: Optional[int] = None) -> List[Film]:
        return rank_by_likes(self.films.all(), count, self.default_count)
