# filmgraph/services/films.py
from __future__ import annotations

from typing import List, Optional

from filmgraph.common.logging import get_logger
from filmgraph.common.settings import ValidationConfig
from filmgraph.domain.entities.film import Film
from filmgraph.domain.policies.field_rules import ensure_valid_film
from filmgraph.domain.policies.ranking import RankingEngine
from filmgraph.domain.policies.uniqueness_guard import FilmGuard
from filmgraph.domain.ports.stores import FilmStorePort
from filmgraph.services.relations import RelationshipGraph

logger = get_logger(__name__)


class FilmService:
    def __init__(
        self,
        films: FilmStorePort,
        guard: FilmGuard,
        ranking: RankingEngine,
        relations: RelationshipGraph,
        rules: Optional[ValidationConfig] = None,
    ) -> None:
        self.films = films
        self.guard = guard
        self.ranking = ranking
        self.relations = relations
        self.rules = rules

    def create(self, film: Film) -> Film:
        logger.info("Creating film '%s' (%s)", film.title, film.release_date)
        ensure_valid_film(film, self.rules)
        self.guard.validate_for_create(film)
        return self.films.create(film)

    def update(self, film: Film) -> Film:
        logger.info("Updating film id=%s", film.id)
        ensure_valid_film(film, self.rules)
        self.guard.validate_for_update(film)
        if film.likes is not None:
            self.relations.require_users(film.likes)
        return self.films.update(film)

    def get(self, film_id: int) -> Film:
        return self.guard.require(film_id)

    def list_all(self) -> List[Film]:
        return self.films.all()

    def popular(self, count: Optional[int] = None) -> List[Film]:
        return self.ranking.popular(count)

    def add_like(self, film_id: int, user_id: int) -> Film:
        return self.relations.add_like(film_id, user_id)

    def remove_like(self, film_id: int, user_id: int) -> Film:
        return self.relations.remove_like(film_id, user_id)
