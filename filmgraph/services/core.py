# filmgraph/services/core.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from filmgraph.common.logging import configure_logging
from filmgraph.common.settings import Settings, get_settings
from filmgraph.domain.policies.ranking import RankingEngine
from filmgraph.domain.policies.uniqueness_guard import FilmGuard, UserGuard
from filmgraph.services.films import FilmService
from filmgraph.services.relations import RelationshipGraph
from filmgraph.services.users import UserService
from filmgraph.storage.film_store import FilmStore
from filmgraph.storage.user_store import UserStore


@dataclass
class Filmgraph:
    """Everything one process needs, wired together. No module-level state."""
    settings: Settings
    films: FilmStore
    users: UserStore
    film_guard: FilmGuard
    user_guard: UserGuard
    ranking: RankingEngine
    relations: RelationshipGraph
    film_service: FilmService
    user_service: UserService


def build_core(settings: Optional[Settings] = None) -> Filmgraph:
    cfg = settings or get_settings()
    configure_logging(cfg.log_level)

    films = FilmStore(id_start=cfg.store.film_id_start)
    users = UserStore(id_start=cfg.store.user_id_start)

    film_guard = FilmGuard(films, cfg.messages)
    user_guard = UserGuard(users, cfg.messages)
    ranking = RankingEngine(films, default_count=cfg.ranking.default_count)
    relations = RelationshipGraph(
        users,
        films,
        user_guard=user_guard,
        film_guard=film_guard,
        strict_references=cfg.relations.strict_references,
    )

    return Filmgraph(
        settings=cfg,
        films=films,
        users=users,
        film_guard=film_guard,
        user_guard=user_guard,
        ranking=ranking,
        relations=relations,
        film_service=FilmService(films, film_guard, ranking, relations, cfg.validation),
        user_service=UserService(users, user_guard, relations, cfg.validation),
    )
