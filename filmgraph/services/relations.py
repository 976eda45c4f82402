# filmgraph/services/relations.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

from filmgraph.common.logging import get_logger
from filmgraph.domain.entities.film import Film
from filmgraph.domain.entities.user import User
from filmgraph.domain.errors import InvalidArgumentError, NotFoundError
from filmgraph.domain.policies.uniqueness_guard import FilmGuard, UserGuard
from filmgraph.domain.ports.stores import FilmStorePort, UserStorePort

logger = get_logger(__name__)


class RelationshipGraph:
    """
    Friend edges (user <-> user, symmetric) and likes (user -> film).

    Edges are id sets stored on the records themselves. Both sides of a
    friend edge are written inside one store.modify() call, so they commit
    together or not at all.

    Reads map stored ids back through the user store. An id that no longer
    resolves is skipped with a warning, or raises NotFoundError when
    `strict_references` is set.
    """

    def __init__(
        self,
        users: UserStorePort,
        films: FilmStorePort,
        *,
        user_guard: Optional[UserGuard] = None,
        film_guard: Optional[FilmGuard] = None,
        strict_references: bool = False,
    ) -> None:
        self.users = users
        self.films = films
        self.user_guard = user_guard or UserGuard(users)
        self.film_guard = film_guard or FilmGuard(films)
        self.strict_references = strict_references

    # ---------------- friends ----------------

    def add_friend(self, user_id: int, friend_id: int) -> None:
        self.user_guard.require(user_id)
        self.user_guard.require(friend_id)
        if user_id == friend_id:
            logger.warning("Ignoring self-friendship for user %s", user_id)
            return

        def _link(rows: Dict[int, User]) -> List[int]:
            changed = []
            for a, b in ((user_id, friend_id), (friend_id, user_id)):
                if b not in rows[a].friends:
                    rows[a].friends.add(b)
                    changed.append(a)
            return changed

        self.users.modify([user_id, friend_id], _link)
        logger.info("Users %s and %s are now friends", user_id, friend_id)

    def remove_friend(self, user_id: int, friend_id: int) -> None:
        self.user_guard.require(user_id)
        self.user_guard.require(friend_id)

        def _unlink(rows: Dict[int, User]) -> List[int]:
            changed = []
            for a, b in ((user_id, friend_id), (friend_id, user_id)):
                if b in rows[a].friends:
                    rows[a].friends.discard(b)
                    changed.append(a)
            return changed

        ids = [user_id] if user_id == friend_id else [user_id, friend_id]
        self.users.modify(ids, _unlink)
        logger.info("Users %s and %s are no longer friends", user_id, friend_id)

    def validate_friend_set(self, user_id: int, friend_ids: Iterable[int]) -> Set[int]:
        """Reject a self id (InvalidArgumentError) or an unknown id (NotFoundError)."""
        wanted = set(friend_ids)
        if user_id in wanted:
            raise InvalidArgumentError(f"User {user_id} cannot be their own friend")
        self.require_users(wanted)
        return wanted

    def replace_friends(self, user_id: int, friend_ids: Iterable[int]) -> None:
        """
        Make `friend_ids` the exact friend set of `user_id`, mirroring every
        added and removed edge on the other side in one modify() call.
        """
        wanted = self.validate_friend_set(user_id, friend_ids)
        current = self.user_guard.require(user_id).friends or set()
        touched = sorted((wanted | current) - {user_id})

        def _replace(rows: Dict[int, User]) -> Set[int]:
            me = rows[user_id]
            changed = set()
            for other in wanted - me.friends:
                me.friends.add(other)
                rows[other].friends.add(user_id)
                changed |= {user_id, other}
            for other in me.friends - wanted:
                # linked after the snapshot above; that add orders after this replace
                if other not in rows:
                    continue
                me.friends.discard(other)
                rows[other].friends.discard(user_id)
                changed |= {user_id, other}
            return changed

        self.users.modify([user_id, *touched], _replace)
        logger.info("Friends of user %s replaced: %s", user_id, sorted(wanted))

    def require_users(self, user_ids: Iterable[int]) -> None:
        for i in sorted(set(user_ids)):
            self.user_guard.require(i)

    def friends_of(self, user_id: int) -> List[User]:
        user = self.user_guard.require(user_id)
        return self._resolve(sorted(user.friends or ()), owner=user_id)

    def common_friends(self, user_id: int, other_id: int) -> List[User]:
        first = self.user_guard.require(user_id)
        second = self.user_guard.require(other_id)
        shared = set(first.friends or ()) & set(second.friends or ())
        return self._resolve(sorted(shared), owner=user_id)

    # ---------------- likes ----------------

    def add_like(self, film_id: int, user_id: int) -> Film:
        self.film_guard.require(film_id)
        self.user_guard.require(user_id)

        def _like(rows: Dict[int, Film]) -> List[int]:
            film = rows[film_id]
            if user_id in film.likes:
                return []
            film.likes.add(user_id)
            return [film_id]

        film = self.films.modify([film_id], _like)[film_id]
        logger.info("User %s likes film %s", user_id, film_id)
        return film

    def remove_like(self, film_id: int, user_id: int) -> Film:
        self.film_guard.require(film_id)
        self.user_guard.require(user_id)

        def _unlike(rows: Dict[int, Film]) -> List[int]:
            film = rows[film_id]
            if user_id not in film.likes:
                return []
            film.likes.discard(user_id)
            return [film_id]

        film = self.films.modify([film_id], _unlike)[film_id]
        logger.info("User %s no longer likes film %s", user_id, film_id)
        return film

    # ---------------- internals ----------------

    def _resolve(self, ids: Iterable[int], owner: int) -> List[User]:
        out: List[User] = []
        for i in ids:
            user = self.users.get_by_id(i)
            if user is None:
                if self.strict_references:
                    raise NotFoundError(f"Friend {i} of user {owner} no longer exists")
                logger.warning("Skipping dangling friend id %s of user %s", i, owner)
                continue
            out.append(user)
        return out
