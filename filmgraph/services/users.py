# filmgraph/services/users.py
from __future__ import annotations

from typing import List, Optional

from filmgraph.common.logging import get_logger
from filmgraph.common.settings import ValidationConfig, get_settings
from filmgraph.domain.entities.user import User
from filmgraph.domain.policies.field_rules import ensure_valid_user
from filmgraph.domain.policies.uniqueness_guard import UserGuard
from filmgraph.domain.ports.stores import UserStorePort
from filmgraph.services.relations import RelationshipGraph

logger = get_logger(__name__)


class UserService:
    def __init__(
        self,
        users: UserStorePort,
        guard: UserGuard,
        relations: RelationshipGraph,
        rules: Optional[ValidationConfig] = None,
    ) -> None:
        self.users = users
        self.guard = guard
        self.relations = relations
        self.rules = rules or get_settings().validation

    def create(self, user: User) -> User:
        logger.info("Creating user login=%s", user.login)
        ensure_valid_user(user, self.rules)
        self.guard.validate_for_create(user)
        return self.users.create(self._with_default_name(user))

    def update(self, user: User) -> User:
        logger.info("Updating user id=%s", user.id)
        ensure_valid_user(user, self.rules)
        self.guard.validate_for_update(user)
        if user.friends is None:
            return self.users.update(self._with_default_name(user))

        # explicit set: checked up front, then applied through the graph so both sides move
        self.relations.validate_friend_set(user.id, user.friends)
        self.users.update(self._with_default_name(user.clone(friends=None)))
        self.relations.replace_friends(user.id, user.friends)
        return self.guard.require(user.id)

    def get(self, user_id: int) -> User:
        return self.guard.require(user_id)

    def list_all(self) -> List[User]:
        return self.users.all()

    def add_friend(self, user_id: int, friend_id: int) -> None:
        self.relations.add_friend(user_id, friend_id)

    def remove_friend(self, user_id: int, friend_id: int) -> None:
        self.relations.remove_friend(user_id, friend_id)

    def friends(self, user_id: int) -> List[User]:
        return self.relations.friends_of(user_id)

    def common_friends(self, user_id: int, other_id: int) -> List[User]:
        return self.relations.common_friends(user_id, other_id)

    def _with_default_name(self, user: User) -> User:
        if self.rules.name_default_from_login and (user.name is None or not user.name.strip()):
            logger.debug("Name for %s defaults to login", user.login)
            return user.clone(name=user.login)
        return user
