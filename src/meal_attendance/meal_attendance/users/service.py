from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Sequence

from ..common.validators import optional_text, parse_badge_id, require_non_empty
from ..core.exceptions import DuplicateEntryError, NotFoundError, StorageError
from .id_generator import BadgeIdGenerator
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("position", "department", "level")


class UserDirectory:
    """Use case: manage the staff roster (admin)."""

    def __init__(self, users: UserRepository, *, id_generator: Optional[BadgeIdGenerator] = None):
        self._users = users
        self._ids = id_generator or BadgeIdGenerator()

    def create(
        self,
        *,
        full_name: Any,
        position: Any = None,
        department: Any = None,
        level: Any = None,
    ) -> User:
        full_name = require_non_empty(full_name, "Full Name")

        user = User(
            user_id=self._ids.generate(self._users.exists),
            full_name=full_name,
            position=optional_text(position),
            department=optional_text(department),
            level=optional_text(level),
        )
        try:
            self._users.insert(user)
        except DuplicateEntryError as exc:
            # Another insert took the ID between the check and the write.
            raise StorageError("Badge ID collision, please retry") from exc

        logger.info("Created user %s (%s)", user.user_id, user.full_name)
        return user

    def find_by_id(self, badge_id: Any) -> Optional[User]:
        user_id = parse_badge_id(badge_id)
        if user_id is None:
            return None
        return self._users.get_by_id(user_id)

    def get(self, badge_id: Any) -> User:
        user = self.find_by_id(badge_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def find_all(self) -> Sequence[User]:
        return list(self._users.list_all())

    def update(self, badge_id: Any, *, full_name: Any, **changes: Any) -> User:
        """Replace the name and any of position/department/level passed in ``changes``.

        Optional fields that are not passed keep their stored value.
        """
        full_name = require_non_empty(full_name, "Full name")
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown user fields: {sorted(unknown)}")

        current = self.get(badge_id)
        updated = replace(
            current,
            full_name=full_name,
            **{name: optional_text(value) for name, value in changes.items()},
        )
        if not self._users.update(updated):
            raise NotFoundError("User not found")

        logger.info("Updated user %s", updated.user_id)
        return updated

    def delete(self, badge_id: Any) -> None:
        user_id = parse_badge_id(badge_id)
        if user_id is None or not self._users.delete_by_id(user_id):
            raise NotFoundError("User not found")
        logger.info("Deleted user %s", user_id)
