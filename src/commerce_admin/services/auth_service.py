from __future__ import annotations

import logging

from commerce_admin.core.security import PasswordChecker
from commerce_admin.domain.errors import EntityNotFoundError
from commerce_admin.domain.models import User
from commerce_admin.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self, users: ResourceService[User], checker: PasswordChecker, actor_id: str
    ) -> None:
        self._users = users
        self._checker = checker
        self._actor_id = actor_id

    async def login(self, password: str) -> User | None:
        """
        Checks the console password and returns the admin user.
        Returns None for a wrong password.

        Raises:
            EntityNotFoundError: If the admin user record no longer exists.
        """
        if not self._checker.verify(password):
            logger.warning("Rejected console login with wrong password")
            return None

        user = await self._users.get(self._actor_id)
        if user is None:
            raise EntityNotFoundError(self._users.label, self._actor_id)
        return user
