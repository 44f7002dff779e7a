"""Password hashes, one row per user."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from unicredits.domain.shared.time import utc_now
from unicredits.domain.user import UserCredentialData, UserCredentialRepository
from unicredits.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
)

logger = logging.getLogger(__name__)


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get(self, user_id: UUID) -> UserCredentialModel | None:
        return await self._session.scalar(
            select(UserCredentialModel).where(UserCredentialModel.user_id == user_id),
        )

    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        model = await self._get(user_id)
        if model is None:
            model = UserCredentialModel(user_id=user_id, password_hash=password_hash)
            self._session.add(model)
            logger.info("Stored password for user %s", user_id)
        else:
            model.password_hash = password_hash
            model.updated_at = utc_now()
            logger.debug("Replaced password for user %s", user_id)

        await self._session.flush()
        return UserCredentialData(user_id=model.user_id, password_hash=model.password_hash)

    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        model = await self._get(user_id)
        if model is None:
            return None
        return UserCredentialData(user_id=model.user_id, password_hash=model.password_hash)
