"""SQLAlchemy implementation of PendingVerificationRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from unicredits.domain.shared.time import ensure_tz_aware
from unicredits.domain.user import (
    PendingVerification,
    PendingVerificationRepository,
)
from unicredits.infrastructure.persistence.sqlalchemy.models import (
    PendingVerificationModel,
)

logger = logging.getLogger(__name__)


class PendingVerificationRepositorySQLAlchemy(PendingVerificationRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def upsert(self, verification: PendingVerification) -> None:
        model = await self._find_model(verification.email)

        if model:
            model.code = verification.code
            model.password_hash = verification.password_hash
            model.expires_at = verification.expires_at
            model.created_at = verification.created_at
            logger.debug("Replaced pending verification for %s", verification.email)
        else:
            self._session.add(
                PendingVerificationModel(
                    email=verification.email,
                    code=verification.code,
                    password_hash=verification.password_hash,
                    expires_at=verification.expires_at,
                    created_at=verification.created_at,
                ),
            )
            logger.debug("Created pending verification for %s", verification.email)

        await self._session.flush()

    async def find_by_email(self, email: str) -> PendingVerification | None:
        model = await self._find_model(email)
        if model is None:
            return None
        return PendingVerification(
            email=model.email,
            code=model.code,
            password_hash=model.password_hash,
            expires_at=ensure_tz_aware(model.expires_at),
            created_at=ensure_tz_aware(model.created_at),
        )

    async def delete(self, email: str) -> bool:
        model = await self._find_model(email)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _find_model(self, email: str) -> PendingVerificationModel | None:
        stmt = select(PendingVerificationModel).where(
            PendingVerificationModel.email == email,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
