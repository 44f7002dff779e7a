"""Users table access."""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from unicredits.domain.shared.time import ensure_tz_aware
from unicredits.domain.user import (
    Email,
    EmailAlreadyRegisteredError,
    User,
    UserRepository,
)
from unicredits.infrastructure.persistence.sqlalchemy.models import UserModel
from unicredits.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """Unscoped: registration and login run before anyone is authenticated."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _normalize(email: Union[str, Email]) -> str:
        return email.value if isinstance(email, Email) else Email(email).value

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._session.get(UserModel, user_id)
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == self._normalize(email))
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        stmt = select(exists().where(UserModel.email == self._normalize(email)))
        return bool(await self._session.scalar(stmt))

    async def save(self, user: User) -> None:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            self._session.add(
                UserModel(
                    id=user.id,
                    email=user.email,
                    has_completed_setup=user.has_completed_setup,
                    graduation_total_credits=user.graduation_total_credits,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                ),
            )
            logger.info("Created user %s (%s)", user.id, user.email)
        else:
            model.email = user.email
            model.has_completed_setup = user.has_completed_setup
            model.graduation_total_credits = user.graduation_total_credits
            model.updated_at = user.updated_at
            logger.debug(
                "Updated user %s (setup=%s, goal=%s)",
                user.id,
                user.has_completed_setup,
                user.graduation_total_credits,
            )

        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e, "users", ("email",), "ix_users_email"):
                raise EmailAlreadyRegisteredError(user.email) from e
            raise

    def _to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            has_completed_setup=model.has_completed_setup,
            graduation_total_credits=model.graduation_total_credits,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
