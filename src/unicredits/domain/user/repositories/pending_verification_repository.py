"""Abstract repository for pending email verifications."""

from abc import ABC, abstractmethod

from unicredits.domain.user.entities import PendingVerification


class PendingVerificationRepository(ABC):
    """Stores at most one pending verification per email."""

    @abstractmethod
    async def upsert(self, verification: PendingVerification) -> None:
        """Create the record for its email, replacing any previous one."""

    @abstractmethod
    async def find_by_email(self, email: str) -> PendingVerification | None:
        """Find the pending verification for an email."""

    @abstractmethod
    async def delete(self, email: str) -> bool:
        """Delete the record. Returns False if there was none."""
