"""Outbound email port used by registration."""

from typing import Protocol


class VerificationEmailSender(Protocol):
    """Delivers verification codes. Raises on delivery failure."""

    def send_verification_code(self, to_email: str, code: str) -> None: ...
