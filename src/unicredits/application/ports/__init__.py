"""Ports the application layer needs from the outside world."""

from unicredits.application.ports.email import VerificationEmailSender
from unicredits.application.ports.identity import CurrentUser

__all__ = ["CurrentUser", "VerificationEmailSender"]
