"""Tests for EmailService."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from unicredits.domain.user import VerificationEmailError
from unicredits.infrastructure.email import EmailService
from unicredits_config import Settings


def _settings(**overrides) -> Settings:
    values = {
        "jwt_secret_key": "secret",
        "postgres_password": "secret",
        "smtp_enabled": True,
        "smtp_host": "smtp.pku.edu.cn",
        "smtp_port": 587,
        "smtp_user": "noreply",
        "smtp_password": "mail-secret",
        "smtp_from_email": "noreply@pku.edu.cn",
        "smtp_starttls": True,
    }
    values.update(overrides)
    return Settings(**values)


class TestEmailService:
    def test_disabled_smtp_only_logs(self, caplog):
        service = EmailService(_settings(smtp_enabled=False))

        with patch("smtplib.SMTP") as smtp, caplog.at_level("WARNING"):
            service.send_verification_code("a@pku.edu.cn", "123456")

        smtp.assert_not_called()
        assert "123456" in caplog.text

    def test_sends_code_with_starttls(self):
        service = EmailService(_settings(verification_code_expire_minutes=15))
        server = MagicMock()

        with patch("smtplib.SMTP") as smtp:
            smtp.return_value.__enter__.return_value = server
            service.send_verification_code("a@pku.edu.cn", "654321")

        smtp.assert_called_once_with("smtp.pku.edu.cn", 587)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("noreply", "mail-secret")
        message = server.send_message.call_args.args[0]
        assert message["To"] == "a@pku.edu.cn"
        text = message.get_payload()[0].get_payload()
        assert "654321" in text
        assert "15 minutes" in text

    def test_missing_host(self):
        service = EmailService(_settings(smtp_host=""))

        with pytest.raises(VerificationEmailError):
            service.send_verification_code("a@pku.edu.cn", "123456")

    def test_smtp_failure_is_wrapped(self):
        service = EmailService(_settings())

        with patch("smtplib.SMTP", side_effect=smtplib.SMTPConnectError(421, "busy")):
            with pytest.raises(VerificationEmailError) as exc_info:
                service.send_verification_code("a@pku.edu.cn", "123456")

        assert exc_info.value.code.value == "EMAIL_DELIVERY_FAILED"
