import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from unicredits.domain.user import VerificationEmailError
from unicredits_config.settings import Settings

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Your UniCredits verification code"

VERIFICATION_TEXT = """Your verification code is: {code}
It will expire in {minutes} minutes.

If you didn't request this, you can safely ignore this email.

-- UniCredits
"""

VERIFICATION_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Verify your email</h2>
        <p style="color: #374151; line-height: 1.6;">Your verification code is:</p>
        <p style="font-size: 32px; font-weight: 700; letter-spacing: 6px; text-align: center; color: #111827;">{code}</p>
        <p style="color: #6b7280; font-size: 14px;">It will expire in {minutes} minutes.</p>
        <p style="color: #9ca3af; font-size: 13px; margin-top: 40px;">If you didn't request this, you can safely ignore this email.</p>
    </div>
</body>
</html>
"""


class EmailService:
    """Sends verification codes over SMTP.

    With SMTP disabled the code is only logged, which is what local
    development relies on.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            msg = "SMTP host not configured"
            raise VerificationEmailError(to_email, reason=msg)

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise VerificationEmailError(to_email, reason=str(e)) from e

    def send_verification_code(self, to_email: str, code: str) -> None:
        minutes = self._settings.verification_code_expire_minutes

        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping verification email to %s (code: %s)",
                to_email,
                code,
            )
            return

        message = self._create_message(
            to_email=to_email,
            subject=VERIFICATION_SUBJECT,
            text_body=VERIFICATION_TEXT.format(code=code, minutes=minutes),
            html_body=VERIFICATION_HTML.format(code=code, minutes=minutes),
        )
        self._send_email(to_email, message)
