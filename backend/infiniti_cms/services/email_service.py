"""
Email service.
Sends plain-text mail (with an HTML alternative) through the configured SMTP server.
"""

import asyncio
import html
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from typing import Optional

from fastapi import status

from infiniti_cms.core.config import settings
from infiniti_cms.core.exceptions import EmailDeliveryError
from infiniti_cms.core.logging import get_logger
from infiniti_cms.services.base_service import BaseService
from infiniti_cms.schemas.email import EmailSendRequest, EmailSendResponse

logger = get_logger(__name__)


def render_html(message: str) -> str:
    """Wrap a plain-text message in a minimal HTML body, keeping line breaks."""
    body = html.escape(message).replace("\n", "<br>")
    return (
        '<div style="font-family: Arial, sans-serif; padding: 20px;">'
        f'<p style="white-space: pre-wrap;">{body}</p>'
        "</div>"
    )


class EmailService(BaseService):
    """Service for outbound email."""

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: Optional[bool] = None,
        from_name: Optional[str] = None,
    ):
        self.host = host or settings.SMTP_HOST
        self.port = port or settings.SMTP_PORT
        self.user = user if user is not None else settings.SMTP_USER
        self.password = password if password is not None else settings.SMTP_PASSWORD
        self.use_tls = settings.SMTP_USE_TLS if use_tls is None else use_tls
        self.from_name = from_name or settings.SMTP_FROM_NAME

    def build_message(self, request: EmailSendRequest) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = formataddr((self.from_name, self.user))
        msg["To"] = request.to
        msg["Subject"] = request.subject
        msg["Message-ID"] = make_msgid()
        if request.cc:
            msg["Cc"] = request.cc
        if request.bcc:
            msg["Bcc"] = request.bcc
        msg.attach(MIMEText(request.message, "plain"))
        msg.attach(MIMEText(request.html or render_html(request.message), "html"))
        return msg

    def _deliver(self, msg: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=settings.SMTP_TIMEOUT) as server:
            if self.use_tls:
                server.starttls()
            if self.user and self.password:
                server.login(self.user, self.password)
            server.send_message(msg)

    async def send_email(self, request: EmailSendRequest) -> EmailSendResponse:
        """
        Send an email.

        Raises:
            EmailDeliveryError: 401 on SMTP authentication failure, 503 when the
                server cannot be reached, 502 for any other SMTP rejection.
        """
        msg = self.build_message(request)
        try:
            await asyncio.to_thread(self._deliver, msg)
        except smtplib.SMTPAuthenticationError as e:
            logger.error("SMTP authentication failed", extra={"smtp_host": self.host})
            raise EmailDeliveryError(
                "SMTP authentication failed. Please check your email credentials.",
                status_code=status.HTTP_401_UNAUTHORIZED,
            ) from e
        except (smtplib.SMTPConnectError, smtplib.SMTPServerDisconnected, OSError) as e:
            logger.error(f"SMTP connection failed: {e}", extra={"smtp_host": self.host})
            raise EmailDeliveryError(
                "Failed to connect to email server. Please check your SMTP settings.",
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            ) from e
        except smtplib.SMTPException as e:
            logger.error(f"SMTP send failed: {e}", extra={"smtp_host": self.host})
            raise EmailDeliveryError(
                "Failed to send email",
                status_code=status.HTTP_502_BAD_GATEWAY,
                details=str(e),
            ) from e

        logger.info("Email sent", extra={"to": request.to, "message_id": msg["Message-ID"]})
        return EmailSendResponse(
            success=True,
            message="Email sent successfully",
            message_id=msg["Message-ID"],
        )
