"""SMTP mail dispatch"""
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
import asyncio
import logging
import smtplib
import ssl

from formgateway.config import Settings
from formgateway.exceptions import DeliveryError
from formgateway.models.notification import EmailMessage

logger = logging.getLogger(__name__)


class MailDispatcher:
    """
    Sends one message per call over the configured SMTP transport.

    Built once at startup and shared by every form handler. Holds only
    read-only connection settings; each send opens its own SMTP session
    on a worker thread. No retry is attempted; any failure surfaces as
    DeliveryError.
    """

    def __init__(self, settings: Settings):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.username = settings.smtp_username
        self.password = settings.smtp_password
        self.use_tls = settings.smtp_use_tls or settings.smtp_port == 465
        self.start_tls = settings.smtp_start_tls
        self.timeout = settings.smtp_timeout

    def build_message(self, email: EmailMessage) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = email.subject
        msg["From"] = email.sender
        msg["To"] = email.to
        if email.reply_to:
            msg["Reply-To"] = email.reply_to
        msg.attach(MIMEText(email.html, "html", "utf-8"))
        return msg

    def _connect(self) -> smtplib.SMTP:
        context = ssl.create_default_context()
        if self.use_tls:
            return smtplib.SMTP_SSL(self.host, self.port, context=context, timeout=self.timeout)

        server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        if self.start_tls:
            server.starttls(context=context)
        return server

    def _deliver(self, email: EmailMessage) -> None:
        msg = self.build_message(email)
        with self._connect() as server:
            server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, email: EmailMessage) -> None:
        """
        Hand one message to the SMTP server

        Args:
            email: The message to deliver

        Raises:
            DeliveryError: If the connection, login or send fails
        """
        try:
            await asyncio.to_thread(self._deliver, email)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send '{email.subject}' to {email.to}: {e.__class__.__name__}: {e}")
            raise DeliveryError(f"Failed to send email to {email.to}: {e}", recipient=email.to) from e

        logger.info(f"Email '{email.subject}' sent to {email.to}")
