import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import parseaddr
from typing import Optional

import requests

from api import config

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """The mail provider rejected the message or could not be reached."""

    def __init__(self, message: str, details: Optional[object] = None):
        super().__init__(message)
        self.details = details


def send_via_resend(sender: str, to: str, reply_to: str, subject: str, html: str) -> Optional[str]:
    """Send through the Resend HTTP API and return the provider message id."""
    if not config.RESEND_API_KEY:
        raise EmailDeliveryError("RESEND_API_KEY is not set")

    payload = {
        "from": sender,
        "to": [to],
        "reply_to": reply_to,
        "subject": subject,
        "html": html,
    }
    headers = {
        "Authorization": f"Bearer {config.RESEND_API_KEY}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(config.RESEND_API_URL, json=payload, headers=headers)
    except requests.RequestException as exc:
        raise EmailDeliveryError(f"Resend request failed: {exc}") from exc

    if not response.ok:
        try:
            details = response.json()
        except ValueError:
            details = response.text
        raise EmailDeliveryError(f"Resend responded with {response.status_code}", details=details)

    try:
        return response.json().get("id")
    except ValueError:
        return None


def send_via_smtp(sender: str, to: str, reply_to: str, subject: str, html: str) -> Optional[str]:
    """Send over SMTP with SSL using the configured mailbox credentials."""
    email_message = MIMEMultipart("alternative")
    email_message["Subject"] = subject
    email_message["From"] = sender
    email_message["To"] = to
    email_message["Reply-To"] = reply_to
    email_message.attach(MIMEText(html, "html"))

    context = ssl.create_default_context()
    try:
        with smtplib.SMTP_SSL(config.SMTP_HOST, config.SMTP_PORT, context=context) as server:
            if config.SMTP_USERNAME:
                server.login(config.SMTP_USERNAME, config.SMTP_PASSWORD)
            server.sendmail(parseaddr(sender)[1], [to], email_message.as_string())
    except (smtplib.SMTPException, OSError) as exc:
        raise EmailDeliveryError(f"SMTP send failed: {exc}") from exc
    return email_message.get("Message-ID")


TRANSPORTS = {
    "resend": send_via_resend,
    "smtp": send_via_smtp,
}


def send_contact_email(sender: str, to: str, reply_to: str, subject: str, html: str) -> Optional[str]:
    transport = TRANSPORTS.get(config.EMAIL_TRANSPORT)
    if transport is None:
        raise EmailDeliveryError(f"Unknown EMAIL_TRANSPORT: {config.EMAIL_TRANSPORT}")

    message_id = transport(sender=sender, to=to, reply_to=reply_to, subject=subject, html=html)
    logger.info("Contact email sent via %s to %s (id=%s)", config.EMAIL_TRANSPORT, to, message_id)
    return message_id
