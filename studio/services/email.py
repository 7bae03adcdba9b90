"""
Lead and contact notifications via Brevo transactional email.

Each submission is formatted into an HTML and a plain-text body and POSTed to
Brevo's SMTP API. There is no retry or queue: a failure is reported to the
caller so the visitor can resubmit the form.
"""
from dataclasses import dataclass
from html import escape

import httpx

from studio.config import settings
from studio.logging_config import get_logger
from studio.schemas.lead import ContactRequest, LeadRequest

logger = get_logger("studio.email")

USER_AGENT = "StudioSite/1.0"
TIMEOUT_SECONDS = 10


class EmailDeliveryError(Exception):
    """The provider rejected the message or could not be reached."""

    def __init__(self, message: str, details=None, configured: bool = True):
        super().__init__(message)
        self.message = message
        self.details = details
        self.configured = configured


@dataclass
class EmailMessage:
    subject: str
    sender_name: str
    html: str
    text: str
    reply_to: str | None = None


def _fields_html(fields: list[tuple[str, str | None]]) -> str:
    return "".join(f"<b>{label}:</b> {escape(value or '')}<br/>" for label, value in fields)


def _fields_text(fields: list[tuple[str, str | None]]) -> str:
    return "\n".join(f"{label}: {value or ''}" for label, value in fields)


def format_lead_email(lead: LeadRequest) -> EmailMessage:
    fields = [
        ("Name", lead.name),
        ("Email", lead.email),
        ("Phone", lead.phone),
        ("Company", lead.company),
        ("Budget", lead.budget),
        ("Timeline", lead.timeline),
    ]
    return EmailMessage(
        subject="New Project Inquiry",
        sender_name="Website Lead",
        html=(
            _fields_html(fields)
            + "<br/><b>Project Description:</b><br/>"
            + escape(lead.project_description).replace("\n", "<br/>")
        ),
        text=_fields_text(fields) + "\n\nProject Description:\n" + lead.project_description,
        reply_to=lead.email,
    )


def format_contact_email(contact: ContactRequest) -> EmailMessage:
    fields = [
        ("Name", contact.name),
        ("Email", contact.email),
        ("Phone", contact.phone),
        ("Company", contact.company),
        ("Project Type", contact.project_type),
        ("Budget", contact.budget),
        ("Timeline", contact.timeline),
    ]
    return EmailMessage(
        subject="New Contact Message",
        sender_name="Website Contact",
        html=(
            _fields_html(fields)
            + "<br/><b>Message:</b><br/>"
            + escape(contact.message).replace("\n", "<br/>")
        ),
        text=_fields_text(fields) + "\n\nMessage:\n" + contact.message,
        reply_to=contact.email,
    )


def build_payload(message: EmailMessage) -> dict:
    """Brevo /v3/smtp/email request body."""
    payload = {
        "sender": {"name": message.sender_name, "email": settings.lead_sender_email},
        "to": [{"email": settings.lead_email_to}],
        "subject": message.subject,
        "htmlContent": message.html,
        "textContent": message.text,
    }
    if message.reply_to:
        payload["replyTo"] = {"email": message.reply_to}
    return payload


def send_email(message: EmailMessage) -> str | None:
    """Hand the message to Brevo. Returns the provider message id."""
    if not settings.brevo_api_key:
        raise EmailDeliveryError("Email delivery is not configured", configured=False)

    headers = {
        "api-key": settings.brevo_api_key,
        "accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }
    try:
        resp = httpx.post(
            settings.brevo_api_url,
            json=build_payload(message),
            headers=headers,
            timeout=TIMEOUT_SECONDS,
        )
    except httpx.HTTPError as e:
        logger.error("Brevo request failed for %r: %s", message.subject, e)
        raise EmailDeliveryError("Failed to send email", details=str(e)) from e

    if resp.status_code >= 400:
        try:
            details = resp.json()
        except ValueError:
            details = resp.text
        logger.error("Brevo rejected %r (%d): %s", message.subject, resp.status_code, details)
        raise EmailDeliveryError("Failed to send email", details=details)

    message_id = None
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message_id = body.get("messageId")
    logger.info("Sent %r (message id %s)", message.subject, message_id)
    return message_id
