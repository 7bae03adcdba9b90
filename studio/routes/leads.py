"""Lead and contact form routes. Submissions are relayed by email."""
from fastapi import APIRouter

from studio.schemas.common import envelope
from studio.schemas.lead import LeadRequest, ContactRequest
from studio.services import email as email_service

router = APIRouter(tags=["leads"])


@router.post("/lead")
def submit_lead(body: LeadRequest):
    email_service.send_email(email_service.format_lead_email(body))
    return envelope(message="Lead email sent successfully")


@router.post("/contact")
def submit_contact(body: ContactRequest):
    email_service.send_email(email_service.format_contact_email(body))
    return envelope(message="Contact email sent successfully")
