import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from api import config
from api.schemas.ContactSchema import ContactResponse, ContactSubmission
from contact_form.validation import normalize_submission, validate_submission
from email_service.contact_email import build_contact_email_html, contact_email_subject
from email_service.transport import EmailDeliveryError, send_contact_email

logger = logging.getLogger(__name__)

contact_router = APIRouter(prefix="/api", tags=["contact"])

THANK_YOU_MESSAGE = "Thank you! We'll be in touch soon."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again or call us directly."


def contact_reply(status_code: int, success: bool, message: str) -> JSONResponse:
    body = ContactResponse(success=success, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@contact_router.post("/contact", response_model=ContactResponse)
async def submit_contact(request: Request):
    """Re-validate a consultation request and forward it to the care home inbox."""
    try:
        body = await request.json()
        submission = ContactSubmission.model_validate(body)
        data = normalize_submission(submission.model_dump())

        errors = validate_submission(data)
        if errors:
            logger.debug("Contact form rejected: %s", errors)
            return contact_reply(400, False, " ".join(errors))

        try:
            await run_in_threadpool(
                send_contact_email,
                sender=config.CONTACT_FROM_EMAIL,
                to=config.CONTACT_TO_EMAIL,
                reply_to=data["email"],
                subject=contact_email_subject(data),
                html=build_contact_email_html(data),
            )
        except EmailDeliveryError as exc:
            logger.error("Email delivery error: %s (details=%r)", exc, exc.details)
            return contact_reply(500, False, GENERIC_ERROR_MESSAGE)

        return contact_reply(200, True, THANK_YOU_MESSAGE)
    except Exception:
        logger.exception("Contact form error")
        return contact_reply(500, False, GENERIC_ERROR_MESSAGE)
