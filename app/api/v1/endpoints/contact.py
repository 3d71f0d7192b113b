"""API endpoints for the admin "Contact us" form."""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.constants import COUNTRY_CODES, DEFAULT_COUNTRY_CODE
from app.core.config import settings
from app.core.database import aget_db
from app.core.limiter import limiter
from app.core.security import require_shop_session
from app.models.shopsession import ShopSession
from app.schemas.contactformSchema import (
    ContactFormConfigResponse,
    ContactFormData,
    ContactSubmissionResult,
)
from app.services.ContactSubmissionRepository import ContactSubmissionRepository
from app.services.ContactSubmissionService import ContactSubmissionService
from app.services.HubSpotClient import HubSpotClient
from app.services.ResendEmailClient import ResendEmailClient

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/contact",
    tags=["contact"]
)


def get_email_client() -> ResendEmailClient:
    """Create and return a Resend client instance."""
    return ResendEmailClient(
        api_key=settings.RESEND_API_KEY,
        default_sender=settings.NOTIFICATION_SENDER,
        timeout=settings.HTTP_TIMEOUT_SECONDS
    )


def get_crm_client() -> Optional[HubSpotClient]:
    """HubSpot client when an API key is configured, otherwise None."""
    if not settings.CRM_ENABLED:
        return None
    return HubSpotClient(
        access_token=settings.HUBSPOT_API_KEY.strip(),
        timeout=settings.HTTP_TIMEOUT_SECONDS
    )


def get_contact_service(db: AsyncSession = Depends(aget_db)) -> ContactSubmissionService:
    return ContactSubmissionService(
        repository=ContactSubmissionRepository(db),
        email_client=get_email_client(),
        notification_recipient=settings.NOTIFICATION_RECIPIENT,
        crm_client=get_crm_client()
    )


@router.get("/form-config", response_model=ContactFormConfigResponse)
async def get_form_config(
    shop_session: ShopSession = Depends(require_shop_session)
):
    """Country codes and scheduling link for rendering the contact form."""
    return ContactFormConfigResponse(
        country_codes=COUNTRY_CODES,
        default_country_code=DEFAULT_COUNTRY_CODE,
        booking_link=settings.BOOKING_LINK
    )


@router.post("", response_model=ContactSubmissionResult, response_model_exclude_none=True)
@limiter.limit(settings.SUBMISSION_RATE_LIMIT)
async def submit_contact_form(
    request: Request,
    firstName: Optional[str] = Form(None),
    lastName: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    countryCode: Optional[str] = Form(None),
    phoneNumber: Optional[str] = Form(None),
    questions: Optional[str] = Form(None),
    shop_session: ShopSession = Depends(require_shop_session),
    service: ContactSubmissionService = Depends(get_contact_service)
):
    """
    Submit the contact form.

    Always answers 200 with {success, message, errors?}; validation, duplicate
    and delivery failures are reported in the body, not the status code.
    """
    logger.info(f"Contact form submitted from shop {shop_session.shop}")

    form = ContactFormData(
        first_name=firstName,
        last_name=lastName,
        email=email,
        country_code=countryCode,
        phone_number=phoneNumber,
        questions=questions
    )
    return await service.submit(form)
