"""Contact form submission: validate, offer to HubSpot, fall back to the database plus an email."""

import logging
import traceback
from typing import Optional

from app.constants.constants import (
    DUPLICATE_SUBMISSION_MESSAGE,
    HUBSPOT_CONTACT_PROPERTIES,
    SUBMISSION_FAILED_MESSAGE,
    SUCCESS_MESSAGE,
    VALIDATION_FAILED_MESSAGE,
    SubmissionOutcome,
)
from app.schemas.contactformSchema import ContactFormData, ContactSubmissionResult
from app.services.ContactFormNotifications import notify_admin_new_contact_submission
from app.services.ContactSubmissionRepository import (
    ContactSubmissionRepository,
    DuplicateSubmissionError,
)
from app.services.HubSpotClient import HubSpotClient
from app.services.ResendEmailClient import ResendEmailClient
from app.utils.validate_contact_form import normalize_email, validate_contact_form

logger = logging.getLogger(__name__)


class ContactSubmissionService:
    """
    Handles one contact form submission.

    The HubSpot client is optional: when it is None the CRM is treated as not
    configured and every valid submission goes straight to the local fallback
    (duplicate check, insert, support notification email).
    """

    def __init__(
        self,
        repository: ContactSubmissionRepository,
        email_client: ResendEmailClient,
        notification_recipient: str,
        crm_client: Optional[HubSpotClient] = None
    ):
        self.repository = repository
        self.email_client = email_client
        self.notification_recipient = notification_recipient
        self.crm_client = crm_client

    async def submit(self, form: ContactFormData) -> ContactSubmissionResult:
        errors = validate_contact_form(form)
        if errors:
            return ContactSubmissionResult(
                success=False,
                message=VALIDATION_FAILED_MESSAGE,
                errors=errors,
                outcome=SubmissionOutcome.invalid
            )

        try:
            if self.crm_client is None:
                logger.info("No HubSpot API key found, using database fallback")
                return await self._fallback_to_database(form)

            try:
                logger.info("Attempting to create HubSpot contact")
                await self.crm_client.create_contact(self._crm_properties(form))
            except Exception as e:
                logger.error(f"HubSpot creation failed, falling back to database: {e}")
                return await self._fallback_to_database(form)

            logger.info("HubSpot contact created successfully")
            return ContactSubmissionResult(
                success=True,
                message=SUCCESS_MESSAGE,
                outcome=SubmissionOutcome.crm_created
            )

        except Exception:
            logger.error(f"Form submission error: {traceback.format_exc()}")
            return ContactSubmissionResult(
                success=False,
                message=SUBMISSION_FAILED_MESSAGE,
                outcome=SubmissionOutcome.failed
            )

    def _crm_properties(self, form: ContactFormData) -> dict:
        properties = {
            HUBSPOT_CONTACT_PROPERTIES["first_name"]: form.first_name.strip(),
            HUBSPOT_CONTACT_PROPERTIES["last_name"]: form.last_name.strip(),
            HUBSPOT_CONTACT_PROPERTIES["email"]: normalize_email(form.email),
            HUBSPOT_CONTACT_PROPERTIES["questions"]: form.questions.strip(),
        }
        if form.phone:
            properties[HUBSPOT_CONTACT_PROPERTIES["phone"]] = form.phone.strip()
        return properties

    async def _fallback_to_database(self, form: ContactFormData) -> ContactSubmissionResult:
        logger.info("Falling back to database and email notification")
        email = normalize_email(form.email)

        duplicate = ContactSubmissionResult(
            success=False,
            message=DUPLICATE_SUBMISSION_MESSAGE,
            outcome=SubmissionOutcome.duplicate
        )

        if await self.repository.find_by_email(email):
            logger.info(f"Duplicate contact submission rejected for {email}")
            return duplicate

        try:
            submission = await self.repository.create(
                first_name=form.first_name.strip(),
                last_name=form.last_name.strip(),
                email=email,
                phone=form.phone.strip() if form.phone else None,
                questions=form.questions.strip()
            )
        except DuplicateSubmissionError:
            # Lost the race against a concurrent submission with the same email
            logger.info(f"Duplicate contact submission rejected on insert for {email}")
            return duplicate

        logger.info(f"Contact submission {submission.id} stored")

        await notify_admin_new_contact_submission(
            submission_data={
                'first_name': form.first_name,
                'last_name': form.last_name,
                'email': form.email,
                'phone': form.phone,
                'questions': form.questions
            },
            email_client=self.email_client,
            recipient=self.notification_recipient
        )

        return ContactSubmissionResult(
            success=True,
            message=SUCCESS_MESSAGE,
            outcome=SubmissionOutcome.stored_locally
        )
