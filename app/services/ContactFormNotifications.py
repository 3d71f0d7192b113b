import logging

from app.constants.constants import NOTIFICATION_SUBJECT
from app.services.ResendEmailClient import ResendEmailClient

logger = logging.getLogger(__name__)


ADMIN_NOTIFICATION_TEMPLATE = """
    <h2>New Contact Form Submission</h2>
    <p><strong>First Name:</strong> {first_name}</p>
    <p><strong>Last Name:</strong> {last_name}</p>
    <p><strong>Email:</strong> {email}</p>
    {phone_row}
    <p><strong>Questions:</strong></p>
    <p>{questions}</p>
"""

PHONE_ROW_TEMPLATE = "<p><strong>Phone:</strong> {phone}</p>"


def render_admin_notification(submission_data: dict) -> str:
    """Fill the admin notification template. Values are inserted as submitted."""
    phone = submission_data.get('phone')
    return ADMIN_NOTIFICATION_TEMPLATE.format(
        first_name=submission_data['first_name'],
        last_name=submission_data['last_name'],
        email=submission_data['email'],
        phone_row=PHONE_ROW_TEMPLATE.format(phone=phone) if phone else "",
        questions=submission_data['questions']
    )


async def notify_admin_new_contact_submission(
    submission_data: dict,
    email_client: ResendEmailClient,
    recipient: str
) -> dict:
    """
    Email the support inbox about a contact form submission stored locally.

    Unlike the applicant-facing notifications, a failure here is not swallowed:
    the caller treats it like any other failure of the submission.
    """
    result = await email_client.send_email(
        to_emails=[recipient],
        subject=NOTIFICATION_SUBJECT,
        body_html=render_admin_notification(submission_data)
    )
    logger.info(f"✅ Support notified about contact submission from {submission_data['email']}")
    return result
