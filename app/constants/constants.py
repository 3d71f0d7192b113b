"""Constants for the contact form: field limits, user-facing messages, CRM property names and country codes."""

from enum import Enum


class SubmissionOutcome(str, Enum):
    """How a contact form submission ended."""

    invalid = "invalid"
    crm_created = "crm_created"
    stored_locally = "stored_locally"
    duplicate = "duplicate"
    failed = "failed"


# Field limits (applied after trimming)
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 254
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 12
QUESTIONS_MIN_LENGTH = 10
QUESTIONS_MAX_LENGTH = 1000

NAME_PATTERN = r"^[a-zA-Z\s'-]+$"
# Only letters allowed after the final dot
EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

# Result messages
SUCCESS_MESSAGE = "Form submitted successfully! Our team will contact you soon."
VALIDATION_FAILED_MESSAGE = "Please fix the validation errors"
DUPLICATE_SUBMISSION_MESSAGE = (
    "A submission with this email already exists. "
    "Please use a different email or contact support."
)
SUBMISSION_FAILED_MESSAGE = "Failed to submit form. Please try again later."

NOTIFICATION_SUBJECT = "New Contact Form Submission"

# HubSpot contact properties, keyed by our field names
HUBSPOT_CONTACT_PROPERTIES = {
    "first_name": "firstname",
    "last_name": "lastname",
    "email": "email",
    "phone": "phone",
    # No dedicated questions property on the default contact schema
    "questions": "hs_content_membership_notes",
}

DEFAULT_COUNTRY_CODE = "+1"

COUNTRY_CODES = [
    {"label": "🇺🇸 United States (+1)", "value": "+1"},
    {"label": "🇮🇳 India (+91)", "value": "+91"},
    {"label": "🇬🇧 United Kingdom (+44)", "value": "+44"},
    {"label": "🇨🇦 Canada (+1)", "value": "+1"},
    {"label": "🇦🇺 Australia (+61)", "value": "+61"},
    {"label": "🇩🇪 Germany (+49)", "value": "+49"},
    {"label": "🇫🇷 France (+33)", "value": "+33"},
    {"label": "🇯🇵 Japan (+81)", "value": "+81"},
    {"label": "🇨🇳 China (+86)", "value": "+86"},
    {"label": "🇧🇷 Brazil (+55)", "value": "+55"},
    {"label": "🇲🇽 Mexico (+52)", "value": "+52"},
    {"label": "🇷🇺 Russia (+7)", "value": "+7"},
    {"label": "🇰🇷 South Korea (+82)", "value": "+82"},
    {"label": "🇮🇹 Italy (+39)", "value": "+39"},
    {"label": "🇪🇸 Spain (+34)", "value": "+34"},
    {"label": "🇳🇱 Netherlands (+31)", "value": "+31"},
    {"label": "🇸🇪 Sweden (+46)", "value": "+46"},
    {"label": "🇳🇴 Norway (+47)", "value": "+47"},
    {"label": "🇩🇰 Denmark (+45)", "value": "+45"},
    {"label": "🇫🇮 Finland (+358)", "value": "+358"},
]
