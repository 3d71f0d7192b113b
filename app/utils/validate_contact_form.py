import re
from typing import Dict, Optional

from app.constants.constants import (
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_PATTERN,
    PHONE_MAX_DIGITS,
    PHONE_MIN_DIGITS,
    QUESTIONS_MAX_LENGTH,
    QUESTIONS_MIN_LENGTH,
)
from app.schemas.contactformSchema import ContactFormData


def normalize_email(email: str) -> str:
    """Normalize email by converting to lowercase and stripping whitespace."""
    return email.strip().lower()


def validate_name(value: Optional[str], label: str) -> Optional[str]:
    """Return the error message for a first/last name, or None if it is valid."""
    name = (value or "").strip()
    if not name:
        return f"{label} is required"
    if len(name) < NAME_MIN_LENGTH:
        return f"At least {NAME_MIN_LENGTH} characters"
    if len(name) > NAME_MAX_LENGTH:
        return f"Max {NAME_MAX_LENGTH} characters"
    if not re.fullmatch(NAME_PATTERN, name):
        return "Only letters, spaces, - and '"
    return None


def validate_email(value: Optional[str]) -> Optional[str]:
    email = (value or "").strip()
    if not email:
        return "Email is required"
    if len(email) > EMAIL_MAX_LENGTH:
        return "Email too long"
    if not re.fullmatch(EMAIL_PATTERN, email):
        return "Invalid email"
    return None


def validate_phone(value: Optional[str]) -> Optional[str]:
    """Phone is optional; when given it must hold 7-12 digits once formatting is stripped."""
    phone = (value or "").strip()
    if not phone:
        return None
    digits = re.sub(r"[^0-9]", "", phone)
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
        return "Invalid phone number format"
    return None


def validate_questions(value: Optional[str]) -> Optional[str]:
    questions = (value or "").strip()
    if not questions:
        return "Questions field is required"
    if len(questions) < QUESTIONS_MIN_LENGTH:
        return f"Minimum {QUESTIONS_MIN_LENGTH} characters"
    if len(questions) > QUESTIONS_MAX_LENGTH:
        return f"Max {QUESTIONS_MAX_LENGTH} characters"
    return None


def validate_contact_form(form: ContactFormData) -> Dict[str, str]:
    """
    Check every field of a contact form submission.

    Args:
        form (ContactFormData): The raw submitted values.

    Returns:
        Dict[str, str]: Field name (as posted by the UI) to error message.
            Empty when the form is valid.
    """
    checks = {
        "firstName": validate_name(form.first_name, "First name"),
        "lastName": validate_name(form.last_name, "Last name"),
        "email": validate_email(form.email),
        "phoneNumber": validate_phone(form.phone_number),
        "questions": validate_questions(form.questions),
    }
    return {field: message for field, message in checks.items() if message}
