from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.constants.constants import SubmissionOutcome


class ContactFormData(BaseModel):
    """Raw contact form fields as posted by the admin UI.

    Values are kept as submitted; rule checks live in
    ``app.utils.validate_contact_form`` so every field error can be reported at once.
    """
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    country_code: Optional[str] = Field(default=None, alias="countryCode")
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    questions: Optional[str] = None

    @property
    def phone(self) -> Optional[str]:
        """Country code and number joined, only when both were given."""
        if self.country_code and self.phone_number:
            return f"{self.country_code} {self.phone_number.strip()}"
        return None


class ContactSubmissionResult(BaseModel):
    """Response schema for contact form submission."""
    success: bool
    message: str
    errors: Optional[Dict[str, str]] = None
    outcome: Optional[SubmissionOutcome] = Field(default=None, exclude=True)


class CountryCode(BaseModel):
    label: str
    value: str


class ContactFormConfigResponse(BaseModel):
    """Everything the admin UI needs to render the form."""
    country_codes: List[CountryCode]
    default_country_code: str
    booking_link: str
