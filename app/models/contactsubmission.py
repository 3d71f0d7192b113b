import uuid
from sqlalchemy import Column, String, Text, UniqueConstraint

from app.models.base import Base, TimestampMixin


class ContactSubmission(Base, TimestampMixin):
    """Model for contact form submissions stored when the CRM is unavailable."""

    __tablename__ = "contact_submissions"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)  # normalized: trimmed + lower-cased
    phone = Column(String, nullable=True)
    questions = Column(Text, nullable=False)

    __table_args__ = (
        UniqueConstraint('email', name='uq_contact_submissions_email'),
    )
