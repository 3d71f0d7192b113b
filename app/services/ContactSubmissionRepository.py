from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.contactsubmission import ContactSubmission


class DuplicateSubmissionError(Exception):
    """A submission with the same normalized email is already stored."""


class ContactSubmissionRepository:
    """Reads and writes contact submissions through an async session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Optional[ContactSubmission]:
        result = await self.db.execute(
            select(ContactSubmission).where(ContactSubmission.email == email)
        )
        return result.scalars().first()

    async def create(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str],
        questions: str
    ) -> ContactSubmission:
        """Insert and commit a new submission.

        Raises:
            DuplicateSubmissionError: If the unique email constraint rejects the row.
        """
        submission = ContactSubmission(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            questions=questions
        )
        self.db.add(submission)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateSubmissionError(email)

        await self.db.refresh(submission)
        return submission
