"""Resend client for transactional notification emails."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class ResendEmailClient:
    """
    Client for sending HTML emails through the Resend API.

    The sender must be a domain (or the shared onboarding address) verified
    in the Resend account behind the API key.
    """

    BASE_URL = "https://api.resend.com"

    def __init__(
        self,
        api_key: str,
        default_sender: str,
        timeout: Optional[float] = None
    ):
        self.api_key = api_key
        self.default_sender = default_sender
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        if self.timeout is None:
            return httpx.AsyncClient()
        return httpx.AsyncClient(timeout=self.timeout)

    async def send_email(
        self,
        to_emails: list[str],
        subject: str,
        body_html: str,
        reply_to: str = None,
        sender: str = None
    ) -> dict:
        """
        Send an email.

        Args:
            to_emails: List of recipient email addresses
            subject: Email subject
            body_html: HTML body content
            reply_to: Reply-to address (optional)
            sender: Overrides the default sender (optional)

        Returns:
            dict with status information, including the Resend message id

        Raises:
            RuntimeError: If no API key is configured
            Exception: If Resend rejects the message
        """
        if not self.api_key:
            raise RuntimeError("RESEND_API_KEY is not configured")

        payload = {
            "from": sender or self.default_sender,
            "to": to_emails,
            "subject": subject,
            "html": body_html
        }
        if reply_to:
            payload["reply_to"] = reply_to

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        async with self._client() as client:
            response = await client.post(
                f"{self.BASE_URL}/emails",
                headers=headers,
                json=payload
            )

            if response.status_code not in [200, 201, 202]:
                logger.error(f"❌ [Resend] Failed to send email: {response.status_code} - {response.text}")
                raise Exception(f"Failed to send email: {response.text}")

            message_id = response.json().get("id")
            logger.info(f"✅ [Resend] Email sent to {', '.join(to_emails)} (id: {message_id})")

            return {
                "status": "sent",
                "id": message_id,
                "from": payload["from"],
                "to": to_emails,
                "subject": subject
            }
