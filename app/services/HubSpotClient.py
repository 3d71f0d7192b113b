"""HubSpot CRM client for creating contacts from the contact form."""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class HubSpotClient:
    """
    Minimal client for the HubSpot CRM v3 contacts API.

    Authenticates with a private app access token. Every call is a single
    attempt; callers decide what a failure means.
    """

    BASE_URL = "https://api.hubapi.com"

    def __init__(self, access_token: str, timeout: Optional[float] = None):
        self.access_token = access_token
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json"
        }

    def _client(self) -> httpx.AsyncClient:
        if self.timeout is None:
            return httpx.AsyncClient()
        return httpx.AsyncClient(timeout=self.timeout)

    async def create_contact(self, properties: Dict[str, str]) -> Dict[str, Any]:
        """
        Create a contact record.

        Args:
            properties: HubSpot property name to value, e.g.
                {"firstname": "Jo", "email": "jo@acme.com"}

        Returns:
            dict: The created contact as returned by HubSpot.

        Raises:
            Exception: If HubSpot rejects the request or it cannot be sent.
        """
        async with self._client() as client:
            try:
                response = await client.post(
                    f"{self.BASE_URL}/crm/v3/objects/contacts",
                    headers=self._headers(),
                    json={"properties": properties}
                )
                logger.info(f"HubSpot API response status: {response.status_code}")

                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                logger.error(f"HubSpot API error: {e.response.status_code} - {e.response.text}")
                raise Exception(f"HubSpot API error: {e.response.text}")
            except Exception as e:
                logger.error(f"HubSpot request failed: {str(e)}")
                raise
