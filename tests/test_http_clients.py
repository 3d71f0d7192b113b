import json

import httpx
import pytest

from app.services.HubSpotClient import HubSpotClient
from app.services.ResendEmailClient import ResendEmailClient


def mock_client_factory(handler, calls):
    def _client():
        def recording_handler(request):
            calls.append(request)
            return handler(request)
        return httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
    return _client


@pytest.mark.asyncio
async def test_hubspot_create_contact_posts_properties():
    calls = []
    client = HubSpotClient(access_token="pat-123")
    client._client = mock_client_factory(
        lambda request: httpx.Response(201, json={"id": "901"}), calls
    )

    out = await client.create_contact({"email": "jo@acme.com", "firstname": "Jo"})

    assert out == {"id": "901"}
    request = calls[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.hubapi.com/crm/v3/objects/contacts"
    assert request.headers["Authorization"] == "Bearer pat-123"
    assert json.loads(request.content) == {
        "properties": {"email": "jo@acme.com", "firstname": "Jo"}
    }


@pytest.mark.asyncio
async def test_hubspot_error_status_raises():
    calls = []
    client = HubSpotClient(access_token="pat-123")
    client._client = mock_client_factory(
        lambda request: httpx.Response(409, text='{"message":"Contact already exists"}'), calls
    )

    with pytest.raises(Exception) as exc_info:
        await client.create_contact({"email": "jo@acme.com"})

    assert "Contact already exists" in str(exc_info.value)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_resend_send_email_payload():
    calls = []
    client = ResendEmailClient(api_key="re_123", default_sender="onboarding@resend.dev")
    client._client = mock_client_factory(
        lambda request: httpx.Response(200, json={"id": "email-42"}), calls
    )

    out = await client.send_email(
        to_emails=["support@example.com"],
        subject="New Contact Form Submission",
        body_html="<p>hi</p>",
    )

    assert out["status"] == "sent"
    assert out["id"] == "email-42"
    request = calls[0]
    assert str(request.url) == "https://api.resend.com/emails"
    assert request.headers["Authorization"] == "Bearer re_123"
    assert json.loads(request.content) == {
        "from": "onboarding@resend.dev",
        "to": ["support@example.com"],
        "subject": "New Contact Form Submission",
        "html": "<p>hi</p>",
    }


@pytest.mark.asyncio
async def test_resend_without_api_key_raises_before_sending():
    calls = []
    client = ResendEmailClient(api_key="", default_sender="onboarding@resend.dev")
    client._client = mock_client_factory(lambda request: httpx.Response(200, json={}), calls)

    with pytest.raises(RuntimeError):
        await client.send_email(["support@example.com"], "s", "<p>b</p>")

    assert calls == []


@pytest.mark.asyncio
async def test_resend_rejection_raises():
    calls = []
    client = ResendEmailClient(api_key="re_123", default_sender="onboarding@resend.dev")
    client._client = mock_client_factory(
        lambda request: httpx.Response(422, json={"message": "Invalid `to` field"}), calls
    )

    with pytest.raises(Exception) as exc_info:
        await client.send_email(["nope"], "s", "<p>b</p>")

    assert "Invalid `to` field" in str(exc_info.value)
