import time
from datetime import datetime, timedelta

import jwt
import pytest
from fastapi import HTTPException
from starlette.requests import Request

from app.core.config import settings
from app.core.security import decode_session_token, require_shop_session, shop_from_payload
from app.models.shopsession import ShopSession


class FakeDb:
    def __init__(self, sessions=None):
        self.sessions = {s.id: s for s in (sessions or [])}

    async def get(self, model, ident):
        assert model is ShopSession
        return self.sessions.get(ident)


def make_token(shop="acme.myshopify.com", secret=None, audience=None, expires_in=60):
    now = int(time.time())
    payload = {
        "iss": f"https://{shop}/admin",
        "dest": f"https://{shop}",
        "aud": audience or settings.SHOPIFY_API_KEY,
        "sub": "42",
        "exp": now + expires_in,
        "nbf": now - 5,
        "iat": now - 5,
    }
    return jwt.encode(payload, secret or settings.SHOPIFY_API_SECRET, algorithm="HS256")


def make_request(authorization=None):
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode()))
    return Request({"type": "http", "method": "POST", "path": "/api/v1/contact", "headers": headers})


def offline_session(shop="acme.myshopify.com", expires=None):
    return ShopSession(
        id=ShopSession.offline_id(shop),
        shop=shop,
        state="installed",
        access_token="shpat_123",
        expires=expires,
    )


def test_decode_session_token_and_shop():
    payload = decode_session_token(make_token())
    assert shop_from_payload(payload) == "acme.myshopify.com"


def test_decode_rejects_other_app():
    with pytest.raises(jwt.InvalidTokenError):
        decode_session_token(make_token(audience="another-app"))


@pytest.mark.asyncio
async def test_require_shop_session_returns_offline_session():
    session = offline_session()
    db = FakeDb([session])

    out = await require_shop_session(make_request(f"Bearer {make_token()}"), db=db)

    assert out is session


@pytest.mark.asyncio
@pytest.mark.parametrize("authorization", [None, "", "Basic abc", "Bearer "])
async def test_missing_token_is_401(authorization):
    with pytest.raises(HTTPException) as exc_info:
        await require_shop_session(make_request(authorization), db=FakeDb([offline_session()]))
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_bad_signature_is_401():
    token = make_token(secret="some-other-secret-that-is-long-enough-too")
    with pytest.raises(HTTPException) as exc_info:
        await require_shop_session(make_request(f"Bearer {token}"), db=FakeDb([offline_session()]))
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_expired_token_is_401():
    token = make_token(expires_in=-120)
    with pytest.raises(HTTPException) as exc_info:
        await require_shop_session(make_request(f"Bearer {token}"), db=FakeDb([offline_session()]))
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_unknown_shop_is_401():
    with pytest.raises(HTTPException) as exc_info:
        await require_shop_session(
            make_request(f"Bearer {make_token(shop='other.myshopify.com')}"),
            db=FakeDb([offline_session()])
        )
    assert exc_info.value.detail == "Shop not installed"


@pytest.mark.asyncio
async def test_expired_session_is_401():
    session = offline_session(expires=datetime.utcnow() - timedelta(minutes=1))
    with pytest.raises(HTTPException) as exc_info:
        await require_shop_session(make_request(f"Bearer {make_token()}"), db=FakeDb([session]))
    assert exc_info.value.detail == "Session expired"


@pytest.mark.asyncio
async def test_unusable_secret_is_401(monkeypatch):
    token = make_token()
    monkeypatch.setattr(settings, "SHOPIFY_API_SECRET", "")

    with pytest.raises(HTTPException) as exc_info:
        await require_shop_session(make_request(f"Bearer {token}"), db=FakeDb([offline_session()]))

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Invalid session token"


@pytest.mark.parametrize("missing", ["SHOPIFY_API_KEY", "SHOPIFY_API_SECRET"])
def test_shopify_credentials_are_required(monkeypatch, missing):
    from pydantic import ValidationError

    from app.core.config import Settings

    monkeypatch.delenv(missing, raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
