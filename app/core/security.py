"""Verification of Shopify admin session tokens against stored shop sessions."""

import logging
from datetime import datetime
from urllib.parse import urlparse

import jwt
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import aget_db
from app.models.shopsession import ShopSession

logger = logging.getLogger(__name__)


def decode_session_token(token: str) -> dict:
    """Decodes and validates a Shopify session token.

    The embedded admin signs session tokens with the app's API secret and sets
    the app's API key as audience. Expiry and not-before are checked by PyJWT.

    Args:
        token (str): The session token from the Authorization header.

    Returns:
        dict: The decoded token payload.

    Raises:
        jwt.PyJWTError: If the token is invalid, expired, or for another app, or
            the configured secret cannot be used as a key.
    """
    return jwt.decode(
        token,
        settings.SHOPIFY_API_SECRET,
        algorithms=[settings.SESSION_TOKEN_ALGORITHM],
        audience=settings.SHOPIFY_API_KEY
    )


def shop_from_payload(payload: dict) -> str:
    """Extract the shop domain from the `dest` claim (e.g. https://acme.myshopify.com)."""
    dest = payload.get("dest") or ""
    return urlparse(dest).netloc or dest


def _bearer_token(request: Request) -> str:
    header = request.headers.get("authorization") or ""
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return ""
    return token.strip()


async def require_shop_session(
    request: Request,
    db: AsyncSession = Depends(aget_db)
) -> ShopSession:
    """
    Dependency to resolve the installed shop behind an embedded admin request.
    Raises 401 if the token is missing or invalid, or the shop has no live session.
    """
    token = _bearer_token(request)

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )

    try:
        payload = decode_session_token(token)
    except jwt.PyJWTError as e:
        logger.warning(f"Session token rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session token"
        )

    shop = shop_from_payload(payload)
    if not shop:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session token"
        )

    session = await db.get(ShopSession, ShopSession.offline_id(shop))

    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Shop not installed"
        )

    if session.expires and session.expires < datetime.utcnow():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired"
        )

    return session
