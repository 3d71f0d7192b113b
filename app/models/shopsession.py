"""Session records written by the Shopify install/auth handshake. Read-only here."""

from sqlalchemy import BigInteger, Boolean, Column, DateTime, String

from app.models.base import Base


class ShopSession(Base):
    __tablename__ = "sessions"

    id = Column(String, primary_key=True)
    shop = Column(String, nullable=False, index=True)
    state = Column(String, nullable=False)
    is_online = Column(Boolean, default=False, nullable=False)
    scope = Column(String, nullable=True)
    expires = Column(DateTime, nullable=True)
    access_token = Column(String, nullable=False)
    user_id = Column(BigInteger, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    account_owner = Column(Boolean, default=False, nullable=False)
    locale = Column(String, nullable=True)
    collaborator = Column(Boolean, default=False)
    email_verified = Column(Boolean, default=False)

    @staticmethod
    def offline_id(shop: str) -> str:
        """Id the handshake assigns to a shop's offline (app-level) session."""
        return f"offline_{shop}"
