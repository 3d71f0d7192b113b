import os
import logging
from dotenv import load_dotenv
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings
from typing import ClassVar, List, Optional

# Load environment variables from .env file
load_dotenv(".env", override=True)
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Class to store all the settings of the storefront contact application."""

    # ------------------------------
    # Database - Required
    # ------------------------------
    DATABASE_URL: str = Field(env="DATABASE_URL")
    DB_ECHO: bool = Field(default=False, env="DB_ECHO")

    # ------------------------------
    # HubSpot CRM - Optional (empty disables the CRM path)
    # ------------------------------
    HUBSPOT_API_KEY: str = Field(default="", env="HUBSPOT_API_KEY")

    # ------------------------------
    # Email (Resend) - Required whenever the fallback path sends
    # ------------------------------
    RESEND_API_KEY: str = Field(default="", env="RESEND_API_KEY")
    NOTIFICATION_SENDER: str = Field(default="onboarding@resend.dev", env="NOTIFICATION_SENDER")
    NOTIFICATION_RECIPIENT: str = Field(default="abhinav.kavuluru@i95dev.com", env="NOTIFICATION_RECIPIENT")

    # ------------------------------
    # Outbound HTTP
    # ------------------------------
    HTTP_TIMEOUT_SECONDS: Optional[float] = Field(default=None, env="HTTP_TIMEOUT_SECONDS")

    # ------------------------------
    # Shopify embedded admin - Required
    # ------------------------------
    SHOPIFY_API_KEY: str = Field(env="SHOPIFY_API_KEY")
    SHOPIFY_API_SECRET: str = Field(env="SHOPIFY_API_SECRET")
    SESSION_TOKEN_ALGORITHM: str = Field(default="HS256", env="SESSION_TOKEN_ALGORITHM")

    # ------------------------------
    # Scheduling widget
    # ------------------------------
    BOOKING_LINK: str = Field(default="nsconnect/30min", env="BOOKING_LINK")

    # ------------------------------
    # Environment
    # ------------------------------
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    SUBMISSION_RATE_LIMIT: str = Field(default="10/minute", env="SUBMISSION_RATE_LIMIT")

    # ------------------------------
    # Database models
    # ------------------------------
    DB_MODELS: ClassVar[List[str]] = [
        "app.models.shopsession",
        "app.models.contactsubmission",
    ]

    # ------------------------------
    # Computed Fields
    # ------------------------------
    @computed_field
    @property
    def CRM_ENABLED(self) -> bool:
        """Whether submissions are offered to HubSpot before the local fallback."""
        return bool(self.HUBSPOT_API_KEY.strip())

    class Config:
        """Configuration for the settings class."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
settings = Settings()
