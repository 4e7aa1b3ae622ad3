"""Configuration management for the ResDiary notifier using Pydantic."""

import logging
import re
from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_RESTAURANT = "ChesilRectory"

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class Settings(BaseSettings):
    """Job settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Pushover Configuration
    disable_pushover: bool = Field(
        default=False, description="Only log findings, never send notifications"
    )
    pushover_api_key: str = Field(..., description="Pushover application token")
    pushover_recipient: str = Field(..., description="Pushover user or group key")

    # Search Configuration
    reservation_date: str = Field(
        default="2024-12-21", description="Date to query, YYYY-MM-DD"
    )
    restaurant_names: Annotated[list[str], NoDecode] = Field(
        default=[DEFAULT_RESTAURANT],
        validation_alias=AliasChoices("restaurant_names", "restaurant_name"),
        description="ResDiary restaurant identifiers, comma separated",
    )
    restaurant_covers: str = Field(default="2", description="Party size")

    # Cutoff Configuration
    reservation_ignore_threshold_hour: int = Field(
        default=21, ge=0, le=23, description="Slots at or after this hour are ignored"
    )
    reservation_ignore_threshold_minute: int = Field(
        default=0, ge=0, le=59, description="Minute component of the cutoff"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("restaurant_names", mode="before")
    @classmethod
    def split_restaurant_names(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list | tuple):
            names = [str(name).strip() for name in v]
            names = [name for name in names if name]
            if not names:
                msg = "at least one restaurant name is required"
                raise ValueError(msg)
            return names
        return v

    @field_validator("reservation_date", mode="after")
    @classmethod
    def check_reservation_date(cls, v: str) -> str:
        v = v.strip()
        if not _DATE_RE.fullmatch(v):
            msg = f"reservation date {v!r} must be YYYY-MM-DD"
            raise ValueError(msg)
        datetime.strptime(v, "%Y-%m-%d")  # noqa: DTZ007
        return v

    @field_validator("pushover_api_key", "pushover_recipient", mode="after")
    @classmethod
    def strip_credentials(cls, v: str) -> str:
        return v.strip()

    def model_post_init(self, __context) -> None:
        """Report notable settings after initialization."""
        if self.disable_pushover:
            logger.warning("DISABLE_PUSHOVER set - findings will only be logged")


# Global config instance
config: Settings | None = None


def get_config() -> Settings:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Settings()
    return config


def setup_logging(cfg: Settings | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
