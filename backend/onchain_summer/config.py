"""
Application settings (Pydantic Settings).
"""
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings

# .env next to backend/ (parent of onchain_summer/)
_env_path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    # Calendar dates of the schedule are read in this timezone
    schedule_timezone: str = "UTC"
    # ?spoofDate= preview override; turn off in production
    allow_spoof_date: bool = True
    site_url: str = "https://onchainsummer.xyz"
    arweave_gateway_url: str = "https://arweave.net"
    arweave_graphql_url: str = "https://arweave.net/graphql"
    article_timeout_seconds: float = 10.0
    cors_origins: str = ""  # CORS_ORIGINS in .env, comma-separated

    class Config:
        env_file = _env_path
        extra = "ignore"

    @field_validator("site_url", "arweave_gateway_url", "arweave_graphql_url", mode="after")
    @classmethod
    def strip_urls(cls, v: str) -> str:
        return (v or "").strip().rstrip("/")

    @field_validator("schedule_timezone", mode="after")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        """Fail at startup on an unknown IANA name instead of on every request."""
        v = (v or "").strip()
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone {v!r}") from e
        return v


settings = Settings()
