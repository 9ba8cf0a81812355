import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PRICE_API_HOST = "sky-scrapper.p.rapidapi.com"
DEFAULT_PRICE_API_BASE_URL = "https://sky-scrapper.p.rapidapi.com/api/v1/flights"


class ConfigurationError(Exception):
    """Raised when a required setting is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    rapidapi_key: Optional[str]
    rapidapi_host: str = DEFAULT_PRICE_API_HOST
    price_api_base_url: str = DEFAULT_PRICE_API_BASE_URL
    price_api_timeout: Optional[float] = None
    default_currency: str = "USD"
    log_level: str = "INFO"

    def pricing_configured(self) -> bool:
        return bool(self.rapidapi_key)


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def get_settings() -> Settings:
    """Read settings from the environment (and `.env`, loaded on import)."""
    return Settings(
        rapidapi_key=os.getenv("RAPIDAPI_KEY"),
        rapidapi_host=os.getenv("RAPIDAPI_HOST", DEFAULT_PRICE_API_HOST),
        price_api_base_url=os.getenv("PRICE_API_BASE_URL", DEFAULT_PRICE_API_BASE_URL),
        price_api_timeout=_optional_float("PRICE_API_TIMEOUT"),
        default_currency=os.getenv("DEFAULT_CURRENCY", "USD"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
