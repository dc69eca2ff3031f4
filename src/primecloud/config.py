import logging
from typing import TypedDict

from primecloud.settings import load_core_settings

logger = logging.getLogger(__name__)


class RangeDefaults(TypedDict):
    range_from: int
    range_to: int


class Config(TypedDict):
    NUMBERS_SERVICE_URL: str
    INSTANCE_ID: str
    REQUEST_TIMEOUT: float
    OPENAPI_SPEC_URL: str
    RANGE: RangeDefaults


_CORE_SETTINGS = load_core_settings()

NUMBERS_SERVICE_URL: str = _CORE_SETTINGS.numbers_service_url

RANGE: RangeDefaults = {
    "range_from": _CORE_SETTINGS.range_from,
    "range_to": _CORE_SETTINGS.range_to,
}


def validate() -> bool:
    settings = load_core_settings()
    if not settings.numbers_service_url.startswith(("http://", "https://")):
        logger.error(
            f"Invalid NUMBERS_SERVICE_URL '{settings.numbers_service_url}'. "
            "Expected an http:// or https:// URL"
        )
        return False
    if settings.request_timeout <= 0:
        logger.error(
            f"Invalid REQUEST_TIMEOUT '{settings.request_timeout}'. Must be positive"
        )
        return False
    return True


def from_env() -> Config:
    settings = load_core_settings()
    return Config(
        NUMBERS_SERVICE_URL=settings.numbers_service_url,
        INSTANCE_ID=settings.instance_id,
        REQUEST_TIMEOUT=settings.request_timeout,
        OPENAPI_SPEC_URL=settings.openapi_spec_url,
        RANGE={
            "range_from": settings.range_from,
            "range_to": settings.range_to,
        },
    )
