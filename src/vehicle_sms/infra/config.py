from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CATALOG_URL = (
    "https://public.opendatasoft.com/api/explore/v2.1/catalog/datasets/"
    "all-vehicles-model/records"
)
DEFAULT_SMS_WEBHOOK_URL = "https://send-sms-1219.twil.io/send-sms"


@dataclass(frozen=True, slots=True)
class Settings:
    catalog_url: str = DEFAULT_CATALOG_URL
    catalog_page_size: int = 100
    sms_webhook_url: str = DEFAULT_SMS_WEBHOOK_URL
    country_code: str = "+91"
    request_timeout: float | None = None  # None waits indefinitely
    initial_reveal_count: int = 10
    reveal_increment: int = 10
    scroll_margin: float = 100
    notification_ttl_seconds: float = 3.0


def _request_timeout() -> float | None:
    raw = os.getenv("VEHICLE_SMS_HTTP_TIMEOUT")

    if not raw:
        return None

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"VEHICLE_SMS_HTTP_TIMEOUT must be a number of seconds, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("VEHICLE_SMS_HTTP_TIMEOUT must be > 0")

    return timeout


def load_settings() -> Settings:
    return Settings(
        catalog_url=os.getenv("VEHICLE_SMS_CATALOG_URL") or DEFAULT_CATALOG_URL,
        sms_webhook_url=os.getenv("VEHICLE_SMS_WEBHOOK_URL") or DEFAULT_SMS_WEBHOOK_URL,
        request_timeout=_request_timeout(),
    )
