from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notice:
    """A transient user-facing message."""

    id: int
    severity: Severity
    message: str
    created_at: float

    def expired(self, now: float, ttl_seconds: float) -> bool:
        return now - self.created_at >= ttl_seconds
