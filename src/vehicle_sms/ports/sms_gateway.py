from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

SUCCESS_STATUS = "success"


@dataclass(frozen=True, slots=True)
class SmsRequest:
    phone_number: str  # already carries the country code
    vehicle_data: list[Mapping[str, Any]]


@dataclass(frozen=True, slots=True)
class SmsReply:
    status: str | None

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCESS_STATUS


class SmsGateway(ABC):
    """Port for the third-party SMS webhook."""

    @abstractmethod
    def send(self, request: SmsRequest) -> SmsReply:
        """
        Issue exactly one outbound send.

        Raises:
            ExternalServiceError: If the webhook cannot be reached or answers with an error status
        """
        ...
