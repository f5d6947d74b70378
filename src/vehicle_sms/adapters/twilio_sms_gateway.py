"""Twilio Functions webhook implementation of SmsGateway."""

from __future__ import annotations

import logging

import pydantic
import requests

from vehicle_sms.domain.errors import ExternalServiceError
from vehicle_sms.ports.sms_gateway import SmsGateway, SmsReply, SmsRequest

logger = logging.getLogger(__name__)


class SmsWebhookPayload(pydantic.BaseModel):
    """Request body expected by the webhook (camelCase on the wire)."""

    model_config = pydantic.ConfigDict(populate_by_name=True)

    phone_number: str = pydantic.Field(alias="phoneNumber")
    vehicle_data: list[dict] = pydantic.Field(alias="vehicleData")


class SmsWebhookReply(pydantic.BaseModel):
    status: str | None = None


class TwilioSmsGateway(SmsGateway):
    """
    Posts the selection to a Twilio Functions webhook.

    The webhook answers `{"status": "success"}` when the message was queued.
    Any other body, including one that is not JSON, is passed back as a
    non-success reply. Transport failures and HTTP error statuses raise
    ExternalServiceError.
    """

    def __init__(
        self,
        session: requests.Session,
        url: str,
        timeout: float | None = None,
    ) -> None:
        self._session = session
        self._url = url
        self._timeout = timeout

    def send(self, request: SmsRequest) -> SmsReply:
        payload = SmsWebhookPayload(
            phone_number=request.phone_number,
            vehicle_data=[dict(record) for record in request.vehicle_data],
        )

        try:
            response = self._session.post(
                self._url,
                json=payload.model_dump(by_alias=True),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ExternalServiceError(
                "SMS webhook request failed",
                url=self._url,
                reason=str(exc),
            ) from exc

        try:
            reply = SmsWebhookReply.model_validate(response.json())
        except (ValueError, pydantic.ValidationError):
            # requests' JSONDecodeError is a ValueError
            logger.info("Unrecognised SMS webhook reply", extra={"url": self._url})
            return SmsReply(status=None)

        return SmsReply(status=reply.status)
