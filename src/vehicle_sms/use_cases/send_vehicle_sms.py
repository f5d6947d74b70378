"""Send vehicle SMS use case."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from vehicle_sms.domain.errors import ExternalServiceError
from vehicle_sms.domain.phone import (
    DEFAULT_COUNTRY_CODE,
    is_complete_phone_number,
    to_international,
)
from vehicle_sms.domain.selection import Selection
from vehicle_sms.domain.vehicle import Vehicle
from vehicle_sms.ports.notifier import Notifier
from vehicle_sms.ports.sms_gateway import SmsGateway, SmsRequest

logger = logging.getLogger(__name__)

INVALID_PHONE_MESSAGE = "Please enter a valid 10-digit phone number."
NO_SELECTION_MESSAGE = "No vehicles selected."
SENT_MESSAGE = "SMS sent successfully!"
SEND_FAILED_MESSAGE = "Error sending SMS."


class DispatchOutcome(str, Enum):
    SENT = "sent"
    REJECTED = "rejected"  # webhook answered without the success status
    NO_SELECTION = "no_selection"
    FAILED = "failed"  # transport failure


@dataclass(frozen=True, slots=True)
class SendVehicleSmsRequest:
    phone_number: str
    selection: Selection
    vehicles: Sequence[Vehicle]


@dataclass(frozen=True, slots=True)
class SendVehicleSmsResponse:
    outcome: DispatchOutcome
    sent_count: int = 0


class SendVehicleSms:
    """
    Forward the selected vehicles to the SMS webhook.

    Checks, in order:
    1. Phone number length. A wrong length raises a warning notification
       and dispatch continues anyway.
    2. Selection against the full vehicle set. Nothing selected raises an
       error notification and stops before any outbound call.

    Every path after the checks produces exactly one notification.
    """

    def __init__(
        self,
        sms_gateway: SmsGateway,
        notifier: Notifier,
        country_code: str = DEFAULT_COUNTRY_CODE,
    ) -> None:
        self._gateway = sms_gateway
        self._notifier = notifier
        self._country_code = country_code

    def execute(self, request: SendVehicleSmsRequest) -> SendVehicleSmsResponse:
        if not is_complete_phone_number(request.phone_number):
            # Warns without returning; the send below still happens
            self._notifier.warning(INVALID_PHONE_MESSAGE)

        selected = request.selection.pick(request.vehicles)

        if not selected:
            self._notifier.error(NO_SELECTION_MESSAGE)
            return SendVehicleSmsResponse(outcome=DispatchOutcome.NO_SELECTION)

        sms_request = SmsRequest(
            phone_number=to_international(request.phone_number, self._country_code),
            vehicle_data=[vehicle.to_record() for vehicle in selected],
        )

        try:
            reply = self._gateway.send(sms_request)
        except ExternalServiceError as exc:
            logger.error(
                "Error sending SMS",
                exc_info=exc,
                extra={"error_code": exc.error_code, "context": exc.context},
            )
            self._notifier.error(SEND_FAILED_MESSAGE)
            return SendVehicleSmsResponse(outcome=DispatchOutcome.FAILED)

        if not reply.succeeded:
            logger.info("SMS webhook declined", extra={"status": reply.status})
            self._notifier.error(SEND_FAILED_MESSAGE)
            return SendVehicleSmsResponse(outcome=DispatchOutcome.REJECTED)

        logger.info("SMS sent", extra={"vehicle_count": len(selected)})
        self._notifier.success(SENT_MESSAGE)
        return SendVehicleSmsResponse(outcome=DispatchOutcome.SENT, sent_count=len(selected))
