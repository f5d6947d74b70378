from __future__ import annotations

from vehicle_sms.domain.notification import Notice
from vehicle_sms.entrypoints.http.dtos.notifications import NotificationDTO, NotificationListDTO


class NotificationMapper:
    @staticmethod
    def to_response(notices: list[Notice]) -> NotificationListDTO:
        return NotificationListDTO(
            notifications=[
                NotificationDTO(id=notice.id, severity=notice.severity.value, message=notice.message)
                for notice in notices
            ]
        )
