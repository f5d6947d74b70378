from fastapi import APIRouter, Depends, Response, status

from vehicle_sms.adapters.notification_center import NotificationCenter
from vehicle_sms.entrypoints.http.dependencies import get_notification_center
from vehicle_sms.entrypoints.http.dtos.notifications import NotificationListDTO
from vehicle_sms.entrypoints.http.error_responses import ErrorResponse
from vehicle_sms.entrypoints.http.mappers.notification_mapper import NotificationMapper


router = APIRouter(tags=["Notifications"])


@router.get(
    "/notifications",
    response_model=NotificationListDTO,
    summary="List active notifications",
    description="Notifications expire 3 seconds after they are raised. Oldest first.",
)
def list_notifications(
    notifications: NotificationCenter = Depends(get_notification_center),
) -> NotificationListDTO:
    return NotificationMapper.to_response(notifications.active())


@router.delete(
    "/notifications/{notification_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Dismiss a notification",
    responses={404: {"model": ErrorResponse, "description": "Unknown or expired notification"}},
)
def dismiss_notification(
    notification_id: int,
    notifications: NotificationCenter = Depends(get_notification_center),
) -> Response:
    notifications.dismiss(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
