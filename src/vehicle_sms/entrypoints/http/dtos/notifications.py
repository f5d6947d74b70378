from pydantic import BaseModel


class NotificationDTO(BaseModel):
    id: int
    severity: str
    message: str


class NotificationListDTO(BaseModel):
    notifications: list[NotificationDTO]
