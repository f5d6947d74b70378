"""
Dependency injection for FastAPI routes.

Key principle: the table host is created once per app and kept on
`app.state`; routes reach it through these providers so tests can swap any
of them with `app.dependency_overrides`.
"""

from __future__ import annotations

from fastapi import Depends, Request

from vehicle_sms.adapters.notification_center import NotificationCenter
from vehicle_sms.adapters.opendatasoft_vehicle_catalog import OpendatasoftVehicleCatalog
from vehicle_sms.adapters.scroll_viewport import ScrollViewport
from vehicle_sms.adapters.twilio_sms_gateway import TwilioSmsGateway
from vehicle_sms.entrypoints.http.table_host import TableHost
from vehicle_sms.infra.config import Settings
from vehicle_sms.infra.http.session import get_http_session
from vehicle_sms.use_cases.load_vehicle_catalog import LoadVehicleCatalog
from vehicle_sms.use_cases.send_vehicle_sms import SendVehicleSms
from vehicle_sms.use_cases.vehicle_table import VehicleTable


def build_table_host(settings: Settings) -> TableHost:
    """
    Wire a TableHost against the real catalog and SMS webhook.

    Each mount gets fresh use cases and adapters; the viewport and
    notification center are shared for the lifetime of the host.

    Args:
        settings: Endpoint URLs, sizes and timeouts

    Returns:
        TableHost: Host with no table mounted yet
    """

    def table_factory(viewport: ScrollViewport, notifications: NotificationCenter) -> VehicleTable:
        session = get_http_session()
        catalog = OpendatasoftVehicleCatalog(
            session=session,
            url=settings.catalog_url,
            timeout=settings.request_timeout,
        )
        gateway = TwilioSmsGateway(
            session=session,
            url=settings.sms_webhook_url,
            timeout=settings.request_timeout,
        )
        return VehicleTable(
            load_vehicle_catalog=LoadVehicleCatalog(
                vehicle_catalog=catalog,
                notifier=notifications,
                page_size=settings.catalog_page_size,
            ),
            send_vehicle_sms=SendVehicleSms(
                sms_gateway=gateway,
                notifier=notifications,
                country_code=settings.country_code,
            ),
            viewport=viewport,
            initial_reveal_count=settings.initial_reveal_count,
            reveal_increment=settings.reveal_increment,
        )

    return TableHost(
        table_factory=table_factory,
        viewport=ScrollViewport(margin=settings.scroll_margin),
        notifications=NotificationCenter(ttl_seconds=settings.notification_ttl_seconds),
    )


def get_table_host(request: Request) -> TableHost:
    """Returns the host stored on the application by build_app()."""
    return request.app.state.table_host


def get_vehicle_table(host: TableHost = Depends(get_table_host)) -> VehicleTable:
    """
    Returns the mounted table.

    Raises:
        NotFoundError: If no table is mounted (translated to 404)
    """
    return host.current()


def get_scroll_viewport(host: TableHost = Depends(get_table_host)) -> ScrollViewport:
    return host.viewport


def get_notification_center(host: TableHost = Depends(get_table_host)) -> NotificationCenter:
    return host.notifications
