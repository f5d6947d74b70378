"""
Test suite for the /v1/table routes.

The routes run against a real TableHost whose tables use the in-memory
catalog and a mocked SMS gateway, so each request exercises the full
parse → component → map path without network access.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_sms.adapters.in_memory_vehicle_catalog import InMemoryVehicleCatalog
from vehicle_sms.adapters.notification_center import NotificationCenter
from vehicle_sms.adapters.scroll_viewport import ScrollViewport
from vehicle_sms.entrypoints.http.dependencies import get_vehicle_table
from vehicle_sms.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_sms.entrypoints.http.routes.notifications import router as notifications_router
from vehicle_sms.entrypoints.http.routes.vehicle_table import router
from vehicle_sms.entrypoints.http.table_host import TableHost
from vehicle_sms.ports.sms_gateway import SmsGateway, SmsReply
from vehicle_sms.use_cases.load_vehicle_catalog import LoadVehicleCatalog
from vehicle_sms.use_cases.send_vehicle_sms import SendVehicleSms
from vehicle_sms.use_cases.vehicle_table import VehicleTable

TOP = {"scroll_top": 0, "scroll_height": 3000, "client_height": 600}
BOTTOM = {"scroll_top": 2350, "scroll_height": 3000, "client_height": 600}


def make_records() -> list[dict[str, Any]]:
    """25 records; ids 1-12 are Civics."""
    civics = [{"id": str(n), "model": f"Civic {n}", "make": "Honda"} for n in range(1, 13)]
    others = [{"id": str(n), "model": f"Corolla {n}", "make": "Toyota"} for n in range(13, 26)]
    return civics + others


@pytest.fixture
def gateway() -> Mock:
    mock_gateway = Mock(spec=SmsGateway)
    mock_gateway.send.return_value = SmsReply(status="success")
    return mock_gateway


@pytest.fixture
def host(gateway: Mock) -> TableHost:
    def table_factory(viewport: ScrollViewport, notifications: NotificationCenter) -> VehicleTable:
        return VehicleTable(
            load_vehicle_catalog=LoadVehicleCatalog(
                vehicle_catalog=InMemoryVehicleCatalog(make_records()),
                notifier=notifications,
            ),
            send_vehicle_sms=SendVehicleSms(sms_gateway=gateway, notifier=notifications),
            viewport=viewport,
        )

    return TableHost(
        table_factory=table_factory,
        viewport=ScrollViewport(),
        notifications=NotificationCenter(ttl_seconds=3600),
    )


@pytest.fixture
def app(host: TableHost) -> FastAPI:
    """Create a test FastAPI app with table routes and exception handlers."""
    test_app = FastAPI()
    test_app.state.table_host = host
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.include_router(notifications_router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mounted(client: TestClient) -> TestClient:
    response = client.post("/v1/table")
    assert response.status_code == 201
    return client


# ==============================================================================
# Mount / Unmount
# ==============================================================================


def test_mount_returns_first_rows(client: TestClient) -> None:
    response = client.post("/v1/table")

    assert response.status_code == 201
    data = response.json()
    assert data["total"] == 25
    assert data["visible"] == 10
    assert len(data["rows"]) == 10
    assert data["rows"][0]["model"] == "Civic 1"
    assert data["rows"][0]["selected"] is False
    assert data["loading"] is False
    assert data["load_more"] is True


def test_get_table_before_mount_is_404(client: TestClient) -> None:
    response = client.get("/v1/table")

    assert response.status_code == 404
    assert response.json() == {"detail": "Vehicle table not found", "code": "NOT_FOUND"}


@pytest.mark.parametrize(
    ("method", "path", "body"),
    [
        ("put", "/v1/table/search", {"query": "civic"}),
        ("post", "/v1/table/scroll", BOTTOM),
        ("post", "/v1/table/selection/1", None),
        ("put", "/v1/table/phone", {"value": "123"}),
        ("post", "/v1/table/sms", None),
        ("delete", "/v1/table", None),
    ],
)
def test_table_routes_require_mount(
    client: TestClient, method: str, path: str, body: dict | None
) -> None:
    response = client.request(method, path, json=body)

    assert response.status_code == 404


def test_unmount_returns_204_and_drops_table(mounted: TestClient, host: TableHost) -> None:
    response = mounted.delete("/v1/table")

    assert response.status_code == 204
    assert mounted.get("/v1/table").status_code == 404
    assert host.viewport.listener_count == 0


def test_remount_resets_selection(mounted: TestClient) -> None:
    mounted.post("/v1/table/selection/3")

    data = mounted.post("/v1/table").json()

    assert data["selected_ids"] == []


def test_remount_at_bottom_reveals_on_next_scroll(mounted: TestClient) -> None:
    mounted.post("/v1/table/scroll", json=BOTTOM)

    mounted.post("/v1/table")
    data = mounted.post("/v1/table/scroll", json=BOTTOM).json()

    assert data["visible"] == 20


# ==============================================================================
# Search and Scroll
# ==============================================================================


def test_search_filters_by_model(mounted: TestClient) -> None:
    data = mounted.put("/v1/table/search", json={"query": "CIVIC"}).json()

    assert data["query"] == "CIVIC"
    assert data["matching"] == 12
    assert data["visible"] == 10


def test_search_without_matches_has_empty_message(mounted: TestClient) -> None:
    data = mounted.put("/v1/table/search", json={"query": "mustang"}).json()

    assert data["rows"] == []
    assert data["empty_message"] == "No matching vehicles found"


def test_scroll_to_bottom_reveals_more(mounted: TestClient) -> None:
    mounted.put("/v1/table/search", json={"query": "civic"})

    mounted.post("/v1/table/scroll", json=TOP)
    data = mounted.post("/v1/table/scroll", json=BOTTOM).json()

    assert data["visible"] == 12
    assert data["load_more"] is False


def test_repeated_scroll_reports_reveal_once(mounted: TestClient) -> None:
    for _ in range(5):
        data = mounted.post("/v1/table/scroll", json=BOTTOM).json()

    assert data["visible"] == 20


def test_scroll_with_negative_metrics_is_422(mounted: TestClient) -> None:
    response = mounted.post(
        "/v1/table/scroll",
        json={"scroll_top": -1, "scroll_height": 3000, "client_height": 600},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "scroll_top"


def test_scroll_with_missing_metrics_is_422(mounted: TestClient) -> None:
    response = mounted.post("/v1/table/scroll", json={"scroll_top": 0})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


# ==============================================================================
# Selection and Phone
# ==============================================================================


def test_toggle_selection(mounted: TestClient) -> None:
    data = mounted.post("/v1/table/selection/2").json()

    assert data["selected_ids"] == ["2"]
    assert data["rows"][1]["selected"] is True

    data = mounted.post("/v1/table/selection/2").json()

    assert data["selected_ids"] == []


def test_phone_edit_accepted(mounted: TestClient) -> None:
    response = mounted.put("/v1/table/phone", json={"value": "9876543210"})

    assert response.status_code == 200
    assert response.json() == {"accepted": True, "phone_number": "9876543210"}


def test_phone_edit_rejected_keeps_value(mounted: TestClient) -> None:
    mounted.put("/v1/table/phone", json={"value": "9876543210"})

    response = mounted.put("/v1/table/phone", json={"value": "98765432109"})

    assert response.json() == {"accepted": False, "phone_number": "9876543210"}
    assert mounted.get("/v1/table").json()["phone_number"] == "9876543210"


# ==============================================================================
# Dispatch
# ==============================================================================


def test_send_sms_success(mounted: TestClient, gateway: Mock) -> None:
    mounted.put("/v1/table/phone", json={"value": "9876543210"})
    mounted.post("/v1/table/selection/1")

    response = mounted.post("/v1/table/sms")

    assert response.status_code == 200
    assert response.json() == {"outcome": "sent", "sent_count": 1}
    assert gateway.send.call_args.args[0].phone_number == "+919876543210"

    notices = mounted.get("/v1/notifications").json()["notifications"]
    assert [(n["severity"], n["message"]) for n in notices] == [
        ("success", "SMS sent successfully!")
    ]


def test_send_sms_without_selection(mounted: TestClient, gateway: Mock) -> None:
    response = mounted.post("/v1/table/sms")

    assert response.json() == {"outcome": "no_selection", "sent_count": 0}
    gateway.send.assert_not_called()


def test_send_sms_uses_dependency_override(app: FastAPI, client: TestClient) -> None:
    """Route delegates to whatever table the dependency provides."""
    table = Mock(spec=VehicleTable)
    table.send_sms.return_value = Mock(outcome=Mock(value="failed"), sent_count=0)
    app.dependency_overrides[get_vehicle_table] = lambda: table

    response = client.post("/v1/table/sms")

    assert response.json() == {"outcome": "failed", "sent_count": 0}
    table.send_sms.assert_called_once_with()
