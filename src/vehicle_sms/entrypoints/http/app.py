from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vehicle_sms.entrypoints.http.dependencies import build_table_host
from vehicle_sms.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_sms.entrypoints.http.routes.health import router as health_router
from vehicle_sms.entrypoints.http.routes.notifications import router as notifications_router
from vehicle_sms.entrypoints.http.routes.vehicle_table import router as vehicle_table_router
from vehicle_sms.entrypoints.http.table_host import TableHost
from vehicle_sms.infra.config import load_settings
from vehicle_sms.infra.http.session import close_http_session


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Outbound connections are pooled per process; release them on shutdown
    close_http_session()


def build_app(table_host: TableHost | None = None) -> FastAPI:
    app = FastAPI(
        title="Vehicle SMS Table API",
        description="""
        Local host for the vehicle table: browse the public vehicle catalog,
        filter it, select rows and send them by SMS.

        ## Features
        - Load 100 vehicles from the public catalog on mount
        - Filter by model name, reveal rows as the client scrolls
        - Select vehicles and send them to a phone number

        ## State
        One table per process, held in memory. Nothing is persisted.

        ## Notifications
        Outcomes are reported as short-lived notifications (3 seconds).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    app.state.table_host = table_host or build_table_host(load_settings())

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(vehicle_table_router, prefix="/v1")
    app.include_router(notifications_router, prefix="/v1")

    return app


app = build_app()
