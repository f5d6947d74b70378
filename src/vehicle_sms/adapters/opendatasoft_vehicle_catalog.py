"""Opendatasoft implementation of VehicleCatalog."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pydantic
import requests

from vehicle_sms.domain.errors import CatalogFormatError, ExternalServiceError
from vehicle_sms.ports.vehicle_catalog import VehicleCatalog

logger = logging.getLogger(__name__)


class CatalogPage(pydantic.BaseModel):
    """The part of the records endpoint body the table relies on."""

    results: list[dict[str, Any]]


class OpendatasoftVehicleCatalog(VehicleCatalog):
    """
    Reads the public "all-vehicles-model" dataset.

    - One GET per fetch, `limit` passed as a query parameter
    - HTTP error statuses and connection failures become ExternalServiceError
    - A body without an array-valued `results` field becomes CatalogFormatError
    """

    def __init__(
        self,
        session: requests.Session,
        url: str,
        timeout: float | None = None,
    ) -> None:
        """
        Args:
            session: Shared requests session (see infra.http.session)
            url: Records endpoint of the dataset
            timeout: Seconds to wait for the catalog; None waits indefinitely
        """
        self._session = session
        self._url = url
        self._timeout = timeout

    def fetch(self, limit: int) -> list[Mapping[str, Any]]:
        try:
            response = self._session.get(
                self._url,
                params={"limit": limit},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ExternalServiceError(
                "Vehicle catalog request failed",
                url=self._url,
                reason=str(exc),
            ) from exc

        try:
            body = response.json()
        except ValueError as exc:  # requests' JSONDecodeError is a ValueError
            raise CatalogFormatError("Invalid data format or no data found", url=self._url) from exc

        try:
            page = CatalogPage.model_validate(body)
        except pydantic.ValidationError as exc:
            raise CatalogFormatError("Invalid data format or no data found", url=self._url) from exc

        logger.debug(
            "Vehicle catalog fetched",
            extra={"url": self._url, "limit": limit, "count": len(page.results)},
        )
        return list(page.results)
