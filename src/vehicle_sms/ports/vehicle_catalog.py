from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class VehicleCatalog(ABC):
    """
    Port for the read-only vehicle catalog.

    Contract:
        - One call is one outbound read; implementations never retry
        - The returned records are the catalog's own objects, unmodified
    """

    @abstractmethod
    def fetch(self, limit: int) -> list[Mapping[str, Any]]:
        """
        Read up to `limit` vehicle records.

        Raises:
            CatalogFormatError: If the response carries no array of records
            ExternalServiceError: If the catalog cannot be reached
        """
        ...
