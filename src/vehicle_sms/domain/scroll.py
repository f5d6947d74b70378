from __future__ import annotations

from dataclasses import dataclass

from vehicle_sms.domain.errors import ValidationError

NEAR_BOTTOM_MARGIN = 100


@dataclass(frozen=True, slots=True)
class ScrollPosition:
    """Scroll metrics of the scrolling element, in pixels."""

    scroll_top: float
    scroll_height: float
    client_height: float

    def validate(self) -> None:
        """
        Raises:
            ValidationError: If any metric is negative
        """
        errors = [
            {"field": name, "message": "Must be >= 0", "code": "INVALID_VALUE"}
            for name in ("scroll_top", "scroll_height", "client_height")
            if getattr(self, name) < 0
        ]
        if errors:
            raise ValidationError(errors=errors)

    def is_near_bottom(self, margin: float = NEAR_BOTTOM_MARGIN) -> bool:
        return self.scroll_height - self.scroll_top <= self.client_height + margin
