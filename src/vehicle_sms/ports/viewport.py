from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

NearBottomListener = Callable[[], None]


class ViewportSignal(ABC):
    """
    Port for the "scrolled near the bottom" signal.

    Implementations call every subscribed listener once per crossing into
    the near-bottom zone.
    """

    @abstractmethod
    def subscribe(self, listener: NearBottomListener) -> None:
        """Attach `listener`. Attaching the same listener twice has no effect."""
        ...

    @abstractmethod
    def unsubscribe(self, listener: NearBottomListener) -> None:
        """Detach `listener`. Detaching an unknown listener has no effect."""
        ...

    @abstractmethod
    def rearm(self) -> None:
        """Let the next near-bottom report fire even if the last one did."""
        ...
