from typing import Any, Optional, Protocol, Tuple
from models.models import IconStyle, MarkerHandle

Position = Tuple[float, float]


class MapSurface(Protocol):
    """Map widget the overlay draws on. Only touched from the UI context."""

    def clear(self) -> None: ...

    def add_marker(
        self, position: Position, icon: IconStyle, tag: Optional[Any] = None
    ) -> MarkerHandle: ...

    def animate_zoom(self, level: float) -> None: ...

    def set_padding(self, left: int, top: int, right: int, bottom: int) -> None: ...
