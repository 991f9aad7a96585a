from typing import Dict
from models.models import IconStyle, MarkerVariant
from utils.constants import DEFAULT_MARKER_ANCHOR, INFO_MARKER_ANCHOR, MarkerHue

DEFAULT_TEXT_STYLE = {
    "font-size": "12px",
    "font-weight": "600",
    "color": "#222",
    "background-color": "rgba(255,255,255,0.9)",
    "padding": "2px 6px",
    "border-radius": "4px",
    "border": "1px solid #888",
    "white-space": "nowrap",
}


class MarkerIconFactory:
    """Builds marker icons. Created once by the host screen and shared."""

    def __init__(self, text_style: Dict[str, str] | None = None):
        self.text_style = dict(text_style or DEFAULT_TEXT_STYLE)

    def default_marker(self, hue: MarkerHue) -> IconStyle:
        variant = (
            MarkerVariant.RECENT if hue == MarkerHue.MAGENTA else MarkerVariant.STALE
        )
        return IconStyle(variant=variant, hue=hue.value, anchor=DEFAULT_MARKER_ANCHOR)

    def make_icon(self, text: str) -> IconStyle:
        return IconStyle(
            variant=MarkerVariant.LABEL,
            text=text,
            text_style=self.text_style,
            anchor=INFO_MARKER_ANCHOR,
        )
