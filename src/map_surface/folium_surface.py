"""
Folium-backed map surface.

Markers are kept as handles and turned into a ``folium.Map`` each time the
host page renders, since Streamlit redraws the whole widget on every run.
"""

import html
import itertools
import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

import folium

from models.models import IconStyle, MarkerHandle, MarkerTag, MarkerVariant
from map_surface.surface import Position
from utils.constants import FOLIUM_HUE_COLORS

logger = logging.getLogger(__name__)

LABEL_CHAR_WIDTH_PX = 7
LABEL_PADDING_PX = 14
LABEL_HEIGHT_PX = 20


class FoliumMapSurface:
    def __init__(
        self,
        center: Position = (0.0, 0.0),
        zoom: float = 1.0,
        tiles: str = "OpenStreetMap",
    ):
        self.center = center
        self.zoom = zoom
        self.tiles = tiles
        self.padding: Tuple[int, int, int, int] = (0, 0, 0, 0)
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._markers: Dict[int, MarkerHandle] = {}

    @property
    def markers(self) -> List[MarkerHandle]:
        with self._lock:
            return list(self._markers.values())

    def clear(self) -> None:
        with self._lock:
            self._markers.clear()

    def add_marker(
        self, position: Position, icon: IconStyle, tag: Optional[Any] = None
    ) -> MarkerHandle:
        handle = MarkerHandle(
            marker_id=next(self._ids), position=position, icon=icon, tag=tag
        )
        with self._lock:
            self._markers[handle.marker_id] = handle
        return handle

    def animate_zoom(self, level: float) -> None:
        logger.debug(f"Zooming map to {level}")
        self.zoom = level

    def set_padding(self, left: int, top: int, right: int, bottom: int) -> None:
        self.padding = (left, top, right, bottom)

    def to_folium(self) -> folium.Map:
        fmap = folium.Map(
            location=list(self.center), zoom_start=self.zoom, tiles=self.tiles
        )
        for handle in self.markers:
            self._to_folium_marker(handle).add_to(fmap)
        return fmap

    def _to_folium_marker(self, handle: MarkerHandle) -> folium.Marker:
        icon = handle.icon
        if icon.variant == MarkerVariant.LABEL:
            return folium.Marker(
                location=list(handle.position), icon=_label_icon(icon)
            )
        color = FOLIUM_HUE_COLORS.get(icon.hue, "red")
        popup = None
        if isinstance(handle.tag, MarkerTag):
            popup = folium.Popup(_tag_popup_html(handle.tag), max_width=260)
        return folium.Marker(
            location=list(handle.position),
            icon=folium.Icon(color=color),
            popup=popup,
            tooltip=handle.tag.user_name if isinstance(handle.tag, MarkerTag) else None,
        )


def _label_icon(icon: IconStyle) -> folium.DivIcon:
    text = icon.text or ""
    width = len(text) * LABEL_CHAR_WIDTH_PX + LABEL_PADDING_PX
    style = "; ".join(f"{k}: {v}" for k, v in icon.text_style.items())
    return folium.DivIcon(
        html=f'<div style="{style}">{html.escape(text)}</div>',
        icon_size=(width, LABEL_HEIGHT_PX),
        icon_anchor=(
            int(width * icon.anchor[0]),
            int(LABEL_HEIGHT_PX * icon.anchor[1]),
        ),
    )


def _tag_popup_html(tag: MarkerTag) -> str:
    parts = [
        f"<strong>{html.escape(tag.user_name)}</strong>",
        html.escape(tag.location_name),
    ]
    if tag.caption:
        parts.append(f"<em>{html.escape(tag.caption)}</em>")
    if tag.post_url:
        parts.append(
            f'<a href="{html.escape(tag.post_url)}" target="_blank">View post</a>'
        )
    if tag.link_url:
        parts.append(
            f'<a href="{html.escape(tag.link_url)}" target="_blank">Open link</a>'
        )
    return "<br>".join(parts)
