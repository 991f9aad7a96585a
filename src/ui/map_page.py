import streamlit as st
from streamlit_folium import st_folium
from map_surface.folium_surface import FoliumMapSurface
from projectors.active_user_marker_projector import ActiveUserMarkerProjector
from scheduling.dispatcher import Dispatcher
from ui.add_user_dialog import open_add_user_dialog
from ui.busy import busy
from ui.Page import Page
from ui.users_list import UsersList
from utils.constants import Keys, Label, ZoomLevel


class MapPage(Page):
    """Users row, controls and the map of the active user's posts."""

    title = "HypeMap"

    def __init__(
        self,
        projector: ActiveUserMarkerProjector,
        map_surface: FoliumMapSurface,
        users_list: UsersList,
        dispatcher: Dispatcher,
        map_height: int = 600,
        render_timeout_seconds: float = 5.0,
    ):
        self.projector = projector
        self.map_surface = map_surface
        self.users_list = users_list
        self.dispatcher = dispatcher
        self.map_height = map_height
        self.render_timeout_seconds = render_timeout_seconds

    def _render_controls(self):
        add_col, refresh_col, world_col, city_col, local_col = st.columns(5)
        if add_col.button(
            Label.ADD_USER_BUTTON.value, type="primary", width="stretch"
        ):
            open_add_user_dialog(self.projector)
        refresh_col.button(
            Label.REFRESH_BUTTON.value, width="stretch", on_click=self.projector.resume
        )
        for column, label, level in (
            (world_col, Label.WORLD_ZOOM, ZoomLevel.WORLD),
            (city_col, Label.CITY_ZOOM, ZoomLevel.CITY),
            (local_col, Label.LOCAL_ZOOM, ZoomLevel.LOCAL),
        ):
            column.button(
                label.value,
                width="stretch",
                on_click=self.projector.zoom_to,
                args=(level.value,),
            )

    def render(self):
        st.title(self.title)
        try:
            self.users_list.render(
                self.projector.active_user_id, self.projector.select_user
            )
            self._render_controls()

            with busy("Placing markers..."):
                if not self.dispatcher.flush(timeout=self.render_timeout_seconds):
                    st.warning("Some markers are still loading.")

            st_folium(
                self.map_surface.to_folium(),
                key=Keys.MAP.value,
                height=self.map_height,
                width=None,
                zoom=self.map_surface.zoom,
                returned_objects=[],
            )
        except Exception as e:
            st.error(str(e))
