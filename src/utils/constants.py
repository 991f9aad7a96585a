from enum import Enum

RECENT_POST_WINDOW_SECONDS = 24 * 60 * 60
INFO_MARKER_ANCHOR = (0.5, 2.25)
DEFAULT_MARKER_ANCHOR = (0.5, 1.0)


class MarkerHue(Enum):
    RED = 0.0
    MAGENTA = 300.0


class ZoomLevel(Enum):
    WORLD = 1.0
    CITY = 12.0
    LOCAL = 16.0


class Label(Enum):
    ADD_USER_BUTTON = "Add user"
    REFRESH_BUTTON = "Refresh"
    ADD_USER_TITLE = "Add a user to follow"
    ADD_USER_INPUT = "Username"
    OK_BUTTON = "OK"
    CLOSE_BUTTON = "Close"
    WORLD_ZOOM = "World"
    CITY_ZOOM = "City"
    LOCAL_ZOOM = "Local"
    NO_USERS = "No users yet. Add one to start following."


class Keys(Enum):
    ADD_USER_INPUT = "add_user_name"
    USER_BUTTON_PREFIX = "user_"
    MAP = "hypemap"


# Leaflet awesome-marker colors closest to the widget hues.
FOLIUM_HUE_COLORS = {
    MarkerHue.RED.value: "red",
    MarkerHue.MAGENTA.value: "purple",
}
