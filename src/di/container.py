from dependency_injector import containers, providers
from clients.hypemap_store import load_shared_store
from map_surface.folium_surface import FoliumMapSurface
from map_surface.icon_factory import MarkerIconFactory
from projectors.active_user_marker_projector import ActiveUserMarkerProjector
from scheduling.dispatcher import Dispatcher
from ui.map_page import MapPage
from ui.users_list import UsersList
from config.config import SETTINGS


class Container(containers.DeclarativeContainer):
    # Shared across sessions
    store = providers.Callable(load_shared_store, seed_path=SETTINGS.seed_data_path)

    # Per-session UI resources
    dispatcher = providers.Singleton(
        Dispatcher.threaded, lookup_workers=SETTINGS.lookup_workers
    )
    map_surface = providers.Singleton(
        FoliumMapSurface,
        center=(SETTINGS.map_center_lat, SETTINGS.map_center_lon),
        zoom=SETTINGS.map_initial_zoom,
        tiles=SETTINGS.map_tiles,
    )
    icon_factory = providers.Singleton(MarkerIconFactory)
    users_list = providers.Singleton(UsersList)

    projector = providers.Singleton(
        ActiveUserMarkerProjector,
        users_stream=store.provided.users,
        posts_stream=store.provided.posts,
        lookup_location=store.provided.get_location,
        lookup_user=store.provided.get_user,
        map_surface=map_surface,
        user_list=users_list,
        register_user=store.provided.add_user,
        icon_factory=icon_factory,
        dispatcher=dispatcher,
    )

    # UI Pages
    map_page = providers.Singleton(
        MapPage,
        projector=projector,
        map_surface=map_surface,
        users_list=users_list,
        dispatcher=dispatcher,
        map_height=SETTINGS.map_height,
        render_timeout_seconds=SETTINGS.render_timeout_seconds,
    )
