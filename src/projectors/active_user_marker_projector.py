import logging
import threading
import time
from typing import Callable, List, MutableMapping, Optional, Protocol, Tuple

from map_surface.icon_factory import MarkerIconFactory
from map_surface.surface import MapSurface
from models.models import Location, MarkerHandle, MarkerTag, Post, User
from scheduling.dispatcher import Dispatcher
from streams.snapshot_stream import SnapshotStream
from utils.constants import MarkerHue
from utils.recency import is_recent, now_seconds

logger = logging.getLogger(__name__)


class UserListDisplay(Protocol):
    def set_items(self, users: List[User]) -> None: ...


class ActiveUserMarkerProjector:
    """
    Keeps the map's markers in step with the active user's posts.

    Lookups run on the dispatcher's worker context. Every change to the map
    surface, the info-marker table and the user list runs on its UI context,
    and each render pass is applied there as a single task: clear, then add.
    """

    def __init__(
        self,
        users_stream: SnapshotStream[User],
        posts_stream: SnapshotStream[Post],
        lookup_location: Callable[[str], Optional[Location]],
        lookup_user: Callable[[str], Optional[User]],
        map_surface: MapSurface,
        user_list: UserListDisplay,
        register_user: Callable[[str], object],
        icon_factory: MarkerIconFactory,
        dispatcher: Dispatcher,
        info_markers: MutableMapping[str, MarkerHandle] | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.lookup_location = lookup_location
        self.lookup_user = lookup_user
        self.map_surface = map_surface
        self.user_list = user_list
        self.register_user = register_user
        self.icon_factory = icon_factory
        self.dispatcher = dispatcher
        self.info_markers = info_markers if info_markers is not None else {}
        self.clock = clock
        self.active_user_id: Optional[str] = None
        self._posts: List[Post] = []
        self._lock = threading.Lock()
        self._generation = 0
        self._unsubscribers = [
            users_stream.subscribe(self.on_users_updated),
            posts_stream.subscribe(self.on_posts_updated),
        ]

    def select_user(self, user_id: str):
        logger.info(f"Showing posts for user {user_id}")
        with self._lock:
            self.active_user_id = user_id
        self.refresh()

    def clear_active_user(self):
        with self._lock:
            self.active_user_id = None
        self.refresh()

    def resume(self):
        if self.active_user_id is not None:
            self.select_user(self.active_user_id)

    def refresh(self):
        with self._lock:
            posts = list(self._posts)
        self._start_pass(posts)

    def on_posts_updated(self, new_posts: List[Post]):
        with self._lock:
            self._posts = list(new_posts)
        self._start_pass(new_posts)

    def on_users_updated(self, new_users: List[User]):
        users = list(new_users)
        self.dispatcher.run_on_ui_context(lambda: self.user_list.set_items(users))

    def add_user(self, name: str):
        self.register_user(name)

    def zoom_to(self, level: float):
        self.dispatcher.run_on_ui_context(
            lambda: self.map_surface.animate_zoom(level)
        )

    def reset_padding(self):
        self.dispatcher.run_on_ui_context(
            lambda: self.map_surface.set_padding(0, 0, 0, 0)
        )

    def close(self):
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _start_pass(self, posts: List[Post]):
        with self._lock:
            self._generation += 1
            generation = self._generation
            user_id = self.active_user_id

        self.dispatcher.run_on_ui_context(lambda: self._clear_if_current(generation))
        if user_id is None:
            return
        snapshot = list(posts)
        self.dispatcher.run_in_worker(
            lambda: self._resolve_pass(generation, user_id, snapshot)
        )

    def _resolve_pass(self, generation: int, user_id: str, posts: List[Post]):
        resolved: List[Tuple[Location, MarkerTag]] = []
        for post in posts:
            if post.user_id != user_id:
                continue
            location = self.lookup_location(post.location_id)
            user = self.lookup_user(post.user_id)
            if location is None or user is None:
                logger.debug(f"Skipping post {post.id}: unresolved location or user")
                continue
            resolved.append((location, MarkerTag.from_post(post, user)))
        self.dispatcher.run_on_ui_context(
            lambda: self._apply_pass(generation, resolved)
        )

    def _apply_pass(
        self, generation: int, resolved: List[Tuple[Location, MarkerTag]]
    ):
        with self._lock:
            superseded = generation != self._generation
        if superseded:
            logger.debug(f"Dropping superseded render pass {generation}")
            return
        self._clear_markers()
        for location, tag in resolved:
            self._add_marker_at_location(location, tag)

    def _add_marker_at_location(self, location: Location, tag: MarkerTag):
        position = (location.latitude, location.longitude)
        hue = MarkerHue.RED
        if is_recent(tag.timestamp, now_seconds(self.clock)):
            hue = MarkerHue.MAGENTA
        self.map_surface.add_marker(
            position, self.icon_factory.default_marker(hue), tag=tag
        )
        info_marker = self.map_surface.add_marker(
            position,
            self.icon_factory.make_icon(tag.location_name),
            tag=tag.location_name,
        )
        self.info_markers[tag.id] = info_marker

    def _clear_if_current(self, generation: int):
        with self._lock:
            superseded = generation != self._generation
        if not superseded:
            self._clear_markers()

    def _clear_markers(self):
        self.map_surface.clear()
        self.info_markers.clear()
