import pytest
from unittest.mock import MagicMock

from clients.hypemap_store import HypeMapStore
from map_surface.folium_surface import FoliumMapSurface
from map_surface.icon_factory import MarkerIconFactory
from models.models import Location, Post, SeedData, User
from projectors.active_user_marker_projector import ActiveUserMarkerProjector
from scheduling.dispatcher import Dispatcher

NOW = 1_700_000_000


def make_post(post_id, user_id="u1", location_id="l1", timestamp=NOW - 100, **kw):
    return Post(
        id=post_id,
        user_id=user_id,
        location_id=location_id,
        location_name=kw.pop("location_name", f"Place {location_id}"),
        post_url=kw.pop("post_url", f"https://example.com/p/{post_id}"),
        link_url=kw.pop("link_url", ""),
        caption=kw.pop("caption", ""),
        timestamp=timestamp,
    )


@pytest.fixture
def seed():
    return SeedData(
        users=[User(id="u1", user_name="Ann"), User(id="u2", user_name="Bob")],
        posts=[],
        locations={
            "l1": Location(latitude=1, longitude=2),
            "l2": Location(latitude=3, longitude=4),
        },
    )


@pytest.fixture
def store(seed):
    return HypeMapStore(seed)


@pytest.fixture
def surface():
    return FoliumMapSurface()


@pytest.fixture
def user_list():
    return MagicMock()


@pytest.fixture
def make_projector(store, surface, user_list):
    def _make(dispatcher=None, register_user=None, clock=lambda: NOW + 0.75):
        return ActiveUserMarkerProjector(
            users_stream=store.users,
            posts_stream=store.posts,
            lookup_location=store.get_location,
            lookup_user=store.get_user,
            map_surface=surface,
            user_list=user_list,
            register_user=register_user or store.add_user,
            icon_factory=MarkerIconFactory(),
            dispatcher=dispatcher or Dispatcher.inline(),
            clock=clock,
        )

    return _make
