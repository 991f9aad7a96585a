import logging
import threading
import uuid
from pathlib import Path
from typing import Dict, Optional
import streamlit as st
from pydantic import ValidationError
from models.models import Location, Post, SeedData, User
from streams.snapshot_stream import SnapshotStream

logger = logging.getLogger(__name__)


class HypeMapStore:
    """In-memory source of followed users, their posts and post locations."""

    def __init__(self, seed: SeedData | None = None):
        seed = seed or SeedData()
        self._lock = threading.Lock()
        self._locations: Dict[str, Location] = dict(seed.locations)
        self._users: Dict[str, User] = {user.id: user for user in seed.users}
        self.users: SnapshotStream[User] = SnapshotStream(list(seed.users))
        self.posts: SnapshotStream[Post] = SnapshotStream(list(seed.posts))

    @classmethod
    def from_seed_file(cls, path: str | None) -> "HypeMapStore":
        if not path:
            return cls()
        p = Path(path)
        if not p.exists():
            raise ValueError(f"Seed file not found: {path}")
        try:
            seed = SeedData.model_validate_json(p.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise ValueError(f"Invalid seed file {path}: {e}") from e
        logger.info(
            f"Loaded {len(seed.users)} users, {len(seed.posts)} posts and "
            f"{len(seed.locations)} locations from {path}"
        )
        return cls(seed)

    def get_location(self, location_id: str) -> Optional[Location]:
        with self._lock:
            return self._locations.get(location_id)

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def add_location(self, location_id: str, location: Location):
        with self._lock:
            self._locations[location_id] = location

    def add_user(self, name: str) -> User:
        user = User(id=uuid.uuid4().hex, user_name=name)
        with self._lock:
            self._users[user.id] = user
            users = list(self._users.values())
        logger.info(f"Following new user '{name}' ({user.id})")
        self.users.publish(users)
        return user

    def add_post(self, post: Post):
        self.posts.publish(self.posts.value + [post])


@st.cache_resource(show_spinner=False)
def load_shared_store(seed_path: str) -> HypeMapStore:
    return HypeMapStore.from_seed_file(seed_path)
