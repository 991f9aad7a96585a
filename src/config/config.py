import os
from dataclasses import dataclass

from utils.load_secrets import load_env_vars


@dataclass(frozen=True)
class Settings:
    seed_data_path: str
    map_tiles: str
    map_center_lat: float
    map_center_lon: float
    map_initial_zoom: float
    map_height: int
    lookup_workers: int
    render_timeout_seconds: float
    log_level: str

    def __init__(self):
        load_env_vars()
        object.__setattr__(
            self, "seed_data_path", os.getenv("HYPEMAP_SEED_PATH", "").strip()
        )
        object.__setattr__(
            self, "map_tiles", os.getenv("MAP_TILES", "OpenStreetMap").strip()
        )
        object.__setattr__(
            self, "map_center_lat", float(os.getenv("MAP_CENTER_LAT", "0").strip())
        )
        object.__setattr__(
            self, "map_center_lon", float(os.getenv("MAP_CENTER_LON", "0").strip())
        )
        object.__setattr__(
            self,
            "map_initial_zoom",
            float(os.getenv("MAP_INITIAL_ZOOM", "1").strip()),
        )
        object.__setattr__(
            self, "map_height", int(os.getenv("MAP_HEIGHT", "600").strip())
        )
        object.__setattr__(
            self, "lookup_workers", int(os.getenv("LOOKUP_WORKERS", "4").strip())
        )
        object.__setattr__(
            self,
            "render_timeout_seconds",
            float(os.getenv("RENDER_TIMEOUT_SECONDS", "5").strip()),
        )
        object.__setattr__(
            self, "log_level", os.getenv("LOG_LEVEL", "INFO").strip().upper()
        )


SETTINGS = Settings()
