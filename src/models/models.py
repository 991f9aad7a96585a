from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)
    latitude: float
    longitude: float


class User(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: str
    user_name: str


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: str
    user_id: str
    location_id: str
    location_name: str = ""
    post_url: str = ""
    link_url: str = ""
    caption: str = ""
    timestamp: int


class MarkerTag(BaseModel):
    """Display-only projection of a post and the name of its user."""

    model_config = ConfigDict(frozen=True)
    id: str
    user_name: str
    location_name: str
    post_url: str
    link_url: str
    caption: str
    timestamp: int

    @classmethod
    def from_post(cls, post: Post, user: User) -> "MarkerTag":
        return cls(
            id=post.id,
            user_name=user.user_name,
            location_name=post.location_name,
            post_url=post.post_url,
            link_url=post.link_url,
            caption=post.caption,
            timestamp=post.timestamp,
        )


class MarkerVariant(Enum):
    RECENT = "recent"
    STALE = "stale"
    LABEL = "label"


class IconStyle(BaseModel):
    model_config = ConfigDict(frozen=True)
    variant: MarkerVariant
    hue: Optional[float] = None
    text: Optional[str] = None
    text_style: Dict[str, str] = Field(default_factory=dict)
    anchor: Tuple[float, float] = (0.5, 1.0)


class MarkerHandle(BaseModel):
    marker_id: int
    position: Tuple[float, float]
    icon: IconStyle
    tag: Optional[Any] = None


class SeedData(BaseModel):
    users: List[User] = Field(default_factory=list)
    posts: List[Post] = Field(default_factory=list)
    locations: Dict[str, Location] = Field(default_factory=dict)
