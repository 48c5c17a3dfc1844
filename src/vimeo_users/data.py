from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from zgw_consumers.api_models.base import Model


@dataclass
class WebSite(Model):
    uri: Optional[str] = None
    name: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None


@dataclass
class Pictures(Model):
    uri: Optional[str] = None
    active: Optional[bool] = None
    type: Optional[str] = None
    sizes: list = field(default_factory=list)


@dataclass
class User(Model):
    uri: str
    name: Optional[str] = None
    link: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    created_time: Optional[datetime] = None
    account: Optional[str] = None
    pictures: Optional[Pictures] = None
    websites: List[WebSite] = field(default_factory=list)
    content_filter: List[str] = field(default_factory=list)
    resource_key: Optional[str] = None

    @property
    def id(self) -> str:
        return self.uri.rstrip("/").rsplit("/", 1)[-1]


@dataclass
class Video(Model):
    uri: str
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    release_time: Optional[datetime] = None
    privacy: Optional[dict] = None
    pictures: Optional[Pictures] = None
    tags: list = field(default_factory=list)
    user: Optional[User] = None
    resource_key: Optional[str] = None
    status: Optional[str] = None


@dataclass
class Feed(Model):
    uri: str
    clip: Optional[Video] = None
    type: Optional[str] = None
    time: Optional[datetime] = None


@dataclass
class Category(Model):
    uri: str
    name: Optional[str] = None
    link: Optional[str] = None
    top_level: Optional[bool] = None
    pictures: Optional[Pictures] = None
    resource_key: Optional[str] = None


@dataclass
class Channel(Model):
    uri: str
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    user: Optional[User] = None
    pictures: Optional[Pictures] = None
    privacy: Optional[dict] = None
    resource_key: Optional[str] = None


@dataclass
class Group(Model):
    uri: str
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    privacy: Optional[dict] = None
    pictures: Optional[Pictures] = None
    user: Optional[User] = None
    resource_key: Optional[str] = None
