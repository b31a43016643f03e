from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel


@dataclass(frozen=True)
class Location:
    """A parsed, normalized resource identifier"""

    url: str

    def __str__(self) -> str:
        return self.url

    @property
    def scheme(self) -> str:
        return urlsplit(self.url).scheme

    @property
    def host(self) -> Optional[str]:
        return urlsplit(self.url).hostname

    @property
    def port(self) -> Optional[int]:
        return urlsplit(self.url).port

    @property
    def path(self) -> str:
        return urlsplit(self.url).path


@dataclass
class HistoryEntry:
    """Represents a single committed visit"""

    location: Location
    visited_at: datetime = field(default_factory=datetime.now)


class NavigationState(BaseModel):
    """Snapshot of the model for the address bar, buttons and bookmark menu."""
    current: Optional[str]
    history: list[str]
    visited_at: list[datetime]
    cursor: int
    can_go_back: bool
    can_go_forward: bool
    home: Optional[str]
    favorites: dict[str, str]
