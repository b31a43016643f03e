import logging
from threading import RLock
from typing import Optional

from browser_model.address import AddressNormalizer
from browser_model.config import NavigationConfig
from browser_model.errors import (AddressResolutionError, BrowserError,
                                  ErrorKind, MalformedAddressError,
                                  NavigationError, NoNextHistoryError,
                                  NoPreviousHistoryError,
                                  UnknownFavoriteError,
                                  UnreachableAddressError)
from browser_model.history import BrowserHistory
from browser_model.messages import MessageProvider
from browser_model.resolver import (OfflineResolver, ResourceResolver,
                                    WebDriverResolver, resolver_from_config)
from browser_model.types import HistoryEntry, Location, NavigationState

logger = logging.getLogger(__name__)

__all__ = [
    "AddressNormalizer",
    "AddressResolutionError",
    "BrowserError",
    "BrowserHistory",
    "ErrorKind",
    "HistoryEntry",
    "Location",
    "MalformedAddressError",
    "MessageProvider",
    "NavigationConfig",
    "NavigationError",
    "NavigationModel",
    "NavigationState",
    "NoNextHistoryError",
    "NoPreviousHistoryError",
    "OfflineResolver",
    "ResourceResolver",
    "UnknownFavoriteError",
    "UnreachableAddressError",
    "WebDriverResolver",
    "resolver_from_config",
]


class NavigationModel:
    """
    The collections that organize visited locations: history with a
    cursor, the home location and the named favorites.
    """

    def __init__(
        self,
        resolver: Optional[ResourceResolver] = None,
        messages: Optional[MessageProvider] = None,
        config: Optional[NavigationConfig] = None,
    ) -> None:
        """
        Create an empty model.

        Args:
            resolver: Parses addresses and checks reachability
                      (default: an OfflineResolver)
            messages: Supplies the text of raised errors
            config: Normalization settings (default: the resolver's); must
                    match the resolver's when both are given

        Raises:
            ValueError: If ``config`` differs from the resolver's config
        """
        if resolver is not None and config is not None and config != resolver.config:
            raise ValueError("config must match the resolver's config")
        self.resolver: ResourceResolver = resolver or OfflineResolver(config)
        self.config: NavigationConfig = self.resolver.config
        self.messages: MessageProvider = messages or MessageProvider()
        self.normalizer = AddressNormalizer(self.resolver, self.config, self.messages)
        self.history: BrowserHistory = BrowserHistory()

        self._home: Optional[Location] = None
        self._favorites: dict[str, Location] = {}
        self._lock = RLock()

    @property
    def current(self) -> Optional[Location]:
        """The location at the history cursor, None before any navigation"""
        entry = self.history.get_current()
        return entry.location if entry else None

    def navigate_to(self, address: str) -> Location:
        """
        Navigate to an address and add it to history, dropping any
        forward history.

        Args:
            address: Free-form address typed by the user

        Returns:
            Location: The new current location

        Raises:
            NavigationError: If the address cannot be resolved or reached;
                             the model is left unchanged
        """
        with self._lock:
            try:
                location = self.normalizer.complete(address, self.current)
                self.resolver.check_reachable(location)
            except Exception as e:
                logger.error(f"Navigation to {address!r} failed: {str(e)}")
                raise NavigationError(
                    self.messages.format(ErrorKind.NAVIGATION, address=address),
                    address=address,
                ) from e

            self.history.add_entry(HistoryEntry(location=location))
            logger.info(f"Navigated to {location}")
            return location

    def next(self) -> Location:
        """
        Move forward one entry in history.

        Raises:
            NoNextHistoryError: If already at the last entry or empty
        """
        with self._lock:
            if not self.history.can_go_forward():
                raise NoNextHistoryError(self.messages.format(ErrorKind.NO_NEXT_HISTORY))
            return self.history.go_forward().location

    def back(self) -> Location:
        """
        Move back one entry in history.

        Raises:
            NoPreviousHistoryError: If already at the first entry or empty
        """
        with self._lock:
            if not self.history.can_go_back():
                raise NoPreviousHistoryError(
                    self.messages.format(ErrorKind.NO_PREVIOUS_HISTORY)
                )
            return self.history.go_back().location

    def has_next(self) -> bool:
        with self._lock:
            return self.history.can_go_forward()

    def has_previous(self) -> bool:
        with self._lock:
            return self.history.can_go_back()

    def get_home(self) -> Optional[Location]:
        """Home location, None if it was never set"""
        with self._lock:
            return self._home

    def set_home(self) -> None:
        """Make the current location home; no-op before any navigation"""
        with self._lock:
            if self.current is not None:
                self._home = self.current

    def add_favorite(self, name: str) -> None:
        """Store the current location under ``name``, replacing any previous one."""
        with self._lock:
            if name and self.current is not None:
                self._favorites[name] = self.current

    def get_favorite(self, name: str) -> Location:
        """
        Look up a favorite.

        Raises:
            UnknownFavoriteError: If ``name`` is empty or not stored
        """
        with self._lock:
            if name and name in self._favorites:
                return self._favorites[name]
            raise UnknownFavoriteError(
                self.messages.format(ErrorKind.UNKNOWN_FAVORITE, name=name),
                name=name,
            )

    def favorite_names(self) -> list[str]:
        """Favorite names in the order they were first added"""
        with self._lock:
            return list(self._favorites)

    def get_history_entries(self) -> list[HistoryEntry]:
        """Committed visits, oldest first"""
        with self._lock:
            return self.history.get_history()

    def state(self) -> NavigationState:
        """Snapshot of the model for the presentation layer."""
        with self._lock:
            current = self.current
            entries = self.history.get_history()
            return NavigationState(
                current=str(current) if current else None,
                history=[str(entry.location) for entry in entries],
                visited_at=[entry.visited_at for entry in entries],
                cursor=self.history.current_index,
                can_go_back=self.history.can_go_back(),
                can_go_forward=self.history.can_go_forward(),
                home=str(self._home) if self._home else None,
                favorites={name: str(location) for name, location in self._favorites.items()},
            )
