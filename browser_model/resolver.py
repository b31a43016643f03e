"""
Resource resolvers: turn strings into locations and confirm they load.

The navigation model never talks to the network itself. It hands every
candidate address to a ``ResourceResolver``, which parses it and, once the
model has settled on a location, checks that the location can be reached.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

from selenium.webdriver.chrome.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait

from browser_model.config import NETWORK_SCHEMES, NavigationConfig
from browser_model.driver import new_webdriver
from browser_model.errors import MalformedAddressError, UnreachableAddressError
from browser_model.types import Location
from browser_model.utils.decorators import reraise_as

logger = logging.getLogger(__name__)


class ResourceResolver(ABC):
    """Parses addresses into locations and checks that locations are reachable."""

    def __init__(self, config: Optional[NavigationConfig] = None):
        self.config = config or NavigationConfig()

    def parse(self, address: str) -> Location:
        """
        Parse a fully-qualified address.

        Args:
            address: The address to parse, surrounding whitespace is ignored

        Returns:
            Location: The normalized location

        Raises:
            MalformedAddressError: If the address is not fully qualified
        """
        if address is None:
            raise MalformedAddressError("no address given")

        candidate = address.strip()
        if not candidate:
            raise MalformedAddressError("empty address")
        if any(ch.isspace() for ch in candidate):
            raise MalformedAddressError(f"whitespace in address: {candidate!r}")

        try:
            parts = urlsplit(candidate)
            # accessing the port validates it
            parts.port
        except ValueError as e:
            raise MalformedAddressError(f"invalid address {candidate!r}: {str(e)}") from e

        scheme = parts.scheme.lower()
        if not scheme:
            raise MalformedAddressError(f"no scheme in address: {candidate!r}")
        if scheme not in self.config.known_schemes:
            raise MalformedAddressError(f"unknown scheme {scheme!r} in address: {candidate!r}")
        if scheme in NETWORK_SCHEMES and not parts.hostname:
            raise MalformedAddressError(f"no host in address: {candidate!r}")

        return Location(self._normalize(parts))

    @abstractmethod
    def check_reachable(self, location: Location) -> None:
        """Raise UnreachableAddressError if ``location`` cannot be loaded.

        The model reports any exception raised here as a NavigationError.
        """

    def close(self) -> None:
        """Release any resources held by the resolver."""

    def __enter__(self):
        """Support for context manager protocol."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @staticmethod
    def _normalize(parts: SplitResult) -> str:
        userinfo, at, hostport = parts.netloc.rpartition("@")
        netloc = f"{userinfo}{at}{hostport.lower()}"
        return urlunsplit(
            (parts.scheme.lower(), netloc, parts.path, parts.query, parts.fragment)
        )


class OfflineResolver(ResourceResolver):
    """Treats every well-formed location as reachable."""

    def check_reachable(self, location: Location) -> None:
        logger.debug(f"Assuming {location} is reachable")


class WebDriverResolver(ResourceResolver):
    """Checks reachability by loading the location in a WebDriver."""

    def __init__(
        self,
        config: Optional[NavigationConfig] = None,
        driver: Optional[WebDriver] = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            config: Navigation configuration; headless mode and page load
                    timeout are taken from it
            driver: An existing driver to use instead of starting Chrome
        """
        super().__init__(config)
        self._driver: Optional[WebDriver] = driver

    @property
    def driver(self) -> WebDriver:
        if self._driver is None:
            self._driver = new_webdriver(
                headless=self.config.headless,
                page_load_timeout=self.config.page_load_timeout,
            )
        return self._driver

    @reraise_as(UnreachableAddressError)
    def check_reachable(self, location: Location) -> None:
        logger.info(f"Checking {location} is reachable")
        self.driver.get(str(location))
        WebDriverWait(self.driver, self.config.page_load_timeout).until(
            lambda d: d.execute_script("return document.readyState")
            == "complete"
        )

    def close(self) -> None:
        """Quit the driver if one was started."""
        if self._driver:
            self._driver.quit()
            self._driver = None


def resolver_from_config(config: NavigationConfig) -> ResourceResolver:
    """Build the resolver named by ``config.resolver``."""
    if config.resolver == "webdriver":
        return WebDriverResolver(config)
    return OfflineResolver(config)
