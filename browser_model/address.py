import logging
from typing import Optional

from browser_model.config import NavigationConfig
from browser_model.errors import AddressResolutionError, ErrorKind
from browser_model.messages import MessageProvider
from browser_model.resolver import ResourceResolver
from browser_model.types import Location

logger = logging.getLogger(__name__)


class AddressNormalizer:
    """Completes a user-typed address into a location.

    Tries, in order: the address as typed, the address appended to the
    current location, then the address behind the default scheme. This is a
    plain string heuristic; no dot-segment or query/fragment resolution.
    """

    def __init__(
        self,
        resolver: ResourceResolver,
        config: Optional[NavigationConfig] = None,
        messages: Optional[MessageProvider] = None,
    ):
        self.resolver = resolver
        self.config = config or resolver.config
        self.messages = messages or MessageProvider()

    def candidates(self, address: str, current: Optional[Location] = None) -> list[str]:
        """Strings to try parsing, in order"""
        candidates = [address]
        if current is not None:
            candidates.append(f"{current}{self.config.relative_separator}{address}")
        candidates.append(f"{self.config.default_scheme}{address}")
        return candidates

    def complete(self, address: str, current: Optional[Location] = None) -> Location:
        """
        Resolve a possibly incomplete address.

        Args:
            address: Free-form text typed by the user
            current: The location being viewed, if any

        Returns:
            Location: The first candidate that parses

        Raises:
            AddressResolutionError: If no candidate parses
        """
        if address is None:
            address = ""

        for candidate in self.candidates(address, current):
            try:
                return self.resolver.parse(candidate)
            except ValueError as e:
                logger.debug(f"Could not parse {candidate!r}: {str(e)}")

        raise AddressResolutionError(
            self.messages.format(ErrorKind.ADDRESS_RESOLUTION, address=address),
            address=address,
        )
