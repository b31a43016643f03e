"""
Error types raised by the navigation model and its collaborators.

Every error carries an ``ErrorKind`` so the presentation layer can pick its
own text for it; the message attached to the exception is the default one
produced by the model's ``MessageProvider``.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure the model reports."""
    ADDRESS_RESOLUTION = "address_resolution"
    NAVIGATION = "navigation"
    NO_NEXT_HISTORY = "no_next_history"
    NO_PREVIOUS_HISTORY = "no_previous_history"
    UNKNOWN_FAVORITE = "unknown_favorite"


class BrowserError(Exception):
    """Base class for all navigation model errors."""

    kind: ErrorKind = ErrorKind.NAVIGATION

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class AddressResolutionError(BrowserError):
    """None of the normalization fallbacks produced a parseable address."""

    kind = ErrorKind.ADDRESS_RESOLUTION

    def __init__(self, message: str = "", address: str = "") -> None:
        super().__init__(message)
        self.address = address


class NavigationError(BrowserError):
    """An address could not be resolved or was not reachable."""

    kind = ErrorKind.NAVIGATION

    def __init__(self, message: str = "", address: str = "") -> None:
        super().__init__(message)
        self.address = address


class NoNextHistoryError(BrowserError):
    kind = ErrorKind.NO_NEXT_HISTORY


class NoPreviousHistoryError(BrowserError):
    kind = ErrorKind.NO_PREVIOUS_HISTORY


class UnknownFavoriteError(BrowserError, KeyError):
    """No favorite is stored under the requested name."""

    kind = ErrorKind.UNKNOWN_FAVORITE

    def __init__(self, message: str = "", name: str = "") -> None:
        super().__init__(message)
        self.name = name

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.message


class MalformedAddressError(BrowserError, ValueError):
    """Raised by a resolver when a string is not a valid address."""

    kind = ErrorKind.ADDRESS_RESOLUTION


class UnreachableAddressError(BrowserError):
    """Raised by a resolver when a well-formed location cannot be loaded."""

    kind = ErrorKind.NAVIGATION
