from typing import Optional

from browser_model.errors import ErrorKind

DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.ADDRESS_RESOLUTION: "Could not make sense of the address {address}",
    ErrorKind.NAVIGATION: "Could not load {address}",
    ErrorKind.NO_NEXT_HISTORY: "There is no next page in the history",
    ErrorKind.NO_PREVIOUS_HISTORY: "There is no previous page in the history",
    ErrorKind.UNKNOWN_FAVORITE: "There is no favorite named {name!r}",
}


class MessageProvider:
    """Maps an error kind to human-readable text."""

    def __init__(self, messages: Optional[dict[ErrorKind, str]] = None):
        self._messages = dict(DEFAULT_MESSAGES)
        if messages:
            self._messages.update(messages)

    def format(self, kind: ErrorKind, **fields) -> str:
        """
        Render the message template for ``kind``.

        Args:
            kind: The error kind to describe
            **fields: Values substituted into the template

        Returns:
            The formatted message; the bare template if a field is missing
        """
        template = self._messages[kind]
        try:
            return template.format(**fields)
        except (KeyError, IndexError):
            return template
