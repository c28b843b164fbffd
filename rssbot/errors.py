"""
Exception hierarchy for RSS Bot.

Configuration errors are fatal at startup; fetch errors only skip
the affected feed for the current cycle.
"""

from enum import Enum


class RSSBotError(Exception):
    """Base class for all RSS Bot errors."""

    pass


class ConfigErrorKind(str, Enum):
    """Reason a configuration file could not be loaded."""

    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    MALFORMED = "malformed"


class ConfigError(RSSBotError):
    """
    Raised when the configuration file cannot be loaded.

    Attributes
    ----------
    kind : ConfigErrorKind
        What went wrong.
    path : str
        Path of the configuration file.
    """

    def __init__(self, kind: ConfigErrorKind, path: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.path = path


class FetchErrorKind(str, Enum):
    """Reason a feed could not be fetched."""

    NETWORK = "network"
    PARSE = "parse"


class FetchError(RSSBotError):
    """
    Raised when a feed cannot be retrieved or parsed.

    Attributes
    ----------
    kind : FetchErrorKind
        Whether retrieval or parsing failed.
    url : str
        URL of the feed.
    """

    def __init__(self, kind: FetchErrorKind, url: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.url = url
