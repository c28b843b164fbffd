"""
Output of newly discovered feed items.

Defines the interface the poll loop reports new items through,
and the console implementation used by the command line.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Protocol, TextIO, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewItem:
    """
    A newly discovered feed item.

    Attributes
    ----------
    feed_name : str
        Name of the feed the item was found in.
    title : str
        Item title.
    link : str
        Item URL.
    """

    feed_name: str
    title: str
    link: str

    def format(self) -> str:
        """Render the item as a single output line."""
        return f"New item found in {self.feed_name}: {self.title} ({self.link})"


@runtime_checkable
class Notifier(Protocol):
    """
    Protocol defining the interface for output backends.

    The @runtime_checkable decorator allows using isinstance() checks
    against this protocol for structural typing validation.
    """

    async def send_item(self, item: NewItem) -> bool:
        """
        Report a new item.

        Parameters
        ----------
        item : NewItem
            The item to report.

        Returns
        -------
        bool
            True if the item was written successfully.
        """
        ...

    async def close(self) -> None:
        """Release any resources held by the notifier."""
        ...


class ConsoleNotifier:
    """Writes one line per new item to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        """
        Initialize the console notifier.

        Parameters
        ----------
        stream : TextIO | None
            Stream to write to. Defaults to standard output.
        """
        self.stream = stream if stream is not None else sys.stdout

    async def send_item(self, item: NewItem) -> bool:
        """
        Write the item as one line and flush the stream.

        Parameters
        ----------
        item : NewItem
            The item to report.

        Returns
        -------
        bool
            False if the stream could not be written to.
        """
        line = item.format()
        logger.debug("Reporting new item from %s: %s", item.feed_name, item.link)
        try:
            self.stream.write(line + "\n")
            self.stream.flush()
        except (OSError, ValueError) as e:
            logger.error("Failed to write item '%s': %s", item.title[:50], e)
            return False
        return True

    async def close(self) -> None:
        """Flush any buffered output."""
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            logger.debug("Failed to flush output stream: %s", e)
