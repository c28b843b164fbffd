"""
In-memory tracking of seen feed entries.

Decides which entries of a freshly fetched feed are new since
the previous fetch of that same feed.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from rssbot.entry import Entry

logger = logging.getLogger(__name__)


@dataclass
class FeedState:
    """
    Tracking state for one feed.

    Attributes
    ----------
    seen_guids : set[str]
        Every GUID observed in a successful fetch of the feed.
        Grows for the lifetime of the process and is never pruned.
    """

    seen_guids: set[str] = field(default_factory=set)


@dataclass(frozen=True)
class ClassifiedEntry:
    """An entry tagged with whether it was seen for the first time."""

    entry: Entry
    is_new: bool


class SeenTracker:
    """
    Per-feed seen-GUID tracker.

    The first successful fetch of a feed only seeds its state: nothing
    is reported as new. On later fetches an entry is new iff its GUID
    has not been observed for that feed before. States are keyed by
    feed URL and are independent of each other.

    Entries without a GUID all share the empty identifier, so only
    the first of them is ever reported.
    """

    def __init__(self) -> None:
        self._states: dict[str, FeedState] = {}

    def __len__(self) -> int:
        return len(self._states)

    def is_tracked(self, feed_url: str) -> bool:
        """Return True once the feed has completed its baseline fetch."""
        return feed_url in self._states

    def seen_count(self, feed_url: str) -> int:
        """Return the number of distinct GUIDs seen for a feed."""
        state = self._states.get(feed_url)
        return len(state.seen_guids) if state else 0

    def classify(
        self, feed_url: str, entries: Iterable[Entry]
    ) -> list[ClassifiedEntry]:
        """
        Classify fetched entries as new or already seen.

        Marks every new GUID as seen before moving to the next entry,
        so a GUID repeated within the same batch is reported at most once.

        Parameters
        ----------
        feed_url : str
            URL identifying the feed.
        entries : Iterable[Entry]
            Entries of the latest fetch, in document order.

        Returns
        -------
        list[ClassifiedEntry]
            The entries in the same order, each tagged with ``is_new``.
        """
        state = self._states.get(feed_url)

        if state is None:
            state = FeedState()
            self._states[feed_url] = state
            result = []
            for entry in entries:
                state.seen_guids.add(entry.guid)
                result.append(ClassifiedEntry(entry, is_new=False))
            logger.info(
                "New feed detected: marking %d existing entries as seen for %s",
                len(result),
                feed_url,
            )
            return result

        result = []
        for entry in entries:
            if entry.guid in state.seen_guids:
                result.append(ClassifiedEntry(entry, is_new=False))
            else:
                state.seen_guids.add(entry.guid)
                result.append(ClassifiedEntry(entry, is_new=True))
        return result

    def new_entries(self, feed_url: str, entries: Iterable[Entry]) -> list[Entry]:
        """Classify entries and return only the new ones."""
        return [c.entry for c in self.classify(feed_url, entries) if c.is_new]
