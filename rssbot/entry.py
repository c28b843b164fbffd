"""
Data model for parsed feed documents.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Entry:
    """
    One item parsed from an RSS feed.

    Attributes
    ----------
    title : str
        Item title.
    link : str
        Item URL.
    description : str
        Item description/summary.
    published : str
        Publication date string, as written in the feed.
    guid : str
        Item identifier used for change detection. Empty if the
        item carries none.
    """

    title: str = ""
    link: str = ""
    description: str = ""
    published: str = ""
    guid: str = ""

    @classmethod
    def from_feedparser(cls, entry: Any) -> "Entry":
        """
        Create an Entry from a feedparser entry.

        Missing fields default to empty strings. The guid is taken
        from the item's own identifier only; the link is not used
        as a substitute. A link that feedparser copied from a permalink
        guid is dropped, since the item itself has no link.

        Parameters
        ----------
        entry : Any
            A feedparser entry object.

        Returns
        -------
        Entry
            Normalized entry instance.
        """
        link = entry.get("link", "") or ""
        if entry.get("guidislink") and not entry.get("links"):
            link = ""

        return cls(
            title=entry.get("title", "") or "",
            link=link,
            description=entry.get("summary", "") or "",
            published=entry.get("published", "") or "",
            guid=entry.get("id", "") or "",
        )


@dataclass
class FeedDocument:
    """
    Result of one successful feed fetch.

    Attributes
    ----------
    title : str
        Channel title.
    link : str
        Channel link.
    description : str
        Channel description.
    entries : list[Entry]
        Items in document order.
    """

    title: str = ""
    link: str = ""
    description: str = ""
    entries: list[Entry] = field(default_factory=list)
