"""Best-effort extraction of the newest entry from an RSS feed.

Feeds are untrusted and loosely structured, and only the latest entry is
ever shown, so this scans tags with patterns instead of parsing XML.
"""
import re
from dataclasses import dataclass
from typing import Optional, Tuple

NO_TITLE = "(no title)"

_ITEM_SPLIT = re.compile(r"<item>", re.IGNORECASE)
_CDATA_OPEN = re.compile(r"^<!\[CDATA\[")
_CDATA_CLOSE = re.compile(r"\]\]>$")
_SUBREDDIT = re.compile(r"\(\s*r/([^)]+)\s*\)", re.IGNORECASE)


@dataclass(frozen=True)
class FeedItem:
    title: Optional[str] = None
    link: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.title or NO_TITLE


def extract_first_tag(xml: str, tag: str) -> Optional[str]:
    """Return the trimmed contents of the first <tag>...</tag>, if any."""
    match = re.search(rf"<{tag}>([\s\S]*?)</{tag}>", xml, re.IGNORECASE)
    if not match:
        return None
    return match.group(1).strip()


def decode_cdata(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    return _CDATA_CLOSE.sub("", _CDATA_OPEN.sub("", value))


def first_item(xml: str) -> FeedItem:
    """Extract title and link from the first <item> of a feed."""
    entries = _ITEM_SPLIT.split(xml)[1:]
    item_xml = f"<item>{entries[0]}" if entries else ""

    return FeedItem(
        title=decode_cdata(extract_first_tag(item_xml, "title")),
        link=decode_cdata(extract_first_tag(item_xml, "link")),
    )


def split_subreddit(title: str) -> Tuple[str, Optional[str]]:
    """
    Pull a "(r/name)" tag out of a post title.

    Returns:
        (cleaned title, subreddit) - subreddit is None when no tag is present
    """
    match = _SUBREDDIT.search(title)
    if not match:
        return title, None
    return _SUBREDDIT.sub("", title, count=1).strip(), match.group(1)
