"""
URL helpers for calendar items.

An item lives at ``<parent calendar URL>/<uid>.ics``. When the uid cannot be
joined onto the parent, the item gets a random URL inside the same calendar.
"""

from datetime import datetime
from urllib.parse import urljoin, urlsplit, quote
import sys
import uuid

from . import config


# Characters left unescaped when a uid is turned into a path segment
_SEGMENT_SAFE = "/@+,;=!$&'()*~"


def _debug_print(msg: str) -> None:
    if not config.is_debug():
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] URL: {msg}", file=sys.stderr)


def _check_absolute(url: str) -> None:
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Not an absolute URL: {url!r}")


def _collection_path(url: str) -> str:
    """Path of the collection a relative reference is resolved against."""
    path = urlsplit(url).path
    return path[:path.rfind('/') + 1] if '/' in path else '/'


def join_url(parent_url: str, segment: str) -> str:
    """
    Resolve ``segment`` against ``parent_url``.

    Raises:
        ValueError: if the parent is not absolute, or the result leaves the
            parent's host or collection.
    """
    _check_absolute(parent_url)
    joined = urljoin(parent_url, quote(segment, safe=_SEGMENT_SAFE))

    parent = urlsplit(parent_url)
    result = urlsplit(joined)
    if (result.scheme, result.netloc) != (parent.scheme, parent.netloc):
        raise ValueError(f"{segment!r} does not resolve under {parent_url!r}")
    if not result.path.startswith(_collection_path(parent_url)):
        raise ValueError(f"{segment!r} escapes the collection of {parent_url!r}")
    return joined


def random_url(parent_url: str) -> str:
    """A fresh, unique URL inside the parent calendar."""
    return join_url(parent_url, str(uuid.uuid4()))


def item_url(parent_url: str, uid: str) -> str:
    """
    Compute the URL of an item from its parent calendar and its uid.

    Falls back to random_url() when the uid cannot be joined.
    """
    try:
        return join_url(parent_url, f"{uid}.ics")
    except ValueError as e:
        _check_absolute(parent_url)
        _debug_print(f"Cannot derive URL for uid {uid!r} ({e}), using a random one")
        return random_url(parent_url)
