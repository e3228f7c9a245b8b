"""Bounds applied to collections and strings before they are sent upstream."""

from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def take_first(items: Optional[Sequence[T]], limit: int) -> List[T]:
    """Return the first `limit` items, keeping their order."""
    if not items or limit <= 0:
        return []
    return list(items[:limit])


def clip(text: Optional[str], limit: int) -> str:
    """Return the first `limit` characters of `text` (None renders as empty)."""
    if not text or limit <= 0:
        return ""
    return text[:limit]
