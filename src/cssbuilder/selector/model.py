"""Selector part kinds: canonical rank, rendering and exclusivity."""

from __future__ import annotations

from enum import Enum


class PartKind(Enum):
    """A kind of simple-selector part.

    Each member's value is ``(rank, prefix, suffix, exclusive)``.  Parts must be
    appended in non-decreasing rank order; exclusive kinds may occur only once.
    """

    ELEMENT = (0, "", "", True)
    ID = (1, "#", "", True)
    CLASS = (2, ".", "", False)
    ATTRIBUTE = (3, "[", "]", False)
    PSEUDO_CLASS = (4, ":", "", False)
    PSEUDO_ELEMENT = (5, "::", "", True)

    def __init__(self, rank: int, prefix: str, suffix: str, exclusive: bool) -> None:
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.exclusive = exclusive

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def tokens(self, value: str) -> list[str]:
        """Return the rendered fragments for *value* of this kind."""
        tokens = [self.prefix] if self.prefix else []
        tokens.append(value)
        if self.suffix:
            tokens.append(self.suffix)
        return tokens
