"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import PartKind


class CssBuilderError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector sequencing errors
# ---------------------------------------------------------------------------


class SelectorError(CssBuilderError):
    """A selector part was appended in a sequence the builder rejects.

    The offending selector is reset before the error propagates.
    """

    def __init__(self, message: str, *, kind: PartKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicationError(SelectorError):
    """Element, id or pseudo-element appended a second time."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )

    def __init__(self, *, kind: PartKind | None = None) -> None:
        super().__init__(self.MESSAGE, kind=kind)


class OrderError(SelectorError):
    """A part was appended after a part of a later canonical rank."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, *, kind: PartKind | None = None) -> None:
        super().__init__(self.MESSAGE, kind=kind)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class SerializationError(CssBuilderError):
    """JSON text could not be loaded into the requested type."""
