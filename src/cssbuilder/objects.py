"""Small object helpers: a rectangle value object and JSON text conversion."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeVar

from cssbuilder.errors import SerializationError

__all__ = ["Rectangle", "to_text", "from_text"]

T = TypeVar("T")


@dataclass
class Rectangle:
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        return self.area


def to_text(value: Any) -> str:
    """Serialise *value* to compact JSON, keeping dict insertion order."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def from_text(template: type[T] | T, text: str) -> T:
    """Load JSON *text* as an instance of *template*'s type.

    *template* may be a class or an instance of one.  The instance is allocated
    without running ``__init__`` and receives only the parsed fields; nothing
    is copied from *template* itself.
    """
    cls = template if isinstance(template, type) else type(template)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    for key, value in data.items():
        try:
            # bypasses frozen dataclass __setattr__
            object.__setattr__(obj, key, value)
        except (AttributeError, TypeError) as exc:
            raise SerializationError(
                f"Cannot set field {key!r} on {cls.__name__}: {exc}", cause=exc
            ) from exc
    return obj
