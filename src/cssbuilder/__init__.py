"""cssbuilder: chainable CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import BuilderConfig  # noqa: E402
from cssbuilder.errors import (  # noqa: E402
    CssBuilderError,
    DuplicationError,
    OrderError,
    SelectorError,
    SerializationError,
)
from cssbuilder.objects import Rectangle, from_text, to_text  # noqa: E402
from cssbuilder.selector import (  # noqa: E402
    PartKind,
    Selector,
    SelectorBuilder,
    css_selector_builder,
)

__all__ = [
    "__version__",
    # config
    "BuilderConfig",
    # errors
    "CssBuilderError",
    "SelectorError",
    "DuplicationError",
    "OrderError",
    "SerializationError",
    # selector
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    # objects
    "Rectangle",
    "to_text",
    "from_text",
]
