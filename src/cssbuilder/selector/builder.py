"""Chainable CSS selector builder.

Usage::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # => '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # => 'div#main + table#data'

The :class:`SelectorBuilder` facade is stateless: each of its entry points
starts a fresh :class:`Selector`.  Methods called on a :class:`Selector`
mutate that instance and return it.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import DuplicationError, OrderError, SelectorError
from cssbuilder.selector.model import PartKind

__all__ = ["Selector", "SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger("cssbuilder.selector")


class Selector:
    """Accumulated, not-yet-rendered state of one simple or combined selector."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()
        self._fragments: list[str] = []
        self._present: set[PartKind] = set()
        self._last_rank = -1

    # --- simple-selector parts ------------------------------------------------

    def element(self, value: str) -> Selector:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append ``[value]``; the attribute expression is inserted verbatim."""
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    def _append(self, kind: PartKind, value: str) -> Selector:
        if kind.exclusive and kind in self._present:
            self._fail(DuplicationError(kind=kind))
        if self._last_rank > kind.rank:
            self._fail(OrderError(kind=kind))
        self._present.add(kind)
        self._last_rank = kind.rank
        self._fragments.extend(kind.tokens(value))
        return self

    def _fail(self, error: SelectorError) -> NoReturn:
        logger.debug(
            "Rejected %s after %r: %s",
            error.kind.label if error.kind else "part",
            self.render(),
            type(error).__name__,
        )
        self.reset()
        raise error

    # --- combinators ----------------------------------------------------------

    def combine(self, left: Any, combinator: str, right: Any) -> Selector:
        """Replace this selector with ``left <combinator> right``.

        ``Selector`` operands are finalized with their own ``stringify()``;
        anything else is rendered with ``str()``.
        """
        rendered_left = _render_operand(left)
        rendered_right = _render_operand(right)
        joint = self._format_combinator(combinator)
        self.reset()
        self._fragments = [rendered_left, joint, rendered_right]
        logger.debug("Combined %r %r %r", rendered_left, combinator, rendered_right)
        return self

    def _format_combinator(self, combinator: str) -> str:
        if self.config.collapse_descendant and not combinator.strip():
            return " "
        if self.config.pad_combinators:
            return f" {combinator} "
        return combinator

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the selector text without changing state."""
        return "".join(self._fragments)

    def reset(self) -> Selector:
        """Clear all fragments and presence flags."""
        self._fragments = []
        self._present = set()
        self._last_rank = -1
        return self

    def stringify(self) -> str:
        """Return the selector text and reset this instance for reuse."""
        text = self.render()
        self.reset()
        return text

    # --- introspection --------------------------------------------------------

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    @property
    def last_rank(self) -> int:
        return self._last_rank

    @property
    def is_empty(self) -> bool:
        return not self._fragments

    def has(self, kind: PartKind) -> bool:
        return kind in self._present

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector(fragments={self._fragments!r})"


def _render_operand(operand: Any) -> str:
    if isinstance(operand, Selector):
        return operand.stringify()
    return str(operand)


class SelectorBuilder:
    """Stateless facade whose entry points each start a new :class:`Selector`."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def _new(self) -> Selector:
        return Selector(self.config)

    def element(self, value: str) -> Selector:
        return self._new().element(value)

    def id(self, value: str) -> Selector:
        return self._new().id(value)

    def class_(self, value: str) -> Selector:
        return self._new().class_(value)

    def attr(self, value: str) -> Selector:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return self._new().pseudo_element(value)

    def combine(self, left: Any, combinator: str, right: Any) -> Selector:
        return self._new().combine(left, combinator, right)


css_selector_builder = SelectorBuilder()
