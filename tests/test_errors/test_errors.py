"""Tests for cssbuilder.errors."""
from __future__ import annotations

from cssbuilder.errors import (
    CssBuilderError,
    DuplicationError,
    OrderError,
    SelectorError,
    SerializationError,
)
from cssbuilder.selector.model import PartKind


class TestCssBuilderError:
    def test_is_exception(self) -> None:
        assert issubclass(CssBuilderError, Exception)

    def test_cause_default_none(self) -> None:
        assert CssBuilderError("boom").cause is None

    def test_cause_set(self) -> None:
        orig = ValueError("original")
        err = CssBuilderError("wrapped", cause=orig)
        assert err.cause is orig


class TestSelectorErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(SelectorError, CssBuilderError)
        assert issubclass(DuplicationError, SelectorError)
        assert issubclass(OrderError, SelectorError)
        assert issubclass(SerializationError, CssBuilderError)
        assert not issubclass(SerializationError, SelectorError)

    def test_fixed_messages(self) -> None:
        assert str(DuplicationError()) == DuplicationError.MESSAGE
        assert str(OrderError()) == OrderError.MESSAGE

    def test_kind(self) -> None:
        assert DuplicationError().kind is None
        assert OrderError(kind=PartKind.CLASS).kind is PartKind.CLASS
