from cssbuilder.selector.builder import Selector, SelectorBuilder, css_selector_builder
from cssbuilder.selector.model import PartKind

__all__ = ["Selector", "SelectorBuilder", "css_selector_builder", "PartKind"]
