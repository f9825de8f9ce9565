from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    pad_combinators: bool = True
    collapse_descendant: bool = False  # render " " as one space instead of three
