"""Size values used for margins and the preview window, and their option parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

_USIZE_MAX = (1 << 64) - 1
_RE_USIZE = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int | None:
    if not _RE_USIZE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _USIZE_MAX else None


@dataclass(frozen=True)
class Size:
    """A length that is fixed, a percentage of the available space, or left to the default."""

    kind: Literal["fixed", "percent", "default"] = "default"
    value: int = 0

    @classmethod
    def fixed(cls, value: int) -> Size:
        return cls("fixed", value)

    @classmethod
    def percent(cls, value: int) -> Size:
        return cls("percent", value)

    @classmethod
    def default(cls) -> Size:
        return cls("default", 0)

    def calc_fixed_size(self, total: int, default: int) -> int:
        """Resolve this size against ``total``, using ``default`` for a default size."""
        if self.kind == "fixed":
            return self.value
        if self.kind == "percent":
            return total * self.value // 100
        return default


def margin_string_to_size(margin: str) -> Size:
    """Turn ``"10"`` into a fixed size and ``"10%"`` into a percentage (at most 100)."""
    if margin.endswith("%"):
        parsed = _parse_usize(margin[:-1])
        return Size.percent(min(100, 100 if parsed is None else parsed))
    parsed = _parse_usize(margin)
    return Size.fixed(0 if parsed is None else parsed)


def parse_margin(margin_option: str) -> tuple[Size, Size, Size, Size]:
    """Parse ``TRBL``, ``TB,RL``, ``T,RL,B`` or ``T,R,B,L`` into (top, right, bottom, left)."""
    sizes = [margin_string_to_size(part) for part in margin_option.split(",")]
    if len(sizes) == 1:
        (all_sides,) = sizes
        return all_sides, all_sides, all_sides, all_sides
    if len(sizes) == 2:
        vertical, horizontal = sizes
        return vertical, horizontal, vertical, horizontal
    if len(sizes) == 3:
        top, horizontal, bottom = sizes
        return top, horizontal, bottom, horizontal
    if len(sizes) == 4:
        top, right, bottom, left = sizes
        return top, right, bottom, left
    zero = Size.fixed(0)
    return zero, zero, zero, zero