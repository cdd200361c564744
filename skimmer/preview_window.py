"""Parsing of the preview window option: placement, size, wrapping and scroll offset."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .layout import Size, margin_string_to_size

_RE_PREVIEW_OFFSET = re.compile(r"\+([0-9]+|\{-?[0-9]+\})(-[0-9]+|-/[1-9][0-9]*)?")
_DIGITS = "0123456789"


class Direction(enum.Enum):
    """Side of the screen where the preview window is placed."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class PreviewLayout:
    """How the preview window is shown."""

    direction: Direction = Direction.RIGHT
    size: Size = Size.percent(50)
    wrap: bool = False
    shown: bool = True


_DIRECTIONS = {
    "UP": Direction.UP,
    "DOWN": Direction.DOWN,
    "LEFT": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
}


def parse_preview(preview_option: str) -> PreviewLayout:
    """Parse a colon separated spec such as ``"up:30%:wrap:hidden"``.

    A token starting with a digit is the size; unknown tokens are ignored.
    """
    direction = Direction.RIGHT
    size = Size.percent(50)
    wrap = False
    shown = True

    for token in preview_option.split(":"):
        if not token:
            continue
        if token[0] in _DIGITS:
            size = margin_string_to_size(token)
            continue
        word = token.upper()
        if word in _DIRECTIONS:
            direction = _DIRECTIONS[word]
        elif word == "HIDDEN":
            shown = False
        elif word == "WRAP":
            wrap = True

    return PreviewLayout(direction, size, wrap, shown)


def parse_preview_offset(preview_window: str) -> str:
    """Return the first ``+SCROLL[-OFFSET]`` token of the spec, or an empty string."""
    for token in preview_window.split(":"):
        if _RE_PREVIEW_OFFSET.fullmatch(token):
            return token
    return ""