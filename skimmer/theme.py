"""Colours, text effects and the colour theme of the finder's interface."""

from __future__ import annotations

import dataclasses
import enum
import re
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

_RE_HEX = re.compile(r"\+?[0-9A-Fa-f]+")
_RE_DEC = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Color:
    """A terminal colour: the terminal default, a palette index or an RGB triple."""

    kind: Literal["default", "ansi", "rgb"] = "default"
    value: tuple[int, ...] = ()

    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    LIGHT_BLACK: ClassVar[Color]

    @classmethod
    def default(cls) -> Color:
        return cls("default", ())

    @classmethod
    def ansi(cls, index: int) -> Color:
        if not 0 <= index <= 255:
            raise ValueError(f"palette index out of range: {index}")
        return cls("ansi", (index,))

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Color:
        for part in (red, green, blue):
            if not 0 <= part <= 255:
                raise ValueError(f"colour component out of range: {part}")
        return cls("rgb", (red, green, blue))


Color.BLACK = Color.ansi(0)
Color.RED = Color.ansi(1)
Color.GREEN = Color.ansi(2)
Color.YELLOW = Color.ansi(3)
Color.BLUE = Color.ansi(4)
Color.MAGENTA = Color.ansi(5)
Color.CYAN = Color.ansi(6)
Color.WHITE = Color.ansi(7)
Color.LIGHT_BLACK = Color.ansi(8)


class Effect(enum.Flag):
    """Text effects; ``Effect(0)`` means no effect."""

    BOLD = enum.auto()
    DIM = enum.auto()
    UNDERLINE = enum.auto()
    BLINK = enum.auto()
    REVERSE = enum.auto()


_NO_EFFECT = Effect(0)


@dataclass(frozen=True)
class Attr:
    """Foreground, background and effect used to draw text."""

    fg: Color = Color()
    bg: Color = Color()
    effect: Effect = _NO_EFFECT


_SPEC_FIELDS = {
    "fg": "fg",
    "bg": "bg",
    "matched": "matched",
    "hl": "matched",
    "matched_bg": "matched_bg",
    "current": "current",
    "fg+": "current",
    "current_bg": "current_bg",
    "bg+": "current_bg",
    "current_match": "current_match",
    "hl+": "current_match",
    "current_match_bg": "current_match_bg",
    "query": "query_fg",
    "query_bg": "query_bg",
    "spinner": "spinner",
    "info": "info",
    "prompt": "prompt",
    "cursor": "cursor",
    "pointer": "cursor",
    "selected": "selected",
    "marker": "selected",
    "header": "header",
    "border": "border",
}


def _hex_byte(raw: bytes) -> int:
    try:
        text = raw.decode("ascii")
    except UnicodeDecodeError:
        return 255
    if not _RE_HEX.fullmatch(text):
        return 255
    value = int(text, 16)
    return value if value <= 255 else 255


def _parse_color(text: str) -> Color:
    raw = text.encode("utf-8")
    if len(raw) == 7:
        return Color.rgb(_hex_byte(raw[1:3]), _hex_byte(raw[3:5]), _hex_byte(raw[5:7]))
    if _RE_DEC.fullmatch(text) and text.isascii():
        value = int(text)
        if value <= 255:
            return Color.ansi(value)
    return Color.default()


@dataclass(frozen=True)
class ColorTheme:
    """The colours of each part of the interface."""

    fg: Color = Color()
    bg: Color = Color()
    normal_effect: Effect = _NO_EFFECT
    matched: Color = Color()
    matched_bg: Color = Color()
    matched_effect: Effect = _NO_EFFECT
    current: Color = Color()
    current_bg: Color = Color()
    current_effect: Effect = _NO_EFFECT
    current_match: Color = Color()
    current_match_bg: Color = Color()
    current_match_effect: Effect = _NO_EFFECT
    query_fg: Color = Color()
    query_bg: Color = Color()
    query_effect: Effect = _NO_EFFECT
    spinner: Color = Color()
    info: Color = Color()
    prompt: Color = Color()
    cursor: Color = Color()
    selected: Color = Color()
    header: Color = Color()
    border: Color = Color()

    @classmethod
    def init_from_options(cls, options: Any) -> ColorTheme:
        """Build the theme named by the options' ``color`` setting, or the dark theme."""
        color = getattr(options, "color", None)
        return cls.dark256() if color is None else cls.from_spec(color)

    @classmethod
    def empty(cls) -> ColorTheme:
        return cls()

    @classmethod
    def bw(cls) -> ColorTheme:
        return cls(
            matched_effect=Effect.UNDERLINE,
            current_effect=Effect.REVERSE,
            current_match_effect=Effect.UNDERLINE | Effect.REVERSE,
        )

    @classmethod
    def default16(cls) -> ColorTheme:
        return cls(
            matched=Color.GREEN,
            matched_bg=Color.BLACK,
            current=Color.YELLOW,
            current_bg=Color.BLACK,
            current_match=Color.GREEN,
            current_match_bg=Color.BLACK,
            spinner=Color.GREEN,
            info=Color.WHITE,
            prompt=Color.BLUE,
            cursor=Color.RED,
            selected=Color.MAGENTA,
            header=Color.CYAN,
            border=Color.LIGHT_BLACK,
        )

    @classmethod
    def dark256(cls) -> ColorTheme:
        return cls(
            matched=Color.ansi(108),
            matched_bg=Color.ansi(0),
            current=Color.ansi(254),
            current_bg=Color.ansi(236),
            current_match=Color.ansi(151),
            current_match_bg=Color.ansi(236),
            spinner=Color.ansi(148),
            info=Color.ansi(144),
            prompt=Color.ansi(110),
            cursor=Color.ansi(161),
            selected=Color.ansi(168),
            header=Color.ansi(109),
            border=Color.ansi(59),
        )

    @classmethod
    def molokai256(cls) -> ColorTheme:
        return cls(
            matched=Color.ansi(234),
            matched_bg=Color.ansi(186),
            current=Color.ansi(254),
            current_bg=Color.ansi(236),
            current_match=Color.ansi(234),
            current_match_bg=Color.ansi(186),
            spinner=Color.ansi(148),
            info=Color.ansi(144),
            prompt=Color.ansi(110),
            cursor=Color.ansi(161),
            selected=Color.ansi(168),
            header=Color.ansi(109),
            border=Color.ansi(59),
        )

    @classmethod
    def light256(cls) -> ColorTheme:
        return cls(
            matched=Color.ansi(0),
            matched_bg=Color.ansi(220),
            current=Color.ansi(237),
            current_bg=Color.ansi(251),
            current_match=Color.ansi(66),
            current_match_bg=Color.ansi(251),
            spinner=Color.ansi(65),
            info=Color.ansi(101),
            prompt=Color.ansi(25),
            cursor=Color.ansi(161),
            selected=Color.ansi(168),
            header=Color.ansi(31),
            border=Color.ansi(145),
        )

    @classmethod
    def from_spec(cls, color: str) -> ColorTheme:
        """Parse a spec such as ``"light,hl:1,fg:#ff8800"`` into a theme.

        A bare name picks a preset; ``name:value`` sets one colour, where the value
        is a palette index or ``#rrggbb``.
        """
        presets = {
            "molokai": cls.molokai256,
            "light": cls.light256,
            "16": cls.default16,
            "bw": cls.bw,
            "empty": cls.empty,
        }
        theme = cls.dark256()
        for pair in color.split(","):
            parts = pair.split(":")
            if len(parts) < 2:
                theme = presets.get(parts[0], cls.dark256)()
                continue
            target = _SPEC_FIELDS.get(parts[0])
            if target is not None:
                theme = dataclasses.replace(theme, **{target: _parse_color(parts[1])})
        return theme

    def normal(self) -> Attr:
        return Attr(self.fg, self.bg, self.normal_effect)

    def matched_attr(self) -> Attr:
        return Attr(self.matched, self.matched_bg, self.matched_effect)

    def current_attr(self) -> Attr:
        return Attr(self.current, self.current_bg, self.current_effect)

    def current_match_attr(self) -> Attr:
        return Attr(self.current_match, self.current_match_bg, self.current_match_effect)

    def query(self) -> Attr:
        return Attr(self.query_fg, self.query_bg, self.query_effect)

    def spinner_attr(self) -> Attr:
        return Attr(self.spinner, self.bg, Effect.BOLD)

    def info_attr(self) -> Attr:
        return Attr(self.info, self.bg, _NO_EFFECT)

    def prompt_attr(self) -> Attr:
        return Attr(self.prompt, self.bg, _NO_EFFECT)

    def cursor_attr(self) -> Attr:
        return Attr(self.cursor, self.current_bg, _NO_EFFECT)

    def selected_attr(self) -> Attr:
        return Attr(self.selected, self.current_bg, _NO_EFFECT)

    def header_attr(self) -> Attr:
        return Attr(self.header, self.bg, _NO_EFFECT)

    def border_attr(self) -> Attr:
        return Attr(self.border, self.bg, _NO_EFFECT)


DEFAULT_THEME = ColorTheme.dark256()