"""The status line: spinner, match counts, progress and cursor position."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .theme import DEFAULT_THEME, Attr, ColorTheme, Effect

SPINNER_DURATION_MS = 200
SPINNERS_INLINE = ("-", "<")
SPINNERS_UNICODE = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
_A_WHILE = 0.05


class ClearStrategy(enum.Enum):
    """When the current selection is cleared after the matcher reports new results."""

    DONT_CLEAR = "dont_clear"
    CLEAR = "clear"
    CLEAR_IF_NOT_NULL = "clear_if_not_null"


@dataclass
class Status:
    """A snapshot of the finder's progress, drawn as one line of text.

    Times are in seconds since the reader and the matcher were last started.
    """

    total: int = 0
    matched: int = 0
    processed: int = 0
    matcher_running: bool = False
    multi_selection: bool = False
    selected: int = 0
    current_item_idx: int = 0
    hscroll_offset: int = 0
    reading: bool = False
    time_since_read: float = 0.0
    time_since_match: float = 0.0
    matcher_mode: str = ""
    theme: ColorTheme = field(default=DEFAULT_THEME)
    inline_info: bool = False

    def _spinner_set(self) -> tuple[str, ...]:
        return SPINNERS_INLINE if self.inline_info else SPINNERS_UNICODE

    def _spinning(self) -> bool:
        return self.reading and self.time_since_read > _A_WHILE

    def spinner_char(self) -> str:
        """The character shown in the spinner position."""
        if self._spinning():
            millis = int(self.time_since_read * 1000)
            spinners = self._spinner_set()
            return spinners[(millis // SPINNER_DURATION_MS) % len(spinners)]
        return "<" if self.inline_info else " "

    def _segments(self, width: int) -> list[tuple[int, str, Attr]]:
        info = self.theme.info_attr()
        info_bold = Attr(info.fg, info.bg, Effect.BOLD)
        segments: list[tuple[int, str, Attr]] = []
        col = 0

        def put(text: str, attr: Attr) -> None:
            nonlocal col
            segments.append((col, text, attr))
            col += len(text)

        if self.inline_info:
            put(" ", info)

        spinner_attr = self.theme.spinner_attr() if self._spinning() else self.theme.prompt_attr()
        put(self.spinner_char(), spinner_attr)

        put(f" {self.matched}/{self.total}", info)

        if self.matcher_mode:
            put(f"/{self.matcher_mode}", info)

        if self.matcher_running and self.time_since_match > _A_WHILE:
            put(f" ({self.processed * 100 // self.total}%) ", info)

        if self.multi_selection and self.selected > 0:
            put(f" [{self.selected}]", info_bold)

        marker = "." if self.matcher_running else " "
        cursor_info = f" {self.current_item_idx}/{self.hscroll_offset}{marker}"
        start = width - len(cursor_info)
        if start < 0:
            raise ValueError(f"width {width} is too small for the status line")
        segments.append((start, cursor_info, info_bold))
        return segments

    def render(self, width: int) -> str:
        """Draw the status line into exactly ``width`` columns."""
        cells = [" "] * width
        for start, text, _attr in self._segments(width):
            for offset, ch in enumerate(text):
                position = start + offset
                if position >= width:
                    break
                cells[position] = ch
        return "".join(cells)