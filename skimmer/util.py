"""Text helpers: shell quoting, display widths, line reshaping and number scanning."""

from __future__ import annotations

import re

from wcwidth import wcwidth

_RE_ESCAPE = re.compile(r"['\x00]")
_RE_NUMBER = re.compile(r"[+|-]?\d+")
_RE_ITEMS = re.compile(r"\\?(\{ *-?[0-9.+]*? *})")

_ESCAPES = {"'": "'\\''", "\x00": "\\0"}


def escape_single_quote(text: str) -> str:
    """Escape ``text`` so it can be placed inside single quotes in a shell command."""
    return _RE_ESCAPE.sub(lambda m: _ESCAPES.get(m.group(0), ""), text)


def char_width(ch: str) -> int:
    """Display width of one character; characters without a defined width count as 2."""
    width = wcwidth(ch)
    return 2 if width < 0 else width


def accumulate_text_width(text: str, tabstop: int) -> list[int]:
    """Return a list whose i-th entry is the display width of ``text[: i + 1]``."""
    widths = []
    total = 0
    for ch in text:
        total += tabstop - (total % tabstop) if ch == "\t" else char_width(ch)
        widths.append(total)
    return widths


def reshape_string(
    text: str,
    container_width: int,
    match_start: int,
    match_end: int,
    tabstop: int,
) -> tuple[int, int]:
    """Choose a left shift so the matched part of ``text`` stays visible.

    Returns ``(left_shift, full_print_width)``.
    """
    if not text:
        return 0, 0

    acc_width = accumulate_text_width(text, tabstop)
    full_width = acc_width[-1]
    if full_width <= container_width:
        return 0, full_width

    before = acc_width[match_start - 1] if match_start else 0
    if match_end >= len(acc_width):
        matched = full_width - before
    else:
        matched = acc_width[match_end] - before
    after = full_width - before - matched

    if (before > after and matched + after <= container_width) or after <= 2:
        return full_width - container_width, full_width
    if before <= after and before + matched <= container_width:
        return 0, full_width
    return acc_width[match_end] - container_width + 2, full_width


def depends_on_items(cmd: str) -> bool:
    """Tell whether a command refers to items, e.g. contains ``{}``, ``{1..}`` or ``{+}``."""
    return _RE_ITEMS.search(cmd) is not None


def str_lines(string: str) -> list[str]:
    """Split text into lines after dropping trailing whitespace."""
    return string.rstrip().split("\n")


def atoi(text: str, signed: bool = False, bits: int = 64) -> int | None:
    """Parse the first number found in ``text`` as an integer of the given kind.

    Returns ``None`` when there is no number or it does not fit the type.
    """
    found = _RE_NUMBER.search(text)
    if found is None:
        return None
    token = found.group(0)

    sign = 1
    if token[0] == "+":
        token = token[1:]
    elif token[0] == "-":
        if not signed:
            return None
        sign = -1
        token = token[1:]
    elif token[0] == "|":
        return None

    if not token.isascii() or not token.isdigit():
        return None

    value = sign * int(token)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        return None
    return value