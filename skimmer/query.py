"""The editable query line: fuzzy query and command query, with history and a yank buffer."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Any

from .theme import DEFAULT_THEME


class QueryMode(enum.Enum):
    """Which of the two queries is being edited."""

    CMD = "cmd"
    QUERY = "query"


class Query:
    """Two editable lines, the fuzzy query and the command query, each with a cursor.

    Text left of the cursor is kept in order; text right of the cursor is kept
    reversed, so the character just after the cursor is the last entry.
    """

    def __init__(
        self,
        fz_query: str = "",
        base_cmd: str = "",
        replstr: str = "{}",
        query_prompt: str = "> ",
        cmd_prompt: str = "c> ",
        cmd_history: Iterable[str] = (),
        fz_query_history: Iterable[str] = (),
        interactive: bool = False,
    ) -> None:
        self._fz_before: list[str] = list(fz_query)
        self._fz_after: list[str] = []
        self._cmd_before: list[str] = []
        self._cmd_after: list[str] = []
        self._yank: list[str] = []

        self.mode = QueryMode.CMD if interactive else QueryMode.QUERY
        self.base_cmd = base_cmd
        self.replstr = replstr
        self.query_prompt = query_prompt
        self.cmd_prompt = cmd_prompt

        self._cmd_history_before: list[str] = list(cmd_history)
        self._cmd_history_after: list[str] = []
        self._fz_history_before: list[str] = list(fz_query_history)
        self._fz_history_after: list[str] = []

        self._pasted: list[str] | None = None
        self.theme = DEFAULT_THEME

    @classmethod
    def from_options(cls, options: Any) -> Query:
        """Create a query line configured from finder options."""
        query = cls(
            fz_query=options.query or "",
            base_cmd=options.cmd if options.cmd is not None else "",
            replstr=options.replstr if options.replstr is not None else "{}",
            query_prompt=options.prompt if options.prompt is not None else "> ",
            cmd_prompt=options.cmd_prompt if options.cmd_prompt is not None else "c> ",
            cmd_history=options.query_history and options.cmd_history or options.cmd_history,
            fz_query_history=options.query_history,
            interactive=options.interactive,
        )
        if options.cmd_query is not None:
            query._cmd_before = list(options.cmd_query)
        return query

    def replace_base_cmd_if_not_set(self, base_cmd: str) -> Query:
        """Use ``base_cmd`` as the command template unless one is already set."""
        if not self.base_cmd:
            self.base_cmd = base_cmd
        return self

    # ------------------------------------------------------------------ reading

    def in_query_mode(self) -> bool:
        return self.mode is QueryMode.QUERY

    def get_fz_query(self) -> str:
        return "".join(self._fz_before) + "".join(reversed(self._fz_after))

    def get_cmd_query(self) -> str:
        return "".join(self._cmd_before) + "".join(reversed(self._cmd_after))

    def get_cmd(self) -> str:
        """The command template with the command query put in place of the placeholder."""
        return self.base_cmd.replace(self.replstr, self.get_cmd_query())

    def _get_query(self) -> str:
        return self.get_fz_query() if self.in_query_mode() else self.get_cmd_query()

    def get_before(self) -> str:
        """Text left of the cursor in the current mode."""
        before, _ = self._line()
        return "".join(before)

    def get_after(self) -> str:
        """Text right of the cursor in the current mode."""
        _, after = self._line()
        return "".join(reversed(after))

    def get_prompt(self) -> str:
        return self.query_prompt if self.in_query_mode() else self.cmd_prompt

    def _line(self) -> tuple[list[str], list[str]]:
        if self.in_query_mode():
            return self._fz_before, self._fz_after
        return self._cmd_before, self._cmd_after

    def _history(self) -> tuple[list[str], list[str]]:
        if self.in_query_mode():
            return self._fz_history_before, self._fz_history_after
        return self._cmd_history_before, self._cmd_history_after

    def _save_yank(self, yank: list[str], reverse: bool) -> None:
        if not yank:
            return
        self._yank = yank[::-1] if reverse else list(yank)

    def _insert(self, ch: str) -> None:
        before, _ = self._line()
        before.append(ch)

    # ------------------------------------------------------------------ actions

    def act_query_toggle_interactive(self) -> None:
        self.mode = QueryMode.CMD if self.in_query_mode() else QueryMode.QUERY

    def act_add_char(self, ch: str) -> None:
        """Type a character; while a paste is in progress it is buffered instead."""
        if self._pasted is not None:
            self._pasted.append(ch)
        else:
            self._insert(ch)

    def act_backward_delete_char(self) -> None:
        before, _ = self._line()
        if before:
            before.pop()

    def act_delete_char(self) -> None:
        _, after = self._line()
        if after:
            after.pop()

    def act_backward_char(self) -> None:
        before, after = self._line()
        if before:
            after.append(before.pop())

    def act_forward_char(self) -> None:
        before, after = self._line()
        if after:
            before.append(after.pop())

    def act_unix_word_rubout(self) -> None:
        before, _ = self._line()
        yank: list[str] = []
        while before and before[-1].isspace():
            yank.append(before.pop())
        while before and not before[-1].isspace():
            yank.append(before.pop())
        self._save_yank(yank, reverse=True)

    def act_backward_kill_word(self) -> None:
        before, _ = self._line()
        yank: list[str] = []
        while before and not before[-1].isalnum():
            yank.append(before.pop())
        while before and before[-1].isalnum():
            yank.append(before.pop())
        self._save_yank(yank, reverse=True)

    def act_kill_word(self) -> None:
        _, after = self._line()
        yank: list[str] = []
        while after and not after[-1].isalnum():
            yank.append(after.pop())
        while after and after[-1].isalnum():
            yank.append(after.pop())
        self._save_yank(yank, reverse=False)

    def act_backward_word(self) -> None:
        before, after = self._line()
        while before and not before[-1].isalnum():
            after.append(before.pop())
        while before and before[-1].isalnum():
            after.append(before.pop())

    def act_forward_word(self) -> None:
        before, after = self._line()
        while after and after[-1].isspace():
            before.append(after.pop())
        while after and not after[-1].isspace():
            before.append(after.pop())

    def act_beginning_of_line(self) -> None:
        before, after = self._line()
        after.extend(reversed(before))
        before.clear()

    def act_end_of_line(self) -> None:
        before, after = self._line()
        before.extend(reversed(after))
        after.clear()

    def act_kill_line(self) -> None:
        _, after = self._line()
        killed = list(after)
        after.clear()
        self._save_yank(killed, reverse=False)

    def act_line_discard(self) -> None:
        before, _ = self._line()
        killed = list(before)
        before.clear()
        self._save_yank(killed, reverse=False)

    def act_yank(self) -> None:
        for ch in list(self._yank):
            self._insert(ch)

    def previous_history(self) -> None:
        """Replace the text before the cursor with the previous history entry."""
        history_before, history_after = self._history()
        if not history_before:
            return
        current = self._get_query()
        entry = history_before.pop()
        history_after.append(current)
        before, _ = self._line()
        before[:] = list(entry)

    def next_history(self) -> None:
        """Replace the text before the cursor with the next history entry."""
        history_before, history_after = self._history()
        if not history_after:
            return
        current = self._get_query()
        entry = history_after.pop()
        history_before.append(current)
        before, _ = self._line()
        before[:] = list(entry)

    def start_paste(self) -> None:
        """Begin buffering typed characters as pasted text."""
        self._pasted = []

    def end_paste(self) -> None:
        """Insert the buffered pasted text and stop buffering."""
        pasted = self._pasted or []
        self._pasted = None
        for ch in pasted:
            self._insert(ch)