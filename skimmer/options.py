"""Run options for the finder and the result it reports when it finishes."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any


@dataclass
class SkimOptions:
    """Every setting the finder accepts, with its default value."""

    bind: list[str] = field(default_factory=list)
    multi: bool = False
    prompt: str | None = "> "
    cmd_prompt: str | None = "c> "
    expect: str | None = None
    tac: bool = False
    nosort: bool = False
    tiebreak: str | None = None
    exact: bool = False
    cmd: str | None = None
    interactive: bool = False
    query: str | None = None
    cmd_query: str | None = None
    regex: bool = False
    delimiter: str | None = None
    replstr: str | None = "{}"
    color: str | None = None
    margin: str | None = "0,0,0,0"
    no_height: bool = False
    no_clear: bool = False
    min_height: str | None = "10"
    height: str | None = "100%"
    preview: str | None = None
    preview_window: str | None = "right:50%"
    reverse: bool = False
    tabstop: str | None = None
    no_hscroll: bool = False
    no_mouse: bool = False
    inline_info: bool = False
    header: str | None = None
    header_lines: int = 0
    layout: str = ""
    algorithm: Any = None
    case: Any = None
    engine_factory: Any = None
    query_history: list[str] = field(default_factory=list)
    cmd_history: list[str] = field(default_factory=list)
    cmd_collector: Any = None
    keep_right: bool = False
    skip_to_pattern: str = ""
    select1: bool = False
    exit0: bool = False
    sync: bool = False
    selector: Any = None
    no_clear_if_empty: bool = False


def build_options(**kwargs: Any) -> SkimOptions:
    """Create options from keyword settings, applying the settings that imply others.

    ``no_height`` forces a full height and ``reverse`` selects the reverse layout.
    An unknown setting raises ``TypeError``.
    """
    options = SkimOptions(**kwargs)
    if options.no_height:
        options = dataclasses.replace(options, height="100%")
    if options.reverse:
        options = dataclasses.replace(options, layout="reverse")
    return options


@dataclass
class SkimOutput:
    """What the finder returns once it accepts or aborts."""

    final_event: Any
    """The event that ended the run, normally an accept or an abort."""
    is_abort: bool
    """True when the run was aborted."""
    final_key: Any
    """The key that ended the run; may be a null key when triggered internally."""
    query: str
    """The fuzzy query at the end of the run."""
    cmd: str
    """The command query at the end of the run."""
    selected_items: list[Any] = field(default_factory=list)
    """The items the user selected."""