# skimmer

The state and parsing logic behind an interactive fuzzy finder, as a plain Python
library. It holds the editable query line, colour themes, option records, the
margin and preview-window option parsers, the status line and the helpers that
build shell commands from items.

## Modules

- `skimmer.query` has `Query` and `QueryMode`. A `Query` keeps two editable lines,
  the fuzzy query and the command query, and switches between them with
  `act_query_toggle_interactive`. It offers readline-style editing: `act_add_char`,
  `act_backward_delete_char`, `act_delete_char`, `act_backward_char`, `act_forward_char`,
  `act_backward_word`, `act_forward_word`, `act_beginning_of_line`, `act_end_of_line`.
  For kill and yank it has `act_unix_word_rubout`, `act_backward_kill_word`,
  `act_kill_word`, `act_kill_line`, `act_line_discard` and `act_yank`. History moves with
  `previous_history` and `next_history`, and bracketed paste goes through `start_paste`
  and `end_paste`. `get_cmd` puts the command query in place of the placeholder
  (`replstr`, `{}` by default) in the base command. `Query.from_options` builds a query
  from a `SkimOptions`.
- `skimmer.theme` provides `Color`, `Effect`, `Attr` and `ColorTheme`. The presets are
  `dark256` (the default), `molokai256`, `light256`, `default16`, `bw` and `empty`.
  `ColorTheme.from_spec` parses specs such as `"light,hl:1,fg:#ff8800"`.
- `skimmer.options` holds `SkimOptions`, the record of all settings with their defaults.
  `build_options(**kwargs)` creates one: `no_height` forces height `100%` and `reverse`
  selects the `reverse` layout. `SkimOutput` is the record of a finished run.
- `skimmer.layout` has `Size` (fixed, percent or default), `margin_string_to_size` and
  `parse_margin`, which takes the `TRBL`, `TB,RL`, `T,RL,B` or `T,R,B,L` forms.
- `skimmer.preview_window` has `parse_preview`, which returns a `PreviewLayout` with a
  `Direction`, a size, wrap and shown. It also has `parse_preview_offset`, which finds the
  `+SCROLL[-OFFSET]` token.
- `skimmer.status` has `Status`, which renders the info line (spinner, matched/total
  counts, progress percentage, selection count, cursor position), and the
  `ClearStrategy` enum.
- `skimmer.util` has `escape_single_quote`, `accumulate_text_width`, `reshape_string`,
  `depends_on_items`, `str_lines` and `atoi`.

## Installation

```
pip install .
```

## Example

```python
from skimmer.query import Query
from skimmer.theme import ColorTheme, Color
from skimmer.layout import parse_margin, Size
from skimmer.preview_window import parse_preview, parse_preview_offset, Direction
from skimmer.status import Status
from skimmer.util import escape_single_quote, depends_on_items

query = Query(fz_query="ab")
query.act_add_char("c")
query.act_backward_kill_word()      # removes "abc" into the yank buffer
query.act_yank()
print(query.get_fz_query())         # abc

cmd_line = Query(base_cmd="grep {} file", interactive=True)
for ch in "foo":
    cmd_line.act_add_char(ch)
print(cmd_line.get_cmd())           # grep foo file

theme = ColorTheme.from_spec("light,hl:1")
assert theme.matched == Color.ansi(1)

top, right, bottom, left = parse_margin("1,10%")
assert top == Size.fixed(1) and right == Size.percent(10)

layout = parse_preview("up:30%:wrap")
assert layout.direction is Direction.UP and layout.wrap
print(parse_preview_offset("right:+{2}-5"))   # +{2}-5

print(repr(Status(total=10, matched=3).render(20)))  # '  3/10          0/0 '

print(escape_single_quote("it's"))  # it'\''s
print(depends_on_items("cat {}"))   # True
```

## What this package does not do

It has no terminal front end and no command to run. It does not draw to a screen or
read keys. It does not match items against a query, read items from commands or
standard input, or run preview commands. Those parts are left to the application
that uses these pieces.

## Running the tests

```
pip install .[test]
pytest
```