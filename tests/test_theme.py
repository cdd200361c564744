import pytest

from skimmer.options import SkimOptions
from skimmer.theme import DEFAULT_THEME, Attr, Color, ColorTheme, Effect


def test_default_theme_is_dark():
    assert DEFAULT_THEME == ColorTheme.dark256()
    assert DEFAULT_THEME.matched == Color.ansi(108)
    assert DEFAULT_THEME.border == Color.ansi(59)


def test_empty_theme_uses_terminal_defaults():
    theme = ColorTheme.empty()
    assert theme.fg == Color.default()
    assert theme.cursor == Color.default()
    assert theme.normal() == Attr(Color.default(), Color.default(), Effect(0))


def test_bw_effects():
    theme = ColorTheme.bw()
    assert theme.matched_attr().effect == Effect.UNDERLINE
    assert theme.current_attr().effect == Effect.REVERSE
    assert theme.current_match_attr().effect == Effect.UNDERLINE | Effect.REVERSE


def test_named_colors_are_palette_entries():
    assert Color.BLACK == Color.ansi(0)
    assert Color.LIGHT_BLACK == Color.ansi(8)
    assert ColorTheme.default16().prompt == Color.BLUE


@pytest.mark.parametrize(
    "name, preset",
    [
        ("molokai", ColorTheme.molokai256),
        ("light", ColorTheme.light256),
        ("16", ColorTheme.default16),
        ("bw", ColorTheme.bw),
        ("empty", ColorTheme.empty),
        ("dark", ColorTheme.dark256),
        ("default", ColorTheme.dark256),
        ("whatever", ColorTheme.dark256),
    ],
)
def test_preset_names(name, preset):
    assert ColorTheme.from_spec(name) == preset()


def test_palette_colour_setting():
    theme = ColorTheme.from_spec("hl:1")
    assert theme.matched == Color.ansi(1)
    assert theme.current == ColorTheme.dark256().current


def test_aliases_set_the_same_field():
    assert ColorTheme.from_spec("fg+:3") == ColorTheme.from_spec("current:3")
    assert ColorTheme.from_spec("pointer:9") == ColorTheme.from_spec("cursor:9")
    assert ColorTheme.from_spec("marker:9") == ColorTheme.from_spec("selected:9")
    assert ColorTheme.from_spec("bg+:9") == ColorTheme.from_spec("current_bg:9")


def test_rgb_colour_setting():
    theme = ColorTheme.from_spec("fg:#ff0000")
    assert theme.fg == Color.rgb(255, 0, 0)


def test_invalid_hex_part_falls_back():
    theme = ColorTheme.from_spec("bg:#zz0000")
    assert theme.bg == Color.rgb(255, 0, 0)


def test_invalid_palette_value_is_default():
    assert ColorTheme.from_spec("info:abc").info == Color.default()
    assert ColorTheme.from_spec("info:300").info == Color.default()


def test_query_sets_query_foreground():
    theme = ColorTheme.from_spec("query:4,query_bg:5")
    assert theme.query() == Attr(Color.ansi(4), Color.ansi(5), Effect(0))


def test_preset_then_override():
    theme = ColorTheme.from_spec("light,prompt:1")
    assert theme.prompt == Color.ansi(1)
    assert theme.matched_bg == ColorTheme.light256().matched_bg


def test_later_preset_resets_overrides():
    assert ColorTheme.from_spec("prompt:1,molokai") == ColorTheme.molokai256()


def test_unknown_field_ignored():
    assert ColorTheme.from_spec("nothing:1") == ColorTheme.dark256()


def test_derived_attrs_use_shared_backgrounds():
    theme = ColorTheme.from_spec("bg:3,current_bg:4")
    assert theme.spinner_attr().effect == Effect.BOLD
    assert theme.spinner_attr().bg == theme.bg
    assert theme.cursor_attr().bg == theme.current_bg
    assert theme.selected_attr().bg == theme.current_bg
    assert theme.header_attr().bg == theme.bg
    assert theme.border_attr().fg == theme.border
    assert theme.info_attr().fg == theme.info
    assert theme.prompt_attr().fg == theme.prompt


def test_init_from_options():
    assert ColorTheme.init_from_options(SkimOptions()) == ColorTheme.dark256()
    assert ColorTheme.init_from_options(SkimOptions(color="light")) == ColorTheme.light256()


def test_color_range_checked():
    with pytest.raises(ValueError):
        Color.ansi(256)
    with pytest.raises(ValueError):
        Color.rgb(0, -1, 0)