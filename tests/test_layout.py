import pytest

from skimmer.layout import Size, margin_string_to_size, parse_margin


def test_fixed_size_from_number():
    assert margin_string_to_size("10") == Size.fixed(10)


def test_percent_size_from_number_with_percent_sign():
    assert margin_string_to_size("10%") == Size.percent(10)


def test_percent_is_capped_at_100():
    assert margin_string_to_size("150%") == Size.percent(100)


def test_invalid_percent_falls_back_to_100():
    assert margin_string_to_size("x%") == Size.percent(100)


def test_invalid_fixed_falls_back_to_zero():
    assert margin_string_to_size("abc") == Size.fixed(0)
    assert margin_string_to_size("-3") == Size.fixed(0)
    assert margin_string_to_size(" 3") == Size.fixed(0)


def test_plus_sign_is_accepted():
    assert margin_string_to_size("+7") == Size.fixed(7)


@pytest.mark.parametrize("value", [0, 1, 42, 99, 100])
def test_percent_round_trip(value):
    size = margin_string_to_size(f"{value}%")
    assert size.kind == "percent"
    assert size.value == value


def test_parse_margin_default_option():
    assert parse_margin("0,0,0,0") == (Size.fixed(0),) * 4


def test_parse_margin_single():
    assert parse_margin("5") == (Size.fixed(5),) * 4


def test_parse_margin_two():
    top, right, bottom, left = parse_margin("1,2%")
    assert top == bottom == Size.fixed(1)
    assert right == left == Size.percent(2)


def test_parse_margin_three():
    top, right, bottom, left = parse_margin("1,2,3")
    assert (top, right, bottom, left) == (
        Size.fixed(1),
        Size.fixed(2),
        Size.fixed(3),
        Size.fixed(2),
    )


def test_parse_margin_four():
    assert parse_margin("1,2,3,4") == (
        Size.fixed(1),
        Size.fixed(2),
        Size.fixed(3),
        Size.fixed(4),
    )


def test_parse_margin_too_many_parts_gives_zero():
    assert parse_margin("1,2,3,4,5") == (Size.fixed(0),) * 4


def test_calc_fixed_size():
    assert Size.fixed(7).calc_fixed_size(100, 3) == 7
    assert Size.percent(50).calc_fixed_size(80, 3) == 40
    assert Size.default().calc_fixed_size(100, 3) == 3