import pytest

from fdfkit.colors import COLOR_TABLE, lookup_color, text_to_rgb


def test_lookup_basic_names():
    assert lookup_color("red") == 0xff0000
    assert lookup_color("navy") == 0x80
    assert lookup_color("black") == 0x0


def test_lookup_is_case_insensitive():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("GHOST WHITE") == 0xf8f8ff


def test_duplicate_name_resolves_to_first_entry():
    assert lookup_color("dark slate") == 0x2f4f4f
    assert lookup_color("light goldenrod") == 0xfafad2


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("no such colour")


def test_every_table_entry_resolves_to_first_occurrence():
    seen = {}
    for name, value in COLOR_TABLE:
        seen.setdefault(name.lower(), value)
    for name, value in seen.items():
        assert lookup_color(name) == value


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_hex_spec():
    assert text_to_rgb("#ff00ff") == 0xff00ff
    assert text_to_rgb("#FFFFFF", None) == 0xffffff


def test_hex_spec_ignores_trailing_garbage():
    assert text_to_rgb("#ff00ffzz") == text_to_rgb("#ff00ff")


def test_hex_spec_without_digits_is_zero():
    assert text_to_rgb("#zz") == 0


def test_hex_spec_wraps_to_signed_32_bits():
    assert text_to_rgb("#FFFFFFFF") == -1


def test_two_word_spec_joins_with_space():
    assert text_to_rgb("light", "green") == lookup_color("light green")
    assert text_to_rgb("navy", "blue") == 0x80


def test_single_word_spec():
    assert text_to_rgb("Magenta") == 0xff00ff
    assert text_to_rgb("None") == -1


def test_unknown_spec_is_black():
    assert text_to_rgb("unknowncolour") == 0
    assert text_to_rgb("unknown", "colour") == 0


def test_end_ignored_for_hex_spec():
    assert text_to_rgb("#ff0000", "anything") == lookup_color("red")