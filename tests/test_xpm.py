import pytest

from fdfkit.xpm import (
    TRANSPARENT,
    XpmError,
    extract_strings,
    parse_xpm,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]


def test_parse_sets_size():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)


def test_parse_hex_colour():
    image = parse_xpm(SAMPLE)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_none_colour_is_transparent():
    image = parse_xpm(SAMPLE)
    assert image.get_pixel(1, 0) == 0xFF000000
    assert TRANSPARENT == 0xFF000000


def test_named_colour():
    image = parse_xpm(["1 1 1 1", "a c red", "a"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "a c light green", "a"])
    assert image.get_pixel(0, 0) == 0x90EE90


def test_unknown_pixel_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c #FF0000", "az"])
    assert image.get_pixel(1, 0) == 0


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #FF0000", "a c #00FF00", "a"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #FF0000", "abc c #00FF00", "abc"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_xpm_to_image_matches_parse():
    assert xpm_to_image(SAMPLE).data == parse_xpm(SAMPLE).data


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
        ["-1 1 1 1", "a c red", "a"],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_extract_strings():
    assert extract_strings('x "ab" y "cd" "unterminated') == ["ab", "cd"]


def test_file_round_trip(tmp_path):
    source = (
        "/* XPM */\n"
        "static char *pic[] = {\n"
        "/* values */\n"
        '"2 2 2 1",\n'
        '"a c #FF0000",\n'
        '"b c None",\n'
        "// pixels follow\n"
        '"ab",\n'
        '"ba"\n'
        "};\n"
    )
    path = tmp_path / "pic.xpm"
    path.write_text(source, encoding="latin-1")
    image = xpm_file_to_image(path)
    assert image.data == parse_xpm(SAMPLE).data


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")