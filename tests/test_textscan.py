import pytest

from fdfkit.textscan import find, find_unquoted, split_words, strip_comments


def test_split_words_on_spaces_and_tabs():
    assert split_words("  16 7\t\t3  1 ") == ["16", "7", "3", "1"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_of_blank_text_is_empty():
    assert split_words(" \t  ") == []


def test_find_locates_needle():
    text = "abcabc"
    pos = find(text, "ca", len(text))
    assert pos == 2
    assert text[pos:pos + 2] == "ca"


def test_find_missing_needle():
    assert find("abcdef", "xy", 6) == -1


def test_find_refuses_needle_longer_than_limit():
    assert find("abcdef", "abc", 2) == -1


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_match():
    text = 'a "x" x'
    pos = find_unquoted(text, "x", len(text))
    assert text[pos] == "x"
    assert pos > text.rindex('"')


def test_find_unquoted_all_quoted_is_missing():
    text = '"/* inside */"'
    assert find_unquoted(text, "/*", len(text)) == -1
    assert find(text, "/*", len(text)) == 1


def test_find_unquoted_matches_plain_text():
    text = "abc"
    assert find_unquoted(text, "bc", len(text)) == find(text, "bc", len(text))


def test_find_unquoted_needle_longer_than_text():
    assert find_unquoted("ab", "abc", 10) == -1


def test_strip_block_comment():
    text = "a /* b */ c"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["a", "c"]


def test_strip_line_comment_removes_newline():
    text = "x // y\nz"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert result.split() == ["x", "z"]


def test_strip_keeps_quoted_comment_markers():
    text = '"a /* b */ c" /* gone */'
    result = strip_comments(text)
    assert result.startswith('"a /* b */ c"')
    assert "gone" not in result


def test_strip_unterminated_block_comment():
    text = "a /* b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result


def test_strip_line_comment_at_end_without_newline():
    text = "v //"
    result = strip_comments(text)
    assert result.split() == ["v"]
    assert len(result) == len(text)


def test_strip_without_comments_is_identity():
    text = '"16 16 2 1",\n"a c #FF0000",'
    assert strip_comments(text) == text