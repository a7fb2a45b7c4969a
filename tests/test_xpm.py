import pytest

from solong.colors import color_by_name, text_to_rgb
from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    quoted_strings,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"  c None",
"r c #FF0000",
"w c white",
/* pixels */
"r w",
"wr ",
};
"""


def test_split_words_on_spaces_and_tabs_only():
    assert split_words("  a \tb  c\t") == ["a", "b", "c"]
    assert split_words("a\nb c") == ["a\nb", "c"]
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_removes_comment():
    text = "/* XPM */\nx // note\ny"
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "XPM" not in stripped
    assert "note" not in stripped
    assert stripped.strip().split() == ["x", "y"]


def test_strip_comments_leaves_quoted_text():
    text = '"a/*b*/c"'
    assert strip_comments(text) == text


def test_quoted_strings_in_order():
    assert list(quoted_strings('a "x" b "y z" "unclosed')) == ["x", "y z"]


def test_parse_sample_text():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(1, 0) == TRANSPARENT
    assert image.pixel(2, 0) == color_by_name("white")
    assert image.pixels[1] == (color_by_name("white"), 0xFF0000, TRANSPARENT)


def test_pixel_out_of_range():
    image = parse_xpm_text(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_parse_from_string_list_with_two_char_keys():
    image = parse_xpm(["2 1 2 2", "aa c red", "bb c blue", "bbaa"])
    assert image == XpmImage(
        width=2,
        height=1,
        pixels=((color_by_name("blue"), color_by_name("red")),),
    )


def test_unknown_key_gives_zero():
    image = parse_xpm(["2 1 1 1", "a c red", "ab"])
    assert image.pixel(0, 0) == color_by_name("red")
    assert image.pixel(1, 0) == 0


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == color_by_name("light blue")
    assert image.pixel(0, 0) == text_to_rgb("light", "blue")


def test_duplicate_short_key_last_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == color_by_name("blue")


def test_duplicate_long_key_first_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == color_by_name("red")


@pytest.mark.parametrize(
    "header",
    ["0 1 1 1", "1 0 1 1", "1 1 0 1", "1 1 1 0", "abc def g h", "1 1 1"],
)
def test_bad_header(header):
    with pytest.raises(XpmError):
        parse_xpm([header, "a c red", "a"])


def test_missing_colour_key():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a s red", "a"])


def test_colour_key_without_value():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a c", "a"])


def test_missing_rows():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "a c red", "a"])


def test_short_row():
    with pytest.raises(XpmError):
        parse_xpm(["3 1 1 1", "a c red", "aa"])


def test_empty_input():
    with pytest.raises(XpmError):
        parse_xpm([])


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.xpm"
    path.write_bytes(b"")
    with pytest.raises(XpmError):
        load_xpm(path)