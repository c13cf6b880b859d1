import pytest

from cubray.xpm import (
    XpmError,
    XpmImage,
    parse_xpm,
    quoted_lines,
    read_xpm,
    split_words,
    strip_comments,
)

BASIC = ["2 2 2 1", ". c #ff0000", "# c None", ".#", "#."]


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb") == ["a\nb"]


def test_quoted_lines_skips_unterminated_string():
    assert quoted_lines('x "ab" y "c d" "open') == ["ab", "c d"]


def test_strip_block_comment():
    assert strip_comments("a/* x */b") == "a" + " " * len("/* x */") + "b"


def test_strip_line_comment_with_newline():
    assert strip_comments("a // c\nb") == "a" + " " * len("// c\n") + "b"


def test_comment_inside_quotes_is_kept():
    text = '"/* k */" "// z"'
    assert strip_comments(text) == text


@pytest.mark.parametrize("text", ["a/* b */ c // d\ne", '"x" /* "y" */ "z"'])
def test_strip_comments_keeps_length(text):
    assert len(strip_comments(text)) == len(text)


def test_parse_basic_image():
    image = parse_xpm(BASIC)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) is None
    assert image.pixel(0, 1) is None
    assert image.pixel(1, 1) == 0xFF0000


def test_named_colours():
    image = parse_xpm(["2 1 2 1", "a c white", "b c light blue", "ab"])
    assert image.pixel(0, 0) == 0xFFFFFF
    assert image.pixel(1, 0) == 0xADD8E6


def test_unknown_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c #00ff00", "az"])
    assert image.pixel(0, 0) == 0x00FF00
    assert image.pixel(1, 0) == 0


def test_short_key_definitions_later_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixel(0, 0) == 0x000002


def test_long_key_definitions_first_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixel(0, 0) == 0x000001


def test_rows_have_width_entries():
    image = parse_xpm(["3 2 1 2", "xy c #123456", "xyxyxy", "xyxyxy"])
    assert len(image.rows) == 2
    assert all(len(row) == 3 for row in image.rows)
    assert {value for row in image.rows for value in row} == {0x123456}


def test_pixel_out_of_range():
    image = parse_xpm(BASIC)
    with pytest.raises(IndexError):
        image.pixel(2, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 2"],
        ["0 2 2 1", ". c #ff0000", "# c None", ".#", "#."],
        ["2 2 2 1", ". c #ff0000"],
        ["2 2 2 1", ". x #ff0000", "# c None", ".#", "#."],
        ["2 2 2 1", ". c", "# c None", ".#", "#."],
        ["2 2 2 1", ". c #ff0000", "# c None", ".#"],
    ],
)
def test_invalid_images(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_read_xpm_file(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"o c #0000ff", // blue\n'
        '"- c none",\n'
        '"o-"\n'
        "};\n"
    )
    image = read_xpm(path)
    assert isinstance(image, XpmImage)
    assert image.pixel(0, 0) == 0x0000FF
    assert image.pixel(1, 0) is None


def test_read_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm(tmp_path / "absent.xpm")