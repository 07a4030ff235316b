import errno

import pytest

from cubcaster.errors import CubError
from cubcaster.model import Cardinal
from cubcaster.parsing import (
    has_cub_extension,
    has_invalid_char,
    is_map_line,
    is_texture_line,
    load_scene,
    max_width,
    parse_rgb,
    parse_scene,
    read_lines,
    skip_whitespace,
    square_map,
)

HEADER = [
    "NO ./textures/north.xpm\n",
    "SO ./textures/south.xpm\n",
    "WE ./textures/west.xpm\n",
    "EA ./textures/east.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]
MAP = ["1111\n", "1N01\n", "1 1\n", "1111"]


def test_extension():
    assert has_cub_extension("maps/map1.cub") is True
    assert has_cub_extension("maps/map1.ber") is False
    assert has_cub_extension("cub") is False


def test_skip_whitespace():
    assert skip_whitespace("\t  ./path ") == "./path "
    assert skip_whitespace("   ") == ""


@pytest.mark.parametrize(
    "line, expected",
    [
        ("NO ./a.xpm", True),
        ("SO ./a.xpm", True),
        ("WE ./a.xpm", True),
        ("EA ./a.xpm", True),
        ("F 1,2,3", True),
        ("C 1,2,3", True),
        ("NO./a.xpm", False),
        ("1111", False),
    ],
)
def test_is_texture_line(line, expected):
    assert is_texture_line(line) is expected


def test_is_map_line():
    assert is_map_line("1111\n") is True
    assert is_map_line("  0 \n") is True
    assert is_map_line("   \n") is False
    assert is_map_line("F 10,20,30\n") is False


def test_has_invalid_char():
    assert has_invalid_char("\n") is True
    assert has_invalid_char("10 1NSEW\n") is False
    assert has_invalid_char("10X1") is True


def test_parse_rgb_accepts_newline_terminated():
    assert parse_rgb("220,100,0\n") == (220, 100, 0)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "1,2,3,\n"])
def test_parse_rgb_wrong_count(text):
    with pytest.raises(CubError) as info:
        parse_rgb(text)
    assert info.value.message == "missing RGB value"
    assert info.value.error_code == errno.EINVAL


@pytest.mark.parametrize("text", ["256,0,0", "1000,0,0", "12a,0,0", "1, 2,3", "-1,0,0"])
def test_parse_rgb_invalid_value(text):
    with pytest.raises(CubError) as info:
        parse_rgb(text)
    assert "invalid RGB value" in info.value.message


def test_max_width():
    assert max_width([]) == 0
    assert max_width(["1", "111", "11"]) == 3


def test_square_map_pads_with_floor():
    rows = ["1", "111", "11"]
    squared = square_map(rows)
    assert all(len(row) == max_width(rows) for row in squared)
    assert all(row.startswith(original) for row, original in zip(squared, rows))
    assert squared[0] == "100"


def test_parse_scene():
    scene = parse_scene(HEADER + MAP)
    assert scene.texture(Cardinal.NO).path == "./textures/north.xpm"
    assert scene.texture(Cardinal.SO).path == "./textures/south.xpm"
    assert scene.texture(Cardinal.WE).path == "./textures/west.xpm"
    assert scene.texture(Cardinal.EA).path == "./textures/east.xpm"
    assert scene.floor == (220, 100, 0)
    assert scene.ceiling == (225, 30, 0)
    assert scene.grid == ["1111", "1N01", "101", "1111"]
    assert scene.elements_found == 6


def test_parse_scene_missing_element():
    with pytest.raises(CubError) as info:
        parse_scene(HEADER[1:] + MAP)
    assert info.value.message == "Error: missing element"


def test_parse_scene_without_map():
    with pytest.raises(CubError) as info:
        parse_scene(HEADER)
    assert info.value.message == "Error: missing element"


def test_parse_scene_extra_texture():
    with pytest.raises(CubError) as info:
        parse_scene(HEADER + ["NO ./other.xpm\n"] + MAP)
    assert info.value.message == "Error: extra texture"


def test_parse_scene_forbidden_char():
    with pytest.raises(CubError) as info:
        parse_scene(HEADER + ["1111\n", "1X01\n", "1111"])
    assert "forbidden char" in info.value.message


def test_parse_scene_blank_line_inside_map():
    with pytest.raises(CubError):
        parse_scene(HEADER + ["1111\n", "\n", "1N01\n", "1111"])


def test_parse_scene_bad_colour():
    lines = list(HEADER)
    lines[5] = "F 300,0,0\n"
    with pytest.raises(CubError):
        parse_scene(lines + MAP)


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("".join(MAP))
    assert read_lines(path) == MAP


def test_load_scene(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("".join(HEADER + MAP))
    scene = load_scene(path)
    assert scene.floor == (220, 100, 0)
    assert scene.grid[1] == "1N01"


def test_load_scene_wrong_extension(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text("".join(HEADER + MAP))
    with pytest.raises(CubError) as info:
        load_scene(path)
    assert info.value.message == "extension should be .cub"


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(CubError) as info:
        load_scene(tmp_path / "absent.cub")
    assert info.value.error_code == errno.ENOENT


def test_load_scene_none():
    with pytest.raises(CubError) as info:
        load_scene(None)
    assert info.value.error_code == errno.EINVAL