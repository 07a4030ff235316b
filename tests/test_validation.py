import pytest

from cubcaster.errors import CubError
from cubcaster.model import Cardinal, Scene
from cubcaster.parsing import parse_scene
from cubcaster.validation import find_player, validate_scene, walls_closed

HEADER = [
    "NO ./n.xpm\n",
    "SO ./s.xpm\n",
    "WE ./w.xpm\n",
    "EA ./e.xpm\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]


def test_find_player():
    scene = Scene(grid=["1111", "1N01", "1111"])
    assert find_player(scene) == ((1, 1), Cardinal.NO)


@pytest.mark.parametrize("char", ["N", "S", "E", "W"])
def test_find_player_directions(char):
    scene = Scene(grid=["111", f"1{char}1", "111"])
    position, cardinal = find_player(scene)
    assert position == (1, 1)
    assert cardinal.to_char() == char


def test_find_player_missing():
    with pytest.raises(CubError) as info:
        find_player(Scene(grid=["111", "101", "111"]))
    assert info.value.message == "Error: invalid player start position"


def test_find_player_twice():
    with pytest.raises(CubError) as info:
        find_player(Scene(grid=["1111", "1NS1", "1111"]))
    assert info.value.message == "Error: invalid player start position"


def test_walls_closed_true():
    assert walls_closed(["1111", "1001", "1111"], (1, 1)) is True


def test_walls_closed_open_edge():
    assert walls_closed(["1111", "1001", "1000"], (1, 1)) is False


def test_walls_closed_start_on_border():
    assert walls_closed(["1011", "1001", "1111"], (0, 1)) is False


def test_walls_closed_ignores_unreachable_floor():
    assert walls_closed(["11111", "10101", "11100"], (1, 1)) is True


def test_validate_scene():
    scene = parse_scene(HEADER + ["1111\n", "1N01\n", "1 1\n", "1111"])
    result = validate_scene(scene)
    assert result.player == (1, 1)
    assert result.cardinal is Cardinal.NO
    assert len({len(row) for row in result.grid}) == 1
    assert result.grid[1] == "1N01"
    assert result.size == (4, 4)


def test_validate_scene_open_map():
    scene = parse_scene(HEADER + ["1111\n", "1N00\n", "1111"])
    with pytest.raises(CubError) as info:
        validate_scene(scene)
    assert info.value.message == "Error: invalid map"


def test_validate_scene_padding_opens_map():
    scene = parse_scene(HEADER + ["11111\n", "1N0\n", "11111"])
    with pytest.raises(CubError) as info:
        validate_scene(scene)
    assert info.value.message == "Error: invalid map"