import math

import pytest

from cubcaster.image import Image
from cubcaster.model import GROUND, PI, S_WIDTH, SKY, WALL_E, WALL_N, WALL_S, WALL_W, Point
from cubcaster.raycast import (
    cast_frame,
    check_collision,
    distance,
    draw_column,
    find_wall,
    fish_eye,
    horizontal_intersection,
    normalise_angle,
    radian,
    smallest_distance,
    vertical_intersection,
)

ROOM = ["111", "1N1", "111"]
BIG_ROOM = ["11111", "10001", "10N01", "10001", "11111"]


def test_radian_half_turn_is_pi():
    assert radian(180.0) == pytest.approx(PI)


def test_normalise_angle_wraps_once():
    assert normalise_angle(30.0 + 360.0) == pytest.approx(30.0)
    assert normalise_angle(-30.0) == pytest.approx(360.0 - 30.0)
    assert normalise_angle(45.0) == 45.0
    assert normalise_angle(360.0) == 360.0


def test_distance_pythagorean():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    assert distance(Point(2, 2), Point(2, 2)) == 0.0


def test_check_collision_cases():
    assert check_collision(ROOM, 1.5, 1.5) == 0
    assert check_collision(ROOM, 0.5, 0.5) == 1
    assert check_collision(ROOM, -1.0, 1.0) == -1
    assert check_collision(ROOM, 5.0, 1.0) == -1
    assert check_collision(ROOM, 1.0, 3.0) == -1


def test_find_wall_stops_on_wall():
    hit, point = find_wall(ROOM, Point(1.5, 1.5), Point(1.0, 0.0))
    assert hit == 1
    assert check_collision(ROOM, point.x, point.y) == 1


def test_find_wall_reports_edge():
    hit, _ = find_wall(["000"], Point(0.5, 0.5), Point(1.0, 0.0))
    assert hit == -1


def test_vertical_intersection_symmetric():
    east = vertical_intersection(ROOM, Point(1.5, 1.5), 0.0)
    west = vertical_intersection(ROOM, Point(1.5, 1.5), 180.0)
    assert east > 0
    assert east == pytest.approx(west, abs=1e-3)


def test_horizontal_intersection_symmetric():
    north = horizontal_intersection(ROOM, Point(1.5, 1.5), 90.0)
    south = horizontal_intersection(ROOM, Point(1.5, 1.5), 270.0)
    assert north > 0
    assert north == pytest.approx(south, abs=1e-3)


def test_horizontal_intersection_flat_ray():
    assert horizontal_intersection(ROOM, Point(1.5, 1.5), 0.0) == -1


def test_intersection_outside_map_is_minus_one():
    assert vertical_intersection(["000"], Point(0.5, 0.5), 0.0) == -1


@pytest.mark.parametrize(
    "horizontal, vertical, angle, expected",
    [
        (2.0, -1, 45.0, (2.0, WALL_N)),
        (2.0, -1, 200.0, (2.0, WALL_S)),
        (-1, 3.0, 0.0, (3.0, WALL_E)),
        (-1, 3.0, 180.0, (3.0, WALL_W)),
        (5.0, 3.0, 10.0, (3.0, WALL_E)),
        (1.0, 3.0, 100.0, (1.0, WALL_N)),
    ],
)
def test_smallest_distance(horizontal, vertical, angle, expected):
    assert smallest_distance(horizontal, vertical, angle) == expected


def test_smallest_distance_without_hit():
    assert smallest_distance(-2.0, 0.0, 10.0) == (0.0, None)


def test_fish_eye_centre_unchanged_and_edges_shorter():
    assert fish_eye(4.0, int(S_WIDTH * 0.5), 0.1) == pytest.approx(4.0)
    assert fish_eye(4.0, 0, 0.05) < 4.0


def test_draw_column_layers():
    image = Image(4, 10)
    draw_column(image, 1, 1.0, 4.0, WALL_E)
    column = [image.get_pixel(1, y) for y in range(10)]
    assert column[0] == SKY
    assert column[-1] == GROUND
    assert column.count(WALL_E) == 4
    assert column.count(SKY) + column.count(WALL_E) + column.count(GROUND) == 10
    assert all(image.get_pixel(0, y) == 0 for y in range(10))


def test_draw_column_tall_wall_fills_column():
    image = Image(3, 6)
    draw_column(image, 2, 0.5, 100.0, WALL_W)
    assert all(image.get_pixel(2, y) == WALL_W for y in range(6))


def test_draw_column_outside_image_ignored():
    image = Image(2, 2)
    draw_column(image, 5, 1.0, 1.0, WALL_N)
    assert bytes(image.data) == bytes(len(image.data))


def test_cast_frame_closed_room():
    image = Image(8, 6)
    columns = cast_frame(image, BIG_ROOM, Point(2.5, 2.5), 90.0, 60.0 / 7, 10.0)
    assert len(columns) == 8
    assert all(dist > 0 and math.isfinite(dist) for dist, _ in columns)
    allowed = {SKY, GROUND, WALL_N, WALL_S, WALL_E, WALL_W}
    assert all(image.get_pixel(x, y) in allowed for x in range(8) for y in range(6))