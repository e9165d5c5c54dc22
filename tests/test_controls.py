import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from raycube.controls import Controls, KeyCode, Player, camera_plane


def test_raw_x11_keycodes_are_understood():
    controls = Controls()
    controls.press(119)
    player = Player(0.0, 0.0, 0.0)
    controls.move_forward_backward(player, 1.0)
    assert player.x == pytest.approx(5.0)
    controls.press(65307)
    assert controls.should_close is True


def test_escape_requests_close():
    controls = Controls()
    controls.press(KeyCode.ESC)
    assert controls.should_close is True


@pytest.mark.parametrize("key", [KeyCode.Z, KeyCode.W])
def test_forward_keys_move_along_direction(key):
    controls = Controls()
    controls.press(key)
    player = Player(2.0, 3.0, 0.0)
    controls.move_forward_backward(player, 1.0)
    assert player.x == pytest.approx(7.0)
    assert player.y == pytest.approx(3.0)


def test_backward_moves_opposite():
    controls = Controls()
    controls.press(KeyCode.S)
    player = Player(2.0, 3.0, 0.0)
    controls.move_forward_backward(player, 1.0)
    assert player.x == pytest.approx(-3.0)


def test_forward_wins_over_backward():
    both = Controls()
    both.press(KeyCode.W)
    both.press(KeyCode.S)
    only = Controls()
    only.press(KeyCode.W)
    a = Player(0.0, 0.0, 0.7)
    b = Player(0.0, 0.0, 0.7)
    both.move_forward_backward(a, 0.2)
    only.move_forward_backward(b, 0.2)
    assert (a.x, a.y) == pytest.approx((b.x, b.y))


def test_release_stops_movement():
    controls = Controls()
    controls.press(KeyCode.W)
    controls.release(KeyCode.W)
    player = Player(1.0, 1.0, 0.3)
    controls.apply(player, 1.0)
    assert (player.x, player.y, player.direction) == (1.0, 1.0, 0.3)


def test_unknown_key_is_ignored():
    controls = Controls()
    controls.press(42)
    assert controls == Controls()


@pytest.mark.parametrize("key", [KeyCode.Q, KeyCode.A])
def test_strafe_left_and_right_are_opposite(key):
    left = Controls()
    left.press(key)
    right = Controls()
    right.press(KeyCode.D)
    a = Player(0.0, 0.0, 1.1)
    b = Player(0.0, 0.0, 1.1)
    left.move_left_right(a, 0.5)
    right.move_left_right(b, 0.5)
    assert a.x == pytest.approx(-b.x)
    assert a.y == pytest.approx(-b.y)


@given(st.floats(-10, 10), st.floats(0.001, 2.0))
def test_strafe_is_perpendicular_to_view(direction, seconds):
    controls = Controls()
    controls.press(KeyCode.D)
    player = Player(0.0, 0.0, direction)
    controls.move_left_right(player, seconds)
    dot = player.x * math.cos(direction) + player.y * math.sin(direction)
    assert dot == pytest.approx(0.0, abs=1e-9)
    assert math.hypot(player.x, player.y) == pytest.approx(seconds * 4.0)


@given(st.floats(-10, 10), st.floats(0.001, 2.0))
def test_walk_distance_matches_speed(direction, seconds):
    controls = Controls()
    controls.press(KeyCode.W)
    player = Player(0.0, 0.0, direction)
    controls.move_forward_backward(player, seconds)
    assert math.hypot(player.x, player.y) == pytest.approx(seconds * 5.0)


def test_turn_left_and_right():
    left = Controls()
    left.press(KeyCode.LEFT)
    right = Controls()
    right.press(KeyCode.RIGHT)
    a = Player(0.0, 0.0, 1.0)
    b = Player(0.0, 0.0, 1.0)
    left.turn(a, 0.5)
    right.turn(b, 0.5)
    assert a.direction - 1.0 == pytest.approx(1.0 - b.direction)
    assert a.direction - 1.0 == pytest.approx(0.5 * 3.0)
    assert a.plane == pytest.approx(camera_plane(a.direction))


@given(st.floats(-10, 10))
def test_camera_plane_perpendicular_with_fixed_length(direction):
    px, py = camera_plane(direction)
    assert px * math.cos(direction) + py * math.sin(direction) == pytest.approx(0.0, abs=1e-9)
    assert math.hypot(px, py) == pytest.approx(camera_plane(0.0)[1])


def test_player_starts_with_matching_plane():
    player = Player(1.0, 2.0, 2.5)
    assert player.plane == camera_plane(2.5)


def test_apply_combines_all_movements():
    controls = Controls()
    controls.press(KeyCode.W)
    controls.press(KeyCode.LEFT)
    player = Player(0.0, 0.0, 0.0)
    controls.apply(player, 0.1)
    assert player.x == pytest.approx(0.5)
    assert player.direction == pytest.approx(0.3)