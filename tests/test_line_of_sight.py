from torusbot.sim.contracts import Orientation
from torusbot.sim.line_of_sight import has_clear_shot
from torusbot.sim.world_state import decode_grid


def test_open_row_to_enemy_is_clear() -> None:
    grid = decode_grid("X__O_")
    assert has_clear_shot(grid, (0, 0), Orientation.EAST)


def test_wall_in_the_way_blocks() -> None:
    grid = decode_grid("X_WO_")
    assert not has_clear_shot(grid, (0, 0), Orientation.EAST)


def test_shot_wraps_around_the_edge() -> None:
    grid = decode_grid("X__O_")
    assert has_clear_shot(grid, (0, 0), Orientation.WEST)


def test_bolt_in_the_way_blocks() -> None:
    grid = decode_grid("XL_O_")
    assert not has_clear_shot(grid, (0, 0), Orientation.EAST)


def test_shot_returning_to_self_blocks() -> None:
    grid = decode_grid("X____\n____O")
    assert not has_clear_shot(grid, (0, 0), Orientation.EAST)


def test_wall_directly_ahead_blocks() -> None:
    grid = decode_grid("XW_O_")
    assert not has_clear_shot(grid, (0, 0), Orientation.EAST)


def test_open_torus_without_obstacles_terminates() -> None:
    grid = decode_grid("_____\n_____\n_____")
    assert not has_clear_shot(grid, (0, 0), Orientation.SOUTH)
    assert not has_clear_shot(grid, (1, 1), Orientation.EAST)


def test_vertical_shot() -> None:
    grid = decode_grid("\n".join(["_O_", "___", "_X_", "___"]))
    assert has_clear_shot(grid, (1, 2), Orientation.NORTH)
    assert has_clear_shot(grid, (1, 2), Orientation.SOUTH)
    assert not has_clear_shot(grid, (1, 2), Orientation.EAST)
