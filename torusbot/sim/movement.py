"""Deterministic move simulation for the agent and its bolts."""

from __future__ import annotations

from torusbot.sim.contracts import Action, CellKind, Orientation, Position
from torusbot.sim.world_state import Grid

STEPS: dict[Orientation, Position] = {
    Orientation.NORTH: (0, -1),
    Orientation.SOUTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.WEST: (-1, 0),
}

LEFT_OF: dict[Orientation, Orientation] = {
    Orientation.NORTH: Orientation.WEST,
    Orientation.SOUTH: Orientation.EAST,
    Orientation.EAST: Orientation.NORTH,
    Orientation.WEST: Orientation.SOUTH,
}

RIGHT_OF: dict[Orientation, Orientation] = {
    Orientation.NORTH: Orientation.EAST,
    Orientation.SOUTH: Orientation.WEST,
    Orientation.EAST: Orientation.SOUTH,
    Orientation.WEST: Orientation.NORTH,
}


def simulate_move(grid: Grid, position: Position, orientation: Orientation) -> Position:
    """Step one cell forward; a wall ahead leaves the position unchanged."""
    dx, dy = STEPS[orientation]
    candidate = grid.wrap((position[0] + dx, position[1] + dy))
    if grid.cell_at(candidate) == CellKind.WALL:
        return position
    return candidate


def simulate_moves(
    grid: Grid, position: Position, orientation: Orientation, steps: int
) -> Position:
    for _ in range(steps):
        position = simulate_move(grid, position, orientation)
    return position


def simulate_turn_left(orientation: Orientation) -> Orientation:
    return LEFT_OF[orientation]


def simulate_turn_right(orientation: Orientation) -> Orientation:
    return RIGHT_OF[orientation]


def simulate_action(
    grid: Grid, position: Position, orientation: Orientation, action: Action
) -> tuple[Position, Orientation]:
    if action == Action.MOVE:
        return simulate_move(grid, position, orientation), orientation
    if action == Action.LEFT:
        return position, simulate_turn_left(orientation)
    if action == Action.RIGHT:
        return position, simulate_turn_right(orientation)
    return position, orientation
