"""Firing-line check along the agent's facing direction."""

from __future__ import annotations

from torusbot.sim.contracts import CellKind, Orientation, Position
from torusbot.sim.movement import simulate_move
from torusbot.sim.world_state import Grid

SHOT_BLOCKERS: frozenset[CellKind] = frozenset({CellKind.SELF, CellKind.BOLT})


def has_clear_shot(grid: Grid, position: Position, orientation: Orientation) -> bool:
    """Return True when a bolt fired now would reach an enemy first."""
    bolt = simulate_move(grid, position, orientation)
    for _ in range(grid.width + grid.height):
        target = grid.cell_at(bolt)
        if target == CellKind.ENEMY:
            return True
        if target in SHOT_BLOCKERS:
            return False
        next_bolt = simulate_move(grid, bolt, orientation)
        if next_bolt == bolt:
            return False
        bolt = next_bolt
    return False
