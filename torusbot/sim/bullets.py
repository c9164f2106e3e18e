"""Belief tracking for in-flight bolts across snapshots.

Snapshots show where bolts are but not where they are going. Headings are
inferred by matching each tracked bolt against the next snapshot; a bolt whose
movement cannot be explained for a turn is dropped and, if it is still on the
grid, rediscovered with an unknown heading.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from torusbot.sim.contracts import (
    ORIENTATIONS,
    CellKind,
    Orientation,
    Position,
    TrackedBullet,
)
from torusbot.sim.movement import simulate_moves
from torusbot.sim.world_state import Grid

logger = logging.getLogger(__name__)

BOLT_CELLS_PER_TURN = 2


@dataclass
class _Bullet:
    position: Position
    heading: Orientation | None = None


class BulletTracker:
    def __init__(self, *, cells_per_turn: int = BOLT_CELLS_PER_TURN) -> None:
        self._cells_per_turn = cells_per_turn
        self._bullets: list[_Bullet] = []

    @property
    def bullets(self) -> list[TrackedBullet]:
        return [
            TrackedBullet(position=bullet.position, heading=bullet.heading)
            for bullet in self._bullets
        ]

    def reset(self) -> None:
        self._bullets = []

    def update(self, grid: Grid) -> None:
        claimed: set[Position] = set()
        self._bullets = self._advance_known(grid, claimed)
        self._bullets = self._infer_headings(grid, claimed)
        self._discover(grid, claimed)

    def _advance_known(self, grid: Grid, claimed: set[Position]) -> list[_Bullet]:
        survivors: list[_Bullet] = []
        for bullet in self._bullets:
            if bullet.heading is None:
                survivors.append(bullet)
                continue
            position = simulate_moves(
                grid, bullet.position, bullet.heading, self._cells_per_turn
            )
            if not _is_unclaimed_bolt(grid, position, claimed):
                logger.debug(
                    "Bolt at %s heading %s is gone",
                    bullet.position,
                    bullet.heading.value,
                )
                continue
            claimed.add(position)
            bullet.position = position
            survivors.append(bullet)
        return survivors

    def _infer_headings(self, grid: Grid, claimed: set[Position]) -> list[_Bullet]:
        survivors: list[_Bullet] = []
        for bullet in self._bullets:
            if bullet.heading is not None:
                survivors.append(bullet)
                continue
            for heading in ORIENTATIONS:
                position = simulate_moves(
                    grid, bullet.position, heading, self._cells_per_turn
                )
                if _is_unclaimed_bolt(grid, position, claimed):
                    claimed.add(position)
                    bullet.position = position
                    bullet.heading = heading
                    survivors.append(bullet)
                    logger.debug(
                        "Bolt now at %s inferred heading %s", position, heading.value
                    )
                    break
            else:
                logger.debug("No heading explains bolt at %s", bullet.position)
        return survivors

    def _discover(self, grid: Grid, claimed: set[Position]) -> None:
        for position in grid.positions_of(CellKind.BOLT):
            if position in claimed:
                continue
            self._bullets.append(_Bullet(position=position))


def _is_unclaimed_bolt(grid: Grid, position: Position, claimed: set[Position]) -> bool:
    return grid.cell_at(position) == CellKind.BOLT and position not in claimed
