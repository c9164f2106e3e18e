"""Best-first action planning over (position, orientation) states."""

from __future__ import annotations

import heapq
import itertools
import logging

from torusbot.sim.contracts import Action, Orientation, Position
from torusbot.sim.movement import simulate_action
from torusbot.sim.world_state import Grid

logger = logging.getLogger(__name__)

PLANNING_ACTIONS: tuple[Action, ...] = (Action.MOVE, Action.LEFT, Action.RIGHT)


class ActionPlanner:
    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    def plan_route(
        self,
        start: Position,
        orientation: Orientation,
        target: Position,
    ) -> list[Action]:
        """Return the first action sequence found that ends on target.

        States are scored by steps taken plus the wrap-around Manhattan range
        still to cover. An empty list means the target is unreachable or
        already occupied by the start.
        """
        target = self._grid.wrap(target)
        counter = itertools.count()
        open_set: list[tuple[int, int, Position, Orientation, list[Action]]] = []
        heapq.heappush(
            open_set,
            (self._score(start, target, 0), next(counter), start, orientation, []),
        )
        seen: set[tuple[Position, Orientation]] = set()

        while open_set:
            _, _, position, facing, history = heapq.heappop(open_set)
            if (position, facing) in seen:
                continue
            seen.add((position, facing))
            if position == target:
                return history

            for action in PLANNING_ACTIONS:
                next_position, next_facing = simulate_action(
                    self._grid, position, facing, action
                )
                if (next_position, next_facing) in seen:
                    continue
                next_history = history + [action]
                heapq.heappush(
                    open_set,
                    (
                        self._score(next_position, target, len(next_history)),
                        next(counter),
                        next_position,
                        next_facing,
                        next_history,
                    ),
                )

        logger.debug("Target %s unreachable from %s", target, start)
        return []

    def plan_first_action(
        self,
        start: Position,
        orientation: Orientation,
        target: Position | None,
    ) -> Action:
        """Return only the first step; the rest is re-planned next turn."""
        if target is None:
            return Action.NOOP
        route = self.plan_route(start, orientation, target)
        if not route:
            return Action.NOOP
        return route[0]

    def _score(self, position: Position, target: Position, steps: int) -> int:
        return steps + self._grid.range(position, target)
