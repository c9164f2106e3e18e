"""Fixed-priority turn policy: shoot, recharge, then hunt."""

from __future__ import annotations

from dataclasses import dataclass, field

from torusbot.sim.bullets import BulletTracker
from torusbot.sim.contracts import Action, CellKind, GameConfig, TurnSnapshot
from torusbot.sim.line_of_sight import has_clear_shot
from torusbot.sim.pathfinding import ActionPlanner
from torusbot.sim.world_state import Grid, decode_grid


@dataclass
class AgentState:
    """Per-game belief state; built once when joining and mutated each turn."""

    config: GameConfig
    tracker: BulletTracker = field(default_factory=BulletTracker)
    grid: Grid | None = None

    def observe(self, snapshot: TurnSnapshot) -> Grid:
        grid = decode_grid(snapshot.grid or "")
        self.grid = grid
        self.tracker.update(grid)
        return grid

    def reset(self) -> None:
        self.grid = None
        self.tracker.reset()


def can_fire(energy: float | None, config: GameConfig) -> bool:
    if energy is None or energy <= 0:
        return False
    if config.laser_energy is not None and energy < config.laser_energy:
        return False
    return True


def decide_action(grid: Grid, snapshot: TurnSnapshot, config: GameConfig) -> Action:
    me = grid.find_first(CellKind.SELF)
    orientation = snapshot.orientation
    if me is None or orientation is None:
        return Action.NOOP

    if has_clear_shot(grid, me, orientation) and can_fire(snapshot.energy, config):
        return Action.FIRE

    planner = ActionPlanner(grid)
    battery = grid.find_closest(CellKind.BATTERY, me)
    if battery is not None:
        return planner.plan_first_action(me, orientation, battery)

    enemy = grid.find_closest(CellKind.ENEMY, me)
    return planner.plan_first_action(me, orientation, enemy)
