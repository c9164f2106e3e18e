"""Belief-state world model and turn decisions."""

from torusbot.sim.contracts import (
    Action,
    CellKind,
    GameConfig,
    Orientation,
    Position,
    TrackedBullet,
    TurnRecord,
    TurnSnapshot,
)
from torusbot.sim.agent_policy import AgentState, decide_action
from torusbot.sim.bullets import BOLT_CELLS_PER_TURN, BulletTracker
from torusbot.sim.line_of_sight import has_clear_shot
from torusbot.sim.pathfinding import ActionPlanner
from torusbot.sim.world_state import Grid, MalformedGridError, decode_grid
from torusbot.sim.turn_loop import run_turns, start_game

__all__ = [
    "Action",
    "ActionPlanner",
    "AgentState",
    "BOLT_CELLS_PER_TURN",
    "BulletTracker",
    "CellKind",
    "GameConfig",
    "Grid",
    "MalformedGridError",
    "Orientation",
    "Position",
    "TrackedBullet",
    "TurnRecord",
    "TurnSnapshot",
    "decide_action",
    "decode_grid",
    "has_clear_shot",
    "run_turns",
    "start_game",
]
