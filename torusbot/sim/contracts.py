"""Core data contracts shared by the agent, transport and turn log."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

Position = tuple[int, int]

RUNNING_STATUS = "running"


class Orientation(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


ORIENTATIONS: tuple[Orientation, ...] = (
    Orientation.NORTH,
    Orientation.SOUTH,
    Orientation.EAST,
    Orientation.WEST,
)


class Action(str, Enum):
    MOVE = "move"
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    NOOP = "noop"


class CellKind(str, Enum):
    EMPTY = "_"
    SELF = "X"
    ENEMY = "O"
    WALL = "W"
    BATTERY = "B"
    BOLT = "L"


class GameConfig(BaseModel):
    """Numeric game parameters sent once when joining."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # nanoseconds per turn before the server defaults us to a noop
    turn_timeout: float | None = None
    # seconds to reconnect before the player self destructs
    connect_back_timeout: float | None = None
    max_health: float | None = None
    max_energy: float | None = None
    health_loss: float | None = None
    laser_damage: float | None = None
    laser_distance: float | None = None
    laser_energy: float | None = None
    battery_power: float | None = None
    battery_health: float | None = None

    @property
    def turn_timeout_seconds(self) -> float | None:
        if self.turn_timeout is None:
            return None
        return self.turn_timeout / 1_000_000_000


class TurnSnapshot(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str
    health: float | None = None
    energy: float | None = None
    orientation: Orientation | None = None
    grid: str | None = None

    @property
    def is_running(self) -> bool:
        return self.status == RUNNING_STATUS


class TrackedBullet(BaseModel):
    model_config = ConfigDict(extra="forbid")

    position: Position
    heading: Orientation | None = None


class TurnRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    turn: int
    snapshot: TurnSnapshot
    action: Action
    bullets: list[TrackedBullet] = Field(default_factory=list)
    elapsed_ms: float = 0.0


def parse_snapshot(raw: Any) -> TurnSnapshot:
    try:
        return TurnSnapshot.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid turn snapshot: {exc}") from exc
