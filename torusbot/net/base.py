"""Transport interface between the turn loop and a game server."""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import ValidationError

from torusbot.sim.contracts import Action, GameConfig, TurnSnapshot, parse_snapshot


class GameProtocolError(RuntimeError):
    """Raised when the server answers with something we cannot play from."""


class Transport(Protocol):
    def join(self, name: str) -> tuple[GameConfig, TurnSnapshot]:
        """Join the game and return its config plus the first snapshot."""

    def send_action(self, action: Action) -> TurnSnapshot:
        """Deliver one action and return the next snapshot."""


def split_join_payload(payload: Any) -> tuple[GameConfig, TurnSnapshot]:
    """Separate the one-off config block from the first snapshot."""
    if not isinstance(payload, dict):
        raise GameProtocolError(f"Join response is not an object: {payload!r}")
    data = dict(payload)
    try:
        config = GameConfig.model_validate(data.pop("config", None) or {})
    except ValidationError as exc:
        raise GameProtocolError(f"Invalid game config: {exc}") from exc
    return config, read_snapshot(data)


def read_snapshot(payload: Any) -> TurnSnapshot:
    try:
        return parse_snapshot(payload)
    except ValueError as exc:
        raise GameProtocolError(str(exc)) from exc
