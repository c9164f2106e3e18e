"""Deterministic in-memory transport for tests and demos."""

from __future__ import annotations

from typing import Any, Iterable

from torusbot.net.base import read_snapshot, split_join_payload
from torusbot.sim.contracts import Action, GameConfig, TurnSnapshot

FINISHED = {"status": "finished"}


class ScriptedTransport:
    """Replay a fixed list of server payloads and record the actions sent.

    The first payload answers the join (it may carry a `config` block); each
    action consumes the next one. Once the script runs out the game reports
    itself finished.
    """

    def __init__(self, payloads: Iterable[Any]) -> None:
        self._payloads = list(payloads)
        self.actions: list[Action] = []
        self.joined_as: str | None = None

    def join(self, name: str) -> tuple[GameConfig, TurnSnapshot]:
        self.joined_as = name
        return split_join_payload(self._next_payload())

    def send_action(self, action: Action) -> TurnSnapshot:
        self.actions.append(action)
        return read_snapshot(self._next_payload())

    def _next_payload(self) -> Any:
        if not self._payloads:
            return dict(FINISHED)
        return self._payloads.pop(0)
