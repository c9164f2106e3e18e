"""Turn loop orchestration against a game transport."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Iterable

from torusbot.sim.agent_policy import AgentState, decide_action
from torusbot.sim.contracts import TurnRecord, TurnSnapshot

if TYPE_CHECKING:
    from torusbot.net.base import Transport

logger = logging.getLogger(__name__)


def start_game(transport: Transport, *, name: str) -> tuple[AgentState, TurnSnapshot]:
    config, snapshot = transport.join(name)
    logger.info("Joined as %s (status=%s)", name, snapshot.status)
    return AgentState(config=config), snapshot


def run_turns(
    state: AgentState,
    snapshot: TurnSnapshot,
    transport: Transport,
    *,
    turns: int | None = None,
) -> Iterable[TurnRecord]:
    """Play until the game stops running or `turns` actions have been sent.

    A malformed grid propagates out of the loop; there is no safe action to
    take on a world we cannot read.
    """
    timeout = state.config.turn_timeout_seconds
    turn = 0
    while snapshot.is_running and (turns is None or turn < turns):
        started = time.perf_counter()
        grid = state.observe(snapshot)
        action = decide_action(grid, snapshot, state.config)
        elapsed = time.perf_counter() - started
        if timeout is not None and elapsed > timeout:
            logger.warning(
                "Turn %d took %.3fs, over the %.3fs budget", turn + 1, elapsed, timeout
            )
        turn += 1
        logger.info("Turn %d: %s", turn, action.value)
        yield TurnRecord(
            turn=turn,
            snapshot=snapshot,
            action=action,
            bullets=state.tracker.bullets,
            elapsed_ms=elapsed * 1000,
        )
        snapshot = transport.send_action(action)

    if not snapshot.is_running:
        logger.info("Game over (status=%s) after %d turns", snapshot.status, turn)
        state.reset()
