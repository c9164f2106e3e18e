import pytest

from torusbot.net.base import GameProtocolError
from torusbot.net.scripted import ScriptedTransport
from torusbot.sim.contracts import Action, Orientation
from torusbot.sim.turn_loop import run_turns, start_game
from torusbot.sim.world_state import MalformedGridError

CONFIG = {
    "turn_timeout": 1_000_000_000,
    "max_health": 300,
    "max_energy": 10,
    "laser_energy": 1,
}


def _running(grid: list[str], *, energy: int = 10, orientation: str = "east") -> dict:
    return {
        "status": "running",
        "health": 200,
        "energy": energy,
        "orientation": orientation,
        "grid": "\n".join(grid),
    }


def test_plays_until_game_finishes() -> None:
    transport = ScriptedTransport(
        [
            {"config": CONFIG, **_running(["X__O_", "_____", "_____"])},
            _running(["X_L__", "_____", "_____"], energy=9),
            _running(["X___L", "___O_", "_____"], energy=9),
            {"status": "finished"},
        ]
    )
    state, snapshot = start_game(transport, name="bot")
    records = list(run_turns(state, snapshot, transport))

    assert transport.joined_as == "bot"
    assert state.config.max_health == 300
    assert [record.turn for record in records] == [1, 2, 3]
    assert records[0].action == Action.FIRE
    assert transport.actions == [record.action for record in records]
    assert records[2].bullets[0].heading == Orientation.EAST
    assert records[2].bullets[0].position == (4, 0)
    assert state.grid is None
    assert state.tracker.bullets == []


def test_turn_limit_stops_early() -> None:
    transport = ScriptedTransport(
        [_running(["X____", "_____"]) for _ in range(5)],
    )
    state, snapshot = start_game(transport, name="bot")
    records = list(run_turns(state, snapshot, transport, turns=2))

    assert len(records) == 2
    assert transport.actions == [Action.NOOP, Action.NOOP]


def test_not_running_at_join_plays_nothing() -> None:
    transport = ScriptedTransport([{"config": CONFIG, "status": "lost"}])
    state, snapshot = start_game(transport, name="bot")

    assert list(run_turns(state, snapshot, transport)) == []
    assert transport.actions == []


def test_malformed_grid_aborts_the_game() -> None:
    transport = ScriptedTransport(
        [
            _running(["X____", "_____"]),
            _running(["X____", "___"]),
        ]
    )
    state, snapshot = start_game(transport, name="bot")

    with pytest.raises(MalformedGridError):
        list(run_turns(state, snapshot, transport))
    assert transport.actions == [Action.NOOP]


def test_fractional_config_is_kept() -> None:
    transport = ScriptedTransport(
        [{"config": {"laser_energy": 1.5}, **_running(["X_O__", "_____"], energy=1)}]
    )
    state, snapshot = start_game(transport, name="bot")
    records = list(run_turns(state, snapshot, transport))

    assert state.config.laser_energy == 1.5
    assert records[0].action == Action.MOVE


def test_bad_config_or_snapshot_is_a_protocol_error() -> None:
    bad_config = ScriptedTransport(
        [{"config": {"laser_energy": "lots"}, "status": "running"}]
    )
    with pytest.raises(GameProtocolError):
        start_game(bad_config, name="bot")

    bad_snapshot = ScriptedTransport([_running(["X____"]), ["not", "an", "object"]])
    state, snapshot = start_game(bad_snapshot, name="bot")
    with pytest.raises(GameProtocolError):
        list(run_turns(state, snapshot, bad_snapshot))
