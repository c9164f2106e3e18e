"""Application entry for playing one game."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from torusbot.db.replay_log import append_turn_record, create_run_folder, write_header
from torusbot.net.base import Transport
from torusbot.net.client import DEFAULT_TIMEOUT, GameClient
from torusbot.sim.turn_loop import run_turns, start_game

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_NAME = "torusbot"
DEFAULT_REPLAY_DIR = Path("replay")


@dataclass(frozen=True)
class ClientSettings:
    game_id: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    name: str = DEFAULT_NAME
    timeout: float = DEFAULT_TIMEOUT
    replay_dir: Path = DEFAULT_REPLAY_DIR

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def resolve_settings(
    game_id: str,
    *,
    host: str | None = None,
    port: int | None = None,
    name: str | None = None,
    replay_dir: Path | None = None,
) -> ClientSettings:
    return ClientSettings(
        game_id=game_id,
        host=host or os.getenv("TORUSBOT_HOST") or DEFAULT_HOST,
        port=port or _env_port(),
        name=name or os.getenv("TORUSBOT_NAME") or DEFAULT_NAME,
        replay_dir=replay_dir or DEFAULT_REPLAY_DIR,
    )


def _env_port() -> int:
    raw = os.getenv("TORUSBOT_PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"TORUSBOT_PORT must be an integer, got {raw!r}.") from exc


def play_game(
    transport: Transport,
    *,
    name: str,
    replay_dir: Path,
    turns: int | None = None,
    metadata: dict | None = None,
) -> Path:
    """Join through `transport`, play to the end and log every turn."""
    state, snapshot = start_game(transport, name=name)
    run_dir, log_path = create_run_folder(replay_dir)
    write_header(
        log_path,
        metadata={"run_id": run_dir.name, "name": name, **(metadata or {})},
        config=state.config,
    )
    for record in run_turns(state, snapshot, transport, turns=turns):
        append_turn_record(log_path, record)
    return run_dir


def run_client(settings: ClientSettings, *, turns: int | None = None) -> Path:
    logger.info("Connecting to %s, game %s", settings.base_url, settings.game_id)
    with GameClient(
        settings.base_url, settings.game_id, timeout=settings.timeout
    ) as client:
        return play_game(
            client,
            name=settings.name,
            replay_dir=settings.replay_dir,
            turns=turns,
            metadata={"game_id": settings.game_id, "server": settings.base_url},
        )
