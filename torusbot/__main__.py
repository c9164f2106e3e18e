"""Module entry point for `python -m torusbot`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from torusbot.app import DEFAULT_REPLAY_DIR, resolve_settings, run_client
from torusbot.db.replay_log import RUN_LOG_NAME
from torusbot.net.base import GameProtocolError
from torusbot.render.live_tail import tail_turn_log
from torusbot.render.replay_reader import read_turn_records
from torusbot.render.viewer import render_turn
from torusbot.sim.world_state import MalformedGridError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play a torus arena game.")
    parser.add_argument("--game", default=None, help="Game id to join.")
    parser.add_argument("--host", default=None, help="Game server host.")
    parser.add_argument("--port", type=int, default=None, help="Game server port.")
    parser.add_argument("--name", default=None, help="Player name sent on join.")
    parser.add_argument(
        "--turns",
        type=int,
        default=None,
        help="Stop after this many turns. Omit to play until the game ends.",
    )
    parser.add_argument(
        "--replay-dir",
        type=Path,
        default=DEFAULT_REPLAY_DIR,
        help="Base directory for turn logs.",
    )
    parser.add_argument(
        "--replay",
        type=Path,
        default=None,
        help="Print every turn of a saved run folder.",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Tail the latest run log in a live viewer.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logs.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    if args.view:
        run_folder = _latest_run_folder(args.replay_dir)
        if run_folder is None:
            raise SystemExit("No run folder found. Play a game first.")
        tail_turn_log(run_folder / RUN_LOG_NAME)
        return

    if args.replay is not None:
        if not (args.replay / RUN_LOG_NAME).exists():
            raise SystemExit(f"No {RUN_LOG_NAME} in {args.replay}.")
        _replay_run(args.replay)
        return

    if not args.game:
        parser.error("--game=<id> is required")

    try:
        settings = resolve_settings(
            args.game,
            host=args.host,
            port=args.port,
            name=args.name,
            replay_dir=args.replay_dir,
        )
    except ValueError as exc:
        parser.error(str(exc))
    try:
        run_dir = run_client(settings, turns=args.turns)
    except (GameProtocolError, MalformedGridError) as exc:
        raise SystemExit(f"Game aborted: {exc}") from exc
    print(f"Run saved to {run_dir}")


def _latest_run_folder(base_dir: Path) -> Path | None:
    if not base_dir.exists():
        return None
    run_dirs = [
        path for path in base_dir.iterdir() if (path / RUN_LOG_NAME).is_file()
    ]
    if not run_dirs:
        return None
    return sorted(run_dirs)[-1]


def _replay_run(run_folder: Path) -> None:
    console = Console()
    for record in read_turn_records(run_folder / RUN_LOG_NAME):
        console.print(render_turn(record))


if __name__ == "__main__":
    main()
