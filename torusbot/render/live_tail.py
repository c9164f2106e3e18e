"""Tail a JSONL turn log and render the latest turn (Textual)."""

from __future__ import annotations

import threading
import time
from pathlib import Path

from rich.panel import Panel
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from torusbot.render.replay_reader import parse_record
from torusbot.render.viewer import render_turn
from torusbot.sim.contracts import TurnRecord


class TailViewerScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #tail-view {
        height: 1fr;
    }
    """

    BINDINGS = [("p", "toggle_pause", "Pause/resume")]

    def __init__(self, path: Path, *, poll_interval: float = 0.2) -> None:
        super().__init__()
        self._path = path
        self._poll_interval = poll_interval
        self._view: Static | None = None
        self._stop_event = threading.Event()
        self._paused = False
        self._latest: TurnRecord | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield Static(id="tail-view")
        yield Footer()

    def on_mount(self) -> None:
        self._view = self.query_one("#tail-view", Static)
        if self._view:
            self._view.update(Panel(Text("Waiting for turns..."), title="Live Game"))
        thread = threading.Thread(target=self._tail_loop, daemon=True)
        thread.start()

    def on_unmount(self) -> None:
        self._stop_event.set()

    def action_toggle_pause(self) -> None:
        self._paused = not self._paused
        self.sub_title = "paused" if self._paused else ""
        if not self._paused and self._latest is not None:
            self._show_turn(self._latest)

    def _tail_loop(self) -> None:
        with self._path.open("r", encoding="utf-8") as handle:
            while not self._stop_event.is_set():
                line = handle.readline()
                if not line:
                    time.sleep(self._poll_interval)
                    continue
                record = parse_record(line)
                if record is None or record.get("type") != "turn":
                    continue
                payload = record.get("payload")
                if payload is None:
                    continue
                turn = TurnRecord.model_validate(payload)
                self.app.call_from_thread(self._show_turn, turn)

    def _show_turn(self, turn: TurnRecord) -> None:
        self._latest = turn
        if self._paused:
            return
        if self._view:
            self._view.update(render_turn(turn))


class TailApp(App):
    """Follow one game's turn log until the user quits."""

    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, path: Path, *, poll_interval: float = 0.2) -> None:
        super().__init__()
        self._tail_screen = TailViewerScreen(path, poll_interval=poll_interval)
        self.title = f"torusbot tail: {path.parent.name}"

    def on_mount(self) -> None:
        self.push_screen(self._tail_screen)


def tail_turn_log(path: Path, *, poll_interval: float = 0.2) -> None:
    if not path.is_file():
        raise FileNotFoundError(f"Turn log not found: {path}")
    TailApp(path, poll_interval=poll_interval).run()
