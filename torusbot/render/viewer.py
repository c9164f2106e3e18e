"""Rich viewer rendering for TurnRecord."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from torusbot.sim.contracts import CellKind, TurnRecord
from torusbot.sim.world_state import MARKERS, MalformedGridError, decode_grid

CELL_STYLES: dict[CellKind, str] = {
    CellKind.SELF: "bold green",
    CellKind.ENEMY: "bold red",
    CellKind.WALL: "grey50",
    CellKind.BATTERY: "bold yellow",
    CellKind.BOLT: "bold magenta",
    CellKind.EMPTY: "grey30",
}


def render_turn(record: TurnRecord) -> RenderableType:
    header = Text(f"Turn {record.turn}", style="bold")
    grid = _render_grid(record)
    stats = _render_stats(record)
    bullets = _render_bullets(record)
    left = Group(header, grid)
    right = Group(stats, bullets)
    return Columns([Panel(left, title="Arena"), Panel(right, title="Agent")])


def _render_grid(record: TurnRecord) -> RenderableType:
    raw = record.snapshot.grid or ""
    try:
        grid = decode_grid(raw)
    except MalformedGridError:
        return Text(raw or "No grid available.", style="red")
    text = Text()
    for y, line in enumerate(grid.lines):
        for char in line:
            kind = MARKERS.get(char, CellKind.EMPTY)
            text.append(char, style=CELL_STYLES[kind])
        if y < grid.height - 1:
            text.append("\n")
    return text


def _render_stats(record: TurnRecord) -> RenderableType:
    snapshot = record.snapshot
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Status", snapshot.status)
    table.add_row("Health", _format_number(snapshot.health))
    table.add_row("Energy", _format_number(snapshot.energy))
    table.add_row(
        "Facing", snapshot.orientation.value if snapshot.orientation else "unknown"
    )
    table.add_row("Action", record.action.value)
    table.add_row("Decided in", f"{record.elapsed_ms:.1f} ms")
    return Panel(table, title="Status")


def _render_bullets(record: TurnRecord) -> RenderableType:
    if not record.bullets:
        return Panel(Text("No bolts in flight."), title="Tracked Bolts")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Position")
    table.add_column("Heading")
    for bullet in record.bullets:
        x, y = bullet.position
        heading = bullet.heading.value if bullet.heading else "?"
        table.add_row(f"({x}, {y})", heading)
    return Panel(table, title="Tracked Bolts")


def _format_number(value: float | None) -> str:
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"
