"""Decoded grid snapshot with wrap-around queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from torusbot.sim.contracts import CellKind, Position
from torusbot.sim.geometry import manhattan_range, shortest_offset, wrap_position

MARKERS: dict[str, CellKind] = {kind.value: kind for kind in CellKind}


class MalformedGridError(ValueError):
    """Raised when snapshot text is not a rectangular grid."""


@dataclass(frozen=True)
class Grid:
    lines: tuple[str, ...]
    cells: tuple[tuple[CellKind, ...], ...]
    width: int
    height: int

    def wrap(self, position: Position) -> Position:
        return wrap_position(position, self.width, self.height)

    def cell_at(self, position: Position) -> CellKind:
        x, y = self.wrap(position)
        return self.cells[y][x]

    def offset(self, target: Position, source: Position) -> Position:
        return shortest_offset(target, source, self.width, self.height)

    def range(self, a: Position, b: Position) -> int:
        return manhattan_range(a, b, self.width, self.height)

    def positions_of(self, kind: CellKind) -> Iterator[Position]:
        """Yield matching positions row by row, left to right."""
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell == kind:
                    yield (x, y)

    def find_first(self, kind: CellKind) -> Position | None:
        return next(self.positions_of(kind), None)

    def find_closest(self, kind: CellKind, origin: Position) -> Position | None:
        best: Position | None = None
        best_range = 0
        for position in self.positions_of(kind):
            distance = self.range(origin, position)
            # Strict comparison keeps the earliest match on ties.
            if best is None or distance < best_range:
                best = position
                best_range = distance
        return best

    def render(self) -> str:
        return "\n".join(self.lines)


def decode_grid(text: str) -> Grid:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if not lines:
        raise MalformedGridError("Grid text is empty.")
    width = len(lines[0])
    if width == 0:
        raise MalformedGridError("Grid rows are empty.")
    for index, line in enumerate(lines):
        if len(line) != width:
            raise MalformedGridError(
                f"Grid row {index} has length {len(line)}, expected {width}."
            )
    cells = tuple(
        tuple(MARKERS.get(char, CellKind.EMPTY) for char in line) for line in lines
    )
    return Grid(lines=tuple(lines), cells=cells, width=width, height=len(lines))
