"""Coordinate arithmetic on a wrap-around grid."""

from __future__ import annotations

from torusbot.sim.contracts import Position


def wrap(value: int, modulus: int) -> int:
    return value % modulus


def wrap_position(position: Position, width: int, height: int) -> Position:
    x, y = position
    return wrap(x, width), wrap(y, height)


def shortest_offset(
    target: Position, source: Position, width: int, height: int
) -> Position:
    """Signed (dx, dy) from source to target, taking the short way round each axis."""
    return (
        _axis_offset(target[0], source[0], width),
        _axis_offset(target[1], source[1], height),
    )


def manhattan_range(a: Position, b: Position, width: int, height: int) -> int:
    dx, dy = shortest_offset(a, b, width, height)
    return abs(dx) + abs(dy)


def _axis_offset(target: int, source: int, modulus: int) -> int:
    delta = wrap(target - source, modulus)
    if delta > modulus // 2:
        delta -= modulus
    return delta
