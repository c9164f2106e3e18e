from torusbot.sim.geometry import manhattan_range, shortest_offset, wrap, wrap_position


def test_wrap_reduces_into_range() -> None:
    assert wrap(-1, 5) == 4
    assert wrap(5, 5) == 0
    assert wrap(7, 5) == 2
    assert wrap_position((-1, 6), 5, 4) == (4, 2)


def test_shortest_offset_wraps_instead_of_going_long() -> None:
    assert shortest_offset((4, 0), (0, 0), 5, 5) == (-1, 0)
    assert shortest_offset((0, 0), (4, 0), 5, 5) == (1, 0)
    assert shortest_offset((2, 3), (1, 1), 5, 5) == (1, 2)


def test_shortest_offset_never_exceeds_half_the_axis() -> None:
    for width, height in [(5, 5), (4, 6), (1, 3), (7, 2)]:
        for tx in range(width):
            for ty in range(height):
                for sx in range(width):
                    for sy in range(height):
                        dx, dy = shortest_offset((tx, ty), (sx, sy), width, height)
                        assert abs(dx) <= width / 2
                        assert abs(dy) <= height / 2


def test_manhattan_range_is_symmetric() -> None:
    points = [(0, 0), (3, 1), (5, 5), (2, 4), (7, 0)]
    for a in points:
        for b in points:
            assert manhattan_range(a, b, 8, 6) == manhattan_range(b, a, 8, 6)
    assert manhattan_range((0, 0), (4, 4), 5, 5) == 2
    assert manhattan_range((0, 0), (2, 2), 4, 4) == 4
