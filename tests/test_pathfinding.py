from torusbot.sim.contracts import Action, Orientation
from torusbot.sim.movement import simulate_action
from torusbot.sim.pathfinding import ActionPlanner
from torusbot.sim.world_state import decode_grid

OPEN_5X5 = decode_grid("\n".join(["_____"] * 5))


def test_straight_ahead_route() -> None:
    planner = ActionPlanner(OPEN_5X5)

    assert planner.plan_route((2, 2), Orientation.NORTH, (2, 0)) == [
        Action.MOVE,
        Action.MOVE,
    ]
    assert planner.plan_first_action((2, 2), Orientation.NORTH, (2, 0)) == Action.MOVE


def test_target_behind_needs_turning_first() -> None:
    planner = ActionPlanner(OPEN_5X5)

    route = planner.plan_route((2, 2), Orientation.NORTH, (2, 3))
    assert len(route) == 3
    assert route[0] in (Action.LEFT, Action.RIGHT)
    assert route[-1] == Action.MOVE


def test_route_uses_wraparound() -> None:
    planner = ActionPlanner(OPEN_5X5)

    route = planner.plan_route((0, 0), Orientation.WEST, (4, 0))
    assert route == [Action.MOVE]


def test_only_first_action_is_returned() -> None:
    planner = ActionPlanner(OPEN_5X5)

    first = planner.plan_first_action((0, 0), Orientation.EAST, (0, 2))
    route = planner.plan_route((0, 0), Orientation.EAST, (0, 2))
    assert len(route) == 3
    assert first == route[0] == Action.RIGHT


def test_no_target_or_already_there_is_noop() -> None:
    planner = ActionPlanner(OPEN_5X5)

    assert planner.plan_first_action((1, 1), Orientation.EAST, None) == Action.NOOP
    assert planner.plan_first_action((1, 1), Orientation.EAST, (1, 1)) == Action.NOOP


def test_walled_in_target_is_noop() -> None:
    grid = decode_grid(
        "\n".join(
            [
                "_____",
                "_WWW_",
                "_WBW_",
                "_WWW_",
                "X____",
            ]
        )
    )
    planner = ActionPlanner(grid)

    assert planner.plan_route((0, 4), Orientation.NORTH, (2, 2)) == []
    assert planner.plan_first_action((0, 4), Orientation.NORTH, (2, 2)) == Action.NOOP


def test_replanning_every_turn_reaches_target() -> None:
    rows = [
        "__________",
        "_WWWWWWW__",
        "_______W__",
        "WWWWW__W__",
        "____W__W__",
        "_W__W_____",
        "_W________",
        "_WWWWWWWW_",
    ]
    grid = decode_grid("\n".join(rows))
    planner = ActionPlanner(grid)
    position, orientation = (0, 4), Orientation.NORTH
    target = (8, 4)

    budget = len(planner.plan_route(position, orientation, target))
    assert budget > 0

    for _ in range(budget):
        action = planner.plan_first_action(position, orientation, target)
        assert action in (Action.MOVE, Action.LEFT, Action.RIGHT)
        position, orientation = simulate_action(grid, position, orientation, action)
        if position == target:
            break

    assert position == target
