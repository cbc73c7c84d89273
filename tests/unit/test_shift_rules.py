import pytest

from tile_merge.actions import Action
from tile_merge.components import Position
from tile_merge.shifts import SHIFT_RULES


def test_every_direction_has_a_rule() -> None:
    assert set(SHIFT_RULES) == set(Action)


@pytest.mark.parametrize(
    "action, expected_order",
    [
        (Action.LEFT, [(0, 0), (2, 0), (1, 1), (3, 1)]),
        (Action.RIGHT, [(2, 0), (0, 0), (3, 1), (1, 1)]),
        (Action.UP, [(0, 0), (1, 1), (2, 0), (3, 1)]),
        (Action.DOWN, [(0, 0), (1, 1), (2, 0), (3, 1)]),
    ],
)
def test_sort_order_leading_edge_first(
    action: Action, expected_order: list[tuple[int, int]]
) -> None:
    cells = [Position(3, 1), Position(0, 0), Position(1, 1), Position(2, 0)]
    ordered = sorted(cells, key=SHIFT_RULES[action].sort_key)
    assert [(p.x, p.y) for p in ordered] == expected_order


def test_vertical_tie_break_within_a_column() -> None:
    column = [Position(1, 0), Position(1, 3), Position(1, 1)]
    up = sorted(column, key=SHIFT_RULES[Action.UP].sort_key)
    down = sorted(column, key=SHIFT_RULES[Action.DOWN].sort_key)
    assert [p.y for p in up] == [3, 1, 0]
    assert [p.y for p in down] == [0, 1, 3]


@pytest.mark.parametrize(
    "action, slot, expected",
    [
        (Action.LEFT, 0, (0, 2)),
        (Action.LEFT, 2, (2, 2)),
        (Action.RIGHT, 0, (3, 2)),
        (Action.RIGHT, 1, (2, 2)),
        (Action.UP, 0, (1, 3)),
        (Action.UP, 3, (1, 0)),
        (Action.DOWN, 0, (1, 0)),
        (Action.DOWN, 1, (1, 1)),
    ],
)
def test_place_keeps_cross_axis(
    action: Action, slot: int, expected: tuple[int, int]
) -> None:
    placed = SHIFT_RULES[action].place(Position(1, 2), slot, 4)
    assert (placed.x, placed.y) == expected


@pytest.mark.parametrize(
    "action, expected_group",
    [(Action.LEFT, 2), (Action.RIGHT, 2), (Action.UP, 1), (Action.DOWN, 1)],
)
def test_group_key(action: Action, expected_group: int) -> None:
    assert SHIFT_RULES[action].group_key(Position(1, 2)) == expected_group
