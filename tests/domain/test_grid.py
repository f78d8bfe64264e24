import pytest

from pathkit.domain.entities.grid import CARDINAL, COMPASS, INFINITE, Direction, Grid
from pathkit.domain.errors import OutOfBounds


@pytest.fixture
def grid3() -> Grid:
    return Grid.from_rows([[4, 2, 1], [2, 1, 0], [3, 4, 7]])


@pytest.fixture
def wide() -> Grid:
    # 2 rows x 3 cols
    return Grid.from_rows([[4, 2, 1], [2, 1, 0]])


def test_cost_by_node_id(grid3: Grid):
    assert grid3.cost(0) == 4
    assert grid3.cost(4) == 1
    assert grid3.cost(8) == 7


def test_cost_past_size_raises(grid3: Grid):
    with pytest.raises(OutOfBounds, match="exceeds grid size"):
        grid3.cost(9)


def test_node_id_is_row_major(grid3: Grid):
    assert grid3.node_id((0, 0)) == 0
    assert grid3.node_id((1, 1)) == 4
    assert grid3.node_id((2, 2)) == 8


def test_node_id_outside_raises(grid3: Grid):
    with pytest.raises(OutOfBounds, match="outside of matrix"):
        grid3.node_id((2, 3))


def test_non_square_round_trip(wide: Grid):
    assert (wide.width, wide.height, wide.size) == (2, 3, 6)
    assert wide.node_id((1, 2)) == 5
    assert wide.coords(5) == (1, 2)
    assert wide.cost(5) == 0
    with pytest.raises(OutOfBounds):
        wide.coords(6)


def test_within_and_outside(wide: Grid):
    assert wide.within((0, 0)) and not wide.outside((0, 0))
    assert wide.outside((2, 0))
    assert wide.outside((0, 3))


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Grid.from_rows([[1, 2], [3]])


def test_directions_saturate_at_zero():
    assert Direction.N.attempt_move((0, 2)) == (0, 2)
    assert Direction.NW.attempt_move((0, 2)) == (0, 1)
    assert Direction.W.attempt_move((3, 0)) == (3, 0)
    assert Direction.SE.attempt_move((1, 1)) == (2, 2)


def test_direction_sets():
    assert len(CARDINAL) == 4
    assert len(COMPASS) == 8
    assert set(CARDINAL) <= set(COMPASS)


def test_steps_skip_impassable_and_outside():
    g = Grid.from_rows([[1, INFINITE], [2, 3]])
    # SW from (0, 0) saturates into S, so 2 is reached twice
    dests = sorted(e.destination for e in g.steps(0, COMPASS))
    assert dests == [2, 2, 3]
    weights = {e.destination: e.weight for e in g.steps(0, COMPASS)}
    assert weights == {2: 2.0, 3: 3.0}
    assert not g.passable(1)


def test_steps_never_return_to_origin_cell():
    g = Grid.from_rows([[1, 1], [1, 1]])
    assert all(e.destination != 0 for e in g.steps(0, COMPASS))
