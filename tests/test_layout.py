import pytest

from quick_cash.layout import GridTopology


@pytest.fixture
def topology():
    return GridTopology(rows=3, columns=5)


def test_corner_cells_have_two_neighbors(topology):
    assert topology.neighbors(0) == {1, 5}
    assert topology.neighbors(4) == {3, 9}
    assert topology.neighbors(14) == {9, 13}


def test_center_cell_has_four_neighbors(topology):
    assert topology.neighbors(7) == {2, 6, 8, 12}


def test_rows_do_not_wrap(topology):
    assert 5 not in topology.neighbors(4)
    assert 4 not in topology.neighbors(5)


def test_index_and_coord_round_trip(topology):
    assert topology.coord_of(7) == (1, 2)
    assert topology.index_of(2, 4) == 14


def test_is_connected(topology):
    assert topology.is_connected([0, 1, 2, 7])
    assert not topology.is_connected([0, 2])
    assert topology.is_connected([])


def test_rejects_empty_grid():
    with pytest.raises(ValueError):
        GridTopology(rows=0, columns=5)
