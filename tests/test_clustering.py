import random

import pytest

from quick_cash.boards import allocate_cluster, free_cells
from quick_cash.errors import WarningCode
from quick_cash.layout import GridTopology

TOPOLOGY = GridTopology(rows=3, columns=5)

# Middle row and middle column claimed: the free cells form four pairs.
FRAGMENTING_CLAIM = {2, 5, 6, 7, 8, 9, 12}


@pytest.mark.parametrize("seed", range(20))
def test_empty_board_gives_connected_cluster(seed):
    warnings = []
    cluster = allocate_cluster(5, set(), TOPOLOGY, rng=random.Random(seed), warnings=warnings)
    assert len(cluster) == 5
    assert len(set(cluster)) == 5
    assert all(0 <= index < 15 for index in cluster)
    assert TOPOLOGY.is_connected(cluster)
    assert warnings == []


@pytest.mark.parametrize("seed", range(10))
def test_claimed_cells_are_never_reused(seed):
    claimed = {0, 1, 2, 3}
    cluster = allocate_cluster(6, claimed, TOPOLOGY, rng=random.Random(seed))
    assert len(set(cluster)) == 6
    assert not claimed & set(cluster)


@pytest.mark.parametrize("seed", range(10))
def test_fragmented_board_is_padded_to_requested_count(seed):
    warnings = []
    cluster = allocate_cluster(
        5, FRAGMENTING_CLAIM, TOPOLOGY, rng=random.Random(seed), warnings=warnings
    )
    assert len(cluster) == 5
    assert len(set(cluster)) == 5
    assert not FRAGMENTING_CLAIM & set(cluster)
    assert [warning.code for warning in warnings] == [WarningCode.CLUSTERING_DEGRADED]


def test_zero_trials_still_returns_requested_count():
    cluster = allocate_cluster(4, set(), TOPOLOGY, rng=random.Random(2), max_trials=0)
    assert len(set(cluster)) == 4


def test_request_beyond_free_cells_returns_every_free_cell():
    warnings = []
    claimed = set(range(12))
    cluster = allocate_cluster(5, claimed, TOPOLOGY, rng=random.Random(4), warnings=warnings)
    assert sorted(cluster) == [12, 13, 14]
    assert WarningCode.RESOURCE_EXHAUSTION in [warning.code for warning in warnings]


def test_full_board_returns_nothing():
    assert allocate_cluster(3, set(range(15)), TOPOLOGY, rng=random.Random(1)) == []


def test_non_positive_count_returns_nothing():
    assert allocate_cluster(0, set(), TOPOLOGY, rng=random.Random(1)) == []


def test_free_cells_are_in_index_order():
    assert free_cells(TOPOLOGY, {0, 14}) == list(range(1, 14))
