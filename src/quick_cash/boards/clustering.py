"""Connected cell-region allocation on a board."""

from __future__ import annotations

import logging
import random
from collections import deque

from quick_cash.config import CLUSTER_MAX_TRIALS
from quick_cash.errors import WarningCode, emit_warning

logger = logging.getLogger(__name__)


def free_cells(topology, claimed) -> list[int]:
    """Return board indices not yet claimed, in index order."""

    return [index for index in range(topology.size) if index not in claimed]


def _pick_cluster_seed(available: list[int], rng) -> int:
    return rng.choice(available)


def _grow_cluster_bfs(seed: int, target_size: int, claimed, topology, rng) -> list[int]:
    cluster = []
    visited = {seed}
    frontier = deque([seed])

    while frontier and len(cluster) < target_size:
        index = frontier.popleft()
        cluster.append(index)

        neighbors = sorted(topology.neighbors(index))
        rng.shuffle(neighbors)
        for neighbor in neighbors:
            if neighbor in claimed or neighbor in visited:
                continue
            visited.add(neighbor)
            frontier.append(neighbor)

    return cluster


def allocate_cluster(
    count: int,
    claimed,
    topology,
    rng: random.Random | None = None,
    max_trials: int = CLUSTER_MAX_TRIALS,
    warnings=None,
) -> list[int]:
    """Pick ``count`` distinct unclaimed cells, connected when possible.

    Runs up to ``max_trials`` breadth-first searches from random free seed
    cells and keeps the largest region found. A region that stays short of
    ``count`` is padded with random free cells, which breaks adjacency for
    the padding only. When fewer than ``count`` cells are free, every free
    cell is returned.
    """

    rng = rng or random
    claimed = set(claimed)
    available = free_cells(topology, claimed)
    if count <= 0:
        return []

    if len(available) < count:
        emit_warning(
            logger,
            warnings,
            WarningCode.RESOURCE_EXHAUSTION,
            f"Requested {count} cells but only {len(available)} are free; truncating",
        )
        count = len(available)
        if count == 0:
            return []

    best: list[int] = []
    for _ in range(max_trials):
        seed = _pick_cluster_seed(available, rng)
        cluster = _grow_cluster_bfs(seed, count, claimed, topology, rng)
        if len(cluster) > len(best):
            best = cluster
        if len(best) == count:
            return best

    emit_warning(
        logger,
        warnings,
        WarningCode.CLUSTERING_DEGRADED,
        f"No connected region of {count} cells found in {max_trials} trials "
        f"(best {len(best)}); padding with free cells",
    )
    taken = set(best)
    remainder = [index for index in available if index not in taken]
    return best + rng.sample(remainder, count - len(best))


__all__ = [
    "free_cells",
    "allocate_cluster",
]
