from __future__ import annotations

import random
from typing import List, Tuple

import pytest

from routesim.topology import Topology

TRIANGLE = [(1, 2, 1), (2, 3, 1), (1, 3, 5)]


def random_links(seed: int, max_nodes: int = 9, max_cost: int = 10) -> List[Tuple[int, int, int]]:
    rng = random.Random(seed)
    n_nodes = rng.randint(2, max_nodes)
    links = []
    for u in range(1, n_nodes + 1):
        for v in range(u + 1, n_nodes + 1):
            if rng.random() < 0.4:
                links.append((u, v, rng.randint(1, max_cost)))
    return links


@pytest.fixture
def triangle() -> Topology:
    return Topology.from_edges(TRIANGLE)


@pytest.fixture
def diamond() -> Topology:
    # two equal-cost paths 1-2-4 and 1-3-4
    return Topology.from_edges([(1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 4, 1)])


@pytest.fixture
def uneven_tie() -> Topology:
    # 1-2-5-4 and 1-3-4 both cost 3; the first has the smaller first hop,
    # the second the smaller predecessor of 4
    return Topology.from_edges([(1, 2, 1), (2, 5, 1), (5, 4, 1), (1, 3, 2), (3, 4, 1)])
