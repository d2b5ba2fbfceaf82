from __future__ import annotations

from routesim.core import hash_routes
from routesim.model import RouteEntry, RoutingState, RoutingTable
from routesim.protocols import DistanceVectorSolver, LinkStateSolver
from routesim.topology import Topology


def _table(source: int, rows: list[tuple[int, int, int]]) -> RoutingTable:
    return RoutingTable(source=source, entries={d: RouteEntry(d, h, c) for d, h, c in rows})


def test_convergence_hash_stable_against_dict_order() -> None:
    a = RoutingState.from_tables(
        "distvec",
        [_table(1, [(1, 1, 0), (3, 2, 2), (2, 2, 1)]), _table(2, [(2, 2, 0), (1, 1, 1)])],
    )
    b = RoutingState.from_tables(
        "distvec",
        [_table(2, [(1, 1, 1), (2, 2, 0)]), _table(1, [(2, 2, 1), (1, 1, 0), (3, 2, 2)])],
    )
    assert hash_routes(a) == hash_routes(b)


def test_convergence_hash_tracks_next_hop_changes() -> None:
    topology = Topology.from_edges([(1, 2, 1), (2, 5, 1), (5, 4, 1), (1, 3, 2), (3, 4, 1)])
    dv = DistanceVectorSolver().solve(topology)
    ls = LinkStateSolver().solve(topology)
    assert hash_routes(dv) != hash_routes(ls)
