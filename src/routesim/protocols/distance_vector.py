from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from routesim.model import INFINITY, RoutingState, RoutingTable
from routesim.protocols.base import RoutingSolver
from routesim.topology import NodeId, Topology

CostMatrix = Dict[NodeId, Dict[NodeId, float]]
HopMatrix = Dict[NodeId, Dict[NodeId, Optional[NodeId]]]


class DistanceVectorSolver(RoutingSolver):
    """Bellman-Ford style distance-vector routing.

    Rather than exchanging vectors between neighbors, every node's vector is
    relaxed against its neighbors' current vectors in global passes until a
    pass changes nothing, which is the fixed point the exchange would reach.
    Equal-cost candidates are resolved toward the smaller next-hop id.
    """

    @property
    def name(self) -> str:
        return "distvec"

    def solve(self, topology: Topology) -> RoutingState:
        if topology.has_negative_costs():
            self._log.warning("negative link costs present; results may not be shortest paths")
        nodes = topology.nodes()
        costs, next_hops = self.initial_vectors(topology, nodes)
        passes = self.relax(topology, nodes, costs, next_hops)
        self._log.debug("distance vectors settled after %d pass(es) over %d node(s)", passes, len(nodes))
        return RoutingState.from_tables(
            self.name,
            (RoutingTable.from_vectors(i, costs[i], next_hops[i]) for i in nodes),
        )

    @staticmethod
    def initial_vectors(topology: Topology, nodes: List[NodeId]) -> Tuple[CostMatrix, HopMatrix]:
        costs: CostMatrix = {}
        next_hops: HopMatrix = {}
        for i in nodes:
            costs[i] = {k: INFINITY for k in nodes}
            next_hops[i] = {k: None for k in nodes}
            for j, edge_cost in topology.neighbors(i).items():
                costs[i][j] = edge_cost
                next_hops[i][j] = j
            costs[i][i] = 0
            next_hops[i][i] = i
        return costs, next_hops

    @staticmethod
    def relax(
        topology: Topology,
        nodes: List[NodeId],
        costs: CostMatrix,
        next_hops: HopMatrix,
    ) -> int:
        passes = 0
        changed = True
        while changed and passes < len(nodes) - 1:
            changed = False
            passes += 1
            for i in nodes:
                row_cost = costs[i]
                row_hop = next_hops[i]
                for j in sorted(topology.neighbors(i)):
                    via_cost = row_cost[j]
                    if j == i or via_cost == INFINITY:
                        continue
                    via_hop = row_hop[j]
                    for k in nodes:
                        if k == i:
                            continue
                        tail = costs[j][k]
                        if tail == INFINITY:
                            continue
                        candidate = via_cost + tail
                        current = row_cost[k]
                        if candidate < current:
                            row_cost[k] = candidate
                            row_hop[k] = via_hop
                            changed = True
                        elif candidate == current and via_hop is not None:
                            current_hop = row_hop[k]
                            if current_hop is None or via_hop < current_hop:
                                row_hop[k] = via_hop
                                changed = True
        return passes
