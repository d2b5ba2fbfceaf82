from __future__ import annotations

import heapq
from typing import Dict, List, Tuple

from routesim.model import RoutingState, RoutingTable
from routesim.protocols.base import NegativeCostError, RoutingSolver
from routesim.topology import NodeId, Topology


class LinkStateSolver(RoutingSolver):
    """Link-state routing: every node runs Dijkstra over the full topology.

    Equal-cost paths are resolved toward the smaller predecessor id, i.e. the
    path whose second-to-last hop is smaller, and the first hop from the
    source is carried forward along the chosen path.
    """

    @property
    def name(self) -> str:
        return "linkstate"

    def solve(self, topology: Topology) -> RoutingState:
        if topology.has_negative_costs():
            raise NegativeCostError("link-state routing requires non-negative link costs")
        tables = [self.shortest_path_table(topology, source) for source in topology.nodes()]
        self._log.debug("computed shortest path trees for %d node(s)", len(tables))
        return RoutingState.from_tables(self.name, tables)

    def shortest_path_table(self, topology: Topology, source: NodeId) -> RoutingTable:
        dist, first_hop, _ = self.dijkstra(topology, source)
        return RoutingTable.from_vectors(source, dist, first_hop)

    @staticmethod
    def dijkstra(
        topology: Topology,
        source: NodeId,
    ) -> Tuple[Dict[NodeId, int], Dict[NodeId, NodeId], Dict[NodeId, NodeId]]:
        dist: Dict[NodeId, int] = {source: 0}
        first_hop: Dict[NodeId, NodeId] = {source: source}
        prev: Dict[NodeId, NodeId] = {source: source}
        pq: List[Tuple[int, NodeId]] = [(0, source)]

        while pq:
            dist_u, u = heapq.heappop(pq)
            # superseded by a cheaper entry pushed later
            if dist_u != dist[u]:
                continue
            for v, edge_cost in sorted(topology.neighbors(u).items()):
                if v == source or v == u:
                    continue
                alt = dist_u + edge_cost
                current = dist.get(v)
                if current is None or alt < current or (alt == current and u < prev[v]):
                    dist[v] = alt
                    first_hop[v] = v if u == source else first_hop[u]
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))

        return dist, first_hop, prev
