from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from routesim.topology import Cost, NodeId

INFINITY = float("inf")


@dataclass(frozen=True)
class RouteEntry:
    destination: NodeId
    next_hop: NodeId
    cost: Cost


@dataclass(frozen=True)
class RoutingTable:
    """Forwarding table of one source node.

    Only reachable destinations are stored; anything else reads back as
    infinite cost with no next hop.
    """

    source: NodeId
    entries: Mapping[NodeId, RouteEntry] = field(default_factory=dict)

    def get(self, destination: NodeId) -> Optional[RouteEntry]:
        return self.entries.get(destination)

    def cost(self, destination: NodeId) -> float:
        entry = self.entries.get(destination)
        if entry is None:
            return INFINITY
        return entry.cost

    def next_hop(self, destination: NodeId) -> Optional[NodeId]:
        entry = self.entries.get(destination)
        if entry is None:
            return None
        return entry.next_hop

    def snapshot(self) -> List[RouteEntry]:
        return sorted(self.entries.values(), key=lambda e: e.destination)

    @classmethod
    def from_vectors(
        cls,
        source: NodeId,
        costs: Mapping[NodeId, float],
        next_hops: Mapping[NodeId, Optional[NodeId]],
    ) -> "RoutingTable":
        entries: Dict[NodeId, RouteEntry] = {}
        for dst, cost in costs.items():
            hop = next_hops.get(dst)
            if cost == INFINITY or hop is None:
                continue
            entries[int(dst)] = RouteEntry(destination=int(dst), next_hop=int(hop), cost=int(cost))
        return cls(source=int(source), entries=entries)


@dataclass(frozen=True)
class RoutingState:
    protocol: str
    tables: Mapping[NodeId, RoutingTable]

    def nodes(self) -> List[NodeId]:
        return sorted(self.tables)

    def table(self, source: NodeId) -> Optional[RoutingTable]:
        return self.tables.get(source)

    def cost(self, source: NodeId, destination: NodeId) -> float:
        table = self.tables.get(source)
        if table is None:
            return INFINITY
        return table.cost(destination)

    def next_hop(self, source: NodeId, destination: NodeId) -> Optional[NodeId]:
        table = self.tables.get(source)
        if table is None:
            return None
        return table.next_hop(destination)

    def forwarding_tables(self) -> Dict[NodeId, List[RouteEntry]]:
        return {node: self.tables[node].snapshot() for node in self.nodes()}

    def route_map(self) -> Dict[NodeId, Dict[NodeId, List[int]]]:
        return {
            node: {e.destination: [e.next_hop, e.cost] for e in entries}
            for node, entries in self.forwarding_tables().items()
        }

    @classmethod
    def from_tables(cls, protocol: str, tables: Iterable[RoutingTable]) -> "RoutingState":
        return cls(protocol=protocol, tables={t.source: t for t in tables})
