from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set, Tuple

NodeId = int
Cost = int


@dataclass(frozen=True)
class Edge:
    u: NodeId
    v: NodeId
    cost: Cost


class Topology:
    """Weighted undirected graph stored as mirrored adjacency maps.

    Every edge ``(a, b)`` is kept in both ``a``'s and ``b``'s adjacency with
    the same cost, and an unordered pair holds at most one edge.
    """

    def __init__(self) -> None:
        self._adj: Dict[NodeId, Dict[NodeId, Cost]] = {}

    def add_node(self, node: NodeId) -> None:
        self._adj.setdefault(int(node), {})

    def node_ids(self) -> Set[NodeId]:
        return set(self._adj)

    def nodes(self) -> List[NodeId]:
        return sorted(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def neighbors(self, node: NodeId) -> Dict[NodeId, Cost]:
        return dict(self._adj.get(node, {}))

    def has_edge(self, u: NodeId, v: NodeId) -> bool:
        return v in self._adj.get(u, {})

    def cost(self, u: NodeId, v: NodeId) -> Optional[Cost]:
        return self._adj.get(u, {}).get(v)

    def upsert_edge(self, u: NodeId, v: NodeId, cost: Cost) -> None:
        u, v = int(u), int(v)
        self.add_node(u)
        self.add_node(v)
        self._adj[u][v] = int(cost)
        self._adj[v][u] = int(cost)

    def remove_edge(self, u: NodeId, v: NodeId) -> bool:
        existed = self.has_edge(u, v)
        self._adj.get(u, {}).pop(v, None)
        self._adj.get(v, {}).pop(u, None)
        return existed

    def has_negative_costs(self) -> bool:
        return any(c < 0 for nbrs in self._adj.values() for c in nbrs.values())

    def edge_list(self) -> List[Edge]:
        edges: List[Edge] = []
        seen: Set[Tuple[int, int]] = set()
        for u in self.nodes():
            for v, c in self._adj[u].items():
                key = (min(u, v), max(u, v))
                if key in seen:
                    continue
                seen.add(key)
                edges.append(Edge(u=key[0], v=key[1], cost=c))
        return sorted(edges, key=lambda e: (e.u, e.v))

    def snapshot(self) -> Dict[NodeId, Dict[NodeId, Cost]]:
        return {n: dict(nbrs) for n, nbrs in self._adj.items()}

    def copy(self) -> "Topology":
        other = Topology()
        for node in self.nodes():
            other.add_node(node)
        for e in self.edge_list():
            other.upsert_edge(e.u, e.v, e.cost)
        return other

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int, int]]) -> "Topology":
        t = cls()
        for u, v, c in edges:
            t.upsert_edge(int(u), int(v), int(c))
        return t
