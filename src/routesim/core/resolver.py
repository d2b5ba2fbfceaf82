from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from routesim.model import INFINITY, MessageQuery, RoutingState
from routesim.topology import NodeId


class PathStatus(str, Enum):
    DELIVERED = "delivered"
    UNREACHABLE = "unreachable"
    INCONSISTENT = "inconsistent"


@dataclass(frozen=True)
class PathResult:
    source: NodeId
    destination: NodeId
    status: PathStatus
    cost: Optional[int] = None
    hops: Tuple[NodeId, ...] = ()

    @property
    def reachable(self) -> bool:
        return self.status == PathStatus.DELIVERED


@dataclass(frozen=True)
class QueryResult:
    query: MessageQuery
    path: PathResult


class PathResolver:
    """Walks next hops hop by hop from source to destination.

    Every node forwards with its own table, so the walk reflects what the
    routers would do rather than the source's view of the path. The walk is
    bounded by the node count; a broken chain is reported as
    ``PathStatus.INCONSISTENT`` instead of looping.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger("routesim.resolver")

    def resolve(self, state: RoutingState, source: NodeId, destination: NodeId) -> PathResult:
        cost = state.cost(source, destination)
        if cost == INFINITY:
            return PathResult(source=source, destination=destination, status=PathStatus.UNREACHABLE)

        hops: List[NodeId] = []
        current: NodeId = source
        for _ in range(len(state.tables)):
            hops.append(current)
            if current == destination:
                return PathResult(
                    source=source,
                    destination=destination,
                    status=PathStatus.DELIVERED,
                    cost=int(cost),
                    hops=tuple(hops),
                )
            nxt = state.next_hop(current, destination)
            if nxt is None or nxt == current:
                break
            current = nxt

        self._log.warning(
            "inconsistent %s route from %s to %s: walked %s",
            state.protocol,
            source,
            destination,
            hops,
        )
        return PathResult(
            source=source,
            destination=destination,
            status=PathStatus.INCONSISTENT,
            hops=tuple(hops),
        )

    def resolve_all(self, state: RoutingState, queries: Iterable[MessageQuery]) -> List[QueryResult]:
        return [
            QueryResult(query=q, path=self.resolve(state, q.source, q.destination))
            for q in queries
        ]
