from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from routesim.core.changes import ChangeApplicator
from routesim.core.convergence import hash_routes
from routesim.core.resolver import PathResolver, QueryResult
from routesim.model import REMOVE_EDGE, ChangeRecord, MessageQuery, RouteEntry, RoutingState
from routesim.protocols.base import RoutingSolver
from routesim.topology import NodeId, Topology


@dataclass
class SimulationRound:
    index: int
    change: Optional[ChangeRecord]
    state: RoutingState
    route_hash: str
    results: List[QueryResult] = field(default_factory=list)

    @property
    def forwarding_tables(self) -> Dict[NodeId, List[RouteEntry]]:
        return self.state.forwarding_tables()


class Simulation:
    def __init__(
        self,
        topology: Topology,
        solver: RoutingSolver,
        removal_sentinel: int = REMOVE_EDGE,
        logger: logging.Logger | None = None,
    ) -> None:
        self._log = logger or logging.getLogger("routesim.simulation")
        self.topology = topology
        self.solver = solver
        self.applicator = ChangeApplicator(topology, solver, removal_sentinel=removal_sentinel)
        self.resolver = PathResolver()

    def run(
        self,
        queries: Iterable[MessageQuery],
        changes: Iterable[ChangeRecord] = (),
    ) -> List[SimulationRound]:
        queries = list(queries)
        rounds: List[SimulationRound] = []
        for index, (change, state) in enumerate(self.applicator.snapshots(changes)):
            results = self.resolver.resolve_all(state, queries)
            route_hash = hash_routes(state)
            delivered = sum(1 for r in results if r.path.reachable)
            self._log.info(
                "round %d (%s): change=%s nodes=%d delivered=%d/%d hash=%s",
                index,
                self.solver.name,
                None if change is None else (change.from_id, change.to_id, change.cost),
                len(state.tables),
                delivered,
                len(results),
                route_hash[:12],
            )
            rounds.append(
                SimulationRound(
                    index=index,
                    change=change,
                    state=state,
                    route_hash=route_hash,
                    results=results,
                )
            )
        return rounds
