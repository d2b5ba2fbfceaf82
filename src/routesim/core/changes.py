from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from routesim.model import REMOVE_EDGE, ChangeRecord, RoutingState
from routesim.protocols.base import RoutingSolver
from routesim.topology import Topology


class ChangeApplicator:
    """Applies link changes in order and recomputes routes after each one.

    Changes are irrevocable: each one is applied on top of the topology left
    by the previous one.
    """

    def __init__(
        self,
        topology: Topology,
        solver: RoutingSolver,
        removal_sentinel: int = REMOVE_EDGE,
        logger: logging.Logger | None = None,
    ) -> None:
        self.topology = topology
        self.solver = solver
        self.removal_sentinel = int(removal_sentinel)
        self._log = logger or logging.getLogger("routesim.changes")

    def apply(self, change: ChangeRecord) -> None:
        if change.is_removal(self.removal_sentinel):
            removed = self.topology.remove_edge(change.from_id, change.to_id)
            if not removed:
                self._log.info("no link %s-%s to remove", change.from_id, change.to_id)
            else:
                self._log.debug("removed link %s-%s", change.from_id, change.to_id)
            return
        self.topology.upsert_edge(change.from_id, change.to_id, change.cost)
        self._log.debug("set link %s-%s cost=%s", change.from_id, change.to_id, change.cost)

    def snapshots(
        self, changes: Iterable[ChangeRecord]
    ) -> Iterator[Tuple[Optional[ChangeRecord], RoutingState]]:
        yield None, self.solver.solve(self.topology)
        for change in changes:
            self.apply(change)
            yield change, self.solver.solve(self.topology)
