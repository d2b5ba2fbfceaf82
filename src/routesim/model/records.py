from __future__ import annotations

from dataclasses import dataclass

from routesim.topology import Cost, NodeId

REMOVE_EDGE = -999


@dataclass(frozen=True)
class ChangeRecord:
    from_id: NodeId
    to_id: NodeId
    cost: Cost

    def is_removal(self, sentinel: int = REMOVE_EDGE) -> bool:
        return self.cost == sentinel


@dataclass(frozen=True)
class MessageQuery:
    source: NodeId
    destination: NodeId
    text: str
