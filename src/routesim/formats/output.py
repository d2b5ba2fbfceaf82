from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List

from routesim.core.resolver import PathResult
from routesim.core.simulation import SimulationRound
from routesim.model import RouteEntry, RoutingState
from routesim.topology import NodeId
from routesim.utils.io import ensure_dir

CHANGE_MARKER = "----- At this point, change is applied"
MESSAGES_HEADER = "<message output lines>"


def table_header(node: NodeId) -> str:
    return f"<forwarding table entries for node {node}>"


def format_route(entry: RouteEntry) -> str:
    return f"{entry.destination} {entry.next_hop} {entry.cost}"


def format_trace(path: PathResult, text: str) -> str:
    if not path.reachable:
        return f"from {path.source} to {path.destination} cost infinite hops unreachable message {text}"
    hops = " ".join(str(h) for h in path.hops)
    return f"from {path.source} to {path.destination} cost {path.cost} hops {hops} message {text}"


def render_tables(state: RoutingState) -> Iterator[str]:
    for node, entries in state.forwarding_tables().items():
        yield table_header(node)
        for entry in entries:
            yield format_route(entry)


def render_round(rnd: SimulationRound) -> List[str]:
    lines: List[str] = []
    if rnd.change is not None:
        lines.append(CHANGE_MARKER)
    lines.extend(render_tables(rnd.state))
    lines.append(MESSAGES_HEADER)
    lines.extend(format_trace(r.path, r.query.text) for r in rnd.results)
    return lines


def render_rounds(rounds: Iterable[SimulationRound]) -> str:
    lines: List[str] = []
    for rnd in rounds:
        lines.extend(render_round(rnd))
    return "".join(f"{line}\n" for line in lines)


def write_output(path: str | Path, rounds: Iterable[SimulationRound]) -> Path:
    p = Path(path)
    ensure_dir(p.parent)
    p.write_text(render_rounds(rounds), encoding="utf-8")
    return p
