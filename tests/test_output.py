from __future__ import annotations

from pathlib import Path

from routesim.core import PathResult, PathStatus, Simulation
from routesim.formats import format_trace, render_rounds, write_output
from routesim.model import ChangeRecord, MessageQuery
from routesim.protocols import DistanceVectorSolver, LinkStateSolver
from routesim.topology import Topology

TRIANGLE_OUTPUT = """\
<forwarding table entries for node 1>
1 1 0
2 2 1
3 2 2
<forwarding table entries for node 2>
1 1 1
2 2 0
3 3 1
<forwarding table entries for node 3>
1 2 2
2 2 1
3 3 0
<message output lines>
from 1 to 3 cost 2 hops 1 2 3 message hello
----- At this point, change is applied
<forwarding table entries for node 1>
1 1 0
2 2 1
3 3 5
<forwarding table entries for node 2>
1 1 1
2 2 0
3 1 6
<forwarding table entries for node 3>
1 1 5
2 1 6
3 3 0
<message output lines>
from 1 to 3 cost 5 hops 1 3 message hello
"""


def test_format_trace_delivered_and_unreachable() -> None:
    delivered = PathResult(1, 3, PathStatus.DELIVERED, cost=2, hops=(1, 2, 3))
    assert format_trace(delivered, "hello") == "from 1 to 3 cost 2 hops 1 2 3 message hello"

    unreachable = PathResult(1, 9, PathStatus.UNREACHABLE)
    assert format_trace(unreachable, "hi there") == "from 1 to 9 cost infinite hops unreachable message hi there"


def test_format_trace_writes_inconsistent_route_as_unreachable() -> None:
    broken = PathResult(1, 3, PathStatus.INCONSISTENT, hops=(1, 2, 1))
    assert format_trace(broken, "x") == "from 1 to 3 cost infinite hops unreachable message x"


def test_render_rounds_matches_simulator_layout(triangle: Topology) -> None:
    for solver in (DistanceVectorSolver(), LinkStateSolver()):
        rounds = Simulation(triangle.copy(), solver).run([MessageQuery(1, 3, "hello")], [ChangeRecord(2, 3, -999)])
        assert render_rounds(rounds) == TRIANGLE_OUTPUT


def test_write_output_creates_parent_dirs(tmp_path: Path, triangle: Topology) -> None:
    rounds = Simulation(triangle, LinkStateSolver()).run([MessageQuery(1, 3, "hello")])
    out = write_output(tmp_path / "runs" / "output.txt", rounds)
    text = out.read_text(encoding="utf-8")
    assert text.startswith("<forwarding table entries for node 1>\n")
    assert text.endswith("from 1 to 3 cost 2 hops 1 2 3 message hello\n")
    assert "change is applied" not in text
