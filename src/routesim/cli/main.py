from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from routesim.cli.validate import validate_config
from routesim.core.simulation import Simulation
from routesim.formats.inputs import load_changes_file, load_message_file, load_topology_file
from routesim.formats.output import write_output
from routesim.protocols.registry import available_solvers, load_solver
from routesim.runtime.config import LOG_LEVELS, InputPaths, SimulationConfig, load_simulation_config
from routesim.topology import Topology
from routesim.utils.io import dump_json, load_yaml

_log = logging.getLogger("routesim.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="routesim", description="Distance-vector / link-state routing simulator")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Run a simulation and write the output file")
    p_run.add_argument("--config", help="YAML config path.")
    p_run.add_argument("--protocol", choices=available_solvers(), help="Routing algorithm.")
    p_run.add_argument("--topology", help="Topology file: 'from to cost' per line.")
    p_run.add_argument("--messages", help="Message file: 'source destination text' per line.")
    p_run.add_argument("--changes", help="Change file: 'from to cost' per line.")
    p_run.add_argument("--output", help="Output file path.")
    p_run.add_argument("--strict", action="store_true", default=None, help="Fail on malformed input lines.")
    p_run.add_argument("--log-level", choices=list(LOG_LEVELS), help="Logging verbosity.")

    p_validate = sub.add_parser("validate", help="Validate a config file")
    p_validate.add_argument("--config", required=True)

    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def effective_config(args: argparse.Namespace) -> SimulationConfig:
    cfg = load_simulation_config(args.config) if args.config else SimulationConfig()
    inputs = InputPaths(
        topology=args.topology or cfg.inputs.topology,
        messages=args.messages or cfg.inputs.messages,
        changes=args.changes or cfg.inputs.changes,
    )
    overrides: Dict[str, Any] = {"inputs": inputs}
    if args.protocol:
        overrides["protocol"] = args.protocol
    if args.output:
        overrides["output"] = args.output
    if args.strict is not None:
        overrides["strict_input"] = args.strict
    if args.log_level:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(cfg, **overrides)


def run_simulation(cfg: SimulationConfig) -> Dict[str, Any]:
    if not cfg.inputs.topology or not cfg.inputs.messages:
        raise ValueError("both a topology file and a message file are required")

    links = load_topology_file(cfg.inputs.topology, strict=cfg.strict_input)
    queries = load_message_file(cfg.inputs.messages, strict=cfg.strict_input)
    changes = load_changes_file(cfg.inputs.changes, strict=cfg.strict_input) if cfg.inputs.changes else []

    topology = Topology.from_edges(links)
    solver = load_solver(cfg.protocol)()
    _log.info(
        "simulate protocol=%s nodes=%d links=%d messages=%d changes=%d",
        solver.name,
        len(topology),
        len(topology.edge_list()),
        len(queries),
        len(changes),
    )
    rounds = Simulation(topology, solver, removal_sentinel=cfg.removal_sentinel).run(queries, changes)
    out_path = write_output(cfg.output, rounds)
    return {
        "protocol": solver.name,
        "output": str(out_path),
        "rounds": len(rounds),
        "route_hashes": [r.route_hash for r in rounds],
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.cmd == "validate":
        errors = validate_config(load_yaml(args.config))
        if errors:
            print(json.dumps({"ok": False, "errors": errors}, ensure_ascii=False, indent=2))
            return 1
        print(json.dumps({"ok": True}, ensure_ascii=False, indent=2))
        return 0

    cfg = effective_config(args)
    configure_logging(cfg.log_level)
    try:
        result = run_simulation(cfg)
    except (OSError, KeyError, ValueError) as exc:
        _log.error("simulation failed: %s", exc)
        return 1
    print(dump_json(result))
    return 0


def _legacy_main(protocol: str, argv: Optional[List[str]]) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3:
        print(f"Usage: ./{protocol} topofile messagefile changesfile")
        return 1
    configure_logging("WARNING")
    cfg = SimulationConfig(
        protocol=protocol,
        inputs=InputPaths(topology=args[0], messages=args[1], changes=args[2]),
    )
    try:
        run_simulation(cfg)
    except (OSError, KeyError, ValueError) as exc:
        _log.error("simulation failed: %s", exc)
        return 1
    return 0


def distvec(argv: Optional[List[str]] = None) -> int:
    return _legacy_main("distvec", argv)


def linkstate(argv: Optional[List[str]] = None) -> int:
    return _legacy_main("linkstate", argv)


if __name__ == "__main__":
    raise SystemExit(main())
