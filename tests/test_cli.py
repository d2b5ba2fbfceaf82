from __future__ import annotations

import json
from pathlib import Path

import pytest

from routesim.cli.main import distvec, linkstate, main


def _write_inputs(tmp_path: Path) -> tuple[Path, Path, Path]:
    topo = tmp_path / "topo.txt"
    topo.write_text("1 2 1\n2 3 1\n1 3 5\n", encoding="utf-8")
    messages = tmp_path / "message.txt"
    messages.write_text("1 3 hello\n3 7 nobody home\n", encoding="utf-8")
    changes = tmp_path / "changes.txt"
    changes.write_text("2 3 -999\n", encoding="utf-8")
    return topo, messages, changes


def test_run_writes_output_and_prints_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    topo, messages, changes = _write_inputs(tmp_path)
    out = tmp_path / "result" / "output.txt"

    code = main(
        [
            "run",
            "--protocol",
            "linkstate",
            "--topology",
            str(topo),
            "--messages",
            str(messages),
            "--changes",
            str(changes),
            "--output",
            str(out),
        ]
    )
    assert code == 0

    summary = json.loads(capsys.readouterr().out)
    assert summary["protocol"] == "linkstate"
    assert summary["rounds"] == 2
    assert len(summary["route_hashes"]) == 2

    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines.count("<message output lines>") == 2
    assert "from 1 to 3 cost 2 hops 1 2 3 message hello" in lines
    assert "from 1 to 3 cost 5 hops 1 3 message hello" in lines
    assert lines.count("from 3 to 7 cost infinite hops unreachable message nobody home") == 2


def test_run_reads_inputs_from_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_inputs(tmp_path)
    cfg = tmp_path / "sim.yaml"
    cfg.write_text(
        "protocol: distvec\ninputs:\n  topology: topo.txt\n  messages: message.txt\noutput: output.txt\n",
        encoding="utf-8",
    )
    assert main(["run", "--config", str(cfg)]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["protocol"] == "distvec"
    assert summary["rounds"] == 1
    assert (tmp_path / "output.txt").exists()


def test_run_fails_cleanly_on_malformed_input_in_strict_mode(tmp_path: Path) -> None:
    topo, messages, _ = _write_inputs(tmp_path)
    topo.write_text("1 2 x\n", encoding="utf-8")
    code = main(["run", "--topology", str(topo), "--messages", str(messages), "--strict", "--output", str(tmp_path / "o.txt")])
    assert code == 1
    assert not (tmp_path / "o.txt").exists()


def test_run_without_topology_fails(tmp_path: Path) -> None:
    assert main(["run", "--output", str(tmp_path / "o.txt")]) == 1


def test_validate_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    good = tmp_path / "good.yaml"
    good.write_text("protocol: linkstate\n", encoding="utf-8")
    assert main(["validate", "--config", str(good)]) == 0
    assert json.loads(capsys.readouterr().out) == {"ok": True}

    bad = tmp_path / "bad.yaml"
    bad.write_text("protocol: ospf\n", encoding="utf-8")
    assert main(["validate", "--config", str(bad)]) == 1
    assert json.loads(capsys.readouterr().out)["ok"] is False


@pytest.mark.parametrize("entry", [distvec, linkstate])
def test_simulator_commands_write_output_txt(
    entry, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    topo, messages, changes = _write_inputs(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert entry([str(topo), str(messages), str(changes)]) == 0
    text = (tmp_path / "output.txt").read_text(encoding="utf-8")
    assert text.count("----- At this point, change is applied") == 1


def test_simulator_command_usage(capsys: pytest.CaptureFixture[str]) -> None:
    assert distvec(["topo.txt"]) == 1
    assert capsys.readouterr().out.strip() == "Usage: ./distvec topofile messagefile changesfile"
