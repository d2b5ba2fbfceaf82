from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from routesim.model import ChangeRecord, MessageQuery
from routesim.utils.io import read_lines

_log = logging.getLogger(__name__)


class InputFormatError(ValueError):
    def __init__(self, path: str | Path, lineno: int, line: str, reason: str) -> None:
        super().__init__(f"{path}:{lineno}: {reason}: {line!r}")
        self.path = str(path)
        self.lineno = lineno
        self.line = line
        self.reason = reason


def parse_link_line(line: str) -> Tuple[int, int, int]:
    parts = line.split()
    if len(parts) < 3:
        raise ValueError("expected 'from to cost'")
    return int(parts[0]), int(parts[1]), int(parts[2])


def parse_message_line(line: str) -> MessageQuery:
    parts = line.split(None, 2)
    if len(parts) < 2:
        raise ValueError("expected 'source destination text'")
    text = parts[2] if len(parts) > 2 else ""
    return MessageQuery(source=int(parts[0]), destination=int(parts[1]), text=text)


def _reject(path: str | Path, lineno: int, line: str, exc: Exception, strict: bool) -> None:
    if strict:
        raise InputFormatError(path, lineno, line, str(exc)) from exc
    _log.warning("skip malformed line %s:%d (%s): %r", path, lineno, exc, line)


def load_topology_file(path: str | Path, strict: bool = False) -> List[Tuple[int, int, int]]:
    links: List[Tuple[int, int, int]] = []
    for lineno, line in enumerate(read_lines(path), start=1):
        if not line.strip():
            continue
        try:
            links.append(parse_link_line(line))
        except ValueError as exc:
            _reject(path, lineno, line, exc, strict)
    _log.debug("loaded %d link(s) from %s", len(links), path)
    return links


def load_changes_file(path: str | Path, strict: bool = False) -> List[ChangeRecord]:
    changes: List[ChangeRecord] = []
    for lineno, line in enumerate(read_lines(path), start=1):
        if not line.strip():
            continue
        try:
            u, v, cost = parse_link_line(line)
        except ValueError as exc:
            _reject(path, lineno, line, exc, strict)
            continue
        changes.append(ChangeRecord(from_id=u, to_id=v, cost=cost))
    _log.debug("loaded %d change(s) from %s", len(changes), path)
    return changes


def load_message_file(path: str | Path, strict: bool = False) -> List[MessageQuery]:
    queries: List[MessageQuery] = []
    for lineno, line in enumerate(read_lines(path), start=1):
        if not line.strip():
            continue
        try:
            queries.append(parse_message_line(line))
        except ValueError as exc:
            _reject(path, lineno, line, exc, strict)
    _log.debug("loaded %d message(s) from %s", len(queries), path)
    return queries
