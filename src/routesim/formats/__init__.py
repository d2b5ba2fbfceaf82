"""Simulator input files and output rendering."""

from routesim.formats.inputs import (
    InputFormatError,
    load_changes_file,
    load_message_file,
    load_topology_file,
)
from routesim.formats.output import format_trace, render_rounds, write_output

__all__ = [
    "InputFormatError",
    "format_trace",
    "load_changes_file",
    "load_message_file",
    "load_topology_file",
    "render_rounds",
    "write_output",
]
