"""Command-line options of the code generator."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from .formatter import make_c_name


@dataclass
class GenOptions:
    """Parsed generator options; a value of None means the option was not given."""

    dbc: Optional[str] = None
    outdir: Optional[str] = None
    drvname: Optional[str] = None
    is_rewrite: bool = False
    is_nodeutils: bool = False
    is_noconfig: bool = False
    is_nocanmon: bool = False
    is_nofmon: bool = False
    is_help: bool = False


_FLAGS = {
    "-rw": "is_rewrite",
    "-nodeutils": "is_nodeutils",
    "-help": "is_help",
    "-noinc": "is_nocanmon",
    "-noconfig": "is_noconfig",
    "-nofmon": "is_nofmon",
}


def _collect_pairs(argv: Sequence[str]) -> list[tuple[str, str]]:
    """Pair every '-key' with the argument after it unless that is a key too."""
    pairs: list[list[str]] = []
    awaiting_value = False
    for arg in argv:
        if arg.startswith("-"):
            pairs.append([arg, ""])
            awaiting_value = True
        elif awaiting_value:
            pairs[-1][1] = arg
            awaiting_value = False
    return [(key, value) for key, value in pairs]


def parse_options(argv: Optional[Sequence[str]] = None) -> GenOptions:
    """Parse an argument vector (program name included) into GenOptions."""
    if argv is None:
        argv = sys.argv
    opts = GenOptions()
    for key, value in _collect_pairs(argv):
        if key == "-dbc":
            opts.dbc = value
        elif key == "-out":
            opts.outdir = value
        elif key == "-drvname":
            name = make_c_name(value)
            opts.drvname = name or None
        elif key in _FLAGS:
            setattr(opts, _FLAGS[key], True)
    return opts