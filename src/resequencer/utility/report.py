# src/resequencer/utility/report.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from resequencer.assembly.models import DEFAULT_SEPARATOR, Fragment, SeedPair
from resequencer.assembly.orchestrator import AssemblyReport

L = logging.getLogger(__name__)

__all__ = [
    "format_rebuilt_sequence",
    "format_segment_listing",
    "format_seed_pairs",
    "attempts_frame",
    "write_attempts_tsv",
]

ATTEMPT_COLS = ["attempt", "seed_a", "seed_b", "base", "extension", "outcome"]


def format_rebuilt_sequence(fragment: Fragment, line_width: int = 0) -> str:
    """Printable block with a clip marker; line_width 0 keeps one long line."""
    seq = fragment.sequence
    if line_width and line_width > 0:
        seq = "\n".join(seq[i : i + line_width] for i in range(0, len(seq), line_width))
    return (
        "\nRebuilt DNA Sequence from FASTA Segments\n"
        "vv-------------clip here--------------vv\n"
        f"{seq}\n"
    )


def format_segment_listing(
    fragment: Fragment, separator: str = DEFAULT_SEPARATOR, per_line: int = 5
) -> str:
    """Ordered segment names, each prefixed by the separator, per_line to a row."""
    names = fragment.trail(separator)
    step = max(per_line, 1)
    rows = [
        "".join(separator + n for n in names[i : i + step])
        for i in range(0, len(names), step)
    ]
    return (
        "\nOrdered listing of FASTA segments\n"
        "---------------------------------\n"
        + "\n".join(rows) + "\n"
    )


def format_seed_pairs(seeds: Sequence[SeedPair], fragments: Sequence[Fragment]) -> str:
    lines = [f"There are initially < {len(seeds)} > seed pairs of DNA sequences"]
    for p, seed in enumerate(seeds):
        lines.append(f"{p}) [{seed.a},{seed.b}] {fragments[seed.a].name} -> {fragments[seed.b].name}")
    return "\n".join(lines) + "\n"


def attempts_frame(report: AssemblyReport) -> pd.DataFrame:
    """One row per attempted seed, in attempt order."""
    rows = [
        {
            "attempt": att.index,
            "seed_a": att.seed.a,
            "seed_b": att.seed.b,
            "base": report.fragments[att.seed.a].name,
            "extension": report.fragments[att.seed.b].name,
            "outcome": "success" if att.succeeded else "dead-end",
        }
        for att in report.attempts
    ]
    return pd.DataFrame(rows, columns=ATTEMPT_COLS)


def write_attempts_tsv(report: AssemblyReport, out_tsv: str | Path) -> Path:
    out_tsv = Path(out_tsv)
    out_tsv.parent.mkdir(parents=True, exist_ok=True)
    attempts_frame(report).to_csv(out_tsv, sep="\t", index=False)
    L.info("Seed attempts table → %s", out_tsv)
    return out_tsv
