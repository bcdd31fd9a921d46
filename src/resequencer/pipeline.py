"""
resequencer.pipeline
Thin wrappers around the CLI stages.
Return an int exit-code (0 = success) & raise on fatal errors.
"""

from __future__ import annotations
from functools import partial
from pathlib import Path
from typing import TextIO, Union
import logging
import sys

from resequencer.assembly import assemble, enumerate_seeds, match
from resequencer.assembly.models import check_separator
from resequencer.assembly.orchestrator import AssemblyReport
from resequencer.utility.fasta_io import read_fragments, write_fasta
from resequencer.utility.report import (
    format_rebuilt_sequence,
    format_seed_pairs,
    format_segment_listing,
    write_attempts_tsv,
)
from resequencer.utility.utils import load_config

__all__ = ["run_assemble", "run_seeds", "assemble_file"]

PathLike = Union[str, Path]
L = logging.getLogger(__name__)


def _assembly_opts(cfg: dict, separator: str | None) -> tuple[str, bool]:
    asm = cfg.get("assembly", {})
    sep = check_separator(separator or asm.get("separator", ":"))
    return sep, bool(asm.get("leftmost_only", True))


# ───────────────────────────────────────────────────────── assembly
def assemble_file(
    input_fasta: PathLike,
    *,
    cfg: dict | None = None,
    separator: str | None = None,
    show_progress: bool = False,
) -> AssemblyReport:
    """Read *input_fasta* and run the seed search; a failed search is reported, not raised."""
    cfg = cfg if cfg is not None else load_config()
    sep, leftmost_only = _assembly_opts(cfg, separator)
    fragments = read_fragments(input_fasta, separator=sep)
    return assemble(
        fragments,
        separator=sep,
        leftmost_only=leftmost_only,
        show_progress=show_progress,
    )


def run_assemble(
    input_fasta: PathLike,
    output_fasta: PathLike | None = None,
    *,
    attempts_tsv: PathLike | None = None,
    verbose: bool = False,
    separator: str | None = None,
    cfg: dict | None = None,
    stream: TextIO | None = None,
) -> int:
    """Rebuild one sequence from *input_fasta*.

    Prints the rebuilt sequence to *stream* (stdout by default); with
    ``verbose`` the seed list and the ordered segment listing go there too.
    *output_fasta* additionally receives the sequence as FASTA, and
    *attempts_tsv* the per-seed outcome table (also on failure).

    Returns 0 on success; raises ``AssemblyFailed`` when no seed completes.
    """
    out = stream or sys.stdout
    cfg = cfg if cfg is not None else load_config()
    sep, _ = _assembly_opts(cfg, separator)
    report = assemble_file(input_fasta, cfg=cfg, separator=sep, show_progress=True)

    if verbose:
        out.write(format_seed_pairs(report.seeds, report.fragments))
    if attempts_tsv:
        write_attempts_tsv(report, attempts_tsv)

    dna = report.require()

    out_cfg = cfg.get("output", {})
    if verbose:
        out.write(format_segment_listing(dna, sep, per_line=int(out_cfg.get("names_per_line", 5))))
    out.write(format_rebuilt_sequence(dna, line_width=int(out_cfg.get("line_width", 0))))

    if output_fasta:
        write_fasta(dna, output_fasta, separator=sep)
    L.info("Assembly finished: %d fragments → %d nt", len(report.fragments), len(dna))
    return 0


# ───────────────────────────────────────────────────────── seeds
def run_seeds(
    input_fasta: PathLike,
    *,
    separator: str | None = None,
    cfg: dict | None = None,
    stream: TextIO | None = None,
) -> int:
    """Print the enumerated seed pairs for *input_fasta*."""
    out = stream or sys.stdout
    cfg = cfg if cfg is not None else load_config()
    sep, leftmost_only = _assembly_opts(cfg, separator)
    fragments = read_fragments(input_fasta, separator=sep)
    seeds = enumerate_seeds(fragments, partial(match, separator=sep, leftmost_only=leftmost_only))
    out.write(format_seed_pairs(seeds, fragments))
    return 0
