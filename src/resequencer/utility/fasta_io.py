# src/resequencer/utility/fasta_io.py
"""
FASTA in/out for the resequencer.

``read_fragments`` is the only place the engine touches the file system on
the way in; ``write_fasta`` the only place on the way out.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from resequencer.assembly.models import (
    DEFAULT_SEPARATOR,
    Fragment,
    InputUnavailable,
    check_separator,
)

L = logging.getLogger(__name__)

PathLike = Union[str, Path]

__all__ = ["read_fragments", "write_fasta"]


def read_fragments(path: PathLike, *, separator: str = DEFAULT_SEPARATOR) -> list[Fragment]:
    """
    Load every record of *path* as a ``Fragment`` in file order.

    The fragment name is the full header line; anything before the first
    ``>`` (e.g. ``;`` comment lines) is dropped before parsing.
    """
    check_separator(separator)
    fasta = Path(path)
    try:
        text = fasta.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailable(f"Cannot read FASTA input {fasta}: {exc}") from exc

    start = text.find(">")
    text = text[start:] if start >= 0 else ""
    records = list(SeqIO.parse(io.StringIO(text), "fasta"))

    if not records:
        raise InputUnavailable(f"No FASTA records found in {fasta}")

    fragments: list[Fragment] = []
    for rec in records:
        name = rec.description or rec.id
        if separator in name:
            raise ValueError(
                f"FASTA header {name!r} in {fasta} contains the reserved separator {separator!r}"
            )
        fragments.append(Fragment(name=name, sequence=str(rec.seq)))

    L.info("Read [ %d ] DNA sequences from: %s", len(fragments), fasta)
    return fragments


def write_fasta(
    fragment: Fragment,
    out_fa: PathLike,
    *,
    separator: str = DEFAULT_SEPARATOR,
    record_id: str = "reconstructed",
) -> Path:
    """Write the reconstructed sequence as one FASTA record; returns the path."""
    out_fa = Path(out_fa)
    out_fa.parent.mkdir(parents=True, exist_ok=True)
    trail = fragment.trail(separator)
    rec = SeqRecord(
        Seq(fragment.sequence),
        id=record_id,
        description=f"segments={len(trail)} order={separator.join(trail)}",
    )
    SeqIO.write([rec], out_fa, "fasta")
    L.info("Reconstructed sequence (%d nt) written to %s", len(fragment), out_fa)
    return out_fa
