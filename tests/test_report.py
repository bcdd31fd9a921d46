# tests/test_report.py
from __future__ import annotations

from pathlib import Path

import pytest
pd = pytest.importorskip("pandas")

from resequencer.assembly import Fragment, assemble
from resequencer.utility.report import (
    ATTEMPT_COLS,
    attempts_frame,
    format_rebuilt_sequence,
    format_seed_pairs,
    format_segment_listing,
    write_attempts_tsv,
)

FRAGS = [
    Fragment("A", "GGAACGT"),
    Fragment("B", "CGTAA"),
    Fragment("C", "GAACGTTCGTA"),
]


def test_segment_listing_wraps_every_five_names():
    dna = Fragment(":".join(f"n{i}" for i in range(1, 8)), "ACGT")
    text = format_segment_listing(dna, ":", per_line=5)
    assert text.splitlines()[-2:] == [":n1:n2:n3:n4:n5", ":n6:n7"]
    assert "Ordered listing of FASTA segments" in text


def test_rebuilt_sequence_block():
    block = format_rebuilt_sequence(Fragment("x", "AAGCTTAGGCC"))
    assert "clip here" in block
    assert block.splitlines()[-1] == "AAGCTTAGGCC"

    wrapped = format_rebuilt_sequence(Fragment("x", "AAGCTTAGGCC"), line_width=4)
    assert wrapped.splitlines()[-3:] == ["AAGC", "TTAG", "GCC"]


def test_seed_pairs_listing():
    report = assemble(FRAGS)
    lines = format_seed_pairs(report.seeds, report.fragments).splitlines()
    assert lines[0] == "There are initially < 3 > seed pairs of DNA sequences"
    assert lines[1:] == ["0) [0,1] A -> B", "1) [0,2] A -> C", "2) [2,1] C -> B"]


def test_attempts_table(tmp_path: Path):
    report = assemble(FRAGS)
    df = attempts_frame(report)
    assert list(df.columns) == ATTEMPT_COLS
    assert df["outcome"].tolist() == ["dead-end", "success"]
    assert df["extension"].tolist() == ["B", "C"]

    out = write_attempts_tsv(report, tmp_path / "diag" / "attempts.tsv")
    back = pd.read_csv(out, sep="\t")
    assert back["seed_b"].tolist() == [1, 2]


def test_attempts_table_empty_on_no_seeds():
    report = assemble([Fragment("a", "AAAA"), Fragment("c", "CCCC")])
    df = attempts_frame(report)
    assert df.empty
    assert list(df.columns) == ATTEMPT_COLS
