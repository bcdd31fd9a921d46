# tests/test_orchestrator.py
from __future__ import annotations

from contextlib import contextmanager

import pytest

from resequencer.assembly import AssemblyFailed, Fragment, SeedPair, assemble
import resequencer.utility.progress as pg

# --- Test Suite Summary ---
# End-to-end behaviour of the seed loop: the first seed whose chain consumes
# every fragment wins, failures are reported with the full attempt history,
# and repeated runs are identical.
# --------------------------

S123 = [
    Fragment("s1", "AAGCTTA"),
    Fragment("s2", "CTTAGG"),
    Fragment("s3", "AGGCC"),
]

A = Fragment("A", "GGAACGT")
B = Fragment("B", "CGTAA")
C = Fragment("C", "GAACGTTCGTA")


def test_three_fragments_chain_end_to_end():
    report = assemble(S123)

    assert report.succeeded
    assert report.result.sequence == "AAGCTTAGGCC"
    assert report.result.name == "s1:s2:s3"
    assert report.seeds == (SeedPair(0, 1), SeedPair(1, 2))
    assert [(a.index, a.succeeded) for a in report.attempts] == [(0, True)]


def test_half_overlap_is_not_enough_to_chain():
    # s1/s2 share exactly half of s2 ("CTT"), so only s2+s3 seeds and it dead-ends
    frags = [Fragment("s1", "AAGCTT"), *S123[1:]]
    report = assemble(frags)

    assert not report.succeeded
    assert report.seeds == (SeedPair(1, 2),)
    assert [a.succeeded for a in report.attempts] == [False]


def test_next_seed_recovers_from_a_committed_dead_end():
    report = assemble([A, B, C])

    assert [(a.seed, a.succeeded) for a in report.attempts] == [
        (SeedPair(0, 1), False),
        (SeedPair(0, 2), True),
    ]
    assert report.result == Fragment("A:C:B", "GGAACGTTCGTAA")


def test_no_overlaps_fails_without_attempts():
    frags = [Fragment("a", "AAAA"), Fragment("c", "CCCC"), Fragment("g", "GGGG")]
    report = assemble(frags)

    assert not report.succeeded
    assert report.seeds == ()
    assert not any(a.succeeded for a in report.attempts)
    with pytest.raises(AssemblyFailed) as excinfo:
        report.require()
    assert excinfo.value.report is report


def test_single_fragment_has_no_seed_and_fails():
    assert not assemble([Fragment("only", "ACGTACGT")]).succeeded


def test_assemble_is_repeatable_and_leaves_input_alone():
    frags = list(S123)
    snapshot = list(frags)
    first = assemble(frags)
    second = assemble(frags)

    assert first == second
    assert frags == snapshot


def test_reserved_separator_in_name_is_rejected():
    with pytest.raises(ValueError, match="reserved separator"):
        assemble([Fragment("bad:name", "ACGT"), Fragment("ok", "CGTA")])


def test_custom_separator_builds_trail():
    frags = [Fragment("a:1", "AAGCTTA"), Fragment("a:2", "CTTAGG")]
    report = assemble(frags, separator="|")
    assert report.result.name == "a:1|a:2"


def test_leftmost_only_switch_reaches_the_matcher():
    frags = [Fragment("b", "ACGTTACG"), Fragment("e", "ACGA")]
    assert not assemble(frags).succeeded
    relaxed = assemble(frags, leftmost_only=False)
    assert relaxed.result == Fragment("b:e", "ACGTTACGA")


def test_progress_ticks_once_per_attempt(monkeypatch):
    seen = {}

    class DummyBar:
        def __init__(self, total):
            self.total = total
            self.n = 0
        def update(self, inc=1):
            self.n += inc

    @contextmanager
    def fake_stage_bar(total, *a, **kw):
        seen["bar"] = DummyBar(total)
        yield seen["bar"]

    monkeypatch.setattr(pg, "stage_bar", fake_stage_bar)
    assemble([A, B, C], show_progress=True)

    bar = seen["bar"]
    assert bar.total == 3   # three seeds enumerated
    assert bar.n == 2       # stopped after the second succeeded


@pytest.mark.parametrize("sep", ["", "::"])
def test_separator_must_be_one_character(sep):
    with pytest.raises(ValueError, match="single character"):
        assemble(S123, separator=sep)
