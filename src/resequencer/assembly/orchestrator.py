# src/resequencer/assembly/orchestrator.py
"""
Assembly orchestrator.

    report = assemble(fragments)
    if report.succeeded:
        print(report.result.sequence)

Seeds are tried in enumeration order; the first seed whose chain consumes
every fragment wins. Each attempt starts from a freshly built availability
vector, so attempts never share state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Sequence

from resequencer.assembly.chain import ChainSuccess, build_chain, initial_state
from resequencer.assembly.models import (
    DEFAULT_SEPARATOR,
    AssemblyFailed,
    Fragment,
    check_separator,
    SeedPair,
)
from resequencer.assembly.overlap import match
from resequencer.assembly.seeds import enumerate_seeds
import resequencer.utility.progress as pg

L = logging.getLogger(__name__)

__all__ = ["SeedAttempt", "AssemblyReport", "assemble"]


@dataclass(frozen=True)
class SeedAttempt:
    index: int
    seed: SeedPair
    succeeded: bool


@dataclass(frozen=True)
class AssemblyReport:
    fragments: tuple[Fragment, ...]
    seeds: tuple[SeedPair, ...]
    attempts: tuple[SeedAttempt, ...]
    result: Fragment | None = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None

    def require(self) -> Fragment:
        """Return the reconstructed fragment or raise ``AssemblyFailed``."""
        if self.result is None:
            raise AssemblyFailed(
                f"No complete chain from {len(self.seeds)} seed pair(s) over "
                f"{len(self.fragments)} fragment(s)",
                report=self,
            )
        return self.result


def _check_names(fragments: Sequence[Fragment], separator: str) -> None:
    check_separator(separator)
    for frag in fragments:
        if separator in frag.name:
            raise ValueError(
                f"Fragment name {frag.name!r} contains the reserved separator {separator!r}"
            )


def assemble(
    fragments: Sequence[Fragment],
    *,
    separator: str = DEFAULT_SEPARATOR,
    leftmost_only: bool = True,
    show_progress: bool = False,
) -> AssemblyReport:
    """Reconstruct one sequence that uses every fragment exactly once."""
    frags = tuple(fragments)
    _check_names(frags, separator)
    matcher = partial(match, separator=separator, leftmost_only=leftmost_only)

    seeds = tuple(enumerate_seeds(frags, matcher))
    attempts: list[SeedAttempt] = []
    result: Fragment | None = None

    if show_progress and seeds:
        with pg.stage_bar(len(seeds), desc="seeds", unit="seed") as bar:
            result = _try_seeds(frags, seeds, matcher, attempts, bar)
    else:
        result = _try_seeds(frags, seeds, matcher, attempts, None)

    if result is None:
        L.warning("Assembly failed: %d seed pair(s) all dead-ended", len(seeds))
    return AssemblyReport(
        fragments=frags, seeds=seeds, attempts=tuple(attempts), result=result
    )


def _try_seeds(frags, seeds, matcher, attempts, bar) -> Fragment | None:
    for p, seed in enumerate(seeds):
        start = matcher(frags[seed.a], frags[seed.b])
        state = initial_state(start, len(frags), (seed.a, seed.b))
        outcome = build_chain(state, frags, matcher)
        ok = isinstance(outcome, ChainSuccess)
        attempts.append(SeedAttempt(index=p, seed=seed, succeeded=ok))
        L.info(
            "Building from seed pair(%d): %s + %s ... %s",
            p, frags[seed.a].name, frags[seed.b].name, "success" if ok else "fail",
        )
        if bar is not None:
            bar.update(1)
        if ok:
            return outcome.dna
    return None
