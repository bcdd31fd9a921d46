# src/resequencer/assembly/chain.py
"""
Chain builder.

Starting from a chain state, repeatedly scan the still-available fragments in
index order and commit to the first one that splices onto the running
sequence. There is no backtracking: once an extension is taken the walk never
returns to try a sibling, so a later dead end fails the whole seed. Trying
other starting points is the orchestrator's job.

The result is a two-variant sum type, ``ChainSuccess | DeadEnd``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from resequencer.assembly.models import ChainState, Fragment
from resequencer.assembly.seeds import Matcher
from resequencer.assembly.overlap import match

L = logging.getLogger(__name__)

__all__ = ["ChainSuccess", "DeadEnd", "ChainResult", "build_chain", "initial_state"]


@dataclass(frozen=True)
class ChainSuccess:
    state: ChainState

    @property
    def dna(self) -> Fragment:
        return self.state.dna


@dataclass(frozen=True)
class DeadEnd:
    state: ChainState  # the state no fragment could extend
    steps: int = 0


ChainResult = Union[ChainSuccess, DeadEnd]


def initial_state(dna: Fragment, n_fragments: int, used: Sequence[int]) -> ChainState:
    """All fragments available except the indices in *used*."""
    avail = [True] * n_fragments
    for idx in used:
        avail[idx] = False
    return ChainState(dna=dna, availability=tuple(avail))


def _next_extension(state: ChainState, fragments: Sequence[Fragment], matcher: Matcher):
    for i, free in enumerate(state.availability):
        if not free:
            continue
        merged = matcher(state.dna, fragments[i])
        if merged is not None:
            return i, merged
    return None


def build_chain(
    state: ChainState,
    fragments: Sequence[Fragment],
    matcher: Matcher = match,
) -> ChainResult:
    """Extend *state* until every fragment is consumed or none will splice."""
    if len(state.availability) != len(fragments):
        raise ValueError(
            f"Availability covers {len(state.availability)} fragments, expected {len(fragments)}"
        )
    steps = 0
    while state.remaining:
        found = _next_extension(state, fragments, matcher)
        if found is None:
            L.debug("dead end after %d step(s) at %s (%d left)", steps, state.dna.name, state.remaining)
            return DeadEnd(state=state, steps=steps)
        i, merged = found
        state = state.extend(merged, i)
        steps += 1
        L.debug("extended with [%d] %s -> %d nt", i, fragments[i].name, len(merged))
    return ChainSuccess(state=state)
