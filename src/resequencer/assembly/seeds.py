# src/resequencer/assembly/seeds.py
from __future__ import annotations

import logging
from typing import Callable, Sequence

from resequencer.assembly.models import Fragment, SeedPair
from resequencer.assembly.overlap import match

L = logging.getLogger(__name__)

Matcher = Callable[[Fragment, Fragment], "Fragment | None"]


def enumerate_seeds(fragments: Sequence[Fragment], matcher: Matcher = match) -> list[SeedPair]:
    """
    Every ordered pair ``(a, b)``, ``a != b``, whose fragments splice as
    base + extension. Outer loop over ``a``, inner over ``b``, both ascending;
    ``(a, b)`` and ``(b, a)`` are tested independently.
    """
    seeds: list[SeedPair] = []
    for n, base in enumerate(fragments):
        for i, ext in enumerate(fragments):
            if i == n:
                continue
            if matcher(base, ext) is not None:
                seeds.append(SeedPair(a=n, b=i))
    L.info("%d seed pair(s) from %d fragment(s)", len(seeds), len(fragments))
    return seeds
