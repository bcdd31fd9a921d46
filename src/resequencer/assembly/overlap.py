# src/resequencer/assembly/overlap.py
"""
Suffix/prefix overlap matcher.

``match(base, extension)`` tries the longest candidate overlap first: the
extension is clipped by ``t`` characters from its right end, for
``t = 1 .. half - 1`` with ``half = (len(extension) + 1) // 2``. The clip is
therefore always longer than half of the extension and never the whole of it.

A clip is accepted only when its *first* occurrence in ``base`` sits exactly
at the tail of ``base``. If the clip also appears earlier in ``base`` that
trim length is rejected and the next, shorter clip is tried. Passing
``leftmost_only=False`` drops that restriction and accepts any clip that is a
suffix of ``base``.
"""
from __future__ import annotations

import logging

from resequencer.assembly.models import DEFAULT_SEPARATOR, Fragment

L = logging.getLogger(__name__)

__all__ = ["overlap_length", "match"]


def _is_tail(base_seq: str, clip: str, leftmost_only: bool) -> bool:
    offset = len(base_seq) - len(clip)
    if offset < 0 or base_seq[offset:] != clip:
        return False
    if leftmost_only and offset > 0:
        # an earlier copy must end at or before base_seq[-2]
        return clip not in base_seq[: len(base_seq) - 1]
    return True


def overlap_length(base_seq: str, ext_seq: str, *, leftmost_only: bool = True) -> int:
    """Length of the accepted overlap, or 0 when the pair does not splice."""
    lenb = len(ext_seq)
    half = (lenb + 1) // 2
    for t in range(1, half):
        clip = ext_seq[: lenb - t]
        if _is_tail(base_seq, clip, leftmost_only):
            return len(clip)
    return 0


def match(
    base: Fragment,
    extension: Fragment,
    *,
    separator: str = DEFAULT_SEPARATOR,
    leftmost_only: bool = True,
) -> Fragment | None:
    """
    Splice *extension* onto the end of *base*.

    Returns the merged fragment, or ``None`` when no overlap covering more
    than half of the extension ends exactly at the tail of *base*.
    """
    k = overlap_length(base.sequence, extension.sequence, leftmost_only=leftmost_only)
    if not k:
        return None
    merged = Fragment(
        name=f"{base.name}{separator}{extension.name}",
        sequence=base.sequence + extension.sequence[k:],
    )
    L.debug("overlap %d nt: %s + %s", k, base.name, extension.name)
    return merged
