# src/resequencer/utility/progress.py

from __future__ import annotations
from contextlib import contextmanager
from tqdm import tqdm
from typing import Iterator


@contextmanager
def stage_bar(total: int, *, desc: str = "", unit: str = "") -> Iterator[tqdm]:
    """
    Context manager yielding a tqdm bar on stderr; the caller ticks it with
    ``bar.update()`` and the bar is closed (and cleared) when the block exits.
    """
    bar = tqdm(total=total, desc=desc, unit=unit, leave=False, ncols=80,
               bar_format=("{l_bar}{bar}| " "{n_fmt}/{total_fmt} " "[elapsed: {elapsed}]"))
    try:
        yield bar
    finally:
        bar.close()
