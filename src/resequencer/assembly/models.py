# src/resequencer/assembly/models.py
"""
Plain value types shared by the assembly engine.

Every value here is frozen: a merge or an extension step always builds a new
object, so two search branches can never see each other's state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from resequencer.assembly.orchestrator import AssemblyReport

DEFAULT_SEPARATOR = ":"


def check_separator(separator: str) -> str:
    """The name-trail separator must be exactly one character."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"Separator must be a single character, got {separator!r}")
    return separator


class InputUnavailable(RuntimeError):
    """Raised when the FASTA input cannot supply any fragments."""


class AssemblyFailed(RuntimeError):
    """Raised when no seed pair leads to a chain that consumes every fragment."""

    def __init__(self, message: str, report: "AssemblyReport | None" = None):
        super().__init__(message)
        self.report = report


@dataclass(frozen=True)
class Fragment:
    """One FASTA record, or several of them merged end-to-end."""

    name: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def trail(self, separator: str = DEFAULT_SEPARATOR) -> list[str]:
        """Original fragment names in assembly order."""
        return self.name.split(separator)


@dataclass(frozen=True)
class SeedPair:
    a: int  # base
    b: int  # extension

    def __post_init__(self):
        if self.a == self.b:
            raise ValueError(f"Seed pair cannot pair fragment {self.a} with itself")


@dataclass(frozen=True)
class ChainState:
    dna: Fragment
    availability: tuple[bool, ...] = field(default_factory=tuple)

    @property
    def remaining(self) -> int:
        return sum(self.availability)

    def extend(self, merged: Fragment, index: int) -> "ChainState":
        """Child state with *index* consumed; the parent is left untouched."""
        if not self.availability[index]:
            raise ValueError(f"Fragment {index} is already part of the chain")
        avail = list(self.availability)
        avail[index] = False
        return ChainState(dna=merged, availability=tuple(avail))
