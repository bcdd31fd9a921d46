"""Overlap-chaining reconstruction engine exposed for external callers."""

from .models import AssemblyFailed, ChainState, Fragment, InputUnavailable, SeedPair
from .overlap import match
from .seeds import enumerate_seeds
from .chain import ChainSuccess, DeadEnd, build_chain
from .orchestrator import AssemblyReport, SeedAttempt, assemble

__all__ = [
    "AssemblyFailed",
    "AssemblyReport",
    "ChainState",
    "ChainSuccess",
    "DeadEnd",
    "Fragment",
    "InputUnavailable",
    "SeedAttempt",
    "SeedPair",
    "assemble",
    "build_chain",
    "enumerate_seeds",
    "match",
]
