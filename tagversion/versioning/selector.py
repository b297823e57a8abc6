"""
Selection of the highest version among the candidates.
"""

from functools import reduce
from typing import Sequence

from .version import VersionRecord


def _higher(current: VersionRecord, other: VersionRecord) -> VersionRecord:
    # ties keep the record seen first
    if other.sort_key > current.sort_key:
        return other
    return current


def select_version(candidates: Sequence[VersionRecord]) -> VersionRecord:
    """
    Pick the highest version record.

    Records are compared by ``(major, minor, patch, build, suffix_number)``.
    Among equal versions the earliest record wins, so the order supplied by
    the tag source acts as the tie-break.

    Raises:
        ValueError: If there are no candidates
    """
    if not candidates:
        raise ValueError("Cannot select a version from an empty candidate list")
    return reduce(_higher, candidates)
