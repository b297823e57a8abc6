"""
Scanning of raw tag records against the compiled tag pattern.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from .pattern import TagPattern
from .version import VersionRecord

logger = logging.getLogger("tagversion")


@dataclass(frozen=True)
class RawTagRecord:
    """
    A tag as listed by the tag source.

    ``timestamp`` and ``commit`` are None when the tag could not be correlated
    with commit metadata. Synthetic records stand in for a missing tag history
    and carry an empty commit.
    """

    tag: str
    timestamp: Optional[datetime] = None
    commit: Optional[str] = None
    synthetic: bool = False

    @property
    def is_correlated(self) -> bool:
        """Whether the record carries the metadata needed to be a candidate."""
        if self.synthetic:
            return self.timestamp is not None
        return self.timestamp is not None and bool((self.commit or "").strip())


def match_candidates(
    pattern: TagPattern, records: Iterable[RawTagRecord]
) -> List[VersionRecord]:
    """
    Collect a version record for every raw record matching the pattern.

    All records are scanned, in order; uncorrelated records are skipped.
    """
    candidates: List[VersionRecord] = []

    for record in records:
        if not record.is_correlated:
            logger.debug(f"Skipping tag '{record.tag}': no commit metadata")
            continue

        tag = record.tag.strip()
        match = pattern.match(tag)
        if match is None:
            logger.debug(f"Tag '{tag}' does not match the tag pattern")
            continue

        candidates.append(
            VersionRecord.from_match(
                match,
                commit=(record.commit or "").strip(),
                timestamp=record.timestamp,  # type: ignore[arg-type]
            )
        )

    return candidates
