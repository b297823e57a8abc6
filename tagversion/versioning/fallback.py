"""
Fallback policy for empty tag histories and unmatched tags.
"""

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional, Sequence

from tagversion.constants import TagSelector

from .exceptions import NoMatchError
from .matcher import RawTagRecord
from .version import VersionRecord

if TYPE_CHECKING:
    from tagversion.config import Configuration

logger = logging.getLogger("tagversion")


def fallback_tag(prefix: str, fallback_value: str) -> str:
    """The tag standing in for a missing tag history."""
    if fallback_value.startswith(prefix):
        return fallback_value
    return f"{prefix}{fallback_value}"


def apply_fallback(
    config: "Configuration",
    records: Sequence[RawTagRecord],
    now: Optional[datetime] = None,
) -> List[RawTagRecord]:
    """
    Return the records to scan, synthesizing one when the history is empty.

    Explicit refs never fall back: an empty listing is returned unchanged and
    ends in a NoMatchError once matching finds nothing.
    """
    if records or config.tag_selector == TagSelector.EXPLICIT_REF:
        return list(records)

    logger.warning(
        f'Unable to find any tags, using fallback value "{config.fallback_value}".'
    )
    return [
        RawTagRecord(
            tag=fallback_tag(config.prefix, config.fallback_value),
            timestamp=now or datetime.now(timezone.utc),
            commit="",
            synthetic=True,
        )
    ]


def require_candidates(
    config: "Configuration", candidates: Sequence[VersionRecord]
) -> None:
    """
    Fail when no candidate matched.

    Raises:
        NoMatchError: If ``candidates`` is empty
    """
    if candidates:
        return
    if config.tag_selector == TagSelector.EXPLICIT_REF:
        raise NoMatchError("Unable to find a match on the given tag", ref=config.ref)
    raise NoMatchError("Unable to find a matching tag")
