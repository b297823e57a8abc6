"""
The version derivation pipeline.

Compiles the tag pattern, awaits the tag listing, applies the fallback
policy, selects the highest matching version and applies the increment mode.
"""

import logging
from typing import TYPE_CHECKING

from .fallback import apply_fallback, require_candidates
from .increment import increment_version
from .matcher import match_candidates
from .pattern import compile_tag_pattern
from .selector import select_version
from .version import DerivedVersion

if TYPE_CHECKING:
    from tagversion.config import Configuration
    from tagversion.core.interfaces import TagSource

logger = logging.getLogger("tagversion")


async def derive_version(config: "Configuration", source: "TagSource") -> DerivedVersion:
    """
    Derive the version (and next version) from the tags of ``source``.

    Raises:
        ConfigError: If the tag pattern cannot be built from ``config``
        TagSourceError: If the tags could not be listed
        NoMatchError: If no tag matched the pattern
    """
    pattern = compile_tag_pattern(config)

    records = await source.fetch(config.tag_selector, config.ref)
    logger.debug(f"Tag source returned {len(records)} tag(s)")

    records = apply_fallback(config, records)
    candidates = match_candidates(pattern, records)
    logger.debug(f"{len(candidates)} tag(s) matched the tag pattern")
    require_candidates(config, candidates)

    selected = select_version(candidates)
    return increment_version(
        selected,
        config.increment_mode,
        static_build_number=config.static_build_number,
        prefix=config.prefix,
        suffix=config.suffix,
    )
