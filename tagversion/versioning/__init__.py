"""
Versioning module for tagversion.

Derives a version from the tags of a repository:

1. **Pattern Compiler** (pattern.py): builds the tag pattern from the
   configured prefix/suffix literals or sub-patterns.
2. **Version Parser** (version.py): VersionRecord, one immutable record per
   matched tag, ordered by ``(major, minor, patch, build, suffix_number)``.
3. **Candidate Matcher** (matcher.py): scans every raw tag record and
   collects all matches.
4. **Version Selector** (selector.py): left-biased max reduction, the tag
   source order breaks ties.
5. **Increment Engine** (increment.py): pure auto-increment transform.
6. **Fallback Policy** (fallback.py): synthesizes a tag for empty histories,
   fails loudly when nothing matches.

``derive_version`` (pipeline.py) chains them. All errors derive from
TagVersionError (exceptions.py).
"""

from .exceptions import ConfigError, NoMatchError, TagSourceError, TagVersionError
from .fallback import apply_fallback, fallback_tag, require_candidates
from .increment import IncrementMode, build_tag, increment_version
from .matcher import RawTagRecord, match_candidates
from .pattern import TagPattern, compile_tag_pattern
from .pipeline import derive_version
from .selector import select_version
from .version import DerivedVersion, VersionRecord

__all__ = [
    "derive_version",
    # Components
    "compile_tag_pattern",
    "TagPattern",
    "VersionRecord",
    "DerivedVersion",
    "RawTagRecord",
    "match_candidates",
    "select_version",
    "IncrementMode",
    "increment_version",
    "build_tag",
    "apply_fallback",
    "fallback_tag",
    "require_candidates",
    # Exceptions
    "TagVersionError",
    "ConfigError",
    "TagSourceError",
    "NoMatchError",
]
