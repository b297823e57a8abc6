"""
Version records parsed from repository tags.

A VersionRecord is built from a single match of the compiled tag pattern plus
the commit metadata supplied by the tag source. Records are immutable; the
increment engine produces a separate DerivedVersion instead of changing them.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class VersionRecord:
    """
    A version found in a tag.

    Attributes:
        tag: The full matched tag text
        prefix: Literal prefix text as matched (not the pattern)
        suffix: Literal suffix text as matched, None when the tag has no suffix
        major, minor, patch: Core version numbers
        build: Optional fourth component, 0 when absent
        suffix_number: Number trailing the suffix. Mirrors ``build`` when the
            suffix carries no explicit number, 0 without a suffix
        suffix_number_text: The suffix number as written in the tag, None when
            the tag spells out no number
        commit: Commit identifier, empty for synthesized records
        timestamp: When the tag (or its commit) was created
    """

    tag: str
    prefix: str
    major: int
    minor: int
    patch: int
    commit: str
    timestamp: datetime
    build: int = 0
    suffix: Optional[str] = None
    suffix_number: int = 0
    suffix_number_text: Optional[str] = None

    @classmethod
    def from_match(
        cls, match: re.Match[str], commit: str, timestamp: datetime
    ) -> "VersionRecord":
        """Parse a successful tag pattern match into a record."""
        groups = match.groupdict()

        build_text = groups.get("build")
        build = int(build_text) if build_text is not None else 0

        suffix = groups.get("suffix")
        suffix_number_text = groups.get("suffixNumber")
        if suffix_number_text is not None:
            suffix_number = int(suffix_number_text)
        elif suffix is not None:
            # an unnumbered suffix orders alongside numbered siblings by build
            suffix_number = build
        else:
            suffix_number = 0

        return cls(
            tag=match.group(0),
            prefix=groups["prefix"],
            major=int(groups["major"]),
            minor=int(groups["minor"]),
            patch=int(groups["patch"]),
            build=build,
            suffix=suffix,
            suffix_number=suffix_number,
            suffix_number_text=suffix_number_text,
            commit=commit,
            timestamp=timestamp,
        )

    @property
    def sort_key(self) -> Tuple[int, int, int, int, int]:
        """Total order of records, higher tuples are higher versions."""
        return (self.major, self.minor, self.patch, self.build, self.suffix_number)

    @property
    def version(self) -> str:
        """The version found in the tag, padded with a zero build."""
        return f"{self.major}.{self.minor}.{self.patch}.{self.build}"

    @property
    def suffix_text(self) -> str:
        """The suffix segment of the tag, including its number if present."""
        if self.suffix is None:
            return ""
        if self.suffix_number_text is not None:
            return f"{self.suffix}.{self.suffix_number_text}"
        return self.suffix

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class DerivedVersion:
    """
    The tag and version emitted by a run.

    ``found`` is the selected record; the remaining fields describe the tag
    to publish, which equals ``found`` when no increment was applied.
    """

    found: VersionRecord
    tag: str
    prefix: str
    suffix: str
    major: int
    minor: int
    patch: int
    build: int
    suffix_number: int
    incremented: bool = False

    @property
    def version(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}.{self.build}"

    @property
    def version_short(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def commit(self) -> str:
        return self.found.commit

    @property
    def timestamp(self) -> datetime:
        return self.found.timestamp
