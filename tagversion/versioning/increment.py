"""
Auto-increment of a selected version.

``increment_version`` is a pure function: it maps the selected record, the
increment mode and the optional static build number to a new DerivedVersion
without touching the record.
"""

from enum import Enum
from typing import Optional, Tuple

from .version import DerivedVersion, VersionRecord


class IncrementMode(str, Enum):
    """Which version component advances when computing the next version."""

    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    BUILD = "build"
    SUFFIX = "suffix"

    @classmethod
    def auto_increment_values(cls) -> Tuple[str, ...]:
        """The values accepted by the ``increment`` option."""
        return tuple(mode.value for mode in cls if mode is not cls.NONE)


def _next_number(current: int, static_build_number: Optional[int]) -> int:
    if static_build_number is not None:
        return static_build_number
    return current + 1


def build_tag(
    prefix: str,
    major: int,
    minor: int,
    patch: int,
    build: int,
    suffix: str,
    include_build: bool = True,
) -> str:
    """Assemble a tag from its components."""
    tag = f"{prefix}{major}.{minor}.{patch}"
    if include_build and build > 0:
        tag += f".{build}"
    if suffix:
        tag += f"-{suffix}"
    return tag


def increment_version(
    record: VersionRecord,
    mode: IncrementMode,
    static_build_number: Optional[int] = None,
    prefix: str = "",
    suffix: Optional[str] = None,
) -> DerivedVersion:
    """
    Apply an auto-increment mode to the selected record.

    Args:
        record: The selected version record
        mode: The increment mode
        static_build_number: Replaces the computed build (``build`` mode) or
            suffix number (``suffix`` mode) when set
        prefix: Configured prefix, used for the new tag
        suffix: Configured suffix, used for the new tag

    Returns:
        The next version. With ``IncrementMode.NONE`` this is the record's own
        tag and numbers.
    """
    if mode is IncrementMode.NONE:
        return DerivedVersion(
            found=record,
            tag=record.tag,
            prefix=record.prefix,
            suffix=record.suffix_text,
            major=record.major,
            minor=record.minor,
            patch=record.patch,
            build=record.build,
            suffix_number=record.suffix_number,
        )

    major, minor, patch = record.major, record.minor, record.patch
    build, suffix_number = record.build, record.suffix_number

    if mode is IncrementMode.MAJOR:
        major, minor, patch, build = major + 1, 0, 0, 0
    elif mode is IncrementMode.MINOR:
        minor, patch, build = minor + 1, 0, 0
    elif mode is IncrementMode.PATCH:
        patch, build = patch + 1, 0
    elif mode is IncrementMode.BUILD:
        build = _next_number(build, static_build_number)
        suffix_number = 0
    elif mode is IncrementMode.SUFFIX:
        suffix_number = _next_number(suffix_number, static_build_number)
        build = suffix_number
    else:
        raise ValueError(f"Unknown increment mode: {mode}")

    suffix_text = suffix or ""
    if suffix_text and mode is IncrementMode.SUFFIX:
        suffix_text = f"{suffix_text}.{suffix_number}"

    tag = build_tag(
        prefix,
        major,
        minor,
        patch,
        build,
        suffix_text,
        include_build=mode is not IncrementMode.SUFFIX,
    )

    return DerivedVersion(
        found=record,
        tag=tag,
        prefix=prefix,
        suffix=suffix_text,
        major=major,
        minor=minor,
        patch=patch,
        build=build,
        suffix_number=suffix_number,
        incremented=True,
    )
