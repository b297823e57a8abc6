"""
Compilation of the tag matching pattern.

The pattern has the named groups ``prefix``, ``version``, ``major``,
``minor``, ``patch`` and ``build``, plus ``suffix`` and ``suffixNumber`` when
suffix matching is enabled. Conceptually::

    ^<prefix><major>.<minor>.<patch>(.<build>)?(-<suffix>(.<suffixNumber>)?)?$
"""

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .exceptions import ConfigError

if TYPE_CHECKING:
    from tagversion.config import Configuration

logger = logging.getLogger("tagversion")

VERSION_PATTERN = (
    r"(?P<version>(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)(?:\.(?P<build>\d+))?)"
)


@dataclass(frozen=True)
class TagPattern:
    """A compiled tag pattern."""

    regex: "re.Pattern[str]"

    def match(self, tag: str) -> Optional["re.Match[str]"]:
        return self.regex.fullmatch(tag)

    @property
    def pattern(self) -> str:
        return self.regex.pattern


def _check_sub_pattern(name: str, sub_pattern: str, literal: str) -> None:
    try:
        matched = re.fullmatch(sub_pattern, literal)
    except re.error as e:
        raise ConfigError(f"invalid {name} pattern", f"'{sub_pattern}': {e}") from e
    if matched is None:
        raise ConfigError(
            f"{name} pattern mismatch",
            f"'{sub_pattern}' must match the {name} '{literal}'",
        )


def compile_tag_pattern(config: "Configuration") -> TagPattern:
    """
    Compile the tag pattern for a configuration.

    Raises:
        ConfigError: If a prefix or suffix pattern does not match its literal
            counterpart, or cannot be compiled
    """
    if config.prefix_pattern:
        _check_sub_pattern("prefix", config.prefix_pattern, config.prefix)
        prefix_alt = config.prefix_pattern
    else:
        prefix_alt = re.escape(config.prefix)

    pattern = f"^(?P<prefix>{prefix_alt}){VERSION_PATTERN}"

    if config.suffix_enabled:
        if config.suffix_pattern:
            _check_sub_pattern("suffix", config.suffix_pattern, config.suffix or "")
            suffix_alt = config.suffix_pattern
        else:
            suffix_alt = re.escape(config.suffix or "")
        pattern += rf"(?:-(?P<suffix>{suffix_alt})(?:\.(?P<suffixNumber>\d+))?)?"

    pattern += "$"

    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise ConfigError("invalid tag pattern", f"'{pattern}': {e}") from e

    logger.debug(f"Tag pattern: {pattern}")
    return TagPattern(regex=regex)
