"""Configuration of a tag version run.

Options come from three layers, highest precedence first: explicit options
(command line or ``INPUT_*`` environment variables), the ``[tagversion]``
section of an optional INI file, and the built-in defaults.
"""

import configparser
import logging
import os
import platform
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from tagversion.constants import (
    APP_NAME,
    DEFAULT_FALLBACK,
    DEFAULT_PREFIX,
    OPTION_KEYS,
    TagSelector,
)
from tagversion.versioning.exceptions import ConfigError
from tagversion.versioning.increment import IncrementMode

logger = logging.getLogger(APP_NAME)

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/tagversion").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like, read-only accessor for INI configuration files.

    Missing files, sections and keys are handled gracefully. A file that cannot
    be parsed raises ConfigError.

    Usage:
        config = ConfigAccessor()
        value = config.get('tagversion', 'prefix', default='v')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = Path(config_path)

        self.config = configparser.ConfigParser()
        # option keys are camelCase, keep them as written
        self.config.optionxform = str  # type: ignore[assignment,method-assign]
        if self.config_path.exists():
            try:
                self.config.read(self.config_path)
            except configparser.Error as e:
                raise ConfigError(
                    "invalid config file", f"{self.config_path}: {e}"
                ) from e

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def sections(self) -> list:
        return self.config.sections()

    def options(self, section: str) -> list:
        """
        Get all options (keys) in a section.

        Returns:
            List of options in the section or empty list if section doesn't exist
        """
        try:
            return self.config.options(section)
        except configparser.NoSectionError:
            return []


def load_options(
    overrides: Optional[Mapping[str, Any]] = None,
    config_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Merge the option mapping from the config file and explicit overrides.

    Overrides whose value is None are treated as unset and do not shadow the
    file. Unknown keys in the file are ignored with a warning.
    """
    accessor = ConfigAccessor(config_path)
    options: Dict[str, Any] = {}

    for key in accessor.options(APP_NAME):
        if key not in OPTION_KEYS:
            logger.warning(
                f"Ignoring unknown option '{key}' in {accessor.config_path}"
            )
            continue
        options[key] = accessor.get(APP_NAME, key)

    for key, value in (overrides or {}).items():
        if value is not None:
            options[key] = value

    return options


def parse_increment_mode(value: Any) -> IncrementMode:
    """
    Parse the ``increment`` option.

    Absent, empty and ``"false"`` values disable the increment. Anything else
    must name one of the increment modes, case-insensitively.
    """
    if value is None or value is False:
        return IncrementMode.NONE

    text = str(value).strip().lower()
    if text in ("", "false"):
        return IncrementMode.NONE

    if text not in IncrementMode.auto_increment_values():
        valid = '", "'.join(IncrementMode.auto_increment_values())
        raise ConfigError(
            "invalid increment mode",
            f'"{value}" supplied to input "increment". Valid values are "{valid}"',
        )
    return IncrementMode(text)


def parse_build_number(value: Any) -> Optional[int]:
    """Parse the static build number, ignoring values that are not integers."""
    if value is None or str(value).strip() == "":
        return None

    try:
        number = int(str(value).strip(), 10)
    except ValueError:
        logger.warning(f"Ignoring build number '{value}': not an integer")
        return None

    if number < 0:
        logger.warning(f"Ignoring build number '{value}': must not be negative")
        return None
    return number


def _is_true(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return value == "true"


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text else None


class Configuration(BaseModel):
    """Immutable configuration of one version derivation run."""

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(DEFAULT_PREFIX, description="Literal tag prefix")
    prefix_pattern: Optional[str] = Field(
        None, description="Regex sub-pattern matching prefixes"
    )
    suffix: Optional[str] = Field(None, description="Literal tag suffix")
    suffix_pattern: Optional[str] = Field(
        None, description="Regex sub-pattern matching suffixes"
    )
    fallback_value: str = Field(
        DEFAULT_FALLBACK, description="Seed version when no tags exist"
    )
    increment_mode: IncrementMode = Field(
        IncrementMode.NONE, description="Auto-increment policy"
    )
    static_build_number: Optional[int] = Field(
        None, ge=0, description="Overrides the computed build/suffix number"
    )
    tag_selector: TagSelector = Field(
        TagSelector.ALL_TAGS, description="Which tags to scan"
    )
    ref: Optional[str] = Field(None, description="Explicit tag or ref to resolve")

    @model_validator(mode="after")
    def validate_ref(self) -> "Configuration":
        if self.tag_selector == TagSelector.EXPLICIT_REF and not self.ref:
            raise ValueError("an explicit ref selector requires a ref")
        return self

    @property
    def suffix_enabled(self) -> bool:
        """Whether tags may carry a suffix segment."""
        return bool(self.suffix or self.suffix_pattern)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "Configuration":
        """
        Build the configuration from a flat, environment-shaped option mapping.

        Recognized keys: fallback, prefix, prefixRegex, suffix, suffixRegex,
        tag, branch, increment and buildNumber.

        Raises:
            ConfigError: If the increment mode is unknown or the options are
                otherwise invalid.
        """
        ref = _optional_text(options.get("tag"))
        if ref:
            selector = TagSelector.EXPLICIT_REF
        elif _is_true(options.get("branch", False)):
            selector = TagSelector.PER_BRANCH
        else:
            selector = TagSelector.ALL_TAGS

        prefix = options.get("prefix")
        fallback = _optional_text(options.get("fallback"))

        try:
            return cls(
                prefix=DEFAULT_PREFIX if prefix is None else str(prefix),
                prefix_pattern=_optional_text(options.get("prefixRegex")),
                suffix=_optional_text(options.get("suffix")),
                suffix_pattern=_optional_text(options.get("suffixRegex")),
                fallback_value=fallback or DEFAULT_FALLBACK,
                increment_mode=parse_increment_mode(options.get("increment")),
                static_build_number=parse_build_number(options.get("buildNumber")),
                tag_selector=selector,
                ref=ref,
            )
        except ValidationError as e:
            raise ConfigError("invalid configuration", str(e)) from e
