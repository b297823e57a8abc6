from enum import Enum

APP_NAME = "tagversion"

DEFAULT_PREFIX = "v"
DEFAULT_FALLBACK = "0.0.0"

# Keys of the flat option mapping, as exposed to build pipelines
OPTION_KEYS = (
    "fallback",
    "prefix",
    "prefixRegex",
    "suffix",
    "suffixRegex",
    "tag",
    "branch",
    "increment",
    "buildNumber",
)

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class TagSelector(str, Enum):
    """Which tags the tag source should list."""

    EXPLICIT_REF = "explicit_ref"
    PER_BRANCH = "per_branch"
    ALL_TAGS = "all_tags"
