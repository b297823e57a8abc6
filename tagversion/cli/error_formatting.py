"""Error formatting for CLI output."""

import click

from tagversion.versioning.exceptions import (
    ConfigError,
    NoMatchError,
    TagSourceError,
    TagVersionError,
)

_CONFIG_HINTS = {
    "prefix pattern mismatch": 'Input "prefixRegex" must match input "prefix" if set.',
    "suffix pattern mismatch": 'Input "suffixRegex" must match input "suffix" if set.',
}


def pretty_print_error(error: TagVersionError) -> str:
    """Format a TagVersionError to present useful information to the user.

    Example output:
        [ERROR] An error occurred while trying to find the tags
          fatal: not a git repository (or any of the parent directories): .git
    """
    message_parts = [click.style("[ERROR]", fg="red", bold=True), f" {error}"]

    if isinstance(error, ConfigError):
        hint = _CONFIG_HINTS.get(error.reason)
        if hint:
            message_parts.append(f"\n  {hint}")
    elif isinstance(error, TagSourceError) and error.stderr:
        for line in error.stderr.splitlines():
            message_parts.append(f"\n  {line}")
    elif isinstance(error, NoMatchError) and error.ref is None:
        message_parts.append(
            "\n  Check that the prefix/suffix options describe the existing tags."
        )

    return "".join(message_parts)
