"""Tests for CLI error formatting."""

import click
import pytest

from tagversion.cli.error_formatting import pretty_print_error
from tagversion.versioning import ConfigError, NoMatchError, TagSourceError


@pytest.mark.short
class TestPrettyPrintError:
    def test_config_error_with_hint(self):
        error = ConfigError("prefix pattern mismatch", "'r' must match the prefix 'v'")

        message = click.unstyle(pretty_print_error(error))

        assert message.startswith("[ERROR] prefix pattern mismatch")
        assert 'Input "prefixRegex" must match input "prefix" if set.' in message

    def test_tag_source_error_shows_git_output(self):
        error = TagSourceError(
            "An error occurred while trying to find the tags",
            exit_code=128,
            stderr="fatal: not a git repository\nhint: run git init",
        )

        message = click.unstyle(pretty_print_error(error))

        assert "\n  fatal: not a git repository" in message
        assert "\n  hint: run git init" in message

    def test_no_match_error(self):
        message = click.unstyle(pretty_print_error(NoMatchError()))

        assert "Unable to find a matching tag" in message
        assert "prefix/suffix" in message

    def test_no_match_error_for_ref(self):
        message = click.unstyle(pretty_print_error(NoMatchError(ref="v9.9.9")))

        assert "for 'v9.9.9'" in message
        assert "prefix/suffix" not in message
