"""tagversion CLI"""

import asyncio
import os
from pathlib import Path

import click

from tagversion import __version__
from tagversion.config import Configuration, load_options
from tagversion.git import GitTagSource
from tagversion.output import (
    FileOutputSink,
    StreamOutputSink,
    format_outputs,
    write_outputs,
)
from tagversion.versioning import DerivedVersion, TagVersionError, derive_version

from .error_formatting import pretty_print_error
from .utils.logging import configure_logging, logger


def _set_debug(ctx, param, value: bool):
    """Callback function for debug flag"""
    configure_logging(value)
    return value


def report(derived: DerivedVersion) -> None:
    """Log the found (and next) tag and version."""
    logger.info(click.style(f"Found tag: {derived.found.tag}", fg="green"))
    logger.info(click.style(f"Found version: {derived.found.version}", fg="green"))
    if derived.incremented:
        logger.info(click.style(f"Next tag: {derived.tag}", fg="green"))
        logger.info(click.style(f"Next version: {derived.version}", fg="green"))


@click.command(name="tagversion")
@click.version_option(__version__, prog_name="tagversion")
@click.option(
    "--debug/--no-debug",
    is_eager=True,
    expose_value=False,
    callback=_set_debug,
    help="Enable debug mode",
)
@click.option(
    "--fallback",
    envvar="INPUT_FALLBACK",
    help="Version used when no tags exist. May include the prefix. [default: 0.0.0]",
)
@click.option(
    "--prefix",
    envvar="INPUT_PREFIX",
    help="Prefix to look for and to set for new tags. [default: v]",
)
@click.option(
    "--prefix-regex",
    envvar="INPUT_PREFIXREGEX",
    help="Regex sub-pattern matching several prefixes. Must match --prefix.",
)
@click.option(
    "--suffix",
    envvar="INPUT_SUFFIX",
    help="Suffix to look for and to set for new tags. Omit to ignore suffixes.",
)
@click.option(
    "--suffix-regex",
    envvar="INPUT_SUFFIXREGEX",
    help="Regex sub-pattern matching several suffixes. Must match --suffix.",
)
@click.option(
    "--tag",
    envvar="INPUT_TAG",
    help="Extract the version from this tag (or refs/... ref) only.",
)
@click.option(
    "--branch",
    envvar="INPUT_BRANCH",
    help='Set to "true" to only consider tags reachable from HEAD.',
)
@click.option(
    "--increment",
    envvar="INPUT_INCREMENT",
    help="Auto-increment mode: major, minor, patch, build or suffix.",
)
@click.option(
    "--build-number",
    envvar="INPUT_BUILD_NUMBER",
    help="Static build number used by the build and suffix increment modes.",
)
@click.option(
    "--output",
    "-o",
    envvar="GITHUB_OUTPUT",
    type=click.Path(dir_okay=False),
    help="File to append key=value outputs to. Defaults to stderr.",
)
@click.option(
    "--repo",
    envvar="TAGVERSION_REPO",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Path to the git repository.",
)
@click.option(
    "--config",
    "config_path",
    envvar="TAGVERSION_CONFIG",
    type=click.Path(dir_okay=False),
    help="INI file with a [tagversion] section of default options.",
)
@click.pass_context
def cli(
    ctx,
    fallback,
    prefix,
    prefix_regex,
    suffix,
    suffix_regex,
    tag,
    branch,
    increment,
    build_number,
    output,
    repo,
    config_path,
):
    """Derive the version (and next version) of a repository from its tags.

    Outputs are written as key=value lines: tag, tag_prefix, tag_suffix,
    version, version_* fields, commit, commit_short and date_* fields.
    """
    # click drops empty environment values; an empty prefix must survive
    if prefix is None:
        prefix = os.environ.get("INPUT_PREFIX")

    try:
        options = load_options(
            {
                "fallback": fallback,
                "prefix": prefix,
                "prefixRegex": prefix_regex,
                "suffix": suffix,
                "suffixRegex": suffix_regex,
                "tag": tag,
                "branch": branch,
                "increment": increment,
                "buildNumber": build_number,
            },
            config_path=Path(config_path) if config_path else None,
        )
        configuration = Configuration.from_options(options)
        derived = asyncio.run(derive_version(configuration, GitTagSource(repo)))
    except TagVersionError as e:
        logger.error(pretty_print_error(e))
        ctx.exit(e.exit_code)

    report(derived)

    if output:
        sink = FileOutputSink(output)
    else:
        sink = StreamOutputSink(click.get_text_stream("stderr"))
    write_outputs(sink, format_outputs(derived))


if __name__ == "__main__":
    cli()
