"""
Git operations module for tagversion.

Lists the tags of a local repository (GitPython-based) for the versioning
pipeline.
"""

from .tags import (
    GitTagSource,
    parse_branch_output,
    parse_tag_line,
    parse_tag_output,
    parse_timestamp,
)

__all__ = [
    "GitTagSource",
    "parse_branch_output",
    "parse_tag_line",
    "parse_tag_output",
    "parse_timestamp",
]
