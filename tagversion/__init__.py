"""Derive semantic versions from the tags of a git repository."""

__version__ = "0.1.0"
