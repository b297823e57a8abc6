"""
Tag listing from a git repository.

The tag source runs a single git command through GitPython and turns its
output into RawTagRecords. Each listed line has the form
``<refs>|||<ISO-8601 date>|||<commit>``.
"""

import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from tagversion.constants import TagSelector
from tagversion.versioning.exceptions import TagSourceError
from tagversion.versioning.matcher import RawTagRecord

logger = logging.getLogger("tagversion")

FIELD_SEPARATOR = "|||"

# annotated tags are peeled to the commit they point at
TAG_FORMAT = FIELD_SEPARATOR.join(
    [
        "%(refname:short)",
        "%(creatordate:iso-strict)",
        "%(if)%(*objectname)%(then)%(*objectname)%(else)%(objectname)%(end)",
    ]
)
BRANCH_FORMAT = FIELD_SEPARATOR.join(["%D", "%aI", "%H"])
TAG_SORT = "--sort=-creatordate"


def parse_timestamp(text: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp as printed by git.

    Returns:
        An aware datetime in UTC, or None if ``text`` is blank or invalid
    """
    text = text.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        timestamp = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Ignoring unparsable tag date '{text}'")
        return None
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def _split_line(line: str):
    fields = line.split(FIELD_SEPARATOR)
    fields += [""] * (3 - len(fields))
    return fields[0], fields[1], fields[2]


def parse_tag_line(line: str) -> RawTagRecord:
    """Parse one line of a ``for-each-ref``/``tag`` listing."""
    tag, date_text, commit = _split_line(line)
    return RawTagRecord(
        tag=tag.strip(),
        timestamp=parse_timestamp(date_text),
        commit=commit.strip() or None,
    )


def parse_tag_output(output: str) -> List[RawTagRecord]:
    """Parse a ``for-each-ref``/``tag`` listing, skipping blank lines."""
    return [parse_tag_line(line) for line in output.splitlines() if line.strip()]


def parse_branch_output(output: str) -> List[RawTagRecord]:
    """
    Parse a ``rev-list`` listing of decorated commits.

    Only ``tag:`` decorations are kept. Every tag on a commit receives the
    commit's date and hash; commits are kept in traversal order.
    """
    records: List[RawTagRecord] = []
    for line in output.splitlines():
        if FIELD_SEPARATOR not in line:
            continue
        decorations, date_text, commit = _split_line(line)
        timestamp = parse_timestamp(date_text)
        for ref in decorations.split(", "):
            ref = ref.strip()
            if not ref.startswith("tag:"):
                continue
            records.append(
                RawTagRecord(
                    tag=ref[len("tag:") :].strip(),
                    timestamp=timestamp,
                    commit=commit.strip() or None,
                )
            )
    return records


def _exit_status(error: GitCommandError) -> Optional[int]:
    status = error.status
    if isinstance(status, int):
        return status
    return None


class GitTagSource:
    """
    Lists tags from a local git repository.

    Args:
        repo_path: Path inside the repository (defaults to current directory)
    """

    def __init__(self, repo_path: Optional[Union[str, Path]] = None):
        if repo_path is None:
            repo_path = Path.cwd()
        self.repo_path = Path(repo_path)
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        if self._repo is None:
            try:
                self._repo = Repo(self.repo_path, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise TagSourceError(
                    f"Not a git repository: {self.repo_path}"
                ) from e
        return self._repo

    def list_tags(self, selector: TagSelector, ref: Optional[str] = None) -> str:
        """Run the git command for ``selector`` and return its raw output."""
        git = self.repo.git

        if selector == TagSelector.EXPLICIT_REF:
            if not ref:
                raise ValueError("An explicit ref selector requires a ref")
            if ref.startswith("refs"):
                return git.for_each_ref(TAG_SORT, f"--format={TAG_FORMAT}", ref)
            return git.tag(TAG_SORT, f"--format={TAG_FORMAT}", "--list", ref)

        if selector == TagSelector.PER_BRANCH:
            return git.rev_list(
                "--no-commit-header", f"--pretty={BRANCH_FORMAT}", "HEAD"
            )

        return git.for_each_ref(TAG_SORT, f"--format={TAG_FORMAT}", "refs/tags/*")

    async def fetch(
        self, selector: TagSelector, ref: Optional[str] = None
    ) -> List[RawTagRecord]:
        """
        List the tags for ``selector``.

        Raises:
            TagSourceError: If the repository cannot be opened or git fails
        """
        try:
            output = await asyncio.to_thread(self.list_tags, selector, ref)
        except GitCommandError as e:
            raise TagSourceError(
                "An error occurred while trying to find the tags",
                exit_code=_exit_status(e),
                stderr=str(e.stderr or "").strip(),
            ) from e

        if selector == TagSelector.PER_BRANCH:
            return parse_branch_output(output)
        return parse_tag_output(output)
