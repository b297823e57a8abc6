"""Protocol interfaces for the collaborators of the version pipeline.

Protocols that decouple the versioning core from git and from the output
channel.
"""

from typing import List, Optional, Protocol, TYPE_CHECKING

from tagversion.constants import TagSelector

if TYPE_CHECKING:
    from tagversion.versioning.matcher import RawTagRecord


class TagSource(Protocol):
    """Lists the tags of a repository."""

    async def fetch(
        self, selector: TagSelector, ref: Optional[str] = None
    ) -> List["RawTagRecord"]:
        """Return the raw tag records, in the order they should be scanned.

        Raises:
            TagSourceError: If the tags could not be retrieved
        """
        ...


class OutputSink(Protocol):
    """Receives the ``key=value`` outputs of a run."""

    def write(self, key: str, value: str) -> None:
        """Append one output."""
        ...
