"""Outputs of a run, written as ``key=value`` lines."""

from datetime import timezone
from pathlib import Path
from typing import IO, Iterable, List, Tuple, Union

from tagversion.constants import WEEKDAYS
from tagversion.core.interfaces import OutputSink
from tagversion.versioning.version import DerivedVersion


class FileOutputSink:
    """Appends outputs to a file, e.g. the one named by ``$GITHUB_OUTPUT``."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def write(self, key: str, value: str) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(f"{key}={value}\n")


class StreamOutputSink:
    """Writes outputs to an open text stream."""

    def __init__(self, stream: IO[str]):
        self.stream = stream

    def write(self, key: str, value: str) -> None:
        self.stream.write(f"{key}={value}\n")
        self.stream.flush()


def format_outputs(derived: DerivedVersion) -> List[Tuple[str, str]]:
    """The outputs for ``derived``, in emission order."""
    date = derived.timestamp.astimezone(timezone.utc)
    commit = derived.commit

    return [
        ("tag", derived.tag),
        ("tag_prefix", derived.prefix),
        ("tag_suffix", derived.suffix),
        ("version", derived.version),
        ("version_short", derived.version_short),
        ("version_major", str(derived.major)),
        ("version_minor", str(derived.minor)),
        ("version_patch", str(derived.patch)),
        ("version_build", str(derived.build)),
        ("commit", commit),
        ("commit_short", commit[:7]),
        (
            "date",
            f"{date:%Y-%m-%dT%H:%M:%S}.{date.microsecond // 1000:03d}Z",
        ),
        ("date_year", str(date.year)),
        ("date_month", f"{date.month:02d}"),
        ("date_day", f"{date.day:02d}"),
        ("date_weekday", WEEKDAYS[date.weekday()]),
        ("date_hours", f"{date.hour:02d}"),
        ("date_minutes", f"{date.minute:02d}"),
        ("date_seconds", f"{date.second:02d}"),
        ("date_milliseconds", f"{date.microsecond // 1000:03d}"),
    ]


def write_outputs(sink: OutputSink, outputs: Iterable[Tuple[str, str]]) -> None:
    for key, value in outputs:
        sink.write(key, value)
