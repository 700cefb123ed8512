"""Text content addressed by a single running character index."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from os import PathLike

from innex.bin_search import nomore_tar


class TravelMode(enum.Enum):
    WORD = enum.auto()
    LINE = enum.auto()
    TOKEN = enum.auto()


def _read_lines(file_path: str | PathLike[str]):
    with open(file_path, encoding="utf-8", newline="") as handle:
        for raw in handle.read().split("\n"):
            yield raw[:-1] if raw.endswith("\r") else raw


@dataclass
class Content:
    """Lines of a file, each with the running index at which it starts."""

    lines: list[str] = field(default_factory=list)
    starts: list[int] = field(default_factory=list)
    line_at_start: dict[int, int] = field(default_factory=dict)

    def read_file(self, file_path: str | PathLike[str]) -> None:
        """Append the lines of ``file_path``.

        Each line advances the running index by its UTF-8 length.
        """
        lines = list(_read_lines(file_path))
        if lines and lines[-1] == "":
            lines.pop()
        index = 0
        for line_number, line in enumerate(lines):
            self.lines.append(line)
            self.starts.append(index)
            self.line_at_start[index] = line_number
            index += len(line.encode("utf-8"))

    def __getitem__(self, index: int) -> str:
        line = nomore_tar(self.starts, index)
        if line is None:
            raise IndexError(f"index {index} is before the first line")
        return self.lines[line][index - self.starts[line]]


@dataclass
class Travel:
    """A cursor range over a :class:`Content`."""

    content: Content = field(default_factory=Content)
    begin: int = 0
    end: int = 0
    now: int = 0

    def read_file(self, file_path: str | PathLike[str]) -> None:
        """Load ``file_path`` and set ``end`` past the last line start."""
        self.content.read_file(file_path)
        last_start = self.content.starts[-1] if self.content.starts else 0
        self.end = last_start + len(self.content.lines)