"""Block device partitions from /proc/partitions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice

from .errors import ParseError

_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class PartitionEntry:
    """One partition: device numbers, size in 1024-byte blocks and name."""

    major: int
    minor: int
    blocks: int
    name: str


def _unsigned(text: str, bits: int, what: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseError(f"invalid {what}: {text!r}")
    value = int(text)
    if value >= 1 << bits:
        raise ParseError(f"{what} out of range: {text!r}")
    return value


def _parse_line(line: str) -> PartitionEntry:
    fields = line.split()
    if len(fields) < 4:
        raise ParseError(f"truncated partition line: {line!r}")
    major, minor, blocks, name = fields[:4]
    return PartitionEntry(
        major=_unsigned(major, 16, "major"),
        minor=_unsigned(minor, 16, "minor"),
        blocks=_unsigned(blocks, 64, "blocks"),
        name=name,
    )


def parse_partitions(lines: Iterable[str]) -> list[PartitionEntry]:
    """Parse /proc/partitions, skipping the header and the blank line after it."""
    return [_parse_line(line) for line in islice(lines, 2, None)]