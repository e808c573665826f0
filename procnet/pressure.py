"""Pressure stall information from /proc/pressure/{cpu,memory,io}."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import IncompleteError

_UNSIGNED = re.compile(r"\+?[0-9]+")
_MAX_U64 = 2**64 - 1


@dataclass(frozen=True)
class PressureRecord:
    """Stall percentages over 10, 60 and 300 second windows and total stall time in µs."""

    avg10: float
    avg60: float
    avg300: float
    total: int


@dataclass(frozen=True)
class CpuPressure:
    """CPU pressure: only the share of time in which some tasks were stalled."""

    some: PressureRecord


@dataclass(frozen=True)
class MemoryPressure:
    """Memory pressure for some tasks and for all non-idle tasks at once."""

    some: PressureRecord
    full: PressureRecord


@dataclass(frozen=True)
class IoPressure:
    """IO pressure for some tasks and for all non-idle tasks at once."""

    some: PressureRecord
    full: PressureRecord


def _float_value(values: dict[str, str], name: str) -> float:
    try:
        return float(values[name])
    except (KeyError, ValueError):
        raise IncompleteError(name) from None


def _total_value(values: dict[str, str]) -> int:
    text = values.get("total")
    if text is None or not _UNSIGNED.fullmatch(text):
        raise IncompleteError("total")
    total = int(text)
    if total > _MAX_U64:
        raise IncompleteError("total")
    return total


def parse_pressure_record(line: str) -> PressureRecord:
    """Parse one ``some ...`` or ``full ...`` line."""
    if not (line.startswith("some") or line.startswith("full")):
        raise IncompleteError()

    values: dict[str, str] = {}
    for pair in line[5:].split():
        parts = pair.split("=")
        if len(parts) == 2:
            key, value = parts
            values[key] = value

    return PressureRecord(
        avg10=_float_value(values, "avg10"),
        avg60=_float_value(values, "avg60"),
        avg300=_float_value(values, "avg300"),
        total=_total_value(values),
    )


def _some_and_full(lines: Iterable[str]) -> tuple[PressureRecord, PressureRecord]:
    it = iter(lines)
    some = next(it, "")
    full = next(it, "")
    return parse_pressure_record(some), parse_pressure_record(full)


def parse_cpu_pressure(lines: Iterable[str]) -> CpuPressure:
    """Parse the contents of /proc/pressure/cpu."""
    return CpuPressure(some=parse_pressure_record(next(iter(lines), "")))


def parse_memory_pressure(lines: Iterable[str]) -> MemoryPressure:
    """Parse the contents of /proc/pressure/memory."""
    some, full = _some_and_full(lines)
    return MemoryPressure(some=some, full=full)


def parse_io_pressure(lines: Iterable[str]) -> IoPressure:
    """Parse the contents of /proc/pressure/io."""
    some, full = _some_and_full(lines)
    return IoPressure(some=some, full=full)