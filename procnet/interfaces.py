"""Interface counters from /proc/net/dev and IPv4 routes from /proc/net/route."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, fields
from ipaddress import IPv4Address
from itertools import islice

from .errors import IncompleteError, ParseError

_DIGITS = {
    10: re.compile(r"\+?[0-9]+"),
    16: re.compile(r"\+?[0-9a-fA-F]+"),
}


@dataclass(frozen=True)
class DeviceStatus:
    """Receive and transmit counters of one network interface."""

    name: str
    recv_bytes: int
    recv_packets: int
    recv_errs: int
    recv_drop: int
    recv_fifo: int
    recv_frame: int
    recv_compressed: int
    recv_multicast: int
    sent_bytes: int
    sent_packets: int
    sent_errs: int
    sent_drop: int
    sent_fifo: int
    sent_colls: int
    sent_carrier: int
    sent_compressed: int


_COUNTERS = [f.name for f in fields(DeviceStatus)][1:]


@dataclass(frozen=True)
class RouteEntry:
    """One IPv4 route."""

    iface: str
    destination: IPv4Address
    gateway: IPv4Address
    flags: int
    refcnt: int
    in_use: int
    metrics: int
    mask: IPv4Address
    mtu: int
    window: int
    irtt: int


def _unsigned(text: str, bits: int, what: str, base: int = 10) -> int:
    if not _DIGITS[base].fullmatch(text):
        raise ParseError(f"invalid {what}: {text!r}")
    value = int(text, base)
    if value >= 1 << bits:
        raise ParseError(f"{what} out of range: {text!r}")
    return value


def _take(items: list[str], index: int, what: str) -> str:
    try:
        return items[index]
    except IndexError:
        raise IncompleteError(what) from None


def parse_device_status(line: str) -> DeviceStatus:
    """Parse one interface line of /proc/net/dev."""
    items = line.split()
    name = _take(items, 0, "name")
    counters = {
        counter: _unsigned(_take(items, index, counter), 64, counter)
        for index, counter in enumerate(_COUNTERS, start=1)
    }
    return DeviceStatus(name=name.rstrip(":"), **counters)


def parse_interface_status(lines: Iterable[str]) -> dict[str, DeviceStatus]:
    """Parse /proc/net/dev into a mapping from interface name to its counters."""
    statuses = (parse_device_status(line) for line in islice(lines, 2, None))
    return {status.name: status for status in statuses}


def _address(text: str, byteorder: str, what: str) -> IPv4Address:
    value = _unsigned(text, 32, what, 16)
    return IPv4Address(value.to_bytes(4, byteorder))


def _parse_route(line: str, byteorder: str) -> RouteEntry:
    items = line.split()
    return RouteEntry(
        iface=_take(items, 0, "iface"),
        destination=_address(_take(items, 1, "destination"), byteorder, "destination"),
        gateway=_address(_take(items, 2, "gateway"), byteorder, "gateway"),
        flags=_unsigned(_take(items, 3, "flags"), 16, "flags", 16),
        refcnt=_unsigned(_take(items, 4, "refcnt"), 16, "refcnt"),
        in_use=_unsigned(_take(items, 5, "in_use"), 16, "in_use"),
        metrics=_unsigned(_take(items, 6, "metrics"), 32, "metrics"),
        mask=_address(_take(items, 7, "mask"), byteorder, "mask"),
        mtu=_unsigned(_take(items, 8, "mtu"), 32, "mtu"),
        window=_unsigned(_take(items, 9, "window"), 32, "window"),
        irtt=_unsigned(_take(items, 10, "irtt"), 32, "irtt"),
    )


def parse_routes(lines: Iterable[str], byteorder: str = sys.byteorder) -> list[RouteEntry]:
    """Parse /proc/net/route, skipping the header line.

    Addresses are written as hex numbers in the host's byte order, ``"little"``
    or ``"big"``.
    """
    if byteorder not in ("little", "big"):
        raise ValueError(f"byteorder must be 'little' or 'big', not {byteorder!r}")
    return [_parse_route(line, byteorder) for line in islice(lines, 1, None)]