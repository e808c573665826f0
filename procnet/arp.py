"""The ARP table from /proc/net/arp."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntFlag
from functools import reduce
from ipaddress import IPv4Address
from itertools import islice
from operator import or_
from typing import Optional

from .errors import IncompleteError, ParseError

_HEX = re.compile(r"\+?[0-9a-fA-F]+")


class ARPHardware(IntFlag):
    """Hardware type of an ARP entry (almost always ETHER, sometimes INFINIBAND)."""

    NETROM = 0
    ETHER = 1
    EETHER = 2
    AX25 = 3
    PRONET = 4
    CHAOS = 5
    IEEE802 = 6
    ARCNET = 7
    APPLETLK = 8
    DLCI = 15
    ATM = 19
    METRICOM = 23
    IEEE1394 = 24
    EUI64 = 27
    INFINIBAND = 32


class ARPFlags(IntFlag):
    """Kernel flags of an ARP entry."""

    COM = 0x02
    PERM = 0x04
    PUBL = 0x08
    USETRAILERS = 0x10
    NETMASK = 0x20
    DONTPUB = 0x40


_HARDWARE_BITS = reduce(or_, (member.value for member in ARPHardware), 0)
_FLAG_BITS = reduce(or_, (member.value for member in ARPFlags), 0)


@dataclass(frozen=True)
class ARPEntry:
    """One row of the ARP table; ``hw_address`` is None when unknown or all zero."""

    ip_address: IPv4Address
    hw_type: ARPHardware
    flags: ARPFlags
    hw_address: Optional[bytes]
    device: str


def _hex(text: str, bits: int, what: str) -> int:
    if not _HEX.fullmatch(text):
        raise ParseError(f"invalid {what}: {text!r}")
    value = int(text, 16)
    if value >= 1 << bits:
        raise ParseError(f"{what} out of range: {text!r}")
    return value


def _prefixed_hex(text: str, what: str) -> int:
    if len(text) < 2:
        raise ParseError(f"invalid {what}: {text!r}")
    return _hex(text[2:], 32, what)


def _field(fields: list[str], index: int, what: str) -> str:
    try:
        return fields[index]
    except IndexError:
        raise IncompleteError(what) from None


def _mac(text: str) -> Optional[bytes]:
    parts = text.split(":")
    if len(parts) != 6:
        return None
    octets = bytes(_hex(part, 8, "arp::hw_address") for part in parts)
    if not any(octets):
        return None
    return octets


def _parse_line(line: str) -> ARPEntry:
    fields = line.split()
    ip_text = _field(fields, 0, "arp::ip_address")
    try:
        ip_address = IPv4Address(ip_text)
    except ValueError:
        raise ParseError(f"invalid arp::ip_address: {ip_text!r}") from None
    hw = _prefixed_hex(_field(fields, 1, "arp::hw_type"), "arp::hw_type")
    flags = _prefixed_hex(_field(fields, 2, "arp::flags"), "arp::flags")
    hw_address = _mac(_field(fields, 3, "arp::hw_address"))
    _field(fields, 4, "arp::mask")
    device = _field(fields, 5, "arp::device")
    return ARPEntry(
        ip_address=ip_address,
        hw_type=ARPHardware(hw & _HARDWARE_BITS),
        flags=ARPFlags(flags & _FLAG_BITS),
        hw_address=hw_address,
        device=device,
    )


def parse_arp(lines: Iterable[str]) -> list[ARPEntry]:
    """Parse /proc/net/arp, skipping the header line."""
    return [_parse_line(line) for line in islice(lines, 1, None)]