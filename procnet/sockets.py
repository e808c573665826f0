"""TCP, UDP and Unix socket tables from /proc/net/{tcp,tcp6,udp,udp6,unix}."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from ipaddress import IPv4Address, IPv6Address
from itertools import islice
from pathlib import PurePosixPath
from typing import Optional, Tuple, Union

from .errors import IncompleteError, ParseError

_Address = Tuple[Union[IPv4Address, IPv6Address], int]

_DIGITS = {
    10: re.compile(r"\+?[0-9]+"),
    16: re.compile(r"\+?[0-9a-fA-F]+"),
}
_HEX = re.compile(r"[0-9a-fA-F]*")


class TcpState(IntEnum):
    """State of a TCP socket as the kernel numbers it."""

    ESTABLISHED = 0x01
    SYN_SENT = 0x02
    SYN_RECV = 0x03
    FIN_WAIT1 = 0x04
    FIN_WAIT2 = 0x05
    TIME_WAIT = 0x06
    CLOSE = 0x07
    CLOSE_WAIT = 0x08
    LAST_ACK = 0x09
    LISTEN = 0x0A
    CLOSING = 0x0B
    NEW_SYN_RECV = 0x0C


class UdpState(IntEnum):
    """State of a UDP socket."""

    ESTABLISHED = 0x01
    CLOSE = 0x07


class UnixState(IntEnum):
    """State of a Unix domain socket."""

    UNCONNECTED = 0x01
    CONNECTING = 0x02
    CONNECTED = 0x03
    DISCONNECTING = 0x04


@dataclass(frozen=True)
class TcpNetEntry:
    """One row of the TCP socket table."""

    local_address: _Address
    remote_address: _Address
    state: TcpState
    rx_queue: int
    tx_queue: int
    uid: int
    inode: int


@dataclass(frozen=True)
class UdpNetEntry:
    """One row of the UDP socket table."""

    local_address: _Address
    remote_address: _Address
    state: UdpState
    rx_queue: int
    tx_queue: int
    uid: int
    inode: int


@dataclass(frozen=True)
class UnixNetEntry:
    """One row of the Unix socket table.

    ``socket_type`` is SOCK_STREAM, SOCK_DGRAM or SOCK_SEQPACKET; ``path`` is the
    bound name, if any, with abstract names starting with ``@``.
    """

    ref_count: int
    socket_type: int
    state: UnixState
    inode: int
    path: Optional[PurePosixPath]


def _unsigned(text: str, bits: int, what: str, base: int = 10) -> int:
    if not _DIGITS[base].fullmatch(text):
        raise ParseError(f"invalid {what}: {text!r}")
    value = int(text, base)
    if value >= 1 << bits:
        raise ParseError(f"{what} out of range: {text!r}")
    return value


def _field(fields: list[str], index: int, what: str) -> str:
    try:
        return fields[index]
    except IndexError:
        raise IncompleteError(what) from None


def _decode_hex(text: str, original: str) -> bytes:
    if not _HEX.fullmatch(text):
        raise ParseError(f"Unable to parse {original!r} as an address:port")
    return bytes.fromhex(text)


def parse_address_port(text: str, little_endian: bool) -> _Address:
    """Parse an ``address:port`` pair in hex, IPv4 (8 digits) or IPv6 (32 digits).

    The address is stored as 32-bit words in the host's byte order; pass
    ``little_endian`` to say which order that is.
    """
    parts = text.split(":")
    ip_part = parts[0]
    if len(parts) < 2:
        raise IncompleteError("port")
    port = _unsigned(parts[1], 16, "port", 16)

    if len(ip_part) not in (8, 32):
        raise ParseError(f"Unable to parse {text!r} as an address:port")

    raw = _decode_hex(ip_part, text)
    words = (raw[i:i + 4] for i in range(0, len(raw), 4))
    packed = b"".join(word[::-1] if little_endian else word for word in words)
    if len(packed) == 4:
        return IPv4Address(packed), port
    return IPv6Address(packed), port


def _queues(text: str, prefix: str) -> tuple[int, int]:
    tx_text, sep, rx_text = text.partition(":")
    tx_queue = _unsigned(tx_text, 32, f"{prefix}::tx_queue", 16)
    if not sep:
        raise IncompleteError(f"{prefix}::rx_queue")
    rx_queue = _unsigned(rx_text, 32, f"{prefix}::rx_queue", 16)
    return tx_queue, rx_queue


def _inet_row(line: str, little_endian: bool, prefix: str, states: type[IntEnum]) -> dict:
    fields = line.split()
    local_text = _field(fields, 1, f"{prefix}::local_address")
    remote_text = _field(fields, 2, f"{prefix}::rem_address")
    state_text = _field(fields, 3, f"{prefix}::st")
    tx_queue, rx_queue = _queues(_field(fields, 4, f"{prefix}::tx_queue:rx_queue"), prefix)
    uid = _unsigned(_field(fields, 7, f"{prefix}::uid"), 32, f"{prefix}::uid")
    inode_text = _field(fields, 9, f"{prefix}::inode")

    local_address = parse_address_port(local_text, little_endian)
    remote_address = parse_address_port(remote_text, little_endian)
    state_number = _unsigned(state_text, 8, f"{prefix}::st", 16)
    try:
        state = states(state_number)
    except ValueError:
        raise IncompleteError(f"{prefix}::st") from None

    return dict(
        local_address=local_address,
        remote_address=remote_address,
        state=state,
        rx_queue=rx_queue,
        tx_queue=tx_queue,
        uid=uid,
        inode=_unsigned(inode_text, 64, f"{prefix}::inode"),
    )


def parse_tcp(lines: Iterable[str], little_endian: bool) -> list[TcpNetEntry]:
    """Parse /proc/net/tcp or /proc/net/tcp6, skipping the header line."""
    return [
        TcpNetEntry(**_inet_row(line, little_endian, "tcp", TcpState))
        for line in islice(lines, 1, None)
    ]


def parse_udp(lines: Iterable[str], little_endian: bool) -> list[UdpNetEntry]:
    """Parse /proc/net/udp or /proc/net/udp6, skipping the header line."""
    return [
        UdpNetEntry(**_inet_row(line, little_endian, "udp", UdpState))
        for line in islice(lines, 1, None)
    ]


def _unix_row(line: str) -> UnixNetEntry:
    fields = line.split()
    ref_count = _unsigned(_field(fields, 1, "unix::ref_count"), 32, "unix::ref_count", 16)
    socket_type = _unsigned(_field(fields, 4, "unix::type"), 16, "unix::type", 16)
    state_number = _unsigned(_field(fields, 5, "unix::st"), 8, "unix::st", 16)
    inode = _unsigned(_field(fields, 6, "unix::inode"), 64, "unix::inode")
    path = PurePosixPath(fields[7]) if len(fields) > 7 else None
    try:
        state = UnixState(state_number)
    except ValueError:
        raise IncompleteError("unix::st") from None
    return UnixNetEntry(
        ref_count=ref_count,
        socket_type=socket_type,
        state=state,
        inode=inode,
        path=path,
    )


def parse_unix(lines: Iterable[str]) -> list[UnixNetEntry]:
    """Parse /proc/net/unix, skipping the header line."""
    return [_unix_row(line) for line in islice(lines, 1, None)]