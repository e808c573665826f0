# procnet

Parsers for the text tables that Linux exposes under `/proc`:

- the TCP, UDP and Unix socket tables (`/proc/net/tcp`, `tcp6`, `udp`,
  `udp6`, `unix`)
- the ARP table (`/proc/net/arp`)
- interface counters (`/proc/net/dev`) and IPv4 routes (`/proc/net/route`)
- SNMP counters (`/proc/net/snmp` and `/proc/net/snmp6`)
- block device partitions (`/proc/partitions`)
- pressure stall information (`/proc/pressure/cpu`, `memory`, `io`)

Every parser takes an iterable of lines (an open text file works) and
returns plain Python objects: frozen dataclasses, `IntEnum`/`IntFlag`
members, `ipaddress` addresses, lists and dicts.

## Installation

```
pip install procnet
```

The package has no runtime dependencies.

## Usage

```python
import sys

from procnet.sockets import parse_tcp, TcpState
from procnet.partitions import parse_partitions
from procnet.pressure import parse_memory_pressure
from procnet.snmp import parse_snmp

little_endian = sys.byteorder == "little"

with open("/proc/net/tcp") as f:
    for entry in parse_tcp(f, little_endian):
        if entry.state is TcpState.LISTEN:
            print(entry.local_address, entry.inode)

with open("/proc/partitions") as f:
    for part in parse_partitions(f):
        print(part.name, part.major, part.minor, part.blocks)

with open("/proc/pressure/memory") as f:
    pressure = parse_memory_pressure(f)
    print(pressure.some.avg10, pressure.full.total)

with open("/proc/net/snmp") as f:
    snmp = parse_snmp(f)
    print(snmp.tcp_curr_estab, snmp.udp_in_datagrams)
```

## Modules

### `procnet.sockets`

- `parse_tcp(lines, little_endian)` and `parse_udp(lines, little_endian)`
  return lists of `TcpNetEntry` / `UdpNetEntry`. Each entry has
  `local_address` and `remote_address` as `(IPv4Address | IPv6Address, port)`
  tuples, a `state`, `rx_queue`, `tx_queue`, `uid` and `inode`. The header
  line is skipped.
- `parse_unix(lines)` returns `UnixNetEntry` objects with `ref_count`,
  `socket_type`, `state`, `inode` and `path` (a `PurePosixPath`, or `None`
  for unbound sockets; abstract names start with `@`).
- `parse_address_port(text, little_endian)` decodes a single hex
  `address:port` field: 8 hex digits for IPv4, 32 for IPv6. The address is
  stored as 32-bit words in the host's byte order, which `little_endian`
  describes.
- Enums: `TcpState`, `UdpState`, `UnixState`.

### `procnet.arp`

- `parse_arp(lines)` returns `ARPEntry` objects with `ip_address`,
  `hw_type` (`ARPHardware`), `flags` (`ARPFlags`), `hw_address` (six `bytes`,
  or `None` when the address is not six octets or is all zero) and `device`.
  Unknown bits in the hardware type and flags are dropped.

### `procnet.interfaces`

- `parse_interface_status(lines)` parses `/proc/net/dev` (skipping its two
  header lines) into a `dict` from interface name to `DeviceStatus`, which
  holds the `recv_*` and `sent_*` counters.
- `parse_device_status(line)` parses a single interface line.
- `parse_routes(lines, byteorder=sys.byteorder)` parses `/proc/net/route`
  into `RouteEntry` objects. `destination`, `gateway` and `mask` are
  `IPv4Address` values decoded in the given byte order (`"little"` or
  `"big"`; anything else raises `ValueError`).

### `procnet.snmp`

- `parse_snmp(lines)` returns an `Snmp` dataclass of the `Ip:`, `Icmp:`,
  `Tcp:`, `Udp:` and `UdpLite:` counters, with `ip_forwarding` as an
  `IpForwarding` member and `tcp_rto_algorithm` as a `TcpRtoAlgorithm`
  member. `tcp_max_conn` may be `-1`. Header/data line pairs that do not
  line up are ignored; extra columns are tolerated.

### `procnet.snmp6`

- `parse_snmp6(lines)` returns an `Snmp6` dataclass from the `Name value`
  lines of `/proc/net/snmp6`. The per-type `Icmp6InType*` and
  `Icmp6OutType*` counters and any unknown counters are ignored.

### `procnet.partitions`

- `parse_partitions(lines)` returns `PartitionEntry` objects with `major`,
  `minor`, `blocks` (1024-byte blocks) and `name`, skipping the header and
  the blank line after it.

### `procnet.pressure`

- `parse_pressure_record(line)` parses one `some ...` or `full ...` line into
  a `PressureRecord` with `avg10`, `avg60`, `avg300` and `total`
  (microseconds).
- `parse_cpu_pressure(lines)` returns `CpuPressure` from the first line;
  `parse_memory_pressure(lines)` and `parse_io_pressure(lines)` return
  `MemoryPressure` / `IoPressure` with `some` and `full` from the first two
  lines.

### `procnet.errors`

- `ProcError` is the base class of the errors raised for malformed input.
- `ParseError` (also a `ValueError`) is raised when a value does not have the
  expected form or is out of range.
- `IncompleteError` is raised when a required field or counter is missing or
  unusable; its `field` attribute names it when known.

## What it does not do

The parsers only read the lines they are given. The package does not open
anything under `/proc` itself, has no command-line tool, and does not watch
or sample values over time: open the files (or pass any iterable of lines)
and call the parser you need.

## Running the tests

```
pip install -e ".[test]"
pytest
```