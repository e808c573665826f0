from ipaddress import IPv4Address

import pytest

from procnet.arp import ARPFlags, ARPHardware, parse_arp
from procnet.errors import IncompleteError, ParseError

HEADER = "IP address       HW type     Flags       HW address            Mask     Device"


def _table(*rows):
    return [HEADER, *rows]


def test_parses_complete_entry():
    entries = parse_arp(
        _table("192.168.1.1      0x1         0x2         02:00:00:00:00:01     *        eth0")
    )
    assert len(entries) == 1
    entry = entries[0]
    assert entry.ip_address == IPv4Address("192.168.1.1")
    assert entry.hw_type == ARPHardware.ETHER
    assert entry.flags == ARPFlags.COM
    assert entry.hw_address == bytes.fromhex("020000000001")
    assert entry.device == "eth0"


def test_header_only_gives_empty_list():
    assert parse_arp(_table()) == []


def test_all_zero_mac_is_none():
    entries = parse_arp(
        _table("10.0.0.5         0x1         0x0         00:00:00:00:00:00     *        eth0")
    )
    assert entries[0].hw_address is None
    assert entries[0].flags == ARPFlags(0)


def test_short_mac_is_none_even_if_invalid():
    entries = parse_arp(_table("10.0.0.5 0x1 0x0 zz:00:00 * eth0"))
    assert entries[0].hw_address is None


def test_invalid_mac_with_six_parts_raises():
    with pytest.raises(ParseError):
        parse_arp(_table("10.0.0.5 0x1 0x2 zz:00:00:00:00:01 * eth0"))


def test_infiniband_hardware():
    entries = parse_arp(_table("10.0.0.6 0x20 0x2 02:00:00:00:00:02 * ib0"))
    assert entries[0].hw_type == ARPHardware.INFINIBAND


def test_unknown_flag_bits_are_dropped():
    entries = parse_arp(_table("10.0.0.7 0x1 0x86 02:00:00:00:00:03 * eth1"))
    flags = entries[0].flags
    assert ARPFlags.COM in flags
    assert ARPFlags.PERM in flags
    assert flags & ~(ARPFlags.COM | ARPFlags.PERM) == 0


def test_unknown_hardware_bits_are_dropped():
    entries = parse_arp(_table("10.0.0.8 0x100 0x2 02:00:00:00:00:04 * eth1"))
    assert entries[0].hw_type == ARPHardware.NETROM


def test_invalid_ip_raises():
    with pytest.raises(ParseError):
        parse_arp(_table("not-an-ip 0x1 0x2 02:00:00:00:00:01 * eth0"))


def test_missing_device_raises():
    with pytest.raises(IncompleteError):
        parse_arp(_table("10.0.0.5 0x1 0x2 02:00:00:00:00:01 *"))


def test_bad_hw_type_raises():
    with pytest.raises(ParseError):
        parse_arp(_table("10.0.0.5 0xg 0x2 02:00:00:00:00:01 * eth0"))


def test_multiple_rows_keep_order():
    entries = parse_arp(
        _table(
            "10.0.0.1 0x1 0x2 02:00:00:00:00:01 * eth0",
            "10.0.0.2 0x1 0x2 02:00:00:00:00:02 * eth1",
        )
    )
    assert [e.device for e in entries] == ["eth0", "eth1"]
    assert [e.ip_address for e in entries] == [IPv4Address("10.0.0.1"), IPv4Address("10.0.0.2")]