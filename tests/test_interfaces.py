from ipaddress import IPv4Address

import pytest

from procnet.errors import IncompleteError, ParseError
from procnet.interfaces import (
    DeviceStatus,
    parse_device_status,
    parse_interface_status,
    parse_routes,
)

DEV_HEADER = [
    "Inter-|   Receive                                                |  Transmit",
    " face |bytes    packets errs drop fifo frame compressed multicast"
    "|bytes    packets errs drop fifo colls carrier compressed",
]
LO_LINE = "    lo: 1000 10 0 0 0 0 0 0 1000 10 0 0 0 0 0 0"
ETH_LINE = "  eth0: 123456 789 1 2 3 4 5 6 654321 987 7 8 9 10 11 12"

ROUTE_HEADER = "Iface\tDestination\tGateway \tFlags\tRefCnt\tUse\tMetric\tMask\t\tMTU\tWindow\tIRTT"
ROUTES = [
    ROUTE_HEADER,
    "eth0\t00000000\t0101A8C0\t0003\t0\t0\t100\t00000000\t0\t0\t0",
    "eth0\t0001A8C0\t00000000\t0001\t0\t0\t100\t00FFFFFF\t0\t0\t0",
]


def test_device_status_fields_in_order():
    status = parse_device_status(ETH_LINE)
    assert status.name == "eth0"
    assert status.recv_bytes == 123456
    assert status.recv_packets == 789
    assert status.recv_multicast == 6
    assert status.sent_bytes == 654321
    assert status.sent_packets == 987
    assert status.sent_colls == 10
    assert status.sent_compressed == 12


def test_device_name_strips_trailing_colons():
    status = parse_device_status("wlan0:: 1 2 3 4 5 6 7 8 9 10 11 12 13 14 15 16")
    assert status.name == "wlan0"
    assert status.sent_compressed == 16


def test_interface_status_skips_two_header_lines():
    statuses = parse_interface_status([*DEV_HEADER, LO_LINE, ETH_LINE])
    assert set(statuses) == {"lo", "eth0"}
    assert statuses["lo"].recv_bytes == 1000
    assert statuses["eth0"] == parse_device_status(ETH_LINE)
    assert all(isinstance(v, DeviceStatus) and v.name == k for k, v in statuses.items())


def test_truncated_device_line_raises():
    with pytest.raises(IncompleteError):
        parse_device_status("eth0: 1 2 3")


def test_non_numeric_counter_raises():
    with pytest.raises(ParseError):
        parse_device_status("eth0: 1 2 3 x 5 6 7 8 9 10 11 12 13 14 15 16")


def test_routes_little_endian():
    routes = parse_routes(ROUTES, "little")
    assert len(routes) == 2
    default, local = routes
    assert default.iface == "eth0"
    assert default.destination == IPv4Address(0)
    assert default.gateway == IPv4Address("192.168.1.1")
    assert default.flags == 0x0003
    assert default.metrics == 100
    assert local.destination == IPv4Address("192.168.1.0")
    assert local.mask == IPv4Address("255.255.255.0")


def test_routes_big_endian_reads_hex_as_is():
    routes = parse_routes(ROUTES, "big")
    assert int(routes[0].gateway) == int("0101A8C0", 16)
    assert int(routes[1].mask) == int("00FFFFFF", 16)


def test_byte_orders_mirror_each_other():
    little = parse_routes(ROUTES, "little")
    big = parse_routes(ROUTES, "big")
    for a, b in zip(little, big):
        assert a.gateway.packed == b.gateway.packed[::-1]
        assert a.mask.packed == b.mask.packed[::-1]


def test_routes_default_byteorder_matches_host():
    import sys

    assert parse_routes(ROUTES) == parse_routes(ROUTES, sys.byteorder)


def test_route_missing_field_raises():
    with pytest.raises(IncompleteError):
        parse_routes([ROUTE_HEADER, "eth0\t00000000\t0101A8C0\t0003\t0\t0\t100"], "little")


def test_route_bad_hex_raises():
    with pytest.raises(ParseError):
        parse_routes([ROUTE_HEADER, "eth0\tXYZ\t0101A8C0\t0003\t0\t0\t100\t00000000\t0\t0\t0"], "little")


def test_route_refcnt_out_of_range_raises():
    with pytest.raises(ParseError):
        parse_routes([ROUTE_HEADER, "eth0\t00000000\t0101A8C0\t0003\t70000\t0\t100\t00000000\t0\t0\t0"], "little")


def test_invalid_byteorder_raises():
    with pytest.raises(ValueError):
        parse_routes(ROUTES, "middle")