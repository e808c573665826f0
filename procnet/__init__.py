"""Parsers for Linux /proc socket, ARP, route, interface, SNMP, partition and pressure files."""

__version__ = "0.1.0"

__all__ = [
    "arp",
    "errors",
    "interfaces",
    "partitions",
    "pressure",
    "snmp",
    "snmp6",
    "sockets",
]