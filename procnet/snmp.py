"""IP, ICMP, TCP and UDP counters from /proc/net/snmp."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum

from .errors import IncompleteError, ParseError

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


class IpForwarding(IntEnum):
    """Whether this host forwards datagrams not addressed to it."""

    FORWARDING = 1
    NOT_FORWARDING = 2


class TcpRtoAlgorithm(IntEnum):
    """Algorithm used to compute the TCP retransmission timeout."""

    OTHER = 1
    CONSTANT = 2
    RSRE = 3
    VANJ = 4


@dataclass(frozen=True)
class Snmp:
    """The IPv4 management information base counters of the SNMP agent."""

    ip_forwarding: IpForwarding
    ip_default_ttl: int
    ip_in_receives: int
    ip_in_hdr_errors: int
    ip_in_addr_errors: int
    ip_forw_datagrams: int
    ip_in_unknown_protos: int
    ip_in_discards: int
    ip_in_delivers: int
    ip_out_requests: int
    ip_out_discards: int
    ip_out_no_routes: int
    ip_reasm_timeout: int
    ip_reasm_reqds: int
    ip_reasm_oks: int
    ip_reasm_fails: int
    ip_frag_oks: int
    ip_frag_fails: int
    ip_frag_creates: int

    icmp_in_msgs: int
    icmp_in_errors: int
    icmp_in_csum_errors: int
    icmp_in_dest_unreachs: int
    icmp_in_time_excds: int
    icmp_in_parm_probs: int
    icmp_in_src_quenchs: int
    icmp_in_redirects: int
    icmp_in_echos: int
    icmp_in_echo_reps: int
    icmp_in_timestamps: int
    icmp_in_timestamp_reps: int
    icmp_in_addr_masks: int
    icmp_in_addr_mask_reps: int
    icmp_out_msgs: int
    icmp_out_errors: int
    icmp_out_dest_unreachs: int
    icmp_out_time_excds: int
    icmp_out_parm_probs: int
    icmp_out_src_quenchs: int
    icmp_out_redirects: int
    icmp_out_echos: int
    icmp_out_echo_reps: int
    icmp_out_timestamps: int
    icmp_out_timestamp_reps: int
    icmp_out_addr_masks: int
    icmp_out_addr_mask_reps: int

    tcp_rto_algorithm: TcpRtoAlgorithm
    tcp_rto_min: int
    tcp_rto_max: int
    tcp_max_conn: int
    tcp_active_opens: int
    tcp_passive_opens: int
    tcp_attempt_fails: int
    tcp_estab_resets: int
    tcp_curr_estab: int
    tcp_in_segs: int
    tcp_out_segs: int
    tcp_retrans_segs: int
    tcp_in_errs: int
    tcp_out_rsts: int
    tcp_in_csum_errors: int

    udp_in_datagrams: int
    udp_no_ports: int
    udp_in_errors: int
    udp_out_datagrams: int
    udp_rcvbuf_errors: int
    udp_sndbuf_errors: int
    udp_in_csum_errors: int
    udp_ignored_multi: int

    udp_lite_in_datagrams: int
    udp_lite_no_ports: int
    udp_lite_in_errors: int
    udp_lite_out_datagrams: int
    udp_lite_rcvbuf_errors: int
    udp_lite_sndbuf_errors: int
    udp_lite_in_csum_errors: int
    udp_lite_ignored_multi: int


def _integer(text: str, key: str, bits: int, signed: bool = False) -> int:
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(text):
        raise ParseError(f"invalid {key}: {text!r}")
    value = int(text)
    low, high = (-(1 << (bits - 1)), 1 << (bits - 1)) if signed else (0, 1 << bits)
    if not low <= value < high:
        raise ParseError(f"{key} out of range: {text!r}")
    return value


def _u64(text: str, key: str) -> int:
    return _integer(text, key, 64)


def _u32(text: str, key: str) -> int:
    return _integer(text, key, 32)


def _i64(text: str, key: str) -> int:
    return _integer(text, key, 64, signed=True)


def _enum(cls: type[IntEnum]) -> Callable[[str, str], IntEnum]:
    def convert(text: str, key: str) -> IntEnum:
        number = _integer(text, key, 8)
        try:
            return cls(number)
        except ValueError:
            raise IncompleteError(key) from None

    return convert


_FIELDS: tuple[tuple[str, str, Callable[[str, str], object]], ...] = (
    ("ip_forwarding", "Ip:Forwarding", _enum(IpForwarding)),
    ("ip_default_ttl", "Ip:DefaultTTL", _u32),
    ("ip_in_receives", "Ip:InReceives", _u64),
    ("ip_in_hdr_errors", "Ip:InHdrErrors", _u64),
    ("ip_in_addr_errors", "Ip:InAddrErrors", _u64),
    ("ip_forw_datagrams", "Ip:ForwDatagrams", _u64),
    ("ip_in_unknown_protos", "Ip:InUnknownProtos", _u64),
    ("ip_in_discards", "Ip:InDiscards", _u64),
    ("ip_in_delivers", "Ip:InDelivers", _u64),
    ("ip_out_requests", "Ip:OutRequests", _u64),
    ("ip_out_discards", "Ip:OutDiscards", _u64),
    ("ip_out_no_routes", "Ip:OutNoRoutes", _u64),
    ("ip_reasm_timeout", "Ip:ReasmTimeout", _u64),
    ("ip_reasm_reqds", "Ip:ReasmReqds", _u64),
    ("ip_reasm_oks", "Ip:ReasmOKs", _u64),
    ("ip_reasm_fails", "Ip:ReasmFails", _u64),
    ("ip_frag_oks", "Ip:FragOKs", _u64),
    ("ip_frag_fails", "Ip:FragFails", _u64),
    ("ip_frag_creates", "Ip:FragCreates", _u64),
    ("icmp_in_msgs", "Icmp:InMsgs", _u64),
    ("icmp_in_errors", "Icmp:InErrors", _u64),
    ("icmp_in_csum_errors", "Icmp:InCsumErrors", _u64),
    ("icmp_in_dest_unreachs", "Icmp:InDestUnreachs", _u64),
    ("icmp_in_time_excds", "Icmp:InTimeExcds", _u64),
    ("icmp_in_parm_probs", "Icmp:InParmProbs", _u64),
    ("icmp_in_src_quenchs", "Icmp:InSrcQuenchs", _u64),
    ("icmp_in_redirects", "Icmp:InRedirects", _u64),
    ("icmp_in_echos", "Icmp:InEchos", _u64),
    ("icmp_in_echo_reps", "Icmp:InEchoReps", _u64),
    ("icmp_in_timestamps", "Icmp:InTimestamps", _u64),
    ("icmp_in_timestamp_reps", "Icmp:InTimestampReps", _u64),
    ("icmp_in_addr_masks", "Icmp:InAddrMasks", _u64),
    ("icmp_in_addr_mask_reps", "Icmp:InAddrMaskReps", _u64),
    ("icmp_out_msgs", "Icmp:OutMsgs", _u64),
    ("icmp_out_errors", "Icmp:OutErrors", _u64),
    ("icmp_out_dest_unreachs", "Icmp:OutDestUnreachs", _u64),
    ("icmp_out_time_excds", "Icmp:OutTimeExcds", _u64),
    ("icmp_out_parm_probs", "Icmp:OutParmProbs", _u64),
    ("icmp_out_src_quenchs", "Icmp:OutSrcQuenchs", _u64),
    ("icmp_out_redirects", "Icmp:OutRedirects", _u64),
    ("icmp_out_echos", "Icmp:OutEchos", _u64),
    ("icmp_out_echo_reps", "Icmp:OutEchoReps", _u64),
    ("icmp_out_timestamps", "Icmp:OutTimestamps", _u64),
    ("icmp_out_timestamp_reps", "Icmp:OutTimestampReps", _u64),
    ("icmp_out_addr_masks", "Icmp:OutAddrMasks", _u64),
    ("icmp_out_addr_mask_reps", "Icmp:OutAddrMaskReps", _u64),
    ("tcp_rto_algorithm", "Tcp:RtoAlgorithm", _enum(TcpRtoAlgorithm)),
    ("tcp_rto_min", "Tcp:RtoMin", _u64),
    ("tcp_rto_max", "Tcp:RtoMax", _u64),
    ("tcp_max_conn", "Tcp:MaxConn", _i64),
    ("tcp_active_opens", "Tcp:ActiveOpens", _u64),
    ("tcp_passive_opens", "Tcp:PassiveOpens", _u64),
    ("tcp_attempt_fails", "Tcp:AttemptFails", _u64),
    ("tcp_estab_resets", "Tcp:EstabResets", _u64),
    ("tcp_curr_estab", "Tcp:CurrEstab", _u64),
    ("tcp_in_segs", "Tcp:InSegs", _u64),
    ("tcp_out_segs", "Tcp:OutSegs", _u64),
    ("tcp_retrans_segs", "Tcp:RetransSegs", _u64),
    ("tcp_in_errs", "Tcp:InErrs", _u64),
    ("tcp_out_rsts", "Tcp:OutRsts", _u64),
    ("tcp_in_csum_errors", "Tcp:InCsumErrors", _u64),
    ("udp_in_datagrams", "Udp:InDatagrams", _u64),
    ("udp_no_ports", "Udp:NoPorts", _u64),
    ("udp_in_errors", "Udp:InErrors", _u64),
    ("udp_out_datagrams", "Udp:OutDatagrams", _u64),
    ("udp_rcvbuf_errors", "Udp:RcvbufErrors", _u64),
    ("udp_sndbuf_errors", "Udp:SndbufErrors", _u64),
    ("udp_in_csum_errors", "Udp:InCsumErrors", _u64),
    ("udp_ignored_multi", "Udp:IgnoredMulti", _u64),
    ("udp_lite_in_datagrams", "UdpLite:InDatagrams", _u64),
    ("udp_lite_no_ports", "UdpLite:NoPorts", _u64),
    ("udp_lite_in_errors", "UdpLite:InErrors", _u64),
    ("udp_lite_out_datagrams", "UdpLite:OutDatagrams", _u64),
    ("udp_lite_rcvbuf_errors", "UdpLite:RcvbufErrors", _u64),
    ("udp_lite_sndbuf_errors", "UdpLite:SndbufErrors", _u64),
    ("udp_lite_in_csum_errors", "UdpLite:InCsumErrors", _u64),
    ("udp_lite_ignored_multi", "UdpLite:IgnoredMulti", _u64),
)


def _section(header: str, data: str) -> dict[str, str] | None:
    """Pair a header line with its data line; None if they do not match up."""
    names = header.split()
    values = data.split()
    if not names or not values:
        return None
    prefix, names = names[0], names[1:]
    values = values[1:]
    if len(values) < len(names):
        return None
    return {f"{prefix}{name}": value for name, value in zip(names, values)}


def _sections(lines: Iterable[str]) -> Iterator[dict[str, str]]:
    it = iter(lines)
    for header in it:
        section = _section(header, next(it, ""))
        if section is not None:
            yield section


def parse_snmp(lines: Iterable[str]) -> Snmp:
    """Parse /proc/net/snmp.

    The file is a series of header/data line pairs; pairs that do not line up
    are ignored, and a counter missing from every pair is an error.
    """
    values: dict[str, str] = {}
    for section in _sections(lines):
        values.update(section)

    parsed: dict[str, object] = {}
    for attr, key, convert in _FIELDS:
        text = values.get(key)
        if text is None:
            raise IncompleteError(key)
        parsed[attr] = convert(text, key)
    return Snmp(**parsed)