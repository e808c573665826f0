"""IPv6, ICMPv6 and UDPv6 counters from /proc/net/snmp6."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import IncompleteError, ParseError

_UNSIGNED = re.compile(r"\+?[0-9]+")
_MAX_U64 = 2**64 - 1
_SKIPPED_PREFIXES = ("Icmp6InType", "Icmp6OutType")


@dataclass(frozen=True)
class Snmp6:
    """The IPv6 management information base counters of the SNMP agent."""

    ip_in_receives: int
    ip_in_hdr_errors: int
    ip_in_too_big_errors: int
    ip_in_no_routes: int
    ip_in_addr_errors: int
    ip_in_unknown_protos: int
    ip_in_truncated_pkts: int
    ip_in_discards: int
    ip_in_delivers: int
    ip_out_forw_datagrams: int
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
    ip_in_mcast_pkts: int
    ip_out_mcast_pkts: int
    ip_in_octets: int
    ip_out_octets: int
    ip_in_mcast_octets: int
    ip_out_mcast_octets: int
    ip_in_bcast_octets: int
    ip_out_bcast_octets: int
    ip_in_no_ect_pkts: int
    ip_in_ect1_pkts: int
    ip_in_ect0_pkts: int
    ip_in_ce_pkts: int

    icmp_in_msgs: int
    icmp_in_errors: int
    icmp_out_msgs: int
    icmp_out_errors: int
    icmp_in_csum_errors: int
    icmp_in_dest_unreachs: int
    icmp_in_pkt_too_bigs: int
    icmp_in_time_excds: int
    icmp_in_parm_problem: int
    icmp_in_echos: int
    icmp_in_echo_replies: int
    icmp_in_group_memb_queries: int
    icmp_in_group_memb_responses: int
    icmp_in_group_memb_reductions: int
    icmp_in_router_solicits: int
    icmp_in_router_advertisements: int
    icmp_in_neighbor_solicits: int
    icmp_in_neighbor_advertisements: int
    icmp_in_redirects: int
    icmp_in_mldv2_reports: int
    icmp_out_dest_unreachs: int
    icmp_out_pkt_too_bigs: int
    icmp_out_time_excds: int
    icmp_out_parm_problems: int
    icmp_out_echos: int
    icmp_out_echo_replies: int
    icmp_out_group_memb_queries: int
    icmp_out_group_memb_responses: int
    icmp_out_group_memb_reductions: int
    icmp_out_router_solicits: int
    icmp_out_router_advertisements: int
    icmp_out_neighbor_solicits: int
    icmp_out_neighbor_advertisements: int
    icmp_out_redirects: int
    icmp_out_mldv2_reports: int

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


_FIELDS: tuple[tuple[str, str], ...] = (
    ("ip_in_receives", "Ip6InReceives"),
    ("ip_in_hdr_errors", "Ip6InHdrErrors"),
    ("ip_in_too_big_errors", "Ip6InTooBigErrors"),
    ("ip_in_no_routes", "Ip6InNoRoutes"),
    ("ip_in_addr_errors", "Ip6InAddrErrors"),
    ("ip_in_unknown_protos", "Ip6InUnknownProtos"),
    ("ip_in_truncated_pkts", "Ip6InTruncatedPkts"),
    ("ip_in_discards", "Ip6InDiscards"),
    ("ip_in_delivers", "Ip6InDelivers"),
    ("ip_out_forw_datagrams", "Ip6OutForwDatagrams"),
    ("ip_out_requests", "Ip6OutRequests"),
    ("ip_out_discards", "Ip6OutDiscards"),
    ("ip_out_no_routes", "Ip6OutNoRoutes"),
    ("ip_reasm_timeout", "Ip6ReasmTimeout"),
    ("ip_reasm_reqds", "Ip6ReasmReqds"),
    ("ip_reasm_oks", "Ip6ReasmOKs"),
    ("ip_reasm_fails", "Ip6ReasmFails"),
    ("ip_frag_oks", "Ip6FragOKs"),
    ("ip_frag_fails", "Ip6FragFails"),
    ("ip_frag_creates", "Ip6FragCreates"),
    ("ip_in_mcast_pkts", "Ip6InMcastPkts"),
    ("ip_out_mcast_pkts", "Ip6OutMcastPkts"),
    ("ip_in_octets", "Ip6InOctets"),
    ("ip_out_octets", "Ip6OutOctets"),
    ("ip_in_mcast_octets", "Ip6InMcastOctets"),
    ("ip_out_mcast_octets", "Ip6OutMcastOctets"),
    ("ip_in_bcast_octets", "Ip6InBcastOctets"),
    ("ip_out_bcast_octets", "Ip6OutBcastOctets"),
    ("ip_in_no_ect_pkts", "Ip6InNoECTPkts"),
    ("ip_in_ect1_pkts", "Ip6InECT1Pkts"),
    ("ip_in_ect0_pkts", "Ip6InECT0Pkts"),
    ("ip_in_ce_pkts", "Ip6InCEPkts"),
    ("icmp_in_msgs", "Icmp6InMsgs"),
    ("icmp_in_errors", "Icmp6InErrors"),
    ("icmp_out_msgs", "Icmp6OutMsgs"),
    ("icmp_out_errors", "Icmp6OutErrors"),
    ("icmp_in_csum_errors", "Icmp6InCsumErrors"),
    ("icmp_in_dest_unreachs", "Icmp6InDestUnreachs"),
    ("icmp_in_pkt_too_bigs", "Icmp6InPktTooBigs"),
    ("icmp_in_time_excds", "Icmp6InTimeExcds"),
    ("icmp_in_parm_problem", "Icmp6InParmProblems"),
    ("icmp_in_echos", "Icmp6InEchos"),
    ("icmp_in_echo_replies", "Icmp6InEchoReplies"),
    ("icmp_in_group_memb_queries", "Icmp6InGroupMembQueries"),
    ("icmp_in_group_memb_responses", "Icmp6InGroupMembResponses"),
    ("icmp_in_group_memb_reductions", "Icmp6InGroupMembReductions"),
    ("icmp_in_router_solicits", "Icmp6InRouterSolicits"),
    ("icmp_in_router_advertisements", "Icmp6InRouterAdvertisements"),
    ("icmp_in_neighbor_solicits", "Icmp6InNeighborSolicits"),
    ("icmp_in_neighbor_advertisements", "Icmp6InNeighborAdvertisements"),
    ("icmp_in_redirects", "Icmp6InRedirects"),
    ("icmp_in_mldv2_reports", "Icmp6InMLDv2Reports"),
    ("icmp_out_dest_unreachs", "Icmp6OutDestUnreachs"),
    ("icmp_out_pkt_too_bigs", "Icmp6OutPktTooBigs"),
    ("icmp_out_time_excds", "Icmp6OutTimeExcds"),
    ("icmp_out_parm_problems", "Icmp6OutParmProblems"),
    ("icmp_out_echos", "Icmp6OutEchos"),
    ("icmp_out_echo_replies", "Icmp6OutEchoReplies"),
    ("icmp_out_group_memb_queries", "Icmp6OutGroupMembQueries"),
    ("icmp_out_group_memb_responses", "Icmp6OutGroupMembResponses"),
    ("icmp_out_group_memb_reductions", "Icmp6OutGroupMembReductions"),
    ("icmp_out_router_solicits", "Icmp6OutRouterSolicits"),
    ("icmp_out_router_advertisements", "Icmp6OutRouterAdvertisements"),
    ("icmp_out_neighbor_solicits", "Icmp6OutNeighborSolicits"),
    ("icmp_out_neighbor_advertisements", "Icmp6OutNeighborAdvertisements"),
    ("icmp_out_redirects", "Icmp6OutRedirects"),
    ("icmp_out_mldv2_reports", "Icmp6OutMLDv2Reports"),
    ("udp_in_datagrams", "Udp6InDatagrams"),
    ("udp_no_ports", "Udp6NoPorts"),
    ("udp_in_errors", "Udp6InErrors"),
    ("udp_out_datagrams", "Udp6OutDatagrams"),
    ("udp_rcvbuf_errors", "Udp6RcvbufErrors"),
    ("udp_sndbuf_errors", "Udp6SndbufErrors"),
    ("udp_in_csum_errors", "Udp6InCsumErrors"),
    ("udp_ignored_multi", "Udp6IgnoredMulti"),
    ("udp_lite_in_datagrams", "UdpLite6InDatagrams"),
    ("udp_lite_no_ports", "UdpLite6NoPorts"),
    ("udp_lite_in_errors", "UdpLite6InErrors"),
    ("udp_lite_out_datagrams", "UdpLite6OutDatagrams"),
    ("udp_lite_rcvbuf_errors", "UdpLite6RcvbufErrors"),
    ("udp_lite_sndbuf_errors", "UdpLite6SndbufErrors"),
    ("udp_lite_in_csum_errors", "UdpLite6InCsumErrors"),
)


def _u64(text: str, key: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseError(f"invalid {key}: {text!r}")
    value = int(text)
    if value > _MAX_U64:
        raise ParseError(f"{key} out of range: {text!r}")
    return value


def _counters(lines: Iterable[str]) -> dict[str, int]:
    counters: dict[str, int] = {}
    for line in lines:
        text = line.rstrip("\r\n")
        if not text:
            continue
        items = text.split()
        if not items:
            raise IncompleteError("no field")
        name = items[0]
        if name.startswith(_SKIPPED_PREFIXES):
            continue
        if len(items) < 2:
            raise IncompleteError("no value")
        counters[name] = _u64(items[1], name)
    return counters


def parse_snmp6(lines: Iterable[str]) -> Snmp6:
    """Parse /proc/net/snmp6, one ``Name value`` pair per line.

    Per-type ICMPv6 counters are ignored and unknown counters are dropped;
    a counter that is expected but absent is an error.
    """
    counters = _counters(lines)
    parsed: dict[str, int] = {}
    for attr, key in _FIELDS:
        if key not in counters:
            raise IncompleteError(key)
        parsed[attr] = counters[key]
    return Snmp6(**parsed)