"""nuri.host
Host validation: registered names, IPv6 and IPvFuture literals, and RFC 6874 zone identifiers.
"""

import ipaddress

from urllib.parse import unquote

from .encoding import REG_NAME, capitalize_percent_encodings, encode
from .exceptions import UriSyntaxError
from .grammar import IPV6ADDRESS_PAT, IPVFUTURE_PAT, ZONE_ID_PAT
from .utils import log

# Only this block may carry a zone identifier.
LINK_LOCAL_BLOCK: ipaddress.IPv6Network = ipaddress.IPv6Network("fe80::/10")


def format_host(host: str | None) -> str | None:
    if host is None or len(host) == 0:
        return host
    if not host.startswith("["):
        return filter_registered_name(host)
    return format_ip(host)


def filter_registered_name(host: str) -> str:
    """Lowercases an ASCII registered name and percent-encodes anything reg-name does not allow.
    Invalid characters are escaped, never rejected.
    """
    if host.isascii():
        host = host.lower()
    return capitalize_percent_encodings(encode(host, REG_NAME))


def is_ipv6(ip: str) -> bool:
    return IPV6ADDRESS_PAT.fullmatch(ip) is not None


def is_link_local(ip: str) -> bool:
    """True when the first 10 bits of the packed address are those of fe80::/10."""
    return ipaddress.IPv6Address(ip) in LINK_LOCAL_BLOCK


def _malformed(host: str) -> UriSyntaxError:
    return UriSyntaxError(f"The host `{host}` is invalid : the IP host is malformed", "host")


def _decode_zone(zone: str) -> str:
    """Percent-decodes a zone identifier, dropping the "25" left over from an encoded "%" delimiter."""
    if zone.startswith("25"):
        zone = zone[2:]
    return unquote(zone)


def format_ip(host: str) -> str:
    """Validates a bracketed IP-literal and returns it unchanged."""
    if not host.endswith("]"):
        raise _malformed(host)
    ip: str = host[1:-1]

    if is_ipv6(ip):
        return host

    m = IPVFUTURE_PAT.fullmatch(ip)
    if m is not None and m["version"] not in ("4", "6"):
        return host

    address, delim, zone = ip.partition("%")
    if len(delim) == 0:
        raise _malformed(host)
    if ZONE_ID_PAT.fullmatch(_decode_zone(zone)) is None:
        raise _malformed(host)
    if not is_ipv6(address):
        raise _malformed(host)
    if not is_link_local(address):
        log.debug(f"rejecting zone id on {address}, it is not in {LINK_LOCAL_BLOCK}")
        raise _malformed(host)
    return host
