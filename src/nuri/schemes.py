"""nuri.schemes
Default ports and structural policies of the schemes nuri knows about.
"""

import enum
import re

from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

from .exceptions import UriSyntaxError


class SchemePolicy(enum.Enum):
    """The structural rules a scheme imposes on top of RFC 3986."""

    SCHEME_AND_PATH_ONLY = "scheme and path only"
    SCHEME_HOST_AND_PATH_ONLY = "scheme, host and path only"
    NON_EMPTY_HOST = "non-empty host"
    NON_EMPTY_HOST_NO_FRAGMENT = "non-empty host, no fragment"
    NON_EMPTY_HOST_NO_FRAGMENT_NO_QUERY = "non-empty host, no fragment, no query"


class SchemeSpec(NamedTuple):
    default_port: int | None
    policy: SchemePolicy


SCHEMES: Mapping[str, SchemeSpec] = MappingProxyType(
    {
        "data": SchemeSpec(None, SchemePolicy.SCHEME_AND_PATH_ONLY),
        "file": SchemeSpec(None, SchemePolicy.SCHEME_HOST_AND_PATH_ONLY),
        "ftp": SchemeSpec(21, SchemePolicy.NON_EMPTY_HOST_NO_FRAGMENT_NO_QUERY),
        "gopher": SchemeSpec(70, SchemePolicy.NON_EMPTY_HOST_NO_FRAGMENT_NO_QUERY),
        "http": SchemeSpec(80, SchemePolicy.NON_EMPTY_HOST),
        "https": SchemeSpec(443, SchemePolicy.NON_EMPTY_HOST),
        "ws": SchemeSpec(80, SchemePolicy.NON_EMPTY_HOST_NO_FRAGMENT),
        "wss": SchemeSpec(443, SchemePolicy.NON_EMPTY_HOST_NO_FRAGMENT),
    }
)


def default_port(scheme: str | None) -> int | None:
    entry: SchemeSpec | None = SCHEMES.get(scheme) if scheme is not None else None
    return entry.default_port if entry is not None else None


def policy_for(scheme: str | None) -> SchemePolicy | None:
    entry: SchemeSpec | None = SCHEMES.get(scheme) if scheme is not None else None
    return entry.policy if entry is not None else None


_PORT_PAT: re.Pattern[str] = re.compile(r"[0-9]+")


def format_port(port: Any, scheme: str | None) -> int | None:
    """Returns port as an int, or None when it is absent or the default port of scheme."""
    if port is None or port == "":
        return None

    if isinstance(port, str) and _PORT_PAT.fullmatch(port) is not None:
        port = int(port, base=10)
    elif not isinstance(port, int) or isinstance(port, bool):
        raise UriSyntaxError(f"The port `{port}` is invalid", "port")

    if port < 0:
        raise UriSyntaxError(f"The port `{port}` is invalid", "port")

    if port == default_port(scheme):
        return None
    return port


def _non_empty_host(scheme: str | None, host: str | None) -> list[str]:
    violations: list[str] = []
    if host == "":
        violations.append("the host can not be empty")
    if scheme is not None and host is None:
        violations.append("the host is required")
    return violations


def policy_violations(policy: SchemePolicy, components: Any) -> list[str]:
    """Returns a description of every rule of policy the components break, in order."""
    c = components
    violations: list[str] = []
    match policy:
        case SchemePolicy.SCHEME_AND_PATH_ONLY:
            if c.authority is not None:
                violations.append("the authority must be absent")
            if c.query is not None:
                violations.append("the query must be absent")
            if c.fragment is not None:
                violations.append("the fragment must be absent")
        case SchemePolicy.SCHEME_HOST_AND_PATH_ONLY:
            if c.user_info is not None:
                violations.append("the user info must be absent")
            if c.port is not None:
                violations.append("the port must be absent")
            if c.query is not None:
                violations.append("the query must be absent")
            if c.fragment is not None:
                violations.append("the fragment must be absent")
            if c.scheme is not None and c.host is None:
                violations.append("the host is required")
        case SchemePolicy.NON_EMPTY_HOST:
            violations.extend(_non_empty_host(c.scheme, c.host))
        case SchemePolicy.NON_EMPTY_HOST_NO_FRAGMENT:
            violations.extend(_non_empty_host(c.scheme, c.host))
            if c.fragment is not None:
                violations.append("the fragment must be absent")
        case SchemePolicy.NON_EMPTY_HOST_NO_FRAGMENT_NO_QUERY:
            violations.extend(_non_empty_host(c.scheme, c.host))
            if c.fragment is not None:
                violations.append("the fragment must be absent")
            if c.query is not None:
                violations.append("the query must be absent")
    return violations
