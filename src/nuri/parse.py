"""nuri.parse
Splits a URI reference string into raw, unvalidated components.
Validation is left to nuri.Uri, which is what you normally want to call instead.
"""

import dataclasses
import re

# RFC 3986 appendix B, with named groups.
_URI_REFERENCE_PAT: re.Pattern[str] = re.compile(
    r"\A(?:(?P<scheme>[^:/?#]+):)?(?://(?P<authority>[^/?#]*))?(?P<path>[^?#]*)(?:\?(?P<query>[^#]*))?(?:#(?P<fragment>.*))?\Z",
    re.DOTALL,
)

# host [ ":" port ], where host may be a bracketed IP-literal holding colons of its own.
_HOST_PORT_PAT: re.Pattern[str] = re.compile(r"\A(?P<host>\[[^\]]*\]|[^:]*)(?::(?P<port>.*))?\Z", re.DOTALL)


@dataclasses.dataclass
class RawComponents:
    """A class to hold the pieces of a URI reference exactly as they appear in the string."""

    scheme: str | None = None
    user: str | None = None
    password: str | None = None
    host: str | None = None
    port: str | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None


def split(data: str) -> RawComponents:
    """Generic, lenient URI reference splitter.
    e.g. split("http://u:p@example.org:8080/a?b#c") gives user "u", password "p", port "8080" and so on.
    Malformed authorities are split as well as they can be and left for the caller to reject.
    """
    # The pattern can match any string.
    m: re.Match[str] = _URI_REFERENCE_PAT.match(data)  # type: ignore[assignment]

    result: RawComponents = RawComponents(
        scheme=m["scheme"],
        path=m["path"],
        query=m["query"],
        fragment=m["fragment"],
    )

    authority: str | None = m["authority"]
    if authority is None:
        return result

    userinfo, at, hostport = authority.rpartition("@")
    if len(at) > 0:
        user, colon, password = userinfo.partition(":")
        result.user = user
        result.password = password if len(colon) > 0 else None

    # Also total; "[::1]junk" comes out as host "[" and is rejected later.
    hm: re.Match[str] = _HOST_PORT_PAT.match(hostport)  # type: ignore[assignment]
    result.host = hm["host"]
    result.port = hm["port"]
    return result
