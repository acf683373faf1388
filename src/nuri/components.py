"""nuri.components
Turns raw component values into their canonical, validated forms.
"""

from typing import Any, NamedTuple

from .encoding import PASSWORD, QUERY_OR_FRAGMENT, USER, encode
from .exceptions import UriSyntaxError
from .grammar import INVALID_URI_CHARS, SCHEME_PAT
from .host import format_host
from .path import format_path
from .schemes import format_port


class Components(NamedTuple):
    """The formatted components of a URI. authority is derived from user_info, host and port."""

    scheme: str | None
    user_info: str | None
    host: str | None
    port: int | None
    authority: str | None
    path: str
    query: str | None
    fragment: str | None


def filter_string(value: Any, component: str) -> str | None:
    """Coerces value to text, rejecting what has no text form and text with control characters."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, bool)) or not (
        isinstance(value, (str, int, float)) or type(value).__str__ is not object.__str__
    ):
        raise TypeError(
            f"The {component} must be a str, int, float or an object defining __str__, {type(value).__name__} given"
        )
    text: str = str(value)
    if INVALID_URI_CHARS.search(text) is not None:
        raise UriSyntaxError(f"The {component} {text!r} contains invalid characters", component)
    return text


def format_scheme(scheme: str | None) -> str | None:
    if scheme is None or len(scheme) == 0:
        return None
    formatted: str = scheme.lower()
    if SCHEME_PAT.fullmatch(formatted) is None:
        raise UriSyntaxError(f"The scheme `{scheme}` is invalid", "scheme")
    return formatted


def format_user_info(user: str | None, password: str | None) -> str | None:
    if user is None:
        return None
    user = encode(user, USER)
    if password is None:
        return user
    return f"{user}:{encode(password, PASSWORD)}"


def format_query_or_fragment(component: str | None) -> str | None:
    if component is None or len(component) == 0:
        return component
    return encode(component, QUERY_OR_FRAGMENT)


def build_authority(user_info: str | None, host: str | None, port: int | None) -> str | None:
    """userinfo@host:port"""
    if user_info is None and host is None and port is None:
        return None
    result: str = ""
    if user_info is not None:
        result += f"{user_info}@"
    if host is not None:
        result += host
    if port is not None:
        result += f":{port}"
    return result


def build_uri_string(components: Components) -> str:
    """Direct translation of RFC 3986 section 5.3"""
    result: str = ""
    if components.scheme is not None:
        result += f"{components.scheme}:"
    if components.authority is not None:
        result += f"//{components.authority}"
    result += components.path
    if components.query is not None:
        result += f"?{components.query}"
    if components.fragment is not None:
        result += f"#{components.fragment}"
    return result


def format_components(
    scheme: Any = None,
    user: Any = None,
    password: Any = None,
    host: Any = None,
    port: Any = None,
    path: Any = "",
    query: Any = None,
    fragment: Any = None,
) -> Components:
    """Formats every raw component, in the order the later ones depend on."""
    raw_path: str | None = filter_string(path, "path")
    if raw_path is None:
        raise TypeError("A path must be a string, None given")

    formatted_scheme: str | None = format_scheme(filter_string(scheme, "scheme"))
    user_info: str | None = format_user_info(filter_string(user, "user"), filter_string(password, "password"))
    formatted_host: str | None = format_host(filter_string(host, "host"))
    formatted_port: int | None = format_port(port, formatted_scheme)
    return Components(
        scheme=formatted_scheme,
        user_info=user_info,
        host=formatted_host,
        port=formatted_port,
        authority=build_authority(user_info, formatted_host, formatted_port),
        path=format_path(raw_path, formatted_scheme),
        query=format_query_or_fragment(filter_string(query, "query")),
        fragment=format_query_or_fragment(filter_string(fragment, "fragment")),
    )
