"""nuri.uri
The Uri value type.
"""

import base64
import copy
import dataclasses
import mimetypes
import pathlib
import re

from typing import Any, Mapping, Self
from urllib.parse import quote

from .components import (
    Components,
    build_authority,
    build_uri_string,
    filter_string,
    format_components,
    format_query_or_fragment,
    format_scheme,
    format_user_info,
)
from .exceptions import UriSyntaxError
from .host import format_host
from .parse import split
from .path import format_path
from .resolve import resolve
from .schemes import format_port
from .state import assert_valid_state
from .utils import log

_WINDOWS_ROOT_PAT: re.Pattern[str] = re.compile(r"(?P<letter>[a-zA-Z])[:|]")


def _encode_segments(path: str) -> str:
    return "/".join(quote(segment, safe="") for segment in path.split("/"))


class Uri:
    """A URI reference that is valid according to RFC 3986 and to the rules of its scheme.
    Instances never change. Every with_* method returns a new, equally valid Uri, or the
    same instance when nothing would change.
    """

    def __init__(
        self: Self,
        scheme: Any = None,
        user: Any = None,
        password: Any = None,
        host: Any = None,
        port: Any = None,
        path: Any = "",
        query: Any = None,
        fragment: Any = None,
    ) -> None:
        self._components: Components = format_components(
            scheme=scheme,
            user=user,
            password=password,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        )
        self._cached_string: str | None = None
        self._assert_valid_state()

    def _assert_valid_state(self: Self) -> None:
        assert_valid_state(self._components)
        self._cached_string = None

    def _replace(self: Self, **changes: Any) -> Self:
        result: Self = copy.copy(self)
        result._components = self._components._replace(**changes)
        result._assert_valid_state()
        return result

    @classmethod
    def from_string(cls, uri: Any) -> Self:
        text: str | None = filter_string(uri, "uri")
        if text is None:
            raise TypeError("A uri must be a string, None given")
        return cls(**dataclasses.asdict(split(text)))

    @classmethod
    def from_components(cls, components: Mapping[str, Any]) -> Self:
        """Accepts the keyword arguments of the constructor as a mapping, missing keys are absent components."""
        return cls(**components)

    @classmethod
    def from_base_uri(cls, uri: Any, base_uri: Any = None) -> Self:
        """Resolves uri against base_uri. The result is always absolute."""
        if not isinstance(uri, Uri):
            uri = cls.from_string(uri)

        if base_uri is None:
            if uri.scheme is None:
                raise UriSyntaxError(f"the URI `{uri}` must be absolute", "scheme")
            if uri.authority is None:
                return uri
            return resolve(uri, uri.with_fragment(None).with_query(None).with_path(""))

        if not isinstance(base_uri, Uri):
            base_uri = cls.from_string(base_uri)
        if base_uri.scheme is None:
            raise UriSyntaxError(f"the base URI `{base_uri}` must be absolute", "scheme")
        return resolve(uri, base_uri)

    @classmethod
    def from_unix_path(cls, path: str = "") -> Self:
        path = _encode_segments(path)
        if not path.startswith("/"):
            return cls(path=path)
        return cls(scheme="file", host="", path=path)

    @classmethod
    def from_windows_path(cls, path: str = "") -> Self:
        root: str = ""
        m = _WINDOWS_ROOT_PAT.match(path)
        if m is not None:
            root = f"{m['letter']}:"
            path = path[m.end() :]
        path = _encode_segments(path.replace("\\", "/"))

        # Local Windows absolute path
        if len(root) > 0:
            return cls(scheme="file", host="", path=f"/{root}{path}")

        # UNC Windows path
        if not path.startswith("//"):
            return cls(path=path)
        host, _, rest = path[2:].partition("/")
        return cls(scheme="file", host=host, path=f"/{rest}")

    @classmethod
    def from_data_path(cls, path: str | pathlib.Path) -> Self:
        """Embeds the contents of a local file in a base64 data URI."""
        path = pathlib.Path(path)
        log.debug(f"reading {path} into a data uri")
        try:
            raw: bytes = path.read_bytes()
        except OSError as e:
            raise UriSyntaxError(f"The file `{path}` does not exist or is not readable", "path") from e

        mimetype, _ = mimetypes.guess_type(path.as_posix())
        if mimetype is None:
            log.info(f"could not guess the media type of {path}, using application/octet-stream")
            mimetype = "application/octet-stream"
        return cls(scheme="data", path=f"{mimetype};base64,{base64.b64encode(raw).decode('ascii')}")

    @property
    def scheme(self: Self) -> str | None:
        return self._components.scheme

    @property
    def authority(self: Self) -> str | None:
        """userinfo@host:port"""
        return self._components.authority

    @property
    def user_info(self: Self) -> str | None:
        return self._components.user_info

    @property
    def host(self: Self) -> str | None:
        return self._components.host

    @property
    def port(self: Self) -> int | None:
        return self._components.port

    @property
    def path(self: Self) -> str:
        return self._components.path

    @property
    def query(self: Self) -> str | None:
        return self._components.query

    @property
    def fragment(self: Self) -> str | None:
        return self._components.fragment

    def with_scheme(self: Self, scheme: Any) -> Self:
        formatted: str | None = format_scheme(filter_string(scheme, "scheme"))
        if formatted == self.scheme:
            return self
        # The old port may be the default of the new scheme.
        port: int | None = format_port(self.port, formatted)
        return self._replace(scheme=formatted, port=port, authority=build_authority(self.user_info, self.host, port))

    def with_user_info(self: Self, user: Any, password: Any = None) -> Self:
        user_info: str | None = None
        raw_user: str | None = filter_string(user, "user")
        raw_password: str | None = filter_string(password, "password")
        if raw_user != "":
            user_info = format_user_info(raw_user, raw_password)
        if user_info == self.user_info:
            return self
        return self._replace(user_info=user_info, authority=build_authority(user_info, self.host, self.port))

    def with_host(self: Self, host: Any) -> Self:
        formatted: str | None = format_host(filter_string(host, "host"))
        if formatted == self.host:
            return self
        return self._replace(host=formatted, authority=build_authority(self.user_info, formatted, self.port))

    def with_port(self: Self, port: Any) -> Self:
        formatted: int | None = format_port(port, self.scheme)
        if formatted == self.port:
            return self
        return self._replace(port=formatted, authority=build_authority(self.user_info, self.host, formatted))

    def with_path(self: Self, path: Any) -> Self:
        raw: str | None = filter_string(path, "path")
        if raw is None:
            raise TypeError("A path must be a string, None given")
        formatted: str = format_path(raw, self.scheme)
        if formatted == self.path:
            return self
        return self._replace(path=formatted)

    def with_query(self: Self, query: Any) -> Self:
        formatted: str | None = format_query_or_fragment(filter_string(query, "query"))
        if formatted == self.query:
            return self
        return self._replace(query=formatted)

    def with_fragment(self: Self, fragment: Any) -> Self:
        formatted: str | None = format_query_or_fragment(filter_string(fragment, "fragment"))
        if formatted == self.fragment:
            return self
        return self._replace(fragment=formatted)

    def to_string(self: Self) -> str:
        # Recomputing concurrently is harmless, the result is always the same.
        if self._cached_string is None:
            self._cached_string = build_uri_string(self._components)
        return self._cached_string

    def __str__(self: Self) -> str:
        return self.to_string()

    def __repr__(self: Self) -> str:
        c: Components = self._components
        if c.user_info is not None and ":" in c.user_info:
            user_info: str = f"{c.user_info.partition(':')[0]}:***"
            c = c._replace(user_info=user_info, authority=build_authority(user_info, c.host, c.port))
        return f"{self.__class__.__name__}({build_uri_string(c)!r})"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __hash__(self: Self) -> int:
        return hash(self.to_string())
