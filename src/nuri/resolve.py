"""nuri.resolve
Reference resolution, RFC 3986 section 5.2.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .uri import Uri


def remove_dot_segments(path: str) -> str:
    """Implementation of the "remove_dot_segments" routine from RFC 3986 section 5.2.4"""
    result: str = ""
    while len(path) > 0:
        if path.startswith("./") or path.startswith("../"):
            _, _, path = path.partition("/")
        elif path.startswith("/./") or path == "/.":
            path = f"/{path[len('/./') :]}"
        elif path.startswith("/../") or path == "/..":
            path = f"/{path[len('/../') :]}"
            result, _, _ = result.rpartition("/")
        elif path in (".", ".."):
            path = ""
        else:
            if path.startswith("/"):
                _, _, path = path.partition("/")
                result += "/"
            first_seg, slash, rest = path.partition("/")
            path = slash + rest
            result += first_seg
    return result


def merge_paths(base: "Uri", reference: "Uri") -> str:
    """Implementation of the "merge" routine defined in RFC 3986 section 5.2.3"""
    if base.authority is not None and len(base.path) == 0:
        return f"/{reference.path}"
    dirname, slash, _ = base.path.rpartition("/")
    return dirname + slash + reference.path


def _split_user_info(user_info: str | None) -> tuple[str | None, str | None]:
    if user_info is None:
        return None, None
    user, colon, password = user_info.partition(":")
    return user, (password if len(colon) > 0 else None)


def resolve(reference: "Uri", base: "Uri") -> "Uri":
    """Implementation of the "Transform References" algorithm from RFC 3986 section 5.2.2 (strict parser)"""

    scheme: str | None
    user_info: str | None
    host: str | None
    port: int | None
    path: str
    query: str | None

    # This is a direct translation of the pseudocode in the RFC.
    if reference.scheme is not None:
        scheme = reference.scheme
        user_info = reference.user_info
        host = reference.host
        port = reference.port
        path = remove_dot_segments(reference.path)
        query = reference.query
    else:
        if reference.authority is not None:
            user_info = reference.user_info
            host = reference.host
            port = reference.port
            path = remove_dot_segments(reference.path)
            query = reference.query
        else:
            if len(reference.path) == 0:
                path = base.path
                if reference.query is not None:
                    query = reference.query
                else:
                    query = base.query
            else:
                if reference.path.startswith("/"):
                    path = remove_dot_segments(reference.path)
                else:
                    path = merge_paths(base, reference)
                    path = remove_dot_segments(path)
                query = reference.query
            user_info = base.user_info
            host = base.host
            port = base.port
        scheme = base.scheme

    user, password = _split_user_info(user_info)
    return base.__class__(
        scheme=scheme,
        user=user,
        password=password,
        host=host,
        port=port,
        path=path,
        query=query,
        fragment=reference.fragment,
    )
