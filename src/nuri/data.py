"""nuri.data
RFC 2397 validation of the path of a data URI.
"""

import base64
import binascii
import re

from .exceptions import UriSyntaxError

DEFAULT_MIMETYPE: str = "text/plain"
DEFAULT_PARAMETERS: str = "charset=us-ascii"
DEFAULT_DATA_PATH: str = f"{DEFAULT_MIMETYPE};{DEFAULT_PARAMETERS},"

# type "/" subtype [ "+" suffix ]
_MIMETYPE_PAT: re.Pattern[str] = re.compile(r"\w+/[-.\w]+(?:\+[-.\w]+)?", re.ASCII)

_BINARY_FLAG_PAT: re.Pattern[str] = re.compile(r"(?:;|^)base64$")


def format_data_path(path: str) -> str:
    """Returns the canonical mimetype;parameters,data form of a data URI path."""
    if len(path) == 0:
        return DEFAULT_DATA_PATH

    if not path.isascii() or "," not in path:
        raise UriSyntaxError(f"The path `{path}` is invalid according to RFC2397", "path")

    mediatype, _, data = path.partition(",")
    mimetype, _, parameters = mediatype.partition(";")
    if len(mimetype) == 0:
        mimetype = DEFAULT_MIMETYPE
    if len(parameters) == 0:
        parameters = DEFAULT_PARAMETERS

    _assert_valid_payload(mimetype, parameters, data)
    return f"{mimetype};{parameters},{data}"


def _is_invalid_parameter(parameter: str) -> bool:
    properties: list[str] = parameter.split("=")
    return len(properties) != 2 or properties[0].lower() == "base64"


def _assert_valid_payload(mimetype: str, parameters: str, data: str) -> None:
    if _MIMETYPE_PAT.fullmatch(mimetype) is None:
        raise UriSyntaxError(f"The path mimetype `{mimetype}` is invalid", "path")

    m = _BINARY_FLAG_PAT.search(parameters)
    is_binary: bool = m is not None
    if m is not None:
        parameters = parameters[: m.start()]

    # Empty parameters, e.g. the remains of a lone "base64" flag, are tolerated.
    if any(_is_invalid_parameter(p) for p in parameters.split(";") if len(p) > 0):
        raise UriSyntaxError(f"The path parameters `{parameters}` are invalid", "path")

    if not is_binary:
        return

    try:
        decoded: bytes = base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise UriSyntaxError(f"The path data `{data}` is invalid", "path") from e
    if base64.b64encode(decoded).decode("ascii") != data:
        raise UriSyntaxError(f"The path data `{data}` is invalid", "path")
