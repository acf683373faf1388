"""nuri.path
Path canonicalization, generic and scheme-specific.
"""

import re

from .data import format_data_path
from .encoding import PATH, encode

# A leading drive letter whose separator may be written ":" or "|" (possibly already encoded).
_FILE_DRIVE_PAT: re.Pattern[str] = re.compile(r"(?P<delim>/)?(?P<letter>[a-zA-Z])(?::|\||%7[Cc])(?P<rest>.*)", re.DOTALL)


def format_path(path: str, scheme: str | None) -> str:
    if scheme == "data":
        path = format_data_path(path)
    path = encode(path, PATH)
    if scheme == "file":
        path = format_file_path(path)
    return path


def format_file_path(path: str) -> str:
    """Normalizes a Windows drive letter separator to ":".
    e.g. format_file_path("/c|/Windows") == "/c:/Windows"
    """
    m = _FILE_DRIVE_PAT.match(path)
    if m is None:
        return path
    return f"{m['delim'] or ''}{m['letter']}:{m['rest']}"
