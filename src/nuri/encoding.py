"""nuri.encoding
Percent-encoding canonicalization (RFC 3986 section 2.1).
"""

import re

from urllib.parse import quote

from .grammar import HEXDIG, SUB_DELIMS_CHARS, UNRESERVED_CHARS


def literal_set(chars: str) -> re.Pattern[str]:
    """Compiles the pattern matching everything that must be escaped in a component whose allowed literals are chars.
    A match is either a maximal run of disallowed characters or a "%" that does not start a triplet.
    """
    return re.compile(rf"(?:[^%{chars}]+|%(?!{HEXDIG}{HEXDIG}))")


USER: re.Pattern[str] = literal_set(UNRESERVED_CHARS + SUB_DELIMS_CHARS)
PASSWORD: re.Pattern[str] = literal_set(UNRESERVED_CHARS + SUB_DELIMS_CHARS + ":")
REG_NAME: re.Pattern[str] = literal_set(UNRESERVED_CHARS + SUB_DELIMS_CHARS)
PATH: re.Pattern[str] = literal_set(UNRESERVED_CHARS + SUB_DELIMS_CHARS + ":@/")
QUERY_OR_FRAGMENT: re.Pattern[str] = literal_set(UNRESERVED_CHARS + SUB_DELIMS_CHARS + ":@/?")


def _escape(m: re.Match[str]) -> str:
    return quote(m[0], safe="", errors="surrogatepass")


def encode(raw: str, invalid: re.Pattern[str]) -> str:
    """Returns raw with every match of invalid replaced by its UTF-8 percent-encoding.
    e.g. encode("a b%zz%2e", PATH) == "a%20b%25zz%2e"
    Encoding an already encoded string changes nothing.
    """
    return invalid.sub(_escape, raw)


def capitalize_percent_encodings(string: str) -> str:
    """Returns string with all percent-encoded sequences expressed in capital letters.
    e.g. capitalize_percent_encodings("example%2ecom") == "example%2Ecom"
    """
    # Does not change length of string.
    for m in re.finditer(rf"%(?:[a-f]{HEXDIG}|{HEXDIG}[a-f])", string):
        string = string[: m.start()] + string[m.start() : m.end()].upper() + string[m.end() :]
    return string
