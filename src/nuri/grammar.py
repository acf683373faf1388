"""nuri.grammar
RFC 3986 ABNF rules as regular expression fragments, plus the precompiled
patterns every component validator shares.
"""

import re

# Each of these ABNF rules is from RFC 3986, 6874, or 5234.

# ALPHA = %x41-5A / %x61-7A
ALPHA: str = r"[A-Za-z]"

# DIGIT = %x30-39
DIGIT: str = r"[0-9]"

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
HEXDIG: str = rf"(?:{DIGIT}|[A-Fa-f])"

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED: str = rf"(?:{ALPHA}|{DIGIT}|[-._~])"

# pct-encoded = "%" HEXDIG HEXDIG
PCT_ENCODED: str = rf"%{HEXDIG}{HEXDIG}"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS: str = r"[!$&'()*+,;=]"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME: str = rf"{ALPHA}(?:{ALPHA}|{DIGIT}|[+\-.])*"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
DEC_OCTET: str = rf"(?:{DIGIT}|[1-9]{DIGIT}|1{DIGIT}{{2}}|2[0-4]{DIGIT}|25[0-5])"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
IPV4ADDRESS: str = rf"{DEC_OCTET}\.{DEC_OCTET}\.{DEC_OCTET}\.{DEC_OCTET}"

# h16 = 1*4HEXDIG
H16: str = rf"(?:{HEXDIG}{{1,4}})"

# ls32 = ( h16 ":" h16 ) / IPv4address
LS32: str = rf"(?:{H16}:{H16}|{IPV4ADDRESS})"

# IPv6address =                                      6( h16 ":" ) ls32
#                       /                       "::" 5( h16 ":" ) ls32
#                       / [               h16 ] "::" 4( h16 ":" ) ls32
#                       / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#                       / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#                       / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#                       / [ *4( h16 ":" ) h16 ] "::"              ls32
#                       / [ *5( h16 ":" ) h16 ] "::"              h16
#                       / [ *6( h16 ":" ) h16 ] "::"
IPV6ADDRESS: str = (
    "(?:"
    + r"|".join(
        (
                                           rf"(?:{H16}:){{6}}{LS32}",
                                         rf"::(?:{H16}:){{5}}{LS32}",
                              rf"(?:{H16})?::(?:{H16}:){{4}}{LS32}",
            rf"(?:(?:{H16}:){{0,1}}{H16})?::(?:{H16}:){{3}}{LS32}",
            rf"(?:(?:{H16}:){{0,2}}{H16})?::(?:{H16}:){{2}}{LS32}",
            rf"(?:(?:{H16}:){{0,3}}{H16})?::(?:{H16}:){LS32}",
            rf"(?:(?:{H16}:){{0,4}}{H16})?::{LS32}",
            rf"(?:(?:{H16}:){{0,5}}{H16})?::{H16}",
            rf"(?:(?:{H16}:){{0,6}}{H16})?::",
        )
    )
    + ")"
)

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
IPVFUTURE: str = rf"[vV](?P<version>{HEXDIG}+)\.(?:{UNRESERVED}|{SUB_DELIMS}|:)+"

# Literal character sets, written as the body of a regex character class.
UNRESERVED_CHARS: str = r"A-Za-z0-9\-._~"
SUB_DELIMS_CHARS: str = r"!$&'()*+,;="

SCHEME_PAT: re.Pattern[str] = re.compile(SCHEME)
IPV6ADDRESS_PAT: re.Pattern[str] = re.compile(IPV6ADDRESS)
IPVFUTURE_PAT: re.Pattern[str] = re.compile(IPVFUTURE)

# C0 controls and DEL never appear in a URI, encoded or not.
INVALID_URI_CHARS: re.Pattern[str] = re.compile(r"[\x00-\x1f\x7f]")

# ZoneID = 1*( unreserved / pct-encoded ), matched here after decoding
ZONE_ID_PAT: re.Pattern[str] = re.compile(rf"[{UNRESERVED_CHARS}]+")
