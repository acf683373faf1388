import pytest

from nuri import RawComponents, split


@pytest.mark.parametrize(
    "uri,expected",
    [
        (
            "http://u:p@example.org:8080/a?b#c",
            RawComponents("http", "u", "p", "example.org", "8080", "/a", "b", "c"),
        ),
        ("http://u@h", RawComponents(scheme="http", user="u", host="h")),
        ("http://:@h", RawComponents(scheme="http", user="", password="", host="h")),
        ("http://a@b@c/", RawComponents(scheme="http", user="a@b", host="c", path="/")),
        ("http://h:", RawComponents(scheme="http", host="h", port="")),
        ("//[::1]:80", RawComponents(host="[::1]", port="80")),
        ("//[fe80::1%25eth0]", RawComponents(host="[fe80::1%25eth0]")),
        ("file:///etc", RawComponents(scheme="file", host="", path="/etc")),
        ("a/b", RawComponents(path="a/b")),
        ("?#", RawComponents(query="", fragment="")),
        ("", RawComponents()),
        ("urn:isbn:0451450523", RawComponents(scheme="urn", path="isbn:0451450523")),
        ("#a?b#c", RawComponents(fragment="a?b#c")),
    ],
)
def test_split(uri, expected):
    assert split(uri) == expected


def test_split_does_not_validate():
    result = split("ht tp://exa mple:port/p a t h")
    assert result.scheme == "ht tp"
    assert result.host == "exa mple"
    assert result.port == "port"
    assert result.path == "/p a t h"
