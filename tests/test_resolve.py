import pytest

from nuri import Uri, UriSyntaxError, resolve
from nuri.resolve import remove_dot_segments

BASE = "http://a/b/c/d;p?q"


# RFC 3986 section 5.4
@pytest.mark.parametrize(
    "reference,expected",
    [
        ("g:h", "g:h"),
        ("g", "http://a/b/c/g"),
        ("./g", "http://a/b/c/g"),
        ("g/", "http://a/b/c/g/"),
        ("/g", "http://a/g"),
        ("//g", "http://g"),
        ("?y", "http://a/b/c/d;p?y"),
        ("g?y", "http://a/b/c/g?y"),
        ("#s", "http://a/b/c/d;p?q#s"),
        ("g#s", "http://a/b/c/g#s"),
        ("g?y#s", "http://a/b/c/g?y#s"),
        (";x", "http://a/b/c/;x"),
        ("g;x", "http://a/b/c/g;x"),
        ("g;x?y#s", "http://a/b/c/g;x?y#s"),
        ("", "http://a/b/c/d;p?q"),
        (".", "http://a/b/c/"),
        ("./", "http://a/b/c/"),
        ("..", "http://a/b/"),
        ("../", "http://a/b/"),
        ("../g", "http://a/b/g"),
        ("../..", "http://a/"),
        ("../../", "http://a/"),
        ("../../g", "http://a/g"),
        ("../../../g", "http://a/g"),
        ("../../../../g", "http://a/g"),
        ("/./g", "http://a/g"),
        ("/../g", "http://a/g"),
        ("g.", "http://a/b/c/g."),
        (".g", "http://a/b/c/.g"),
        ("g..", "http://a/b/c/g.."),
        ("..g", "http://a/b/c/..g"),
        ("./../g", "http://a/b/g"),
        ("./g/.", "http://a/b/c/g/"),
        ("g/./h", "http://a/b/c/g/h"),
        ("g/../h", "http://a/b/c/h"),
    ],
)
def test_rfc3986_examples(reference, expected):
    assert str(resolve(Uri.from_string(reference), Uri.from_string(BASE))) == expected
    assert str(Uri.from_base_uri(reference, BASE)) == expected


def test_remove_dot_segments():
    assert remove_dot_segments("/a/b/c/./../../g") == "/a/g"
    assert remove_dot_segments("mid/content=5/../6") == "mid/6"


def test_merge_with_empty_base_path():
    assert str(Uri.from_base_uri("g", "http://a")) == "http://a/g"


def test_resolution_applies_the_base_scheme_policy():
    with pytest.raises(UriSyntaxError):
        Uri.from_base_uri("#frag", "ws://a/b")


def test_from_base_uri_without_base():
    assert str(Uri.from_base_uri("http://a/b/c/./../d?x#y")) == "http://a/b/d?x#y"
    mailto = Uri.from_string("mailto:a@example.com")
    assert Uri.from_base_uri(mailto) is mailto
    with pytest.raises(UriSyntaxError):
        Uri.from_base_uri("relative/path")


def test_from_base_uri_needs_an_absolute_base():
    with pytest.raises(UriSyntaxError):
        Uri.from_base_uri("g", "a/b")
