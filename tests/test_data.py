import pytest

from nuri import UriSyntaxError
from nuri.data import DEFAULT_DATA_PATH, format_data_path


def test_empty_path_is_plain_ascii_text():
    assert format_data_path("") == DEFAULT_DATA_PATH == "text/plain;charset=us-ascii,"


@pytest.mark.parametrize(
    "path,expected",
    [
        (",Hello", "text/plain;charset=us-ascii,Hello"),
        ("text/html,<p>", "text/html;charset=us-ascii,<p>"),
        (";charset=utf-8,Hello", "text/plain;charset=utf-8,Hello"),
        ("text/plain;base64,SGVsbG8=", "text/plain;base64,SGVsbG8="),
        (";base64,SGVsbG8=", "text/plain;base64,SGVsbG8="),
        ("image/svg+xml;charset=utf-8;base64,PHN2Zy8+", "image/svg+xml;charset=utf-8;base64,PHN2Zy8+"),
        ("application/vnd.ms-excel;name=a.xls,payload", "application/vnd.ms-excel;name=a.xls,payload"),
        ("text/plain,a,b", "text/plain;charset=us-ascii,a,b"),
        ("text/plain;base64,", "text/plain;base64,"),
    ],
)
def test_valid_data_paths(path, expected):
    assert format_data_path(path) == expected


@pytest.mark.parametrize(
    "path",
    [
        "no comma here",
        "text/plain,héllo",
        "text,Hello",
        "text/plain+,Hello",
        "text/plain;charset,Hello",
        "text/plain;a=b=c,Hello",
        "text/plain;base64=1,Hello",
        "text/plain;base64,SGVsbG8",
        "text/plain;base64,SGVsbG8==",
        "text/plain;base64,SGVs bG8=",
        "text/plain;base64,SGVsbG9=",
    ],
)
def test_invalid_data_paths(path):
    with pytest.raises(UriSyntaxError) as e:
        format_data_path(path)
    assert e.value.component == "path"
