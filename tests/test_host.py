import pytest

from nuri import UriSyntaxError
from nuri.host import filter_registered_name, format_host, is_link_local


@pytest.mark.parametrize("host", [None, ""])
def test_absent_and_empty_hosts_pass_through(host):
    assert format_host(host) == host


@pytest.mark.parametrize(
    "host,expected",
    [
        ("WWW.Example.COM", "www.example.com"),
        ("127.0.0.1", "127.0.0.1"),
        ("exa mple", "exa%20mple"),
        ("EXAMPLE%2ecom", "example%2Ecom"),
        ("a_b~c!$", "a_b~c!$"),
    ],
)
def test_registered_names(host, expected):
    assert format_host(host) == expected
    assert filter_registered_name(host) == expected


@pytest.mark.parametrize(
    "host",
    [
        "[::1]",
        "[2001:db8::1]",
        "[FE80::A]",
        "[::ffff:192.0.2.128]",
        "[v7.fe80::1]",
        "[V1F.abc:def]",
        "[v04.anything]",
        "[fe80::1%eth0]",
        "[fe80::1%25eth0]",
        "[febf::1%en1]",
        "[fe80::1%12]",
        "[fe80::1%25e%74h0]",
    ],
)
def test_valid_ip_literals_are_returned_unchanged(host):
    assert format_host(host) == host


@pytest.mark.parametrize(
    "host",
    [
        "[127.0.0.1]",
        "[::1",
        "[]",
        "[v4.1.2.3.4]",
        "[v6.::1]",
        "[1:2:3:4:5:6:7:8:9]",
        "[2001:db8::1%eth0]",
        "[fec0::1%eth0]",
        "[fe80::1%]",
        "[fe80::1%et/h0]",
        "[fe80::1%25et%2Fh0]",
        "[fe80::g%eth0]",
        "[fe80::1%25]",
        "[fe80::1%e<t>h0]",
        "[fe80::1%eth\"0]",
        "[fe80::1%{eth0}]",
        "[fe80::1%eth|0]",
        "[fe80::1%eth^0]",
        "[fe80::1%eth`0]",
        "[fe80::1%ethé0]",
        "[fe80::1%eth%C3%A90]",
        "[fe80::1%eth%200]",
    ],
)
def test_invalid_ip_literals(host):
    with pytest.raises(UriSyntaxError) as e:
        format_host(host)
    assert e.value.component == "host"


def test_link_local_block_is_ten_bits():
    assert is_link_local("fe80::1")
    assert is_link_local("febf:ffff::1")
    assert not is_link_local("fec0::1")
    assert not is_link_local("fe00::1")
