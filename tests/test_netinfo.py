import ipaddress
import socket
from unittest import mock

import pytest
import requests

from zerobase import netinfo


def _response(content):
    resp = mock.Mock()
    resp.content = content
    return resp


@pytest.mark.parametrize("ip", ["127.0.0.1", "localhost"])
def test_internal_addresses(ip):
    with mock.patch("zerobase.netinfo.requests.get") as get:
        assert netinfo.get_location(ip, "placeholder") == "内部IP"
        get.assert_not_called()


def test_location_joined_from_fields():
    body = '{"country":"中国","province":"湖南省","city":"长沙市","district":"","isp":"电信"}'
    with mock.patch(
        "zerobase.netinfo.requests.get", return_value=_response(body.encode())
    ) as get:
        result = netinfo.get_location("203.0.113.5", "placeholder")
    assert result == "中国-湖南省-长沙市--电信"
    url = get.call_args.args[0]
    assert "ip=203.0.113.5" in url
    assert "key=placeholder" in url
    assert "type=4" in url


def test_missing_fields_are_empty():
    with mock.patch(
        "zerobase.netinfo.requests.get", return_value=_response(b'{"city":"X"}')
    ):
        assert netinfo.get_location("203.0.113.5", "placeholder") == "--X--"


def test_request_failure_gives_unknown():
    with mock.patch(
        "zerobase.netinfo.requests.get",
        side_effect=requests.ConnectionError("down"),
    ):
        assert netinfo.get_location("203.0.113.5", "placeholder") == "未知位置"


@pytest.mark.parametrize("body", [b"not json", b"[1, 2]", b'{"status": 1}'])
def test_bad_body_gives_unknown(body):
    with mock.patch("zerobase.netinfo.requests.get", return_value=_response(body)):
        assert netinfo.get_location("203.0.113.5", "placeholder") == "未知位置"


def test_local_host_is_empty_or_non_loopback_ipv4():
    result = netinfo.get_local_host()
    if result:
        address = ipaddress.ip_address(result)
        assert address.version == 4 and not address.is_loopback
    else:
        assert result == ""


def test_local_host_skips_loopback():
    infos = [
        (socket.AF_INET, socket.SOCK_DGRAM, 0, "", ("127.0.0.1", 0)),
        (socket.AF_INET, socket.SOCK_DGRAM, 0, "", ("192.0.2.7", 0)),
    ]
    with mock.patch("zerobase.netinfo.socket.socket", side_effect=OSError), mock.patch(
        "zerobase.netinfo.socket.getaddrinfo", return_value=infos
    ):
        assert netinfo.get_local_host() == "192.0.2.7"


def test_local_host_empty_when_only_loopback():
    infos = [(socket.AF_INET, socket.SOCK_DGRAM, 0, "", ("127.0.0.1", 0))]
    with mock.patch("zerobase.netinfo.socket.socket", side_effect=OSError), mock.patch(
        "zerobase.netinfo.socket.getaddrinfo", return_value=infos
    ):
        assert netinfo.get_local_host() == ""


def test_local_host_empty_when_lookup_fails():
    with mock.patch("zerobase.netinfo.socket.socket", side_effect=OSError), mock.patch(
        "zerobase.netinfo.socket.getaddrinfo", side_effect=OSError("no name")
    ):
        assert netinfo.get_local_host() == ""