"""Network address helpers: public IP geolocation and local LAN address."""

import ipaddress
import json
import socket

import requests

INTERNAL_IP = "内部IP"
UNKNOWN_LOCATION = "未知位置"

_LOCATION_URL = "https://restapi.amap.com/v5/ip"
_LOCATION_FIELDS = ("country", "province", "city", "district", "isp")
# Connecting a UDP socket sends nothing; it only selects the outbound interface.
_PROBE_ADDRESS = ("10.254.254.254", 1)


def get_location(ip, key):
    """Look up the location of ``ip`` as ``country-province-city-district-isp``."""
    if ip in ("127.0.0.1", "localhost"):
        return INTERNAL_IP
    url = f"{_LOCATION_URL}?ip={ip}&type=4&key={key}"
    try:
        resp = requests.get(url)
    except requests.RequestException as exc:
        print("Failed to get response from restapi.amap.com:", exc)
        return UNKNOWN_LOCATION
    try:
        body = resp.content
    except requests.RequestException as exc:
        print("Failed to read response body:", exc)
        return UNKNOWN_LOCATION
    try:
        data = json.loads(body)
    except ValueError as exc:
        print("Failed to unmarshal response:", exc)
        return UNKNOWN_LOCATION
    if not isinstance(data, dict) or any(
        value is not None and not isinstance(value, str) for value in data.values()
    ):
        print("Failed to unmarshal response: expected an object of strings")
        return UNKNOWN_LOCATION
    return "-".join(data.get(name) or "" for name in _LOCATION_FIELDS)


def _candidate_addresses():
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
            probe.connect(_PROBE_ADDRESS)
            yield probe.getsockname()[0]
    except OSError:
        pass
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except OSError as exc:
        print("Failed to get network interfaces:", exc)
        return
    for info in infos:
        yield info[4][0]


def get_local_host():
    """Return the first non-loopback IPv4 address of this host, or an empty string."""
    for candidate in _candidate_addresses():
        try:
            address = ipaddress.ip_address(candidate)
        except ValueError:
            continue
        if address.version == 4 and not address.is_loopback and not address.is_unspecified:
            return str(address)
    return ""