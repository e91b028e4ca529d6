"""Shared fixtures.

Host lookups made by the outbound URL guard are answered locally so the
suites never depend on DNS: IP literals resolve to themselves, ``localhost``
to the loopback address and every other name to a public address.
"""

import ipaddress
import socket
from unittest.mock import patch

import pytest

PUBLIC_IP = "93.184.216.34"


def _fake_getaddrinfo(host, port, *args, **kwargs):
    if host == "localhost":
        address = "127.0.0.1"
    else:
        try:
            address = str(ipaddress.ip_address(host))
        except ValueError:
            address = PUBLIC_IP
    family = socket.AF_INET6 if ":" in address else socket.AF_INET
    return [(family, socket.SOCK_STREAM, 6, "", (address, port or 0))]


@pytest.fixture(autouse=True)
def local_dns():
    with patch("app.services.fetcher.socket.getaddrinfo", side_effect=_fake_getaddrinfo):
        yield
