"""Tests for host target parsing."""

import pytest

from hostcheck.models import HostAddress
from hostcheck.utils.parser import parse_host_address


def test_host_without_port() -> None:
    assert parse_host_address("ghe.example.com") == HostAddress("ghe.example.com", None)


def test_host_with_port() -> None:
    assert parse_host_address("ghe.example.com:122") == HostAddress("ghe.example.com", 122)


def test_splits_on_last_colon() -> None:
    assert parse_host_address("a:b:2222") == HostAddress("a:b", 2222)


@pytest.mark.parametrize(
    "target",
    [
        "ghe.example.com:ssh",
        "ghe.example.com:",
        "ghe.example.com:12a",
        "ghe.example.com:0",
        "ghe.example.com:-1",
        "ghe.example.com:65536",
        "ghe.example.com:99999",
    ],
)
def test_invalid_port_keeps_whole_host(target: str) -> None:
    """Malformed input is never an error: the whole string is the host."""
    assert parse_host_address(target) == HostAddress(target, None)


def test_empty_string() -> None:
    assert parse_host_address("") == HostAddress("", None)


def test_ip_address_with_port() -> None:
    assert parse_host_address("10.0.0.5:122") == HostAddress("10.0.0.5", 122)
