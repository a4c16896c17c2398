"""Tests for HostAddress model."""

from hostcheck.models import HostAddress


def test_effective_port_defaults_to_22() -> None:
    address = HostAddress(host="ghe.example.com")
    assert address.port is None
    assert address.effective_port == 22
    assert address.uses_default_port is True


def test_explicit_default_port_counts_as_default() -> None:
    assert HostAddress(host="ghe.example.com", port=22).uses_default_port is True


def test_alt_port_is_not_default() -> None:
    address = HostAddress(host="ghe.example.com", port=122)
    assert address.effective_port == 122
    assert address.uses_default_port is False


def test_with_port_keeps_host() -> None:
    address = HostAddress(host="ghe.example.com").with_port(122)
    assert address == HostAddress(host="ghe.example.com", port=122)


def test_str_round_trips_input_form() -> None:
    assert str(HostAddress(host="ghe.example.com")) == "ghe.example.com"
    assert str(HostAddress(host="ghe.example.com", port=122)) == "ghe.example.com:122"
