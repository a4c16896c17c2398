"""Utilities for hostcheck."""

from hostcheck.utils.console import ColorfulFormatter, configure_logging
from hostcheck.utils.parser import parse_host_address
from hostcheck.utils.shell import join_remote_path, quote_path

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "join_remote_path",
    "parse_host_address",
    "quote_path",
]
