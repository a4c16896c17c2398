"""Data models for hostcheck."""

from hostcheck.models.address import DEFAULT_SSH_PORT, HostAddress
from hostcheck.models.command import ProbeResult
from hostcheck.models.outcome import (
    Allowed,
    Denied,
    DenialReason,
    NegotiationOutcome,
    PolicyDecision,
    ProtocolFailure,
    RetryOnAltPort,
    Success,
    TransportFailure,
    VersionUnparseable,
)
from hostcheck.models.report import HostCheckReport
from hostcheck.models.version import Version

__all__ = [
    "Allowed",
    "DEFAULT_SSH_PORT",
    "Denied",
    "DenialReason",
    "HostAddress",
    "HostCheckReport",
    "NegotiationOutcome",
    "PolicyDecision",
    "ProbeResult",
    "ProtocolFailure",
    "RetryOnAltPort",
    "Success",
    "TransportFailure",
    "Version",
    "VersionUnparseable",
]
