"""Negotiation outcomes and policy decisions.

Both are tagged variants: a union of small frozen dataclasses that callers
dispatch on with ``match``.
"""

from dataclasses import dataclass
from enum import Enum

from hostcheck.models.version import Version


@dataclass(frozen=True)
class Success:
    """The appliance identified itself and reported a version."""

    version: Version
    output: str = ""


@dataclass(frozen=True)
class RetryOnAltPort:
    """The default port looks blocked or redirected; try port 122."""

    exit_code: int
    output: str = ""


@dataclass(frozen=True)
class TransportFailure:
    """SSH could not connect or authenticate."""

    message: str
    exit_code: int = 255


@dataclass(frozen=True)
class ProtocolFailure:
    """The target answered but is not a usable appliance."""

    code: int
    message: str = ""


@dataclass(frozen=True)
class VersionUnparseable:
    """Negotiation succeeded but no version token was found."""

    output: str = ""


NegotiationOutcome = (
    Success | RetryOnAltPort | TransportFailure | ProtocolFailure | VersionUnparseable
)


class DenialReason(Enum):
    """Why the policy gate rejected an appliance."""

    SNAPSHOT_DOWNGRADE = "snapshot_downgrade"
    REPLICA = "replica"
    UNSUPPORTED_VERSION = "unsupported_version"


@dataclass(frozen=True)
class Allowed:
    """Every applicable policy check passed."""


@dataclass(frozen=True)
class Denied:
    """A policy check failed."""

    reason: DenialReason
    message: str


PolicyDecision = Allowed | Denied
