"""Services for hostcheck."""

from hostcheck.services.check import run_host_check
from hostcheck.services.cluster import check_cluster_consistency, node_version_tokens
from hostcheck.services.errors import (
    ConfigurationError,
    ConsistencyError,
    HostCheckError,
    PolicyDeniedError,
    ProtocolError,
    TransportError,
    VersionUnparseableError,
)
from hostcheck.services.executor import RemoteExecutor
from hostcheck.services.negotiation import classify_probe, negotiate, probe
from hostcheck.services.policy import enforce_policy, evaluate_policy

__all__ = [
    "ConfigurationError",
    "ConsistencyError",
    "HostCheckError",
    "PolicyDeniedError",
    "ProtocolError",
    "RemoteExecutor",
    "TransportError",
    "VersionUnparseableError",
    "check_cluster_consistency",
    "classify_probe",
    "enforce_policy",
    "evaluate_policy",
    "negotiate",
    "node_version_tokens",
    "probe",
    "run_host_check",
]
