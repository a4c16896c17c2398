"""Host check failures.

Each failure carries the process exit code the CLI terminates with, so
calling automation can branch on the failure category.
"""

from hostcheck.models import DenialReason

SSH_KEY_SETUP_URL = (
    "https://docs.github.com/enterprise-server/admin/configuration/"
    "configuring-your-enterprise/accessing-the-administrative-shell-ssh"
)


class HostCheckError(Exception):
    """Base class for terminal host check failures."""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: int | None = None):
        """Initialize host check error.

        Args:
            message: Diagnostic shown to the operator
            exit_code: Process exit code (class default when omitted)
        """
        if exit_code is not None:
            self.exit_code = exit_code
        self.message = message
        super().__init__(message)


class TransportError(HostCheckError):
    """SSH-level connectivity or credential failure."""

    exit_code = 255

    def __init__(self, host: str, output: str, exit_code: int = 255):
        self.host = host
        self.output = output
        lines = [
            output.rstrip(),
            f"Error: ssh connection with '{host}' failed",
            f"Note that your SSH key needs to be setup on {host} as described in:",
            f"* {SSH_KEY_SETUP_URL}",
        ]
        super().__init__("\n".join(line for line in lines if line), exit_code)


class ProtocolError(HostCheckError):
    """The target responded but is not a compatible appliance, or denied access."""

    def __init__(self, host: str, code: int, message: str):
        self.host = host
        self.code = code
        super().__init__(message, code)


class VersionUnparseableError(HostCheckError):
    """Negotiation succeeded but no version could be read."""

    exit_code = 2

    def __init__(self, host: str):
        self.host = host
        super().__init__(
            f"Error: failed to parse version on '{host}' or this isn't a GitHub appliance."
        )


class ConsistencyError(HostCheckError):
    """Cluster nodes report different versions."""

    def __init__(self, message: str, node_versions: tuple[str, ...] = ()):
        self.node_versions = node_versions
        super().__init__(message)


class PolicyDeniedError(HostCheckError):
    """The appliance is not eligible for this backup or restore."""

    def __init__(self, reason: DenialReason, message: str):
        self.reason = reason
        super().__init__(message)


class ConfigurationError(HostCheckError):
    """Local configuration is missing or unreadable."""
