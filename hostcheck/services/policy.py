"""Policy gate for backup and restore eligibility.

Checks run in a fixed order and stop at the first denial:

1. Snapshot downgrade (restore only): the appliance must not be older than
   the release the snapshot was taken from.
2. Replica: backups must not run against a high availability replica.
3. Minimum version: the appliance must be at least the supported minimum.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from hostcheck.models import (
    Allowed,
    Denied,
    DenialReason,
    HostAddress,
    PolicyDecision,
    Version,
)
from hostcheck.services.errors import ConfigurationError, PolicyDeniedError
from hostcheck.utils.shell import join_remote_path, quote_path

if TYPE_CHECKING:
    from hostcheck.config import Settings
    from hostcheck.protocols import CommandExecutor

logger = logging.getLogger(__name__)

REPLICATION_STATE_MARKER = "etc/github/repl-state"
SNAPSHOT_VERSION_FILE = "version"


def read_snapshot_version(snapshot_path: str) -> Version:
    """Read the appliance release a snapshot was taken from.

    Raises:
        ConfigurationError: If the version file is missing or unparseable
    """
    version_file = Path(snapshot_path) / SNAPSHOT_VERSION_FILE
    try:
        content = version_file.read_text().strip()
        return Version.parse(content)
    except (OSError, ValueError) as e:
        raise ConfigurationError(
            f"Error: cannot read snapshot version from {version_file}: {e}"
        ) from e


def read_minimum_version(settings: "Settings") -> Version:
    """Parse the configured minimum supported release.

    Raises:
        ConfigurationError: If the configured value is not a version
    """
    try:
        return settings.minimum_version
    except ValueError as e:
        raise ConfigurationError(
            f"Error: invalid supported minimum version '{settings.supported_minimum_version}': {e}"
        ) from e


def check_snapshot_downgrade(version: Version, snapshot_version: Version) -> PolicyDecision:
    """Deny restoring a snapshot onto an older major.minor release."""
    if version < snapshot_version.release:
        return Denied(
            reason=DenialReason.SNAPSHOT_DOWNGRADE,
            message=(
                "Error: Snapshot can not be restored to an older release of "
                f"GitHub Enterprise Server (snapshot v{snapshot_version}, "
                f"appliance v{version})."
            ),
        )
    return Allowed()


async def is_replica(
    executor: "CommandExecutor",
    address: HostAddress,
    remote_root_dir: str = "",
) -> bool:
    """Check the replication state marker on the appliance.

    A marker that cannot be read counts as "not a replica".
    """
    marker = join_remote_path(remote_root_dir, REPLICATION_STATE_MARKER)
    result = await executor.run(address, f"cat {quote_path(marker)} 2>/dev/null || true")
    if not result.ok:
        logger.debug(
            "Replication state unreadable on %s (exit_code=%d)",
            address,
            result.exit_code,
        )
        return False
    return result.output.strip() == "replica"


def check_replica(replica: bool) -> PolicyDecision:
    if replica:
        return Denied(
            reason=DenialReason.REPLICA,
            message=(
                "Error: high availability replica detected.\n"
                "Backup Utilities should be used to backup from the primary node in\n"
                "high availability environments, and not replicas."
            ),
        )
    return Allowed()


def check_minimum_version(
    version: Version,
    minimum: Version,
    tool_version: str,
) -> PolicyDecision:
    """Deny appliances older than the supported minimum release."""
    if version < minimum:
        return Denied(
            reason=DenialReason.UNSUPPORTED_VERSION,
            message=(
                "Error: unsupported release of GitHub Enterprise detected.\n"
                f"Backup Utilities v{tool_version} requires GitHub Enterprise "
                f"Server v{minimum} or newer (detected v{version}).\n"
                "Please update your GitHub Enterprise Server appliance or use "
                "an older version of Backup Utilities."
            ),
        )
    return Allowed()


async def evaluate_policy(
    executor: "CommandExecutor",
    address: HostAddress,
    version: Version,
    settings: "Settings",
) -> PolicyDecision:
    """Evaluate every applicable policy check, stopping at the first denial.

    Args:
        executor: Remote command executor
        address: Negotiated appliance address
        version: Negotiated appliance version
        settings: Snapshot path, replica override and minimum version

    Returns:
        Allowed, or the first Denied decision

    Raises:
        ConfigurationError: If the snapshot version file or the minimum version
            cannot be read
    """
    if settings.restore_snapshot_path:
        snapshot_version = read_snapshot_version(settings.restore_snapshot_path)
        decision = check_snapshot_downgrade(version, snapshot_version)
        if isinstance(decision, Denied):
            return decision

    if not settings.allow_replica_backup:
        replica = await is_replica(executor, address, settings.remote_root_dir)
        decision = check_replica(replica)
        if isinstance(decision, Denied):
            return decision

    return check_minimum_version(version, read_minimum_version(settings), settings.tool_version)


async def enforce_policy(
    executor: "CommandExecutor",
    address: HostAddress,
    version: Version,
    settings: "Settings",
) -> None:
    """Evaluate the policy gate and raise on denial.

    Raises:
        PolicyDeniedError: If any check denies the appliance
        ConfigurationError: If the snapshot version file cannot be read
    """
    match await evaluate_policy(executor, address, version, settings):
        case Denied(reason=reason, message=message):
            logger.info("Policy denied %s: %s", address, reason.value)
            raise PolicyDeniedError(reason, message)
        case Allowed():
            logger.debug("Policy allowed %s (v%s)", address, version)
