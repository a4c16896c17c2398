"""Cluster consistency check."""

import logging
import sys
from typing import TYPE_CHECKING

from hostcheck.models import HostAddress
from hostcheck.services.errors import ConsistencyError
from hostcheck.utils.shell import join_remote_path, quote_path

if TYPE_CHECKING:
    from hostcheck.protocols import CommandExecutor

logger = logging.getLogger(__name__)

CLUSTER_MARKER = "etc/github/cluster"
CLUSTER_VERSIONS_COMMAND = "ghe-cluster-each -- ghe-version"


def node_version_tokens(listing: str) -> list[str]:
    """Extract the version token (last field) from each node line."""
    return [line.split()[-1] for line in listing.splitlines() if line.strip()]


async def is_cluster(
    executor: "CommandExecutor",
    address: HostAddress,
    remote_root_dir: str = "",
) -> bool:
    """Check whether the appliance carries the cluster marker file."""
    marker = join_remote_path(remote_root_dir, CLUSTER_MARKER)
    result = await executor.run(address, f"test -f {quote_path(marker)}")
    return result.ok


async def check_cluster_consistency(
    executor: "CommandExecutor",
    address: HostAddress,
    remote_root_dir: str = "",
) -> tuple[bool, tuple[str, ...]]:
    """Ensure every cluster node runs the same version.

    Args:
        executor: Remote command executor
        address: Negotiated appliance address
        remote_root_dir: Remote root directory prefix

    Returns:
        Whether the target is a cluster, and the per-node listing lines.

    Raises:
        ConsistencyError: If the listing fails or nodes disagree on version
    """
    if not await is_cluster(executor, address, remote_root_dir):
        return False, ()

    result = await executor.run(address, CLUSTER_VERSIONS_COMMAND)
    lines = tuple(line for line in result.output.splitlines() if line.strip())
    if not result.ok:
        raise ConsistencyError(
            f"Error: failed to list cluster node versions on '{address}'.\n"
            f"{result.output.rstrip()}",
            lines,
        )

    distinct = set(node_version_tokens(result.output))
    logger.debug("Cluster node versions on %s: %s", address, sorted(distinct))
    if len(distinct) != 1:
        print(result.output.rstrip(), file=sys.stderr)
        raise ConsistencyError(
            "Error: Not all nodes are running the same version! "
            "Please ensure all nodes are running the same version "
            "before using backup-utils.",
            lines,
        )

    return True, lines
