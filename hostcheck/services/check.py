"""Host check orchestration.

Parser -> negotiation (with one alt-port retry) -> cluster consistency ->
policy gate.
"""

import logging
from typing import TYPE_CHECKING

from hostcheck.models import HostCheckReport, Version
from hostcheck.services.cluster import check_cluster_consistency
from hostcheck.services.errors import ConfigurationError
from hostcheck.services.negotiation import negotiate
from hostcheck.services.policy import enforce_policy
from hostcheck.utils.parser import parse_host_address

if TYPE_CHECKING:
    from hostcheck.config import Settings
    from hostcheck.protocols import CommandExecutor

logger = logging.getLogger(__name__)


def _warn_on_remote_version_mismatch(settings: "Settings", negotiated: Version) -> None:
    if not settings.remote_version:
        return
    try:
        expected = Version.parse(settings.remote_version)
    except ValueError:
        logger.warning("Ignoring unparseable remote version %r", settings.remote_version)
        return
    if expected != negotiated:
        logger.warning(
            "Configured remote version v%s differs from negotiated v%s",
            expected,
            negotiated,
        )


async def run_host_check(
    executor: "CommandExecutor",
    settings: "Settings",
    target: str | None = None,
) -> HostCheckReport:
    """Verify an appliance is reachable, compatible and eligible.

    Args:
        executor: Remote command executor
        settings: Host check settings
        target: ``host[:port]`` to check; defaults to the configured hostname

    Returns:
        Report describing the passing appliance

    Raises:
        HostCheckError: The first failure, carrying its exit code
    """
    host_target = target or settings.hostname
    if not host_target:
        raise ConfigurationError(
            "Error: no host given and HOSTCHECK_HOSTNAME/GHE_HOSTNAME is not set"
        )

    address = parse_host_address(host_target)
    logger.info("Checking %s (port %d)", address.host, address.effective_port)

    resolved, version = await negotiate(executor, address, settings)
    cluster, node_versions = await check_cluster_consistency(
        executor, resolved, settings.remote_root_dir
    )
    _warn_on_remote_version_mismatch(settings, version)
    await enforce_policy(executor, resolved, version, settings)

    return HostCheckReport(
        address=resolved,
        version=version,
        cluster=cluster,
        node_versions=node_versions,
    )
