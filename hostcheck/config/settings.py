"""Host check settings from environment variables.

Centralized environment variable parsing and validation. Every setting has a
``HOSTCHECK_*`` key; settings shared with the backup utilities also accept
their legacy ``GHE_*`` / ``BACKUP_UTILS_*`` names.
"""

import logging
import os
from dataclasses import dataclass, field

from hostcheck import __version__
from hostcheck.models import Version

logger = logging.getLogger(__name__)

SUPPORTED_MINIMUM_VERSION = "3.5.0"


@dataclass(frozen=True)
class Settings:
    """Host check settings, read once at startup.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Calling tool identity, sent during negotiation
    tool_name: str = field(default="backup-utils")
    tool_version: str = field(default=__version__)

    # Appliance
    hostname: str = field(default="")
    remote_root_dir: str = field(default="")
    product_name: str = field(default="GitHub Enterprise")
    supported_minimum_version: str = field(default=SUPPORTED_MINIMUM_VERSION)
    remote_version: str | None = field(default=None)

    # Policy
    restore_snapshot_path: str | None = field(default=None)
    allow_replica_backup: bool = field(default=False)

    # SSH transport
    ssh_user: str = field(default="admin")
    identity_file: str | None = field(default=None)
    connect_timeout: int = field(default=5)

    # Logging
    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)

    # MCP server
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        ``HOSTCHECK_*`` takes precedence over the legacy name if both are set.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            tool_name=os.getenv("HOSTCHECK_TOOL_NAME", "backup-utils"),
            tool_version=cls._get_str(
                "HOSTCHECK_TOOL_VERSION", "BACKUP_UTILS_VERSION", __version__
            ),
            hostname=cls._get_str("HOSTCHECK_HOSTNAME", "GHE_HOSTNAME", ""),
            remote_root_dir=cls._get_str(
                "HOSTCHECK_REMOTE_ROOT_DIR", "GHE_REMOTE_ROOT_DIR", ""
            ),
            product_name=os.getenv("HOSTCHECK_PRODUCT_NAME", "GitHub Enterprise"),
            supported_minimum_version=os.getenv(
                "HOSTCHECK_SUPPORTED_MINIMUM_VERSION", SUPPORTED_MINIMUM_VERSION
            ),
            remote_version=cls._get_str(
                "HOSTCHECK_REMOTE_VERSION", "GHE_REMOTE_VERSION", None
            ),
            restore_snapshot_path=cls._get_str(
                "HOSTCHECK_RESTORE_SNAPSHOT_PATH", "GHE_RESTORE_SNAPSHOT_PATH", None
            ),
            allow_replica_backup=cls._get_allow_replica_backup(),
            ssh_user=cls._get_str("HOSTCHECK_SSH_USER", "GHE_SSH_USER", "admin"),
            identity_file=cls._get_str("HOSTCHECK_IDENTITY_FILE", "", None),
            connect_timeout=cls._get_int("HOSTCHECK_CONNECT_TIMEOUT", 5),
            log_level=os.getenv("HOSTCHECK_LOG_LEVEL", "WARNING").upper(),
            log_colors=cls._get_bool("HOSTCHECK_LOG_COLORS", True),
            transport=cls._get_transport(),
            http_host=os.getenv("HOSTCHECK_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("HOSTCHECK_HTTP_PORT", 8000),
        )

    @property
    def minimum_version(self) -> Version:
        """Oldest appliance release this tool supports."""
        return Version.parse(self.supported_minimum_version)

    @staticmethod
    def _get_str(key: str, legacy_key: str, default: str | None) -> str | None:
        """Get a non-empty string from environment with legacy fallback.

        Args:
            key: Primary environment variable key
            legacy_key: Legacy key (empty string to skip)
            default: Default value if neither is set

        Returns:
            String value from environment or default
        """
        value = os.getenv(key)
        if not value and legacy_key:
            value = os.getenv(legacy_key)
        return value if value else default

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @classmethod
    def _get_allow_replica_backup(cls) -> bool:
        """Whether backups from a high availability replica are allowed.

        The legacy ``GHE_ALLOW_REPLICA_BACKUP`` enables it when set to any
        non-empty value.
        """
        if os.getenv("HOSTCHECK_ALLOW_REPLICA_BACKUP") is not None:
            return cls._get_bool("HOSTCHECK_ALLOW_REPLICA_BACKUP", False)
        return bool(os.getenv("GHE_ALLOW_REPLICA_BACKUP"))

    @staticmethod
    def _get_transport() -> str:
        """Get MCP transport from environment with validation.

        Returns:
            Transport type ("http" or "stdio")
        """
        transport = os.getenv("HOSTCHECK_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"
