"""Dependency container for hostcheck.

Builds the settings and executor once at startup and passes them explicitly.
"""

from dataclasses import dataclass

from hostcheck.config import Config
from hostcheck.services.executor import RemoteExecutor


@dataclass
class Dependencies:
    """Container for hostcheck dependencies.

    Example:
        deps = Dependencies.create()
        report = await run_host_check(deps.executor, deps.config.settings, "ghe:122")
    """

    config: Config
    executor: RemoteExecutor

    @classmethod
    def create(cls) -> "Dependencies":
        """Create dependencies from the environment.

        Raises:
            FileNotFoundError: If strict host key checking is on and the
                known_hosts file is missing
        """
        return cls.from_config(Config.from_env())

    @classmethod
    def from_config(cls, config: Config) -> "Dependencies":
        """Create dependencies with a custom configuration."""
        settings = config.settings
        executor = RemoteExecutor(
            username=settings.ssh_user,
            connect_timeout=settings.connect_timeout,
            known_hosts=config.known_hosts_path,
            identity_file=settings.identity_file,
        )
        return cls(config=config, executor=executor)
