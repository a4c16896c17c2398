"""Application configuration.

Delegates to specialized components:
- Settings: Environment variables
- HostKeyVerifier: Manages known_hosts
"""

from dataclasses import dataclass

from hostcheck.config.host_keys import HostKeyVerifier
from hostcheck.config.settings import Settings


@dataclass(frozen=True)
class Config:
    """Host check configuration.

    Aggregates settings from the environment and known_hosts resolution.
    """

    settings: Settings
    host_keys: HostKeyVerifier

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Raises:
            FileNotFoundError: If strict host key checking is on and the
                known_hosts file is missing
        """
        return cls(settings=Settings.from_env(), host_keys=HostKeyVerifier.from_env())

    @property
    def known_hosts_path(self) -> str | None:
        """Path to known_hosts file or None if disabled."""
        return self.host_keys.get_known_hosts_path()
