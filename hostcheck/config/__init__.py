"""Configuration module for hostcheck.

- Config: Main configuration class (aggregates all components)
- HostKeyVerifier: Manages SSH host key verification
- Settings: Environment variable configuration
"""

from hostcheck.config.host_keys import HostKeyVerifier
from hostcheck.config.main import Config
from hostcheck.config.settings import SUPPORTED_MINIMUM_VERSION, Settings

__all__ = ["Config", "HostKeyVerifier", "Settings", "SUPPORTED_MINIMUM_VERSION"]
