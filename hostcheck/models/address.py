"""Host address data models."""

from dataclasses import dataclass, replace

DEFAULT_SSH_PORT = 22


@dataclass(frozen=True)
class HostAddress:
    """Parsed ``host[:port]`` target."""

    host: str
    port: int | None = None

    @property
    def effective_port(self) -> int:
        """Port used for the SSH connection (22 when not given)."""
        return DEFAULT_SSH_PORT if self.port is None else self.port

    @property
    def uses_default_port(self) -> bool:
        """Whether the address targets the default SSH port."""
        return self.effective_port == DEFAULT_SSH_PORT

    def with_port(self, port: int) -> "HostAddress":
        """Return a copy of this address bound to another port."""
        return replace(self, port=port)

    def __str__(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"
