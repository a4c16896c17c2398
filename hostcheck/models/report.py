"""Host check report model."""

from dataclasses import dataclass, field

from hostcheck.models.address import HostAddress
from hostcheck.models.version import Version


@dataclass(frozen=True)
class HostCheckReport:
    """Result of a passing host check."""

    address: HostAddress
    version: Version
    cluster: bool = False
    node_versions: tuple[str, ...] = field(default_factory=tuple)

    def success_line(self) -> str:
        """Line printed on stdout when the check passes."""
        return (
            f"Connect {self.address.host}:{self.address.effective_port} "
            f"OK (v{self.version})"
        )
