"""Remote command execution data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProbeResult:
    """Result of a single remote probe.

    ``output`` holds stdout and stderr combined, in arrival order.
    """

    exit_code: int
    output: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
