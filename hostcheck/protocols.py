"""Protocol interfaces for dependency inversion.

The host check depends on a command executor, not on asyncssh directly, so
tests can script remote responses:

    class ScriptedExecutor:
        async def run(self, address, command, input=None):
            return ProbeResult(exit_code=0, output="GitHub Enterprise Server 3.6.2")

    await negotiate(ScriptedExecutor(), address, settings)
"""

from typing import Protocol, runtime_checkable

from hostcheck.models import HostAddress, ProbeResult


@runtime_checkable
class CommandExecutor(Protocol):
    """Protocol for running a command on a remote host."""

    async def run(
        self,
        address: HostAddress,
        command: str,
        input: str | None = None,
    ) -> ProbeResult:
        """Run command and return exit code with combined output.

        Transport failures are reported as a ProbeResult, never raised.
        """
        ...
