"""Shared fixtures for hostcheck tests."""

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from hostcheck.config import Settings
from hostcheck.models import HostAddress, ProbeResult


@dataclass
class RecordedCall:
    """One command sent to the scripted executor."""

    address: HostAddress
    command: str
    input: str | None


@dataclass
class ScriptedExecutor:
    """CommandExecutor that replays scripted results in order."""

    script: list[ProbeResult]
    calls: list[RecordedCall] = field(default_factory=list)

    async def run(
        self,
        address: HostAddress,
        command: str,
        input: str | None = None,
    ) -> ProbeResult:
        self.calls.append(RecordedCall(address=address, command=command, input=input))
        if not self.script:
            raise AssertionError(f"Unexpected remote command: {command}")
        return self.script.pop(0)


@pytest.fixture
def make_executor() -> Callable[..., ScriptedExecutor]:
    """Factory for executors scripted with (exit_code, output) pairs."""

    def _make(*results: tuple[int, str]) -> ScriptedExecutor:
        return ScriptedExecutor(
            script=[ProbeResult(exit_code=code, output=output) for code, output in results]
        )

    return _make


@pytest.fixture
def settings() -> Settings:
    """Settings with no restore snapshot and replica checks enabled."""
    return Settings(tool_version="3.6.0", hostname="ghe.example.com")
