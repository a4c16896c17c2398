"""Tests for the MCP tool surface."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from hostcheck.config import Config, HostKeyVerifier, Settings
from hostcheck.dependencies import Dependencies
from hostcheck.models import HostAddress, HostCheckReport, Version
from hostcheck.server import create_server, make_host_check_tool
from hostcheck.services.errors import TransportError


@pytest.fixture
def deps() -> Dependencies:
    config = Config(
        settings=Settings(hostname="ghe.example.com"),
        host_keys=HostKeyVerifier(known_hosts_path="none"),
    )
    return Dependencies.from_config(config)


@pytest.mark.asyncio
async def test_host_check_tool_returns_success_line(deps: Dependencies) -> None:
    report = HostCheckReport(address=HostAddress("ghe.example.com"), version=Version(3, 6, 2))
    check = AsyncMock(return_value=report)
    tool = make_host_check_tool(deps)

    with patch("hostcheck.server.run_host_check", check):
        result = await tool("")

    assert result == "Connect ghe.example.com:22 OK (v3.6.2)"
    check.assert_called_once_with(deps.executor, deps.config.settings, None)


@pytest.mark.asyncio
async def test_host_check_tool_raises_tool_error(deps: Dependencies) -> None:
    check = AsyncMock(side_effect=TransportError("ghe", "Permission denied"))
    tool = make_host_check_tool(deps)

    with patch("hostcheck.server.run_host_check", check):
        with pytest.raises(ToolError, match="exit code 255"):
            await tool("ghe")


def test_create_server_registers_tool(deps: Dependencies) -> None:
    server = create_server(deps)
    assert isinstance(server, FastMCP)


def test_dependencies_build_executor_from_settings() -> None:
    config = Config(
        settings=Settings(ssh_user="backup", connect_timeout=7, identity_file="/k"),
        host_keys=MagicMock(get_known_hosts_path=MagicMock(return_value=None)),
    )
    deps = Dependencies.from_config(config)
    assert deps.executor.username == "backup"
    assert deps.executor.connect_timeout == 7
    assert deps.executor._client_keys == ["/k"]
