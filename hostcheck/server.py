"""hostcheck FastMCP server.

Exposes the host check as an MCP tool so agents driving backups can verify
an appliance before starting. All checking logic lives in services/.
"""

import logging
from collections.abc import Awaitable, Callable

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from hostcheck.dependencies import Dependencies
from hostcheck.services import HostCheckError, run_host_check
from hostcheck.utils.console import configure_logging

logger = logging.getLogger(__name__)

HostCheckTool = Callable[[str], Awaitable[str]]


def make_host_check_tool(deps: Dependencies) -> HostCheckTool:
    """Build the ``host_check`` tool bound to a dependency container."""

    async def host_check(target: str = "") -> str:
        """Verify an appliance is reachable, compatible and eligible for backup.

        Args:
            target: "host" or "host:port"; empty uses the configured hostname.

        Returns:
            "Connect <host>:<port> OK (v<version>)" when every check passes.
        """
        logger.info("tool:host_check target=%r", target)
        try:
            report = await run_host_check(deps.executor, deps.config.settings, target or None)
        except HostCheckError as e:
            logger.warning("tool:host_check failed (exit_code=%d)", e.exit_code)
            raise ToolError(f"{e.message}\n(exit code {e.exit_code})") from e
        return report.success_line()

    return host_check


def create_server(deps: Dependencies | None = None) -> FastMCP:
    """Create the MCP server with the host check tool registered.

    Args:
        deps: Dependency container, built from the environment when omitted

    Returns:
        Configured FastMCP server instance
    """
    if deps is None:
        deps = Dependencies.create()

    server = FastMCP("hostcheck")
    server.tool(name="host_check")(make_host_check_tool(deps))
    return server


def run_server() -> None:
    """Run the MCP server with the configured transport."""
    deps = Dependencies.create()
    settings = deps.config.settings
    configure_logging(settings.log_level, settings.log_colors)
    server = create_server(deps)

    if settings.transport == "stdio":
        logger.info("Starting hostcheck MCP server (transport=stdio)")
        server.run(transport="stdio")
    else:
        logger.info(
            "Starting hostcheck MCP server (transport=http, host=%s, port=%d)",
            settings.http_host,
            settings.http_port,
        )
        server.run(transport="http", host=settings.http_host, port=settings.http_port)
