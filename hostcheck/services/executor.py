"""SSH remote command executor.

Runs one command per connection, the way a single ``ssh host -- cmd``
invocation does, and reports transport failures as exit code 255 with an
OpenSSH-style message so callers can classify them from the output text.
"""

import asyncio
import logging
import os
import re
import socket

import asyncssh

from hostcheck.models import HostAddress, ProbeResult

logger = logging.getLogger(__name__)

SSH_TRANSPORT_FAILURE = 255

# asyncio folds per-address connect errors into one OSError without an errno
_ERRNO_PATTERN = re.compile(r"\[Errno (\d+)\]")


class RemoteExecutor:
    """Executes commands on an appliance over SSH.

    Password and keyboard-interactive authentication are disabled, the
    connection attempt is made exactly once, and it is bounded by
    ``connect_timeout`` seconds.
    """

    def __init__(
        self,
        username: str = "admin",
        connect_timeout: int = 5,
        known_hosts: str | None = None,
        identity_file: str | None = None,
    ) -> None:
        """Initialize executor.

        Args:
            username: Remote SSH user
            connect_timeout: Seconds allowed to establish the connection
            known_hosts: Path to known_hosts file, or None to disable verification
            identity_file: Private key to offer, or None for agent/default keys
        """
        self.username = username
        self.connect_timeout = connect_timeout
        self._known_hosts = known_hosts
        self._client_keys = [identity_file] if identity_file else None

    async def run(
        self,
        address: HostAddress,
        command: str,
        input: str | None = None,
    ) -> ProbeResult:
        """Run a command and return its exit code and combined output.

        Args:
            address: Target host and port
            command: Remote command line
            input: Data written to the command's stdin

        Returns:
            ProbeResult with stdout and stderr merged.
        """
        host = address.host
        port = address.effective_port
        logger.info(
            "Running remote command on %s@%s:%d: %s",
            self.username,
            host,
            port,
            command,
        )

        try:
            async with asyncssh.connect(
                host,
                port=port,
                username=self.username,
                known_hosts=self._known_hosts,
                client_keys=self._client_keys,
                password_auth=False,
                kbdint_auth=False,
                connect_timeout=self.connect_timeout,
            ) as conn:
                result = await conn.run(
                    command,
                    input=input,
                    stderr=asyncssh.STDOUT,
                    check=False,
                    encoding="utf-8",
                    errors="replace",
                )
        except (asyncssh.Error, OSError, OverflowError, asyncio.TimeoutError) as e:
            message = self._describe_failure(address, e)
            logger.warning(
                "SSH transport to %s:%d failed (exit_code=%d): %s",
                host,
                port,
                SSH_TRANSPORT_FAILURE,
                message,
            )
            return ProbeResult(exit_code=SSH_TRANSPORT_FAILURE, output=message)

        output = result.stdout
        if output is None:
            output = ""

        exit_code = (
            result.exit_status
            if result.exit_status is not None
            else SSH_TRANSPORT_FAILURE
        )
        logger.debug("Remote command on %s:%d finished (exit_code=%d)", host, port, exit_code)
        return ProbeResult(exit_code=exit_code, output=output)

    def _describe_failure(self, address: HostAddress, error: BaseException) -> str:
        """Render a transport exception the way the OpenSSH client reports it."""
        host = address.host
        port = address.effective_port
        prefix = f"ssh: connect to host {host} port {port}"

        if isinstance(error, asyncssh.HostKeyNotVerifiable):
            return f"Host key verification failed for {host}: {error.reason}"
        if isinstance(error, asyncssh.PermissionDenied):
            return f"{self.username}@{host}: Permission denied (publickey)."
        if isinstance(error, asyncssh.ConnectionLost):
            return f"ssh_exchange_identification: Connection closed by remote host ({host})"
        if isinstance(error, asyncssh.Error):
            return f"ssh: {host} port {port}: {error.reason}"
        if isinstance(error, asyncio.TimeoutError):
            return f"{prefix}: Connection timed out"
        if isinstance(error, socket.gaierror):
            return f"ssh: Could not resolve hostname {host}: {error.strerror}"
        if isinstance(error, OSError) and error.errno is not None:
            return f"{prefix}: {os.strerror(error.errno)}"
        if isinstance(error, OSError):
            match = _ERRNO_PATTERN.search(str(error))
            if match:
                return f"{prefix}: {os.strerror(int(match.group(1)))}"
        if isinstance(error, OverflowError):
            return f"ssh: Bad port '{port}'"
        return f"{prefix}: {error}"
