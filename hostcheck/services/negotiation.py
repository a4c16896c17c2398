"""Version negotiation probe.

Asks the appliance to identify itself, classifies the remote exit code into
a NegotiationOutcome, and retries once on the alternate SSH port when the
default port looks blocked or redirected.
"""

import logging
from typing import TYPE_CHECKING, Final

from hostcheck.models import (
    HostAddress,
    NegotiationOutcome,
    ProbeResult,
    ProtocolFailure,
    RetryOnAltPort,
    Success,
    TransportFailure,
    Version,
    VersionUnparseable,
)
from hostcheck.services.errors import (
    HostCheckError,
    ProtocolError,
    TransportError,
    VersionUnparseableError,
)

if TYPE_CHECKING:
    from hostcheck.config import Settings
    from hostcheck.protocols import CommandExecutor

logger = logging.getLogger(__name__)

ALT_SSH_PORT: Final = 122

EXIT_OK: Final = 0
EXIT_PROTOCOL: Final = 1
EXIT_NOT_APPLIANCE: Final = 101
EXIT_TRANSPORT: Final = 255

# Matched case-insensitively against ssh output on exit code 255
FALLBACK_MARKERS: Final[tuple[str, ...]] = (
    "network is unreachable",
    "connection refused",
    "no route to host",
    "connection closed by remote host",
    "connection timed out during banner exchange",
    "connection timed out",
)

USE_ALT_PORT_MARKER: Final = "use port 122"


def negotiate_command(tool_name: str, tool_version: str) -> str:
    """Handshake line fed to the appliance shell."""
    return f"ghe-negotiate-version {tool_name} {tool_version}"


def extract_version_token(output: str, product_name: str) -> str | None:
    """Return the last field of the first line naming the product.

    Args:
        output: Negotiation output
        product_name: Product name the appliance reports, e.g. "GitHub Enterprise"

    Returns:
        Version token, or None if no line names the product
    """
    for line in output.splitlines():
        if product_name in line:
            fields = line.split()
            return fields[-1] if fields else None
    return None


def classify_probe(
    result: ProbeResult,
    address: HostAddress,
    product_name: str = "GitHub Enterprise",
) -> NegotiationOutcome:
    """Classify one negotiation probe by its remote exit code.

    Args:
        result: Exit code and combined output of the probe
        address: Address the probe ran against
        product_name: Product name expected in the negotiation output

    Returns:
        The negotiation outcome
    """
    code = result.exit_code
    output = result.output

    if code == EXIT_OK:
        token = extract_version_token(output, product_name)
        if not token:
            return VersionUnparseable(output=output)
        try:
            return Success(version=Version.parse(token), output=output)
        except ValueError:
            return VersionUnparseable(output=output)

    if code == EXIT_TRANSPORT:
        lowered = output.lower()
        if address.uses_default_port and any(marker in lowered for marker in FALLBACK_MARKERS):
            return RetryOnAltPort(exit_code=code, output=output)
        return TransportFailure(message=output, exit_code=code)

    if code == EXIT_NOT_APPLIANCE:
        return ProtocolFailure(
            code=code,
            message=(
                f"Error: couldn't read GitHub Enterprise fingerprint on "
                f"'{address}' or this isn't a GitHub appliance."
            ),
        )

    if code == EXIT_PROTOCOL and address.uses_default_port and USE_ALT_PORT_MARKER in output:
        return RetryOnAltPort(exit_code=code, output=output)

    return ProtocolFailure(code=code, message=output)


def _terminal(outcome: RetryOnAltPort) -> NegotiationOutcome:
    """Final form of a fallback outcome once the retry is spent."""
    if outcome.exit_code == EXIT_TRANSPORT:
        return TransportFailure(message=outcome.output, exit_code=outcome.exit_code)
    return ProtocolFailure(code=outcome.exit_code, message=outcome.output)


async def probe(
    executor: "CommandExecutor",
    address: HostAddress,
    settings: "Settings",
    allow_fallback: bool = True,
) -> tuple[HostAddress, NegotiationOutcome]:
    """Run the negotiation probe, retrying once on the alternate port.

    Args:
        executor: Remote command executor
        address: Target parsed from the operator's input
        settings: Tool identity and product name
        allow_fallback: Whether an alt-port retry may still be attempted

    Returns:
        The address the final probe ran against and its outcome. The
        outcome is never RetryOnAltPort.
    """
    result = await executor.run(
        address,
        "/bin/sh",
        input=negotiate_command(settings.tool_name, settings.tool_version) + "\n",
    )
    outcome = classify_probe(result, address, settings.product_name)
    logger.debug(
        "Negotiation with %s: exit_code=%d -> %s",
        address,
        result.exit_code,
        type(outcome).__name__,
    )

    if not isinstance(outcome, RetryOnAltPort):
        return address, outcome

    if not allow_fallback:
        logger.info("Alternate port probe on %s also failed, not retrying", address)
        return address, _terminal(outcome)

    # Always rebuild from the parsed host, never the raw host:port input
    alt_address = HostAddress(host=address.host, port=ALT_SSH_PORT)
    logger.info(
        "Port %d unavailable on %s, retrying on port %d",
        address.effective_port,
        address.host,
        ALT_SSH_PORT,
    )
    return await probe(executor, alt_address, settings, allow_fallback=False)


def raise_for_outcome(address: HostAddress, outcome: NegotiationOutcome) -> Version:
    """Return the negotiated version or raise the matching failure.

    Raises:
        TransportError: SSH connection failed
        ProtocolError: Target is not a compatible appliance
        VersionUnparseableError: No version in the negotiation output
    """
    match outcome:
        case Success(version=version):
            return version
        case TransportFailure(message=message, exit_code=exit_code):
            raise TransportError(str(address), message, exit_code)
        case ProtocolFailure(code=code, message=message):
            raise ProtocolError(str(address), code, message)
        case VersionUnparseable():
            raise VersionUnparseableError(str(address))
        case RetryOnAltPort():
            raise HostCheckError(
                f"Error: unresolved port fallback for '{address}'", outcome.exit_code
            )


async def negotiate(
    executor: "CommandExecutor",
    address: HostAddress,
    settings: "Settings",
) -> tuple[HostAddress, Version]:
    """Negotiate with the appliance and return the resolved address and version.

    Raises:
        HostCheckError: On any terminal negotiation failure
    """
    resolved, outcome = await probe(executor, address, settings)
    version = raise_for_outcome(resolved, outcome)
    logger.info("Negotiated with %s: version %s", resolved, version)
    return resolved, version
