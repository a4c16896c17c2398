"""Host target parsing."""

from hostcheck.models import HostAddress

MAX_PORT = 65535


def parse_host_address(target: str) -> HostAddress:
    """Parse a ``host[:port]`` target.

    Splits on the last colon. The trailing segment is the port only when it
    is entirely digits and within 1-65535; otherwise the whole string is the host
    and the port is left unset. Never raises.

    Examples:
        "ghe.example.com" -> HostAddress("ghe.example.com", None)
        "ghe.example.com:122" -> HostAddress("ghe.example.com", 122)
        "ghe.example.com:ssh" -> HostAddress("ghe.example.com:ssh", None)
    """
    host, sep, port = target.rpartition(":")
    if not sep or not (port.isascii() and port.isdigit()):
        return HostAddress(host=target)

    port_number = int(port)
    if not 0 < port_number <= MAX_PORT:
        return HostAddress(host=target)

    return HostAddress(host=host, port=port_number)
