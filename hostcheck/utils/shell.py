"""Shell command safety utilities."""

import shlex


def quote_path(path: str) -> str:
    """Safely quote a remote path for shell commands.

    Args:
        path: File system path to quote

    Returns:
        Shell-safe quoted path
    """
    return shlex.quote(path)


def join_remote_path(root: str, relative: str) -> str:
    """Join a path below the remote root directory.

    An empty root means the appliance filesystem root.
    """
    return f"{root.rstrip('/')}/{relative.lstrip('/')}"
