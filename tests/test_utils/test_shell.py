"""Tests for shell utilities."""

from hostcheck.utils.shell import join_remote_path, quote_path


def test_join_remote_path_empty_root() -> None:
    assert join_remote_path("", "etc/github/cluster") == "/etc/github/cluster"


def test_join_remote_path_strips_duplicate_slashes() -> None:
    assert join_remote_path("/data/root/", "/etc/github/repl-state") == (
        "/data/root/etc/github/repl-state"
    )


def test_quote_path_quotes_spaces() -> None:
    assert quote_path("/data/my root/x") == "'/data/my root/x'"
