"""Tests for the cluster consistency check."""

import pytest

from hostcheck.models import HostAddress
from hostcheck.services.cluster import (
    CLUSTER_VERSIONS_COMMAND,
    check_cluster_consistency,
    node_version_tokens,
)
from hostcheck.services.errors import ConsistencyError

HOST = HostAddress("ghe.example.com")


def test_node_version_tokens_takes_last_field() -> None:
    listing = (
        "ghe-data-1: GitHub Enterprise Server 3.6.2\n"
        "\n"
        "ghe-app-1: GitHub Enterprise Server 3.6.2\n"
    )
    assert node_version_tokens(listing) == ["3.6.2", "3.6.2"]


@pytest.mark.asyncio
async def test_not_a_cluster(make_executor) -> None:
    executor = make_executor((1, ""))

    cluster, lines = await check_cluster_consistency(executor, HOST, "")

    assert cluster is False
    assert lines == ()
    assert executor.calls[0].command == "test -f /etc/github/cluster"


@pytest.mark.asyncio
async def test_marker_path_uses_remote_root(make_executor) -> None:
    executor = make_executor((1, ""))

    await check_cluster_consistency(executor, HOST, "/data/root")

    assert executor.calls[0].command == "test -f /data/root/etc/github/cluster"


@pytest.mark.asyncio
async def test_consistent_cluster(make_executor) -> None:
    executor = make_executor((0, ""), (0, "v1: ... 3.6.2\nv2: ... 3.6.2\n"))

    cluster, lines = await check_cluster_consistency(executor, HOST)

    assert cluster is True
    assert lines == ("v1: ... 3.6.2", "v2: ... 3.6.2")
    assert executor.calls[1].command == CLUSTER_VERSIONS_COMMAND
    assert len(executor.calls) == 2


@pytest.mark.asyncio
async def test_inconsistent_cluster_fails(make_executor, capsys) -> None:
    executor = make_executor((0, ""), (0, "v1: ... 3.6.2\nv2: ... 3.6.3\n"))

    with pytest.raises(ConsistencyError) as exc_info:
        await check_cluster_consistency(executor, HOST)

    assert exc_info.value.exit_code == 1
    assert "Not all nodes are running the same version!" in exc_info.value.message
    assert exc_info.value.node_versions == ("v1: ... 3.6.2", "v2: ... 3.6.3")
    # Full listing goes to stderr for the operator
    assert "v2: ... 3.6.3" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_empty_listing_is_inconsistent(make_executor) -> None:
    executor = make_executor((0, ""), (0, "\n"))

    with pytest.raises(ConsistencyError):
        await check_cluster_consistency(executor, HOST)


@pytest.mark.asyncio
async def test_listing_command_failure(make_executor) -> None:
    executor = make_executor((0, ""), (1, "ghe-cluster-each: not found"))

    with pytest.raises(ConsistencyError) as exc_info:
        await check_cluster_consistency(executor, HOST)

    assert exc_info.value.exit_code == 1
    assert "ghe-cluster-each: not found" in exc_info.value.message
