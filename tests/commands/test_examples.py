"""Tests for --examples flag on CLI commands.

Parametrized to cover every command; none touches the config file.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from bitstore.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["files", "--examples"], ["bitstore files"]),
    (["files:put", "--examples"], ["bitstore files:put ./photo.jpg", "bitstore upload https://"]),
    (["upload", "--examples"], ["bitstore upload"]),
    (["files:meta", "--examples"], ["bitstore files:meta"]),
    (["files:torrent", "--examples"], ["bitstore files:torrent"]),
    (["files:destroy", "--examples"], ["bitstore rm"]),
    (["wallet", "--examples"], ["bitstore wallet"]),
    (["wallet:deposit", "--examples"], ["bitstore wallet:deposit"]),
    (["wallet:withdraw", "--examples"], ["bitstore wallet:withdraw 50000"]),
    (["transactions", "--examples"], ["bitstore transactions"]),
    (["status", "--examples"], ["bitstore --json status"]),
    (["keys:put", "--examples"], ["bitstore keys:put avatar"]),
    (["keys:get", "--examples"], ["bitstore keys:get avatar"]),
    (["keys:destroy", "--examples"], ["bitstore keys:destroy avatar"]),
    (["billing:payment:set", "--examples"], ["4242424242424242 12 2030"]),
    (["billing:payment:get", "--examples"], ["bitstore billing:payment:get"]),
    (["billing:plan:set", "--examples"], ["bitstore billing:plan:set pro"]),
    (["billing:plan:get", "--examples"], ["bitstore billing:plan:get"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    EXAMPLES_COMMANDS,
    ids=[a[0] for a, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, client_factory: MagicMock, args: list[str], keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
    client_factory.assert_not_called()


def test_examples_not_in_short_listing(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert "bitstore files:put ./photo.jpg" not in result.output
