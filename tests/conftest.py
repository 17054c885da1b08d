"""Shared pytest fixtures and test helpers for bitstore tests."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point HOME at a temp dir and drop any BITSTORE_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in [n for n in os.environ if n.startswith("BITSTORE_")]:
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bitstore = logging.getLogger("bitstore")
    bitstore_level = bitstore.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    bitstore.setLevel(bitstore_level)


def write_config(path: Path, **values: Any) -> Path:
    """Write a JSON config file and return its path."""
    path.write_text(json.dumps(values), encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A valid config file carrying a credential."""
    return write_config(tmp_path / "bitstore.json", privateKey="KxTestKey", network="testnet")


@pytest.fixture
def client_factory(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace the client factory used by the CLI with a recording fake.

    ``client_factory.return_value`` is the fake client: an AsyncMock whose
    namespaced operations (``files.index``, ``billing.plan.set``...) are all
    awaitable; set a ``return_value`` on the operation a test exercises.
    """
    client = AsyncMock(name="BitstoreClient")
    client.__aenter__.return_value = client
    factory = MagicMock(return_value=client)
    monkeypatch.setattr("bitstore.commands._context.create_client", factory)
    return factory


@pytest.fixture
def fake_client(client_factory: MagicMock) -> AsyncMock:
    return client_factory.return_value
