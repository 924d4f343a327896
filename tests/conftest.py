"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest

from yougile_cli.commands.base import AppContext
from yougile_cli.core.api_client import YougileClient
from yougile_cli.core.config import ConfigStore, Settings, YougileConfig

from .fakes import FakeClient, MockApi


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Config location inside a per-test temp directory (not created yet)."""
    return tmp_path / ".config" / "yougile" / "config.json"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    return ConfigStore(config_path)


@pytest.fixture
def sample_config() -> YougileConfig:
    """A fully populated configuration record."""
    return YougileConfig(
        api_key="key-aaaaaaaaaaaa",
        api_host="https://yougile.com/api-v2/",
        default_project_id="p1",
        default_project_name="Website",
        default_board_id="b1",
        default_board_name="Sprint",
        default_column_id="col1",
        default_column_name="To do",
    )


@pytest.fixture
def configured_store(store: ConfigStore, sample_config: YougileConfig) -> ConfigStore:
    store.save(sample_config)
    return store


@pytest.fixture
def make_client(store: ConfigStore) -> Iterator[Callable[[MockApi], YougileClient]]:
    """Build YougileClients bound to the temp store and a MockApi; closed on teardown."""
    clients: list[YougileClient] = []

    def factory(mock: MockApi) -> YougileClient:
        client = YougileClient(store, transport=httpx.MockTransport(mock))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def ctx(store: ConfigStore, fake_client: FakeClient) -> AppContext:
    """Command context wired to the temp store and the fake client."""
    return AppContext(settings=Settings(), store=store, api=fake_client)
