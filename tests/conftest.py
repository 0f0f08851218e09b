"""Shared pytest fixtures for the sync tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from snyk_shared.common import set_verbose_enabled
from snyk_shared.snyk_client import SnykClient

from jira_sync.utils.models import RoutingRule, RoutingTable, SyncConfig


@pytest.fixture(autouse=True)
def _reset_verbose():
    """Keep the module-level verbose flag from leaking between tests."""
    set_verbose_enabled(False)
    yield
    set_verbose_enabled(False)


@pytest.fixture
def routing_table() -> RoutingTable:
    return RoutingTable(
        rules=(RoutingRule("routes", "APJ"), RoutingRule("test", "STJI")),
        wildcard_board="EAS",
    )


@pytest.fixture
def sync_config(routing_table: RoutingTable) -> SyncConfig:
    return SyncConfig(
        snyk_token="token-123",
        org_id="org-1",
        project_id="proj-1",
        org_name="acme",
        routing=routing_table,
    )


@pytest.fixture
def session() -> MagicMock:
    mock = MagicMock()
    mock.headers = {}
    return mock


@pytest.fixture
def client(session: MagicMock) -> SnykClient:
    return SnykClient(
        "token-123",
        rest_base="https://api.example.test/rest",
        v1_base="https://api.example.test/v1",
        session=session,
    )
