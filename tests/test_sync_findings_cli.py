"""Tests for the ``sync_findings`` command-line entry point."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from snyk_shared.common import is_verbose

from jira_sync import sync_findings
from jira_sync.utils.models import SyncOutcome, SyncResult

ENV = {
    "SNYK_TOKEN": "tok",
    "SNYK_ORG_ID": "org-1",
    "SNYK_PROJECT_ID": "proj-1",
    "ORG_NAME": "acme",
}


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("RUNNER_DEBUG", "JIRA_ROUTING_MAP", "JIRA_WILDCARD_PROJECT"):
        monkeypatch.delenv(key, raising=False)
    for key, value in ENV.items():
        monkeypatch.setenv(key, value)


def _run_with_outcome(outcome: SyncOutcome, argv: list[str]) -> tuple[int, MagicMock]:
    with patch.object(sync_findings, "SnykClient") as client_cls, patch.object(
        sync_findings.FindingSync, "from_client"
    ) as from_client:
        from_client.return_value.run.return_value = SyncResult(outcome=outcome)
        code = sync_findings.main(argv)
    client_cls.return_value.__exit__.assert_called_once()
    return code, from_client


@pytest.mark.usefixtures("env")
@pytest.mark.parametrize(
    ("outcome", "expected"),
    [
        (SyncOutcome.COMPLETED_WITH_RESULTS, 0),
        (SyncOutcome.COMPLETED_NO_FINDINGS, 0),
        (SyncOutcome.FATAL_ABORTED, 1),
    ],
)
def test_exit_code_follows_outcome(outcome: SyncOutcome, expected: int) -> None:
    code, _ = _run_with_outcome(outcome, [])

    assert code == expected


@pytest.mark.usefixtures("env")
def test_cli_options_reach_config() -> None:
    _, from_client = _run_with_outcome(
        SyncOutcome.COMPLETED_WITH_RESULTS,
        ["--routing-map", "src=SRC", "--wildcard-project", "OPS", "--dry-run", "--verbose"],
    )

    config = from_client.call_args.args[0]
    assert config.routing.rules[0].prefix == "src"
    assert config.routing.wildcard_board == "OPS"
    assert config.dry_run is True
    assert is_verbose()


def test_missing_env_exits_with_config_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    for key in ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("RUNNER_DEBUG", raising=False)

    with patch.object(sync_findings, "SnykClient") as client_cls:
        code = sync_findings.main([])

    assert code == 1
    client_cls.assert_not_called()
    assert "ERROR: Missing required environment variables" in capsys.readouterr().err
