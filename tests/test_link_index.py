"""Tests for the Jira link registry lookup."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from snyk_shared.snyk_client import JSON_MEDIA_TYPE, SnykClient

from jira_sync.utils.link_index import SnykJiraLinkIndex

from fakes import make_response


def test_linked_ids_are_registry_keys(client: SnykClient, session: MagicMock) -> None:
    session.request.return_value = make_response(
        200,
        {
            "issue-1": [{"jiraIssue": {"id": "1", "key": "EAS-1"}}],
            "issue-2": [{"jiraIssue": {"id": "2", "key": "APJ-7"}}],
        },
    )

    linked = SnykJiraLinkIndex(client).fetch_linked_ids("org-1", "proj-1")

    assert linked == frozenset({"issue-1", "issue-2"})
    args, kwargs = session.request.call_args
    assert args == ("GET", "https://api.example.test/v1/org/org-1/project/proj-1/jira-issues")
    assert kwargs["headers"] == {"Accept": JSON_MEDIA_TYPE}


def test_not_found_degrades_to_empty_set(
    client: SnykClient, session: MagicMock, capsys: pytest.CaptureFixture[str]
) -> None:
    session.request.return_value = make_response(404, text="not found")

    assert SnykJiraLinkIndex(client).fetch_linked_ids("org-1", "proj-1") == frozenset()
    assert "Received 404" in capsys.readouterr().err


def test_other_errors_degrade_to_empty_set_with_warning(
    client: SnykClient, session: MagicMock, capsys: pytest.CaptureFixture[str]
) -> None:
    session.request.side_effect = requests.Timeout("read timed out")

    assert SnykJiraLinkIndex(client).fetch_linked_ids("org-1", "proj-1") == frozenset()
    err = capsys.readouterr().err
    assert err.startswith("WARN:")
    assert "read timed out" in err


def test_unexpected_body_is_treated_as_no_links(
    client: SnykClient, session: MagicMock, capsys: pytest.CaptureFixture[str]
) -> None:
    session.request.return_value = make_response(200, ["not", "a", "mapping"])

    assert SnykJiraLinkIndex(client).fetch_linked_ids("org-1", "proj-1") == frozenset()
    assert "unexpected response structure" in capsys.readouterr().err
