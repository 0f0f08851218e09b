"""In-memory stand-ins for the Snyk-backed sync capabilities."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

from snyk_shared.errors import UpstreamError

from jira_sync.utils.models import EnrichedFinding, Finding, TicketResult


def make_finding(finding_id: str, *, title: str = "", severity: str = "high") -> Finding:
    return Finding(id=finding_id, title=title or f"Issue {finding_id}", severity=severity)


def make_enriched(
    finding_id: str,
    file_path: str | None = None,
    *,
    priority_score: int | float | None = None,
) -> EnrichedFinding:
    return EnrichedFinding(finding=make_finding(finding_id), file_path=file_path, priority_score=priority_score)


def make_response(status_code: int = 200, payload: Any = None, *, text: str | None = None) -> MagicMock:
    """Build a ``requests.Response``-like mock."""
    resp = MagicMock()
    resp.status_code = status_code
    if payload is None and text is None:
        resp.content = b""
        resp.text = ""
    else:
        resp.text = text if text is not None else "{}"
        resp.content = resp.text.encode("utf-8")
    if payload is not None:
        resp.json.return_value = payload
    else:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    return resp


class FakeFindingSource:
    def __init__(self, findings: list[Finding] | None = None, *, error: UpstreamError | None = None) -> None:
        self.findings = findings or []
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def fetch_all(self, org_id: str, project_id: str) -> list[Finding]:
        self.calls.append((org_id, project_id))
        if self.error is not None:
            raise self.error
        return list(self.findings)


class FakeLinkIndex:
    def __init__(self, linked: set[str] | None = None) -> None:
        self.linked = frozenset(linked or ())
        self.calls: list[tuple[str, str]] = []

    def fetch_linked_ids(self, org_id: str, project_id: str) -> frozenset[str]:
        self.calls.append((org_id, project_id))
        return self.linked


class FakeEnricher:
    """Returns the configured path per finding id; ids in *failing* yield ``None``."""

    def __init__(
        self,
        paths: dict[str, str | None] | None = None,
        *,
        failing: set[str] | None = None,
        scores: dict[str, float] | None = None,
    ) -> None:
        self.paths = paths or {}
        self.failing = failing or set()
        self.scores = scores or {}
        self.calls: list[str] = []

    def enrich(self, org_id: str, project_id: str, finding: Finding) -> EnrichedFinding | None:
        self.calls.append(finding.id)
        if finding.id in self.failing:
            return None
        return EnrichedFinding(
            finding=finding,
            file_path=self.paths.get(finding.id),
            priority_score=self.scores.get(finding.id),
        )


class FakeTicketCreator:
    """Records every call; ids in *failing* come back as failed results."""

    def __init__(self, *, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.calls: list[dict[str, str]] = []

    def create(self, finding_id: str, board_key: str, summary: str, description: str) -> TicketResult:
        self.calls.append(
            {"finding_id": finding_id, "board": board_key, "summary": summary, "description": description}
        )
        if finding_id in self.failing:
            return TicketResult.failure(finding_id, board_key, "Error creating Jira ticket – status=500")
        return TicketResult.success(finding_id, board_key, {"jiraIssue": {"key": f"{board_key}-1"}})
