#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Sync data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from snyk_shared.errors import ConfigError
from snyk_shared.snyk_client import DEFAULT_REST_BASE, DEFAULT_V1_BASE

from .constants import ISSUES_PAGE_LIMIT


@dataclass(frozen=True)
class Finding:
    """One issue record from the Snyk issue list endpoint."""
    id: str
    title: str
    severity: str
    attributes: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Finding | None:
        """Build a finding from a JSON:API record, or ``None`` when it has no id."""
        finding_id = str(record.get("id") or "").strip()
        if not finding_id:
            return None
        attrs = record.get("attributes")
        if not isinstance(attrs, dict):
            attrs = {}
        return cls(
            id=finding_id,
            title=str(attrs.get("title") or ""),
            severity=str(attrs.get("severity") or ""),
            attributes=attrs,
        )


@dataclass(frozen=True)
class EnrichedFinding:
    """A finding plus the source-location data from the detail endpoint."""
    finding: Finding
    file_path: str | None = None
    priority_score: int | float | None = None

    @property
    def id(self) -> str:
        return self.finding.id

    @property
    def title(self) -> str:
        return self.finding.title

    @property
    def severity(self) -> str:
        return self.finding.severity


@dataclass(frozen=True)
class RoutingRule:
    prefix: str
    board: str


@dataclass(frozen=True)
class RoutingTable:
    """Ordered ``prefix -> board`` rules (first match wins) plus the wildcard board."""
    rules: tuple[RoutingRule, ...]
    wildcard_board: str

    def __post_init__(self) -> None:
        if not self.wildcard_board:
            raise ConfigError("routing table requires a wildcard board")


# board key -> findings routed there, in fetch order
BoardAssignment = dict[str, list[EnrichedFinding]]


@dataclass(frozen=True)
class TicketResult:
    """Outcome of one ticket creation attempt."""
    finding_id: str
    board: str
    ok: bool
    payload: Any = None
    reason: str = ""

    @classmethod
    def success(cls, finding_id: str, board: str, payload: Any) -> TicketResult:
        return cls(finding_id=finding_id, board=board, ok=True, payload=payload)

    @classmethod
    def failure(cls, finding_id: str, board: str, reason: str) -> TicketResult:
        return cls(finding_id=finding_id, board=board, ok=False, reason=reason)


class SyncOutcome(StrEnum):
    COMPLETED_NO_FINDINGS = "completed-no-findings"
    COMPLETED_WITH_RESULTS = "completed-with-results"
    FATAL_ABORTED = "fatal-aborted"


@dataclass
class SyncResult:
    """Aggregated output of a full sync run."""
    outcome: SyncOutcome
    fetched: int = 0
    already_linked: int = 0
    enrichment_skipped: int = 0
    routed: dict[str, int] = field(default_factory=dict)
    tickets: list[TicketResult] = field(default_factory=list)

    @property
    def created(self) -> int:
        return sum(1 for t in self.tickets if t.ok)

    @property
    def failed(self) -> int:
        return sum(1 for t in self.tickets if not t.ok)


@dataclass(frozen=True)
class SyncConfig:
    """Run configuration, built once at startup and passed explicitly."""
    snyk_token: str
    org_id: str
    project_id: str
    org_name: str
    routing: RoutingTable
    rest_base: str = DEFAULT_REST_BASE
    v1_base: str = DEFAULT_V1_BASE
    http_timeout: float = 30
    http_retries: int = 3
    page_limit: int = ISSUES_PAGE_LIMIT
    dry_run: bool = False
