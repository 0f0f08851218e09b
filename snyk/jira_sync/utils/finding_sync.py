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

"""Core sync orchestration – runs the preflight, gather, prepare and
dispatch phases in order and owns the failure-isolation policy.

Phases
------
preflight   required identifiers present, else abort (``ConfigError``).
gather      Jira link snapshot (never fatal), then the full finding list
            (fatal on ``UpstreamError``).
prepare     drop already-linked findings, enrich one at a time (skipping
            failures), route to boards.
dispatch    one ticket per finding, board by board; a failed ticket is
            recorded and the loop continues.

Every network call is made sequentially so log lines stay next to the
finding they belong to.
"""

from __future__ import annotations

from snyk_shared.common import error, vprint, warn
from snyk_shared.errors import ConfigError, UpstreamError
from snyk_shared.snyk_client import SnykClient

from .config import ensure_required
from .dedup import exclude_linked
from .enricher import Enricher, SnykCodeDetailEnricher
from .finding_source import FindingSource, SnykFindingSource
from .link_index import LinkIndex, SnykJiraLinkIndex
from .models import BoardAssignment, EnrichedFinding, Finding, SyncConfig, SyncOutcome, SyncResult, TicketResult
from .routing import route_findings
from .ticket_builder import build_ticket_description, build_ticket_summary
from .ticket_creator import SnykJiraTicketCreator, TicketCreator


class FindingSync:
    """One sync run over a single Snyk project.

    The four remote capabilities are injected so they can be replaced with
    in-memory fakes; :meth:`from_client` wires the Snyk-backed versions.
    """

    def __init__(
        self,
        config: SyncConfig,
        *,
        finding_source: FindingSource,
        link_index: LinkIndex,
        enricher: Enricher,
        ticket_creator: TicketCreator,
    ) -> None:
        self.config = config
        self.finding_source = finding_source
        self.link_index = link_index
        self.enricher = enricher
        self.ticket_creator = ticket_creator

    @classmethod
    def from_client(cls, config: SyncConfig, client: SnykClient) -> FindingSync:
        return cls(
            config,
            finding_source=SnykFindingSource(client, page_limit=config.page_limit),
            link_index=SnykJiraLinkIndex(client),
            enricher=SnykCodeDetailEnricher(client),
            ticket_creator=SnykJiraTicketCreator(
                client, config.org_id, config.project_id, dry_run=config.dry_run
            ),
        )

    # -----------------------------------------------------------------------
    # Phases
    # -----------------------------------------------------------------------

    def _enrich_all(self, findings: list[Finding]) -> list[EnrichedFinding]:
        enriched: list[EnrichedFinding] = []
        for finding in findings:
            result = self.enricher.enrich(self.config.org_id, self.config.project_id, finding)
            if result is None:
                warn(f"Skipping issue {finding.id}: no source location available")
                continue
            enriched.append(result)
        return enriched

    def _dispatch(self, assignment: BoardAssignment) -> list[TicketResult]:
        results: list[TicketResult] = []
        for board, findings in assignment.items():
            print(f"Creating {len(findings)} ticket(s) in Jira project {board}")
            for finding in findings:
                result = self.ticket_creator.create(
                    finding.id,
                    board,
                    build_ticket_summary(finding),
                    build_ticket_description(
                        finding,
                        org_name=self.config.org_name,
                        project_id=self.config.project_id,
                    ),
                )
                if not result.ok:
                    warn(f"Ticket creation failed for issue {finding.id} in {board}; continuing")
                results.append(result)
        return results

    def run(self) -> SyncResult:
        try:
            ensure_required(self.config)
        except ConfigError as exc:
            error(str(exc))
            return SyncResult(outcome=SyncOutcome.FATAL_ABORTED)

        org_id = self.config.org_id
        project_id = self.config.project_id

        linked_ids = self.link_index.fetch_linked_ids(org_id, project_id)
        try:
            findings = self.finding_source.fetch_all(org_id, project_id)
        except UpstreamError as exc:
            error(exc.describe())
            error("Failed to fetch issue list from Snyk API.")
            return SyncResult(outcome=SyncOutcome.FATAL_ABORTED)

        if not findings:
            print("No issues found for this project.")
            return SyncResult(outcome=SyncOutcome.COMPLETED_NO_FINDINGS)

        pending = exclude_linked(findings, linked_ids)
        print(
            f"Processing {len(pending)} of {len(findings)} issues "
            f"({len(findings) - len(pending)} already linked to Jira)"
        )

        enriched = self._enrich_all(pending)
        assignment = route_findings(enriched, self.config.routing)
        vprint("Board assignment: " + ", ".join(f"{b}={len(f)}" for b, f in assignment.items()))

        tickets = self._dispatch(assignment)
        result = SyncResult(
            outcome=SyncOutcome.COMPLETED_WITH_RESULTS,
            fetched=len(findings),
            already_linked=len(findings) - len(pending),
            enrichment_skipped=len(pending) - len(enriched),
            routed={board: len(items) for board, items in assignment.items()},
            tickets=tickets,
        )
        print(
            f"Sync finished: created={result.created} failed={result.failed} "
            f"skipped={result.enrichment_skipped} already_linked={result.already_linked}"
        )
        return result
