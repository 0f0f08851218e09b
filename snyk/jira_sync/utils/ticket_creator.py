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

"""Jira ticket creation through the Snyk v1 ``jira-issue`` endpoint, which
creates the ticket and records the link in one call.
"""

from __future__ import annotations

import json
from typing import Any, Protocol

from snyk_shared.common import error, is_verbose, vprint
from snyk_shared.errors import TicketCreationError, UpstreamError
from snyk_shared.snyk_client import SnykClient

from .constants import JIRA_ISSUE_CREATE_PATH
from .models import TicketResult
from .ticket_builder import build_ticket_fields


class TicketCreator(Protocol):
    def create(self, finding_id: str, board_key: str, summary: str, description: str) -> TicketResult: ...


class SnykJiraTicketCreator:
    """Creates one Jira ticket per call and never raises: failures come back
    as an unsuccessful :class:`TicketResult`.
    """

    def __init__(self, client: SnykClient, org_id: str, project_id: str, *, dry_run: bool = False) -> None:
        self.client = client
        self.org_id = org_id
        self.project_id = project_id
        self.dry_run = dry_run

    def _post(self, finding_id: str, payload: dict[str, Any]) -> Any:
        url = self.client.v1_url(
            JIRA_ISSUE_CREATE_PATH.format(org_id=self.org_id, project_id=self.project_id, finding_id=finding_id)
        )
        try:
            return self.client.post(url, payload, context=f"creating Jira ticket for Snyk issue {finding_id}")
        except UpstreamError as exc:
            raise TicketCreationError.wrap(exc) from exc

    def create(self, finding_id: str, board_key: str, summary: str, description: str) -> TicketResult:
        payload = build_ticket_fields(board_key, summary, description)

        if self.dry_run:
            print(f"DRY-RUN: create Jira ticket in {board_key} for Snyk issue {finding_id} summary={summary!r}")
            if is_verbose():
                print("DRY-RUN: body_preview_begin")
                print(json.dumps(payload, indent=2))
                print("DRY-RUN: body_preview_end")
            return TicketResult.success(finding_id, board_key, None)

        try:
            response = self._post(finding_id, payload)
        except TicketCreationError as exc:
            error(f"{exc.describe()}\n  Board  : {board_key}")
            return TicketResult.failure(finding_id, board_key, str(exc))

        print(f"Created Jira ticket in {board_key} for Snyk issue {finding_id}.")
        vprint("Snyk API Response: " + json.dumps(response, indent=2))
        return TicketResult.success(finding_id, board_key, response)
