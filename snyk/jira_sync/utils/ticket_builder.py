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

"""Ticket summary / description / request-body construction from findings."""

from typing import Any

from snyk_shared.templates import render_template

from .constants import JIRA_ISSUE_TYPE_TASK, SNYK_APP_BASE, TICKET_PROVENANCE
from .models import EnrichedFinding


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

DESCRIPTION_TEMPLATE = """Issue details:
 Title: {{ title }}
 Severity: {{ severity }}

Priority Score: {{ priority_score }}
Snyk vulnerability details: {{ finding_url }}

{{ provenance }}"""


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_finding_url(org_name: str, project_id: str, finding_id: str) -> str:
    """Deep link to the finding in the Snyk web app."""
    return f"{SNYK_APP_BASE}/org/{org_name}/project/{project_id}#{finding_id}"


def build_ticket_summary(finding: EnrichedFinding) -> str:
    return finding.title


def build_ticket_description(finding: EnrichedFinding, *, org_name: str, project_id: str) -> str:
    return render_template(
        DESCRIPTION_TEMPLATE,
        {
            "title": finding.title,
            "severity": finding.severity,
            "priority_score": finding.priority_score,
            "finding_url": build_finding_url(org_name, project_id, finding.id),
            "provenance": TICKET_PROVENANCE,
        },
        missing="unknown",
    )


def build_ticket_fields(board_key: str, summary: str, description: str) -> dict[str, Any]:
    """Jira ``create issue`` body as accepted by the Snyk v1 jira-issue endpoint."""
    return {
        "fields": {
            "project": {"key": board_key},
            "issuetype": {"name": JIRA_ISSUE_TYPE_TASK},
            "summary": summary,
            "description": description,
        }
    }
