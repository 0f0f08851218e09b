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

"""Code-issue detail lookup – attaches the primary source file path and the
priority score to a finding.

``primaryFilePath`` is the single field used both to decide whether the
detail is usable and as the routed path.
"""

from __future__ import annotations

from typing import Any, Protocol

from snyk_shared.common import error, vprint, warn
from snyk_shared.errors import EnrichmentError, UpstreamError
from snyk_shared.snyk_client import SnykClient

from .constants import (
    ATTR_PRIMARY_FILE_PATH,
    ATTR_PRIORITY_SCORE,
    CODE_DETAIL_API_VERSION,
    CODE_ISSUE_DETAIL_PATH,
)
from .models import EnrichedFinding, Finding


class Enricher(Protocol):
    def enrich(self, org_id: str, project_id: str, finding: Finding) -> EnrichedFinding | None: ...


def extract_file_path(attributes: dict[str, Any]) -> str | None:
    path = attributes.get(ATTR_PRIMARY_FILE_PATH)
    if isinstance(path, str) and path.strip():
        return path.strip()
    return None


def extract_priority_score(attributes: dict[str, Any]) -> int | float | None:
    score = attributes.get(ATTR_PRIORITY_SCORE)
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return None
    return score


class SnykCodeDetailEnricher:
    """Looks up each finding on the experimental code-issue detail endpoint.

    Returns ``None`` (and logs) instead of raising, so one finding never
    aborts the run:

    - 404 (category not supported by the endpoint) -> warning
    - no usable ``primaryFilePath``                -> warning
    - any other upstream failure                   -> error
    """

    def __init__(self, client: SnykClient) -> None:
        self.client = client

    def _fetch_attributes(self, org_id: str, project_id: str, finding_id: str) -> dict[str, Any]:
        url = self.client.rest_url(CODE_ISSUE_DETAIL_PATH.format(org_id=org_id, finding_id=finding_id))
        try:
            data = self.client.get(
                url,
                params={"project_id": project_id, "version": CODE_DETAIL_API_VERSION},
                context=f"fetching code issue detail for {finding_id}",
            )
        except UpstreamError as exc:
            raise EnrichmentError.wrap(exc) from exc

        record = data.get("data") if isinstance(data, dict) else None
        attrs = record.get("attributes") if isinstance(record, dict) else None
        return attrs if isinstance(attrs, dict) else {}

    def enrich(self, org_id: str, project_id: str, finding: Finding) -> EnrichedFinding | None:
        try:
            attrs = self._fetch_attributes(org_id, project_id, finding.id)
        except EnrichmentError as exc:
            if exc.is_not_found:
                warn(f"Experimental detail endpoint returned 404 for issue {finding.id}.")
            else:
                error(exc.describe())
            return None

        vprint(f"Detail attributes for {finding.id}: {attrs}")
        file_path = extract_file_path(attrs)
        if file_path is None:
            warn(f"Could not extract {ATTR_PRIMARY_FILE_PATH!r} for issue {finding.id}.")
            return None

        print(f"   -> Found path for {finding.id}: {file_path}")
        return EnrichedFinding(
            finding=finding,
            file_path=file_path,
            priority_score=extract_priority_score(attrs),
        )
