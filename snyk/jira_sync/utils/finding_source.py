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

"""Paginated retrieval of every finding reported for a Snyk project."""

from __future__ import annotations

from typing import Protocol

from snyk_shared.common import vprint, warn
from snyk_shared.errors import UpstreamError
from snyk_shared.snyk_client import SnykClient

from .constants import ISSUES_LIST_PATH, ISSUES_PAGE_LIMIT, LIST_ISSUES_API_VERSION
from .models import Finding


class FindingSource(Protocol):
    def fetch_all(self, org_id: str, project_id: str) -> list[Finding]: ...


class SnykFindingSource:
    """Reads the REST issue list, following ``links.next`` until exhausted.

    All pages are collected before returning; any failed page raises
    :class:`~snyk_shared.errors.UpstreamError`.
    """

    def __init__(self, client: SnykClient, *, page_limit: int = ISSUES_PAGE_LIMIT) -> None:
        self.client = client
        self.page_limit = page_limit

    def fetch_all(self, org_id: str, project_id: str) -> list[Finding]:
        url: str | None = self.client.rest_url(ISSUES_LIST_PATH.format(org_id=org_id))
        params: dict[str, object] | None = {
            "project_id": project_id,
            "version": LIST_ISSUES_API_VERSION,
            "limit": self.page_limit,
        }

        findings: list[Finding] = []
        seen: set[str] = set()
        page = 0
        print("Fetching list of all issues...")
        while url:
            if url in seen:
                raise UpstreamError("fetching issue list", url=url, detail="pagination loop")
            seen.add(url)
            page += 1
            vprint(f"Fetching list page {page} from: {url.replace(self.client.rest_base, '')}")
            data = self.client.get(url, params=params, context="fetching issue list")
            if not isinstance(data, dict):
                warn(f"Unexpected issue list response on page {page}; treating it as empty")
                data = {}

            for record in data.get("data") or []:
                finding = Finding.from_record(record) if isinstance(record, dict) else None
                if finding is None:
                    warn(f"Skipping issue record without an id on page {page}")
                    continue
                findings.append(finding)

            links = data.get("links") or {}
            url = self.client.resolve_next(links.get("next") if isinstance(links, dict) else None)
            # next links already carry the query string
            params = None

        print(f"Finished fetching issue list. Total issues (all types): {len(findings)}")
        return findings
