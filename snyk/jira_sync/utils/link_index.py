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

"""Jira link registry lookup – the set of Snyk finding ids that already have
a Jira ticket attached through the Snyk integration.

A failed lookup never aborts the run: it degrades to "no links", so the worst
case is a duplicate ticket.
"""

from __future__ import annotations

from typing import Protocol

from snyk_shared.common import vprint, warn
from snyk_shared.errors import UpstreamError
from snyk_shared.snyk_client import JSON_MEDIA_TYPE, SnykClient

from .constants import JIRA_LINKS_PATH


class LinkIndex(Protocol):
    def fetch_linked_ids(self, org_id: str, project_id: str) -> frozenset[str]: ...


class SnykJiraLinkIndex:
    def __init__(self, client: SnykClient) -> None:
        self.client = client

    def fetch_linked_ids(self, org_id: str, project_id: str) -> frozenset[str]:
        url = self.client.v1_url(JIRA_LINKS_PATH.format(org_id=org_id, project_id=project_id))
        vprint(f"Querying v1 endpoint: {url}")

        try:
            data = self.client.get(
                url,
                context=f"fetching Jira linked Snyk issue ids for project {project_id}",
                accept=JSON_MEDIA_TYPE,
            )
        except UpstreamError as exc:
            if exc.is_not_found:
                warn(f"Received 404 from {url}. Project might not exist or has no Jira links.")
            else:
                warn(f"{exc.describe()}\nProceeding without Jira link information.")
            return frozenset()

        if not isinstance(data, dict):
            warn(f"No Jira link records found or unexpected response structure from {url}.")
            return frozenset()

        # The registry is keyed by Snyk issue id.
        linked = frozenset(str(key) for key in data)
        print(f"Found {len(linked)} Snyk issues already linked to Jira for project {project_id}.")
        return linked
