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


"""Snyk finding → Jira ticket sync utilities.

Modules
-------
constants       API versions, endpoint paths, ticket constants.
models          Core dataclass definitions (Finding, EnrichedFinding, RoutingTable, SyncResult …).
config          ``SyncConfig`` loading from the environment and preflight validation.
routing         ``prefix=BOARD`` routing-map parsing and first-match board resolution.
dedup           Exclusion of findings that already have a linked Jira ticket.
finding_source  Paginated retrieval of all findings for a Snyk project.
link_index      Jira link registry lookup (finding ids that already have a ticket).
enricher        Code-issue detail lookup (primary file path, priority score).
ticket_builder  Ticket summary / description / request-body construction.
ticket_creator  Jira ticket creation through the Snyk integration.
finding_sync    Core sync orchestration (preflight, gather, prepare, dispatch).
"""
