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


"""Domain constants – Snyk API versions, endpoint paths, and Jira ticket
defaults shared by the sync modules.
"""

# REST API versions (experimental endpoints pin their own version).
LIST_ISSUES_API_VERSION = "2021-08-20~experimental"
CODE_DETAIL_API_VERSION = "2022-04-06~experimental"

ISSUES_PAGE_LIMIT = 100

# Endpoint paths, relative to the REST / v1 base URLs.
ISSUES_LIST_PATH = "orgs/{org_id}/issues"
CODE_ISSUE_DETAIL_PATH = "orgs/{org_id}/issues/detail/code/{finding_id}"
JIRA_LINKS_PATH = "org/{org_id}/project/{project_id}/jira-issues"
JIRA_ISSUE_CREATE_PATH = "org/{org_id}/project/{project_id}/issue/{finding_id}/jira-issue"

# Attribute names on the code-issue detail response.
ATTR_PRIMARY_FILE_PATH = "primaryFilePath"
ATTR_PRIORITY_SCORE = "priorityScore"

JIRA_ISSUE_TYPE_TASK = "Task"

SNYK_APP_BASE = "https://app.snyk.io"
TICKET_PROVENANCE = "(Ticket auto-generated by Snyk integration)"

# Default routing: source folder prefix -> Jira project key.
DEFAULT_ROUTING_MAP = "routes=APJ,test=STJI"
DEFAULT_WILDCARD_BOARD = "EAS"
