#!/usr/bin/env python3
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

"""Create Jira tickets for open Snyk findings that do not have one yet.

Flow:
- Load the Jira link registry of the Snyk project (finding ids that already
  have a ticket).
- Fetch every finding of the project (all pages).
- Drop linked findings, look up the primary source file of each remaining
  finding, and route it to a Jira project by path prefix.
- Create one Jira ticket per finding through the Snyk Jira integration.

A finding whose detail lookup or ticket creation fails is logged and skipped;
the run continues with the next one.

Requirements:
- SNYK_TOKEN, SNYK_ORG_ID, SNYK_PROJECT_ID, ORG_NAME in the environment
  (see ``jira_sync.utils.config`` for the optional settings).

Exit codes: 0 on success (including "no findings"), 1 on configuration error
or when the finding list cannot be fetched.

Draft / debug (no writes):
    `snyk-jira-sync --routing-map "test/api=API,test=STJI,routes=APJ" --dry-run --verbose`
"""

from __future__ import annotations

import argparse
import sys

from snyk_shared.common import error, parse_runner_debug, set_verbose_enabled
from snyk_shared.errors import ConfigError
from snyk_shared.snyk_client import SnykClient

from jira_sync.utils.config import load_config
from jira_sync.utils.finding_sync import FindingSync
from jira_sync.utils.models import SyncOutcome


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create Jira tickets for Snyk findings that are not linked yet")
    p.add_argument(
        "--routing-map",
        default=None,
        help="Comma-separated prefix=JIRA_PROJECT pairs, first match wins (default: $JIRA_ROUTING_MAP)",
    )
    p.add_argument(
        "--wildcard-project",
        default=None,
        help="Jira project for findings no prefix matches (default: $JIRA_WILDCARD_PROJECT)",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Read from Snyk and print intended tickets without creating them",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logs (also enabled when RUNNER_DEBUG=1)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    set_verbose_enabled(bool(args.verbose) or parse_runner_debug())

    try:
        config = load_config(
            routing_map=args.routing_map,
            wildcard_project=args.wildcard_project,
            dry_run=bool(args.dry_run),
        )
    except ConfigError as exc:
        error(str(exc))
        return 1

    with SnykClient(
        config.snyk_token,
        rest_base=config.rest_base,
        v1_base=config.v1_base,
        timeout=config.http_timeout,
        retries=config.http_retries,
    ) as client:
        result = FindingSync.from_client(config, client).run()

    if result.outcome is SyncOutcome.FATAL_ABORTED:
        print("Sync aborted.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
