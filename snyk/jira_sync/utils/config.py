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

"""Run configuration – builds :class:`SyncConfig` from environment variables
(optionally overridden by CLI values) and validates the required identifiers.

Environment variables
---------------------
SNYK_TOKEN              (required)  Snyk API token.
SNYK_ORG_ID             (required)  Snyk organisation id.
SNYK_PROJECT_ID         (required)  Snyk project id.
ORG_NAME                (required)  Organisation slug used in app.snyk.io links.
JIRA_ROUTING_MAP        ``prefix=BOARD`` pairs, first match wins (default: routes=APJ,test=STJI).
JIRA_WILDCARD_PROJECT   Board for findings no prefix matches (default: EAS).
SNYK_API_BASE           REST API base URL.
SNYK_V1_API_BASE        v1 API base URL.
SNYK_HTTP_TIMEOUT       Per-request timeout in seconds (default: 30).
SNYK_HTTP_RETRIES       Connection retries per request (default: 3).
"""

from __future__ import annotations

import math
import os
from typing import Mapping

from snyk_shared.common import env_value
from snyk_shared.errors import ConfigError
from snyk_shared.snyk_client import DEFAULT_REST_BASE, DEFAULT_V1_BASE

from .constants import DEFAULT_ROUTING_MAP, DEFAULT_WILDCARD_BOARD, ISSUES_PAGE_LIMIT
from .models import SyncConfig
from .routing import parse_routing_table

REQUIRED_ENV: dict[str, str] = {
    "SNYK_TOKEN": "snyk_token",
    "SNYK_ORG_ID": "org_id",
    "SNYK_PROJECT_ID": "project_id",
    "ORG_NAME": "org_name",
}


def missing_required(config: SyncConfig) -> list[str]:
    """Return the env names of required values that are empty on *config*."""
    return [name for name, attr in REQUIRED_ENV.items() if not str(getattr(config, attr) or "").strip()]


def ensure_required(config: SyncConfig) -> None:
    missing = missing_required(config)
    if missing:
        raise ConfigError(f"Missing required environment variables ({', '.join(missing)}).")


def _parse_number(
    env: Mapping[str, str],
    key: str,
    default: float,
    *,
    integer: bool = False,
    positive: bool = False,
) -> float:
    raw = env_value(env, key)
    if not raw:
        return default
    try:
        value = int(raw) if integer else float(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from exc
    if not math.isfinite(value):
        raise ConfigError(f"{key} must be a finite number, got {raw!r}")
    if value < 0 or (positive and value == 0):
        qualifier = "greater than zero" if positive else "non-negative"
        raise ConfigError(f"{key} must be {qualifier}, got {raw!r}")
    return value


def load_config(
    env: Mapping[str, str] | None = None,
    *,
    routing_map: str | None = None,
    wildcard_project: str | None = None,
    dry_run: bool = False,
) -> SyncConfig:
    """Build the run configuration.

    *routing_map* / *wildcard_project* override ``JIRA_ROUTING_MAP`` /
    ``JIRA_WILDCARD_PROJECT`` when given. Raises :class:`ConfigError` when a
    required identifier is missing or a setting does not parse.
    """
    env = os.environ if env is None else env

    raw_routing = routing_map if routing_map is not None else env_value(env, "JIRA_ROUTING_MAP", DEFAULT_ROUTING_MAP)
    wildcard = wildcard_project if wildcard_project is not None else env_value(
        env, "JIRA_WILDCARD_PROJECT", DEFAULT_WILDCARD_BOARD
    )

    config = SyncConfig(
        snyk_token=env_value(env, "SNYK_TOKEN"),
        org_id=env_value(env, "SNYK_ORG_ID"),
        project_id=env_value(env, "SNYK_PROJECT_ID"),
        org_name=env_value(env, "ORG_NAME"),
        routing=parse_routing_table(raw_routing, wildcard),
        rest_base=env_value(env, "SNYK_API_BASE", DEFAULT_REST_BASE),
        v1_base=env_value(env, "SNYK_V1_API_BASE", DEFAULT_V1_BASE),
        http_timeout=_parse_number(env, "SNYK_HTTP_TIMEOUT", 30, positive=True),
        http_retries=int(_parse_number(env, "SNYK_HTTP_RETRIES", 3, integer=True)),
        page_limit=ISSUES_PAGE_LIMIT,
        dry_run=dry_run,
    )
    ensure_required(config)
    return config
