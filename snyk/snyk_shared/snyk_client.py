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

"""Snyk HTTP transport – a thin ``requests.Session`` wrapper that owns the
auth header, timeouts and connection retries, and turns failed responses
into :class:`~snyk_shared.errors.UpstreamError`.

Two API families are used:

- REST (``/rest``, JSON:API): issue list and code-issue detail.
- v1 (``/v1``, plain JSON): Jira link registry and Jira ticket creation.
"""

from __future__ import annotations

import json
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from .common import vprint
from .errors import UpstreamError

DEFAULT_REST_BASE = "https://api.snyk.io/rest"
DEFAULT_V1_BASE = "https://api.snyk.io/v1"

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
JSON_MEDIA_TYPE = "application/json"


class SnykClient:
    """Authenticated session against the Snyk REST and v1 APIs."""

    def __init__(
        self,
        token: str,
        *,
        rest_base: str = DEFAULT_REST_BASE,
        v1_base: str = DEFAULT_V1_BASE,
        timeout: float = 30,
        retries: int = 3,
        session: requests.Session | None = None,
    ) -> None:
        self.rest_base = rest_base.rstrip("/")
        self.v1_base = v1_base.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": JSONAPI_MEDIA_TYPE,
            }
        )
        adapter = HTTPAdapter(max_retries=retries)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def __enter__(self) -> SnykClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    # -----------------------------------------------------------------------
    # URL helpers
    # -----------------------------------------------------------------------

    def rest_url(self, path: str) -> str:
        return f"{self.rest_base}/{path.lstrip('/')}"

    def v1_url(self, path: str) -> str:
        return f"{self.v1_base}/{path.lstrip('/')}"

    def resolve_next(self, next_link: str | None) -> str | None:
        """Resolve a JSON:API ``links.next`` value against the REST base.

        Snyk returns ``next`` as a path relative to the REST base; absolute
        URLs are used unchanged.
        """
        if not next_link:
            return None
        if next_link.startswith(("http://", "https://")):
            return next_link
        if not next_link.startswith("/"):
            next_link = "/" + next_link
        return f"{self.rest_base}{next_link}"

    # -----------------------------------------------------------------------
    # Requests
    # -----------------------------------------------------------------------

    def request(
        self,
        method: str,
        url: str,
        *,
        context: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        accept: str | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (``None`` when empty).

        Raises :class:`UpstreamError` for transport failures, non-2xx statuses
        and undecodable bodies.
        """
        headers = {"Accept": accept} if accept else None
        try:
            resp = self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamError(context, url=url, detail=str(exc)) from exc

        if resp.status_code >= 400:
            raise UpstreamError(context, url=url, status_code=resp.status_code, body=resp.text or "")

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamError(
                context,
                url=url,
                status_code=resp.status_code,
                body=resp.text or "",
                detail=f"invalid JSON response: {exc}",
            ) from exc

    def get(self, url: str, *, context: str, params: dict[str, Any] | None = None, accept: str | None = None) -> Any:
        vprint(f"GET {url}" + (f" params={params}" if params else ""))
        return self.request("GET", url, context=context, params=params, accept=accept)

    def post(self, url: str, payload: dict[str, Any], *, context: str, accept: str | None = None) -> Any:
        vprint(f"POST {url}")
        vprint("Request Body: " + json.dumps(payload, indent=2))
        return self.request("POST", url, context=context, json_body=payload, accept=accept)
