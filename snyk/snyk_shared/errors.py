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

"""Exception hierarchy for the Snyk → Jira sync.

SyncError
├── ConfigError            missing / malformed configuration (fatal, preflight)
└── UpstreamError          a Snyk API call failed (status code when available)
    ├── EnrichmentError    detail lookup failed for one finding (skip it)
    └── TicketCreationError  ticket POST failed for one finding (record it)
"""

from __future__ import annotations

from http import HTTPStatus


class SyncError(Exception):
    """Base class for every error raised by the sync."""


class ConfigError(SyncError, ValueError):
    """Raised when required configuration is missing or invalid."""


class UpstreamError(SyncError):
    """A request to the Snyk API failed after the transport's retries."""

    def __init__(
        self,
        context: str,
        *,
        url: str = "",
        status_code: int | None = None,
        body: str = "",
        detail: str = "",
    ) -> None:
        self.context = context
        self.url = url
        self.status_code = status_code
        self.body = body
        self.detail = detail
        super().__init__(self._summary())

    @classmethod
    def wrap(cls, err: UpstreamError, context: str | None = None) -> UpstreamError:
        """Re-type *err* as *cls*, keeping its request details."""
        return cls(
            context or err.context,
            url=err.url,
            status_code=err.status_code,
            body=err.body,
            detail=err.detail,
        )

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND

    def _summary(self) -> str:
        parts = [f"Error {self.context}"]
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        elif self.detail:
            parts.append(f"request error: {self.detail}")
        else:
            parts.append("no response received")
        return " – ".join(parts)

    def describe(self) -> str:
        """Multi-line description for logs; the response body is omitted on 404."""
        lines = [f"Error {self.context}:"]
        if self.url:
            lines.append(f"  URL    : {self.url}")
        if self.status_code is not None:
            lines.append(f"  Status : {self.status_code}")
            if self.is_not_found:
                lines.append("  Resource not found (404).")
            elif self.body:
                lines.append(f"  Body   : {self.body}")
        elif self.detail:
            lines.append(f"  Request error: {self.detail}")
        else:
            lines.append("  Request error: no response received.")
        return "\n".join(lines)


class EnrichmentError(UpstreamError):
    """Detail lookup for a single finding failed."""


class TicketCreationError(UpstreamError):
    """Jira ticket creation for a single finding failed."""
