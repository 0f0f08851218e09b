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

"""Exclusion of findings that already have a linked Jira ticket."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from .models import Finding


def exclude_linked(findings: Iterable[Finding], linked_ids: AbstractSet[str]) -> list[Finding]:
    """Return *findings* whose id is not in *linked_ids*, in their original order."""
    return [f for f in findings if f.id not in linked_ids]
