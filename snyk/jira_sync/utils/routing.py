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

"""Path-prefix routing – parsing the user-defined ``prefix=BOARD`` config
string and assigning each enriched finding to exactly one Jira board.
"""

from __future__ import annotations

from typing import Iterable

from snyk_shared.common import vprint, warn

from .models import BoardAssignment, EnrichedFinding, RoutingRule, RoutingTable


def parse_routing_table(raw: str, wildcard_board: str) -> RoutingTable:
    """Parse a comma-separated ``prefix=BOARD`` string into a :class:`RoutingTable`.

    Pair order is kept: rules are evaluated first-match-wins, so list more
    specific prefixes before more general ones. Prefixes and board keys are
    kept as-is (no case folding). Malformed pairs are ignored; a repeated
    prefix keeps its first board.

    Example input:  ``"test/api=API,test=STJI,routes=APJ"``
    """
    rules: list[RoutingRule] = []
    seen: set[str] = set()
    for pair in (raw or "").split(","):
        pair = pair.strip()
        if not pair:
            continue
        if "=" not in pair:
            warn(f"Ignoring routing entry without '=': {pair!r}")
            continue
        prefix, board = pair.split("=", 1)
        prefix = prefix.strip()
        board = board.strip()
        if not prefix or not board:
            warn(f"Ignoring incomplete routing entry: {pair!r}")
            continue
        if prefix in seen:
            warn(f"Ignoring duplicate routing prefix {prefix!r} -> {board}")
            continue
        seen.add(prefix)
        rules.append(RoutingRule(prefix=prefix, board=board))

    return RoutingTable(rules=tuple(rules), wildcard_board=(wildcard_board or "").strip())


def resolve_board(finding: EnrichedFinding, table: RoutingTable) -> str:
    """Return the board for *finding*: first rule whose prefix starts its
    ``file_path``, else the wildcard board.
    """
    path = finding.file_path
    if path:
        for rule in table.rules:
            if path.startswith(rule.prefix):
                return rule.board
    return table.wildcard_board


def route_findings(findings: Iterable[EnrichedFinding], table: RoutingTable) -> BoardAssignment:
    """Group *findings* by board, keeping input order within each board."""
    assignment: BoardAssignment = {}
    for finding in findings:
        board = resolve_board(finding, table)
        vprint(f"Route {finding.id} (path={finding.file_path or '-'}) -> {board}")
        assignment.setdefault(board, []).append(finding)
    return assignment
