"""Tests for routing-map parsing and board assignment."""

from __future__ import annotations

import pytest

from snyk_shared.errors import ConfigError

from jira_sync.utils.models import RoutingRule, RoutingTable
from jira_sync.utils.routing import parse_routing_table, resolve_board, route_findings

from fakes import make_enriched


def test_route_matches_first_prefix(routing_table: RoutingTable) -> None:
    assert resolve_board(make_enriched("a", "routes/foo.js"), routing_table) == "APJ"
    assert resolve_board(make_enriched("b", "test/unit/foo.spec.js"), routing_table) == "STJI"


def test_route_falls_back_to_wildcard_without_match(routing_table: RoutingTable) -> None:
    assert resolve_board(make_enriched("a", "lib/x.js"), routing_table) == "EAS"


def test_route_falls_back_to_wildcard_without_path(routing_table: RoutingTable) -> None:
    assert resolve_board(make_enriched("a", None), routing_table) == "EAS"
    assert resolve_board(make_enriched("b", ""), routing_table) == "EAS"


def test_route_prefix_match_is_order_sensitive() -> None:
    specific_first = RoutingTable(rules=(RoutingRule("test/api", "A"), RoutingRule("test", "B")), wildcard_board="W")
    general_first = RoutingTable(rules=(RoutingRule("test", "B"), RoutingRule("test/api", "A")), wildcard_board="W")
    finding = make_enriched("a", "test/api/handler.js")

    assert resolve_board(finding, specific_first) == "A"
    assert resolve_board(finding, general_first) == "B"


def test_route_prefix_is_literal_not_segment_aware(routing_table: RoutingTable) -> None:
    # plain string prefix: "testing/" starts with "test"
    assert resolve_board(make_enriched("a", "testing/helper.js"), routing_table) == "STJI"


def test_route_findings_assigns_each_finding_once_in_input_order(routing_table: RoutingTable) -> None:
    findings = [
        make_enriched("1", "routes/a.js"),
        make_enriched("2", "lib/b.js"),
        make_enriched("3", "routes/c.js"),
        make_enriched("4", None),
        make_enriched("5", "test/d.js"),
    ]

    assignment = route_findings(findings, routing_table)

    assert list(assignment) == ["APJ", "EAS", "STJI"]
    assert [f.id for f in assignment["APJ"]] == ["1", "3"]
    assert [f.id for f in assignment["EAS"]] == ["2", "4"]
    assert [f.id for f in assignment["STJI"]] == ["5"]
    routed_ids = sorted(f.id for group in assignment.values() for f in group)
    assert routed_ids == ["1", "2", "3", "4", "5"]


def test_route_findings_is_deterministic(routing_table: RoutingTable) -> None:
    findings = [make_enriched("1", "routes/a.js"), make_enriched("2", "x.js")]

    assert route_findings(findings, routing_table) == route_findings(findings, routing_table)


def test_route_findings_empty_input(routing_table: RoutingTable) -> None:
    assert route_findings([], routing_table) == {}


def test_parse_routing_table_keeps_pair_order() -> None:
    table = parse_routing_table(" test/api = A , test=B,routes=APJ ", "EAS")

    assert table.rules == (RoutingRule("test/api", "A"), RoutingRule("test", "B"), RoutingRule("routes", "APJ"))
    assert table.wildcard_board == "EAS"


def test_parse_routing_table_ignores_malformed_and_duplicate_pairs(capsys: pytest.CaptureFixture[str]) -> None:
    table = parse_routing_table("routes=APJ,,broken,=X,lib=,routes=OTHER", "EAS")

    assert table.rules == (RoutingRule("routes", "APJ"),)
    err = capsys.readouterr().err
    assert "broken" in err
    assert "duplicate routing prefix 'routes'" in err


def test_parse_routing_table_allows_wildcard_only() -> None:
    table = parse_routing_table("", "EAS")

    assert table.rules == ()
    assert resolve_board(make_enriched("a", "routes/x.js"), table) == "EAS"


def test_routing_table_requires_wildcard_board() -> None:
    with pytest.raises(ConfigError):
        parse_routing_table("routes=APJ", "  ")
