"""Tests for the query classifier."""

import pytest

from vercel_mcp.managers.classifier import (
    KEYWORD_RULES,
    classify,
    match_fallback,
    match_token,
    tokenize,
)


@pytest.mark.parametrize("query,expected", [
    ("list my projects", "projects"),
    ("create a webhook", "infrastructure"),
    ("issue a certificate", "domains"),
    ("show integration marketplace listing", "integrations"),
    ("invite someone to my team", "access"),
    ("set an environment variable", "infrastructure"),
])
def test_classifies_user_queries(query, expected):
    assert classify(query) == expected


@pytest.mark.parametrize("tool_name,expected", [
    ("create_dns_record", "domains"),
    ("list_deployments", "projects"),
    ("create_edge_config", "infrastructure"),
    ("list_access_groups", "access"),
    ("upload_artifact", "integrations"),
])
def test_classifies_tool_names(tool_name, expected):
    assert classify(tool_name) == expected


def test_unrelated_query_returns_none():
    assert classify("xyz_totally_unrelated") is None
    assert classify("") is None


def test_case_and_separators_ignored():
    assert classify("LIST-MY_Projects") == "projects"
    assert tokenize("a  b__c--d") == ["a", "b", "c", "d"]


def test_first_matching_token_wins():
    assert classify("delete domain of project") == "domains"
    assert classify("delete project domain") == "projects"


def test_table_order_breaks_ties_within_token():
    # "secret" is listed before "team"
    assert match_token("teamsecret") == "infrastructure"
    # "team" is listed before "project"
    assert match_token("teamproject") == "access"


def test_fallback_only_when_no_token_matches():
    # "int" alone is not a keyword; the fallback substring "int_" is
    assert match_token("int") is None
    assert classify("int_list") == "integrations"
    assert classify("ssl settings") == "domains"
    assert classify("deploy my app") == "projects"


def test_fallback_rule_order():
    assert match_fallback("edge") == "infrastructure"
    assert match_fallback("nothing here") is None


def test_every_keyword_group_is_known():
    groups = {group for _, group in KEYWORD_RULES}
    assert groups == {"projects", "infrastructure", "access", "domains", "integrations"}
