"""Tests for the navigation state machine."""

from __future__ import annotations

import pytest

from salesbuildr_mcp.domains import DOMAINS, get_registry
from salesbuildr_mcp.navigation import (
    BACK_TOOL,
    BACK_TOOL_NAME,
    NAVIGATE_TOOL_NAME,
    NavigationState,
    UnknownDomainError,
)


@pytest.fixture
def nav():
    return NavigationState(get_registry())


def _names(tools):
    return [t.name for t in tools]


def test_fresh_state_shows_only_navigate(nav):
    assert nav.at_root
    assert _names(nav.visible_tools()) == [NAVIGATE_TOOL_NAME]


@pytest.mark.parametrize("domain", DOMAINS, ids=lambda d: d.id)
def test_navigate_shows_back_then_domain_tools(nav, domain):
    nav.navigate(domain.id)
    assert nav.current is domain
    assert _names(nav.visible_tools()) == [BACK_TOOL_NAME, *domain.tool_names]

    nav.back()
    assert _names(nav.visible_tools()) == [NAVIGATE_TOOL_NAME]


def test_back_at_root_is_noop(nav):
    nav.back()
    nav.back()
    assert nav.at_root
    assert _names(nav.visible_tools()) == [NAVIGATE_TOOL_NAME]


def test_switching_domains_replaces_active_domain(nav):
    nav.navigate("companies")
    nav.navigate("quotes")
    visible = _names(nav.visible_tools())
    assert visible == [
        BACK_TOOL_NAME,
        "salesbuildr_quotes_list",
        "salesbuildr_quotes_get",
        "salesbuildr_quotes_create",
    ]
    assert not any(name.startswith("salesbuildr_companies_") for name in visible)


def test_navigate_returns_registered_domain_object(nav):
    domain = nav.navigate("products")
    assert domain is nav.registry.get("products")


@pytest.mark.parametrize("bad", ["invoices", "", None, "COMPANIES", ["companies"]])
def test_unknown_domain_rejected_without_state_change(nav, bad):
    nav.navigate("contacts")
    with pytest.raises(UnknownDomainError, match="Valid domains"):
        nav.navigate(bad)
    assert nav.current.id == "contacts"


def test_navigate_tool_enumerates_registered_domains(nav):
    schema = nav.navigate_tool.input_schema
    assert schema["required"] == ["domain"]
    assert schema["properties"]["domain"]["enum"] == [d.id for d in DOMAINS]
    for domain in DOMAINS:
        assert domain.description in schema["properties"]["domain"]["description"]


def test_back_tool_takes_no_arguments():
    assert BACK_TOOL.input_schema == {"type": "object", "properties": {}}


def test_sessions_do_not_share_state():
    registry = get_registry()
    a, b = NavigationState(registry), NavigationState(registry)
    a.navigate("companies")
    assert b.at_root
