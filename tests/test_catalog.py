"""
Tests for the static tool catalog and its JSON Schema rendering.
"""

import pytest

from core.catalog import TOOLS, get_tool, list_tool_names
from core.models import FieldSpec, ToolSpec


EXPECTED_BINDINGS = {
    "entry_list": ("/entries", "POST"),
    "subscription_list": ("/subscriptions", "GET"),
    "unread_count": ("/reads", "GET"),
    "feed_info": ("/feeds", "GET"),
    "mark_read": ("/reads/all", "POST"),
    "star_entry": ("/collections", "POST"),
    "unstar_entry": ("/collections", "DELETE"),
    "subscribe": ("/subscriptions", "POST"),
    "unsubscribe": ("/subscriptions", "DELETE"),
    "get_entry": ("/entries", "GET"),
    "discover_feed": ("/discover", "POST"),
    "get_profile": ("/better-auth/get-session", "GET"),
}


def test_catalog_has_every_tool_once():
    names = list_tool_names()
    assert sorted(names) == sorted(EXPECTED_BINDINGS)
    assert len(names) == len(set(names))


@pytest.mark.parametrize("name,binding", sorted(EXPECTED_BINDINGS.items()))
def test_tool_http_binding(name, binding):
    tool = get_tool(name)
    assert (tool.path, tool.http_method) == binding


def test_get_tool_unknown_name():
    with pytest.raises(KeyError, match="no_such_tool"):
        get_tool("no_such_tool")


@pytest.mark.parametrize("tool", TOOLS, ids=lambda t: t.name)
def test_every_tool_is_described(tool):
    assert tool.description.strip()
    assert "Returns:" in tool.description
    for field in tool.input_fields:
        assert field.description.strip()
    schema = tool.input_schema()
    assert schema["type"] == "object"
    assert set(schema["properties"]) == {f.name for f in tool.input_fields}


def test_required_fields_appear_in_schema():
    assert get_tool("star_entry").input_schema()["required"] == ["entryId"]
    assert get_tool("unstar_entry").input_schema()["required"] == ["entryId"]
    assert get_tool("unsubscribe").input_schema()["required"] == ["feedId"]
    assert get_tool("get_entry").input_schema()["required"] == ["id"]
    assert get_tool("subscribe").input_schema()["required"] == ["url"]


def test_optional_only_tools_have_no_required_list():
    assert "required" not in get_tool("entry_list").input_schema()
    assert get_tool("get_profile").input_schema() == {"type": "object", "properties": {}}


def test_field_kinds_render_to_json_schema():
    props = get_tool("entry_list").input_schema()["properties"]

    assert props["view"]["type"] == "integer"
    assert props["read"]["type"] == "boolean"
    assert props["feedIdList"] == {
        "type": "array",
        "items": {"type": "string"},
        "description": "Filter by list of feed IDs",
    }
    assert props["publishedAfter"]["format"] == "date-time"
    assert get_tool("subscribe").input_schema()["properties"]["url"]["format"] == "uri"


def test_hints():
    assert get_tool("entry_list").hints.read_only is True
    assert get_tool("unsubscribe").hints.destructive is True
    assert get_tool("unstar_entry").hints.destructive is True
    assert get_tool("subscribe").hints.idempotent is False
    assert get_tool("mark_read").hints.read_only is False
    assert all(tool.hints.open_world for tool in TOOLS)


def test_tool_spec_is_immutable():
    tool = get_tool("entry_list")
    with pytest.raises(AttributeError):
        tool.path = "/somewhere-else"


def test_number_kind_schema():
    spec = ToolSpec(
        name="t", description="d", path="/x", http_method="GET",
        input_fields=(FieldSpec("ratio", "number", "A ratio", required=True),),
    )
    assert spec.input_schema() == {
        "type": "object",
        "properties": {"ratio": {"type": "number", "description": "A ratio"}},
        "required": ["ratio"],
    }
