"""Unit tests for ActionScope and ActionDocument."""

from __future__ import annotations

from typing import Any

import pytest

from flowsmith.document import ActionDocument, ActionScope, parse_action_path


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("$.['Scope_1'].actions", ["Scope_1", "actions"]),
        ('$["Scope 1"]["actions"]', ["Scope 1", "actions"]),
        ("Scope_1.actions", ["Scope_1", "actions"]),
        ("$['Try'].actions['Inner'].actions", ["Try", "actions", "Inner", "actions"]),
        ("$", []),
        ("", []),
    ],
)
def test_parse_action_path(text: str, expected: list[str]) -> None:
    assert parse_action_path(text) == expected


class TestActionScope:
    def test_add_preserves_order_and_rejects_duplicates(self) -> None:
        entries: dict[str, Any] = {}
        scope = ActionScope(entries)

        assert scope.add("B", {"n": 1})
        assert scope.add("A", {"n": 2})
        assert not scope.add("B", {"n": 3})

        assert scope.names() == ["B", "A"]
        assert entries["B"] == {"n": 1}

    def test_resolve_nested(self) -> None:
        entries = {"Scope": {"type": "Scope", "actions": {"Inner": {}}}}
        scope = ActionScope(entries, ("definition", "actions"))

        child = scope.child_actions("Scope")

        assert child is not None
        assert child.names() == ["Inner"]
        assert child.path_text == "definition.actions.Scope.actions"
        child.add("Second", {})
        assert list(entries["Scope"]["actions"]) == ["Inner", "Second"]

    @pytest.mark.parametrize(
        "segments",
        [["Missing"], ["Scope", "type"], ["Scope", "actions", "x"]],
    )
    def test_resolve_failure(self, segments: list[str]) -> None:
        scope = ActionScope({"Scope": {"type": "Scope", "actions": {}}})

        assert scope.resolve(segments) is None

    def test_resolve_root_is_same_scope(self) -> None:
        scope = ActionScope({"Decide": {"type": "Switch"}}, ("definition", "actions"))

        root = scope.resolve(parse_action_path("$"))

        assert root is scope
        assert root.path_text == "definition.actions"

    def test_find_actions_of_type(self) -> None:
        scope = ActionScope(
            {"A": {"type": "Switch"}, "B": {"type": "Compose"}, "C": "text"}
        )

        assert scope.find_actions_of_type("Switch") == [("A", {"type": "Switch"})]

    def test_container_protocol(self) -> None:
        scope = ActionScope({"A": {}, "B": {}})

        assert "A" in scope
        assert list(scope) == ["A", "B"]
        assert len(scope) == 2
        assert scope.get("C") is None
        assert ActionScope({}).path_text == "$"


class TestActionDocument:
    def test_scopes(self) -> None:
        document = ActionDocument(
            {"definition": {"triggers": {"T": {}}, "actions": {"A": {}}}}
        )

        assert document.triggers is not None
        assert document.triggers.names() == ["T"]
        assert document.actions is not None
        assert document.actions.path == ("definition", "actions")

    def test_missing_sections(self) -> None:
        assert ActionDocument({}).actions is None
        assert ActionDocument({"definition": {"actions": []}}).actions is None
        assert ActionDocument({"definition": "x"}).definition is None

    def test_to_json_returns_live_data(self) -> None:
        data: dict[str, Any] = {"definition": {"actions": {}}}
        document = ActionDocument(data)

        assert document.actions is not None
        document.actions.add("A", {})

        assert document.to_json() is data
        assert data["definition"]["actions"] == {"A": {}}
