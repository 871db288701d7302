"""Unit tests for trigger, variable, message and parameter declarations."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from flowsmith.assembly import add_messages, add_parameters, add_triggers, add_variables
from flowsmith.constants import RESOURCE_TYPE_LOGIC_APP_CONSUMPTION
from flowsmith.document import ActionDocument
from flowsmith.issues import IssueKind
from flowsmith.models import WorkflowModel
from tests.fixtures.snippets import DEFINITION_SKELETON, SnippetWorkspace

TRIGGER_SNIPPET = (
    '{"workflowTrigger": {"When_{{ workflow_object.name }}_receives": '
    '{"type": "ServiceBus", "inputs": {"queue": "{{ workflow_object.name }}"}}}}'
)


@pytest.fixture
def document() -> ActionDocument:
    return ActionDocument(copy.deepcopy(DEFINITION_SKELETON))


def deep_model() -> WorkflowModel:
    """Variables and messages declared at several depths."""
    return WorkflowModel.model_validate(
        {
            "name": "OrderProcess",
            "variables": [{"name": "status"}],
            "activities": [
                {
                    "name": "Level1",
                    "activities": [
                        {
                            "name": "Level2",
                            "activities": [
                                {
                                    "name": "Level3",
                                    "variables": [{"name": "retries"}],
                                    "messages": [{"name": "order"}],
                                    "activities": [],
                                }
                            ],
                        }
                    ],
                }
            ],
        }
    )


# =============================================================================
# Triggers
# =============================================================================


class TestAddTriggers:
    def test_trigger_rendered_against_workflow_model(
        self, workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        workspace.add("channel.trigger.servicebus", TRIGGER_SNIPPET)
        model = WorkflowModel.model_validate(
            {
                "name": "OrderProcess",
                "channels": [{"name": "Orders", "activator": True}, {"name": "Invoices"}],
            }
        )
        context = workspace.context(workspace.process_manager(model))

        added = add_triggers(context, document)

        assert added == 1
        assert document.triggers is not None
        assert document.triggers.names() == ["When_OrderProcess_receives"]
        assert document.triggers.get("When_OrderProcess_receives")["inputs"] == {
            "queue": "OrderProcess"
        }
        assert context.model is not None
        assert context.model.unique_id == 1
        assert all(channel.unique_id is None for channel in context.model.channels)

    def test_rendered_once_per_activator_channel(
        self, workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        workspace.add("channel.trigger.servicebus", TRIGGER_SNIPPET)
        model = WorkflowModel.model_validate(
            {
                "name": "OrderProcess",
                "channels": [
                    {"name": "Orders", "activator": True},
                    {"name": "Returns", "activator": True},
                ],
            }
        )
        context = workspace.context(workspace.process_manager(model))

        added = add_triggers(context, document)

        # Both renders produce the same trigger name; the second is dropped
        assert added == 1
        assert document.triggers is not None
        assert document.triggers.names() == ["When_OrderProcess_receives"]
        assert context.model is not None
        assert context.model.unique_id == 2

    def test_same_trigger_name_added_once(
        self, workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        workspace.add("channel.trigger.a", {"workflowTrigger": {"manual": {"n": 1}}})
        workspace.add("channel.trigger.b", {"workflowTrigger": {"manual": {"n": 2}}})
        model = WorkflowModel.model_validate(
            {"name": "Wf", "channels": [{"name": "In", "activator": True}]}
        )
        context = workspace.context(workspace.process_manager(model))

        assert add_triggers(context, document) == 1
        assert document.to_json()["definition"]["triggers"] == {"manual": {"n": 1}}

    def test_no_activator_channels(
        self, workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        workspace.add("channel.trigger.servicebus", TRIGGER_SNIPPET)
        context = workspace.context(workspace.process_manager(WorkflowModel(name="Wf")))

        assert add_triggers(context, document) == 0

    def test_missing_triggers_collection(self, workspace: SnippetWorkspace) -> None:
        workspace.add("channel.trigger.servicebus", TRIGGER_SNIPPET)
        model = WorkflowModel.model_validate(
            {"name": "Wf", "channels": [{"name": "In", "activator": True}]}
        )
        context = workspace.context(workspace.process_manager(model))

        added = add_triggers(context, ActionDocument({"definition": {"actions": {}}}))

        assert added == 0
        [issue] = context.issues.errors
        assert issue.kind is IssueKind.STRUCTURAL_PATH_NOT_FOUND
        assert issue.path == "definition.triggers"


# =============================================================================
# Variables and messages
# =============================================================================


class TestAddVariables:
    def test_nested_declarations_hoisted_to_root_once(
        self, standard_workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        context = standard_workspace.context(
            standard_workspace.process_manager(deep_model())
        )

        added = add_variables(context, document)

        assert added == 2
        assert document.actions is not None
        assert document.actions.names() == ["Initialize_status", "Initialize_retries"]

    def test_static_variables_come_first(
        self, standard_workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        standard_workspace.add(
            "variable", {"workflowDefinitionVariable": {"Initialize_static": {}}}
        )
        context = standard_workspace.context(
            standard_workspace.process_manager(deep_model())
        )

        add_variables(context, document)

        assert document.actions is not None
        assert document.actions.names()[0] == "Initialize_static"

    def test_duplicate_declaration_kept_once(
        self, standard_workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        model = WorkflowModel.model_validate(
            {
                "name": "Wf",
                "variables": [{"name": "status"}],
                "activities": [
                    {"name": "Inner", "variables": [{"name": "status"}], "activities": []}
                ],
            }
        )
        context = standard_workspace.context(standard_workspace.process_manager(model))

        assert add_variables(context, document) == 1
        assert document.actions is not None
        assert document.actions.names() == ["Initialize_status"]

    def test_without_placeholder(
        self, workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        context = workspace.context(workspace.process_manager(deep_model()))

        assert add_variables(context, document) == 0

    def test_missing_actions_collection(self, standard_workspace: SnippetWorkspace) -> None:
        context = standard_workspace.context(
            standard_workspace.process_manager(deep_model())
        )

        added = add_variables(context, ActionDocument({"definition": {}}))

        assert added == 0
        assert context.issues.errors[0].path == "definition.actions"


class TestAddMessages:
    def test_messages_hoisted(
        self, standard_workspace: SnippetWorkspace, document: ActionDocument
    ) -> None:
        context = standard_workspace.context(
            standard_workspace.process_manager(deep_model())
        )

        assert add_messages(context, document) == 1
        assert document.actions is not None
        assert document.actions.names() == ["Message_order"]


# =============================================================================
# Parameters
# =============================================================================


class TestAddParameters:
    def test_copies_top_level_entries(self, workspace: SnippetWorkspace) -> None:
        workspace.add(
            "parameter",
            {"existing": {"value": 2}, "queueName": {"type": "String", "value": "orders"}},
            family=RESOURCE_TYPE_LOGIC_APP_CONSUMPTION,
        )
        context = workspace.context(workspace.process_manager(WorkflowModel(name="Wf")))
        skeleton: dict[str, Any] = {"existing": {"value": 1}}

        added = add_parameters(context, skeleton)

        assert added == 1
        assert skeleton == {
            "existing": {"value": 1},
            "queueName": {"type": "String", "value": "orders"},
        }

    def test_standard_family_parameter_is_ignored(
        self, workspace: SnippetWorkspace
    ) -> None:
        workspace.add("parameter", {"queueName": {}})
        context = workspace.context(workspace.process_manager(WorkflowModel(name="Wf")))
        skeleton: dict[str, Any] = {}

        assert add_parameters(context, skeleton) == 0
        assert skeleton == {}

    def test_rendered_against_model(self, workspace: SnippetWorkspace) -> None:
        workspace.add(
            "parameter",
            '{"{{ model.name }}_endpoint": {"type": "String"}}',
            family=RESOURCE_TYPE_LOGIC_APP_CONSUMPTION,
        )
        context = workspace.context(workspace.process_manager(WorkflowModel(name="Wf")))
        skeleton: dict[str, Any] = {}

        add_parameters(context, skeleton)

        assert list(skeleton) == ["Wf_endpoint"]
