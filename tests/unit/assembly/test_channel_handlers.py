"""Unit tests for the activity handlers."""

from __future__ import annotations

from flowsmith.assembly.handlers import (
    DefaultActivityHandler,
    ReceiveActivityHandler,
    SendActivityHandler,
    insert_actions,
)
from flowsmith.document import ActionScope
from flowsmith.issues import IssueKind
from flowsmith.models import WorkflowActivity, WorkflowModel
from tests.fixtures.snippets import SnippetWorkspace

QUEUE_SEND = (
    '{"workflowDefinitionAction": {"Queue_{{ workflow_object.name }}": '
    '{"type": "ServiceBus", "runAfter": {}}}}'
)
AUDIT_SEND = (
    '{"workflowDefinitionAction": {"Audit_{{ workflow_object.name }}": '
    '{"type": "Compose", "runAfter": {}}}}'
)


class TestDefaultActivityHandler:
    def test_type_specific_snippet(self, standard_workspace: SnippetWorkspace) -> None:
        standard_workspace.add_action("activity.transform", "Map", {"type": "Xslt"})
        context = standard_workspace.context(
            standard_workspace.process_manager(WorkflowModel(name="Wf"))
        )
        parent = ActionScope({})

        converted = DefaultActivityHandler().convert(
            context, WorkflowActivity(name="Order", type="Transform"), parent
        )

        assert converted
        assert parent.entries == {"Map": {"type": "Xslt"}}

    def test_all_payload_actions_inserted(self, workspace: SnippetWorkspace) -> None:
        workspace.add(
            "activity.transform",
            {"workflowDefinitionAction": {"First": {}, "Second": {}}},
        )
        context = workspace.context(workspace.process_manager(WorkflowModel(name="Wf")))
        parent = ActionScope({})

        DefaultActivityHandler().convert(
            context, WorkflowActivity(name="Order", type="Transform"), parent
        )

        assert parent.names() == ["First", "Second"]

    def test_no_snippet(self, workspace: SnippetWorkspace) -> None:
        context = workspace.context(workspace.process_manager(WorkflowModel(name="Wf")))

        converted = DefaultActivityHandler().convert(
            context, WorkflowActivity(name="Order", type="Transform"), ActionScope({})
        )

        assert not converted
        assert context.issues.of_kind(IssueKind.MISSING_PLACEHOLDER)

    def test_payload_without_actions(self, workspace: SnippetWorkspace) -> None:
        workspace.add("activity.transform", {"workflowTrigger": {"T": {}}})
        context = workspace.context(workspace.process_manager(WorkflowModel(name="Wf")))

        assert not DefaultActivityHandler().convert(
            context, WorkflowActivity(name="Order", type="Transform"), ActionScope({})
        )


class TestChannelHandlers:
    def test_every_channel_snippet_rendered_in_order(
        self, standard_workspace: SnippetWorkspace
    ) -> None:
        standard_workspace.add("channel.send.servicebus", QUEUE_SEND)
        standard_workspace.add("channel.send.audit", AUDIT_SEND)
        context = standard_workspace.context(
            standard_workspace.process_manager(WorkflowModel(name="Wf"))
        )
        parent = ActionScope({})

        converted = SendActivityHandler().convert(
            context, WorkflowActivity(name="Invoice", type="Send"), parent
        )

        assert converted
        assert parent.names() == ["Queue_Invoice", "Audit_Invoice"]

    def test_receive_uses_receive_snippets_only(
        self, standard_workspace: SnippetWorkspace
    ) -> None:
        standard_workspace.add("channel.send.servicebus", QUEUE_SEND)
        standard_workspace.add_action(
            "channel.receive.servicebus", "Complete_Message", {"type": "ServiceBus"}
        )
        context = standard_workspace.context(
            standard_workspace.process_manager(WorkflowModel(name="Wf"))
        )
        parent = ActionScope({})

        ReceiveActivityHandler().convert(
            context, WorkflowActivity(name="Order", type="Receive"), parent
        )

        assert parent.names() == ["Complete_Message"]

    def test_falls_back_to_activity_snippet(
        self, standard_workspace: SnippetWorkspace
    ) -> None:
        context = standard_workspace.context(
            standard_workspace.process_manager(WorkflowModel(name="Wf"))
        )
        parent = ActionScope({})

        converted = SendActivityHandler().convert(
            context, WorkflowActivity(name="Invoice", type="Send"), parent
        )

        assert converted
        assert parent.entries["Invoice"]["inputs"] == "Send"

    def test_duplicate_names_are_not_overwritten(
        self, standard_workspace: SnippetWorkspace
    ) -> None:
        standard_workspace.add_action("channel.send.a", "Send", {"n": 1})
        standard_workspace.add_action("channel.send.b", "Send", {"n": 2})
        context = standard_workspace.context(
            standard_workspace.process_manager(WorkflowModel(name="Wf"))
        )
        parent = ActionScope({})

        SendActivityHandler().convert(
            context, WorkflowActivity(name="Invoice", type="Send"), parent
        )

        assert parent.entries == {"Send": {"n": 1}}


def test_insert_actions_reports_inserted_names(workspace: SnippetWorkspace) -> None:
    context = workspace.context(workspace.process_manager(WorkflowModel(name="Wf")))
    scope = ActionScope({"Existing": {}})

    inserted = insert_actions(
        context, {"Existing": {"n": 1}, "New": {"n": 2}}, scope, source="test"
    )

    assert inserted == ["New"]
    assert scope.entries == {"Existing": {}, "New": {"n": 2}}
