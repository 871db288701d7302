"""Conversion of decision branches into switch cases.

A decision shape is rendered as a ``Switch`` action by its container snippet.
Each branch below it becomes a case of that switch, except the ``Else``
branch, whose children go into the switch's existing default case.
"""

from __future__ import annotations

from flowsmith.assembly.context import AssemblyContext
from flowsmith.assembly.handlers.base import ContainerOutcome, locate_child_scope
from flowsmith.assembly.handlers.container import render_container
from flowsmith.constants import (
    ACTIONS_KEY,
    CASES_KEY,
    DEFAULT_KEY,
    ELSE_BRANCH_NAME,
    SWITCH_ACTION_TYPE,
)
from flowsmith.document.scope import ActionScope
from flowsmith.issues import IssueKind
from flowsmith.logging import get_logger
from flowsmith.models.workflow import WorkflowActivityContainer

__all__ = ["DecisionBranchHandler"]

logger = get_logger(__name__)


class DecisionBranchHandler:
    """Adds a decision branch to the switch in the parent scope."""

    def convert(
        self,
        context: AssemblyContext,
        container: WorkflowActivityContainer,
        parent: ActionScope,
    ) -> ContainerOutcome:
        logger.debug(
            "converting_decision_branch",
            workflow=context.workflow,
            branch=container.name,
        )
        payload = render_container(context, container)
        if payload is None or payload.first_action is None:
            return ContainerOutcome.skipped()

        switches = parent.find_actions_of_type(SWITCH_ACTION_TYPE)
        if len(switches) != 1:
            context.record(
                IssueKind.STRUCTURAL_PATH_NOT_FOUND,
                f"Expected exactly one {SWITCH_ACTION_TYPE} action for decision "
                f"branch '{container.name}', found {len(switches)}",
                path=parent.path_text,
            )
            return ContainerOutcome.skipped()

        switch_name, switch_body = switches[0]
        switch_scope = ActionScope(switch_body, (*parent.path, switch_name))

        if container.name == ELSE_BRANCH_NAME:
            scope = switch_scope.resolve([DEFAULT_KEY, ACTIONS_KEY])
            if scope is None:
                context.record(
                    IssueKind.STRUCTURAL_PATH_NOT_FOUND,
                    f"Switch '{switch_name}' has no default actions for the "
                    "Else branch",
                    path=f"{switch_scope.path_text}.{DEFAULT_KEY}.{ACTIONS_KEY}",
                )
                return ContainerOutcome.skipped()
            return ContainerOutcome(converted=True, scope=scope)

        cases = switch_scope.resolve([CASES_KEY])
        if cases is None:
            context.record(
                IssueKind.STRUCTURAL_PATH_NOT_FOUND,
                f"Switch '{switch_name}' has no cases for branch '{container.name}'",
                path=f"{switch_scope.path_text}.{CASES_KEY}",
            )
            return ContainerOutcome.skipped()

        case_name, case_body = payload.first_action
        if not cases.add(case_name, case_body):
            logger.warning(
                "duplicate_case_name",
                workflow=context.workflow,
                case=case_name,
                switch=switch_name,
            )
        else:
            logger.debug(
                "case_added",
                workflow=context.workflow,
                case=case_name,
                switch=switch_name,
            )

        scope = locate_child_scope(context, payload, case_name, cases)
        if scope is None:
            return ContainerOutcome.skipped()
        return ContainerOutcome(converted=True, scope=scope)
