"""Triggers, variables, messages and parameters of a workflow.

Logic Apps only allow variable initialization at the root of a workflow, so
variables and messages declared anywhere in the activity tree are hoisted
into the root ``actions`` collection.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Sequence
from typing import Any

from flowsmith.assembly.context import AssemblyContext
from flowsmith.constants import (
    ELEMENT_CHANNEL_TRIGGER,
    ELEMENT_MESSAGE,
    ELEMENT_VARIABLE,
)
from flowsmith.document.scope import ActionDocument, ActionScope
from flowsmith.issues import IssueKind
from flowsmith.logging import get_logger
from flowsmith.models.migration import Snippet
from flowsmith.models.workflow import WorkflowActivityContainer, WorkflowObject
from flowsmith.snippets.keys import parameter_key, placeholder_key, prefix_key, snippet_key
from flowsmith.snippets.payload import RenderedPayload

__all__ = ["add_triggers", "add_variables", "add_messages", "add_parameters"]

logger = get_logger(__name__)


def add_triggers(context: AssemblyContext, document: ActionDocument) -> int:
    """Add a trigger for every activator channel of the workflow model.

    Each ``channel.trigger.*`` snippet is rendered against the workflow
    model once per activator channel. A trigger whose name already exists
    is not added again, so channels rendering the same trigger share it.

    Returns:
        Number of triggers added.
    """
    model = context.model
    channels = model.activator_channels() if model is not None else []
    if not channels:
        return 0

    snippets = context.process_manager.snippets_with_prefix(
        prefix_key(snippet_key(ELEMENT_CHANNEL_TRIGGER))
    )
    if not snippets:
        logger.debug("no_trigger_snippets", workflow=context.workflow)
        return 0

    triggers = document.triggers
    if triggers is None:
        context.record(
            IssueKind.STRUCTURAL_PATH_NOT_FOUND,
            "Workflow definition has no triggers collection",
            path="definition.triggers",
        )
        return 0

    added = 0
    for channel in channels:
        for snippet in snippets:
            payload = context.render(model, snippet)
            if payload is None or not payload.trigger:
                continue
            for name, body in payload.trigger.items():
                if triggers.add(name, body):
                    added += 1
                    logger.debug(
                        "trigger_added",
                        workflow=context.workflow,
                        trigger=name,
                        channel=channel.name,
                    )
    return added


def add_variables(context: AssemblyContext, document: ActionDocument) -> int:
    """Add static and declared variables to the root actions."""
    return _add_declarations(
        context,
        document,
        element_kind=ELEMENT_VARIABLE,
        section=lambda payload: payload.variable,
        declared=lambda container: container.variables,
    )


def add_messages(context: AssemblyContext, document: ActionDocument) -> int:
    """Add static and declared messages to the root actions."""
    return _add_declarations(
        context,
        document,
        element_kind=ELEMENT_MESSAGE,
        section=lambda payload: payload.message,
        declared=lambda container: container.messages,
    )


def add_parameters(context: AssemblyContext, skeleton: dict[str, Any]) -> int:
    """Copy the top-level entries of every parameter snippet into ``skeleton``.

    A parameter name that is already present is kept as-is and a warning
    is logged.

    Returns:
        Number of parameters added.
    """
    key = parameter_key()
    snippets = _snippets_with_key(context, key)
    if not snippets:
        logger.debug("no_parameter_snippets", workflow=context.workflow)
        return 0

    added = 0
    for snippet in snippets:
        data = context.render_json(context.model, snippet)
        if not isinstance(data, dict):
            continue
        for name, value in data.items():
            if name in skeleton:
                logger.warning(
                    "duplicate_parameter",
                    workflow=context.workflow,
                    parameter=name,
                )
                continue
            skeleton[name] = copy.deepcopy(value)
            added += 1
            logger.debug("parameter_added", workflow=context.workflow, parameter=name)
    return added


def _add_declarations(
    context: AssemblyContext,
    document: ActionDocument,
    *,
    element_kind: str,
    section: Callable[[RenderedPayload], dict[str, Any] | None],
    declared: Callable[[WorkflowActivityContainer], Sequence[WorkflowObject]],
) -> int:
    root = document.actions
    if root is None:
        context.record(
            IssueKind.STRUCTURAL_PATH_NOT_FOUND,
            f"Workflow definition has no actions collection for {element_kind}s",
            path="definition.actions",
        )
        return 0

    added = 0
    for snippet in _snippets_with_key(context, snippet_key(element_kind)):
        added += _insert(context, root, context.model, snippet, section)

    model = context.model
    if model is None:
        return added

    placeholder = context.process_manager.find_snippet(placeholder_key(element_kind))
    for container in model.iter_containers():
        for item in declared(container):
            if placeholder is None:
                logger.debug(
                    "declaration_placeholder_missing",
                    workflow=context.workflow,
                    kind=element_kind,
                    name=item.name,
                )
                continue
            added += _insert(context, root, item, placeholder, section)
    return added


def _insert(
    context: AssemblyContext,
    root: ActionScope,
    obj: WorkflowObject | None,
    snippet: Snippet,
    section: Callable[[RenderedPayload], dict[str, Any] | None],
) -> int:
    payload: RenderedPayload | None = context.render(obj, snippet)
    if payload is None:
        return 0
    entries = section(payload)
    if not entries:
        return 0

    added = 0
    for name, body in entries.items():
        if root.add(name, body):
            added += 1
            logger.debug("declaration_added", workflow=context.workflow, name=name)
        else:
            logger.warning("duplicate_declaration", workflow=context.workflow, name=name)
    return added


def _snippets_with_key(context: AssemblyContext, key: str) -> list[Snippet]:
    wanted = key.lower()
    return [
        s for s in context.process_manager.snippets if s.resource_type.lower() == wanted
    ]
