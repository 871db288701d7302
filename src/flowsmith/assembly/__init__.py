"""Assembly of workflow definitions from the workflow activity model.

The assembler walks the activity tree, dispatching containers and activities
to handlers through the registry; declarations add triggers, variables,
messages and parameters; the binder chains sibling actions.
"""

from __future__ import annotations

from flowsmith.assembly.assembler import WorkflowAssembler
from flowsmith.assembly.binder import ActionBinder
from flowsmith.assembly.context import AssemblyContext, IdGenerator
from flowsmith.assembly.declarations import (
    add_messages,
    add_parameters,
    add_triggers,
    add_variables,
)
from flowsmith.assembly.registry import (
    ActivityType,
    HandlerRegistry,
    create_default_registry,
)

__all__ = [
    "ActionBinder",
    "ActivityType",
    "AssemblyContext",
    "HandlerRegistry",
    "IdGenerator",
    "WorkflowAssembler",
    "add_messages",
    "add_parameters",
    "add_triggers",
    "add_variables",
    "create_default_registry",
]
