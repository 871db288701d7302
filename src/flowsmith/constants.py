"""flowsmith constants: snippet resource types, model properties, document keys.

This module is the single source of truth for the semantic snippet keys that
link a process manager's registered snippets to the elements of the workflow
model, and for the key names of the generated Logic App documents.
"""

from __future__ import annotations

# =============================================================================
# Resource Types
# =============================================================================

#: Prefix shared by every workflow resource type
RESOURCE_TYPE_WORKFLOWS: str = "microsoft.workflows"

#: Logic App resource family
RESOURCE_TYPE_LOGIC_APP: str = f"{RESOURCE_TYPE_WORKFLOWS}.azurelogicapp"

#: Logic App Standard family, used for every snippet of the definition
RESOURCE_TYPE_LOGIC_APP_STANDARD: str = f"{RESOURCE_TYPE_LOGIC_APP}.standard"

#: Logic App Consumption family, used by workflow parameter snippets
RESOURCE_TYPE_LOGIC_APP_CONSUMPTION: str = f"{RESOURCE_TYPE_LOGIC_APP}.consumption"

# =============================================================================
# Snippet Element Kinds
# =============================================================================

ELEMENT_WORKFLOW_DEFINITION: str = "workflowdefinition"
ELEMENT_WORKFLOW_PARAMETERS: str = "workflowparameters"
ELEMENT_WORKFLOW_LOCAL_PARAMETERS: str = "workflowlocalparameters"
ELEMENT_WORKFLOW_CONNECTIONS: str = "workflowconnections"
ELEMENT_WORKFLOW_APP_SETTINGS: str = "workflowappsettings"
ELEMENT_WORKFLOW_LOCAL_APP_SETTINGS: str = "workflowlocalappsettings"
ELEMENT_PARAMETER: str = "parameter"
ELEMENT_CHANNEL_TRIGGER: str = "channel.trigger"
ELEMENT_CHANNEL_RECEIVE: str = "channel.receive"
ELEMENT_CHANNEL_SEND: str = "channel.send"
ELEMENT_VARIABLE: str = "variable"
ELEMENT_MESSAGE: str = "message"
ELEMENT_ACTIVITY_CONTAINER: str = "activitycontainer"
ELEMENT_ACTIVITY: str = "activity"

#: Type tag of the generic fallback snippet of an element kind
PLACEHOLDER: str = "placeholder"

# =============================================================================
# Workflow Model
# =============================================================================

#: Property stamped onto a workflow object right before it is rendered
PROPERTY_UNIQUE_ID: str = "UniqueId"

#: Name of the decision branch that maps to the default case of a switch
ELSE_BRANCH_NAME: str = "Else"

# =============================================================================
# Generated Documents
# =============================================================================

PAYLOAD_ACTION: str = "workflowDefinitionAction"
PAYLOAD_ACTION_PATH: str = "workflowDefinitionActionPath"
PAYLOAD_TRIGGER: str = "workflowTrigger"
PAYLOAD_VARIABLE: str = "workflowDefinitionVariable"
PAYLOAD_MESSAGE: str = "workflowDefinitionMessage"

DEFINITION_KEY: str = "definition"
TRIGGERS_KEY: str = "triggers"
ACTIONS_KEY: str = "actions"
RUN_AFTER_KEY: str = "runAfter"
CASES_KEY: str = "cases"
DEFAULT_KEY: str = "default"
ELSE_KEY: str = "else"
TYPE_KEY: str = "type"

#: Action type of the switch that hosts decision branches
SWITCH_ACTION_TYPE: str = "Switch"

#: Run-after status recorded by the binder between consecutive actions
RUN_AFTER_SUCCEEDED: str = "Succeeded"

# =============================================================================
# Templating
# =============================================================================

#: File extensions rendered through Jinja2; anything else passes through
DEFAULT_TEMPLATE_EXTENSIONS: tuple[str, ...] = (".j2", ".jinja", ".jinja2")

#: Indentation used for every generated JSON document
DEFAULT_JSON_INDENT: int = 4
