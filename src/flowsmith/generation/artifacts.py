"""The documents generated for each workflow."""

from __future__ import annotations

from enum import Enum

from flowsmith.constants import (
    ELEMENT_WORKFLOW_APP_SETTINGS,
    ELEMENT_WORKFLOW_CONNECTIONS,
    ELEMENT_WORKFLOW_DEFINITION,
    ELEMENT_WORKFLOW_LOCAL_APP_SETTINGS,
    ELEMENT_WORKFLOW_LOCAL_PARAMETERS,
    ELEMENT_WORKFLOW_PARAMETERS,
)

__all__ = ["ArtifactKind"]


class ArtifactKind(str, Enum):
    """Generated workflow documents, in generation order.

    Each kind is built from its own skeleton snippet and written to the path
    found under its parameter name in the resource template.
    """

    DEFINITION = "definition"
    PARAMETERS = "parameters"
    LOCAL_PARAMETERS = "local_parameters"
    CONNECTIONS = "connections"
    APP_SETTINGS = "app_settings"
    LOCAL_APP_SETTINGS = "local_app_settings"

    @property
    def element_kind(self) -> str:
        """Snippet key suffix of the artifact's skeleton."""
        return _ELEMENT_KINDS[self]

    @property
    def output_parameter(self) -> str:
        """Resource template parameter holding the artifact's file path."""
        return _OUTPUT_PARAMETERS[self]

    @property
    def populated(self) -> bool:
        """Whether the skeleton is populated before it is written."""
        return self in (
            ArtifactKind.DEFINITION,
            ArtifactKind.PARAMETERS,
            ArtifactKind.LOCAL_PARAMETERS,
        )


_ELEMENT_KINDS: dict[ArtifactKind, str] = {
    ArtifactKind.DEFINITION: ELEMENT_WORKFLOW_DEFINITION,
    ArtifactKind.PARAMETERS: ELEMENT_WORKFLOW_PARAMETERS,
    ArtifactKind.LOCAL_PARAMETERS: ELEMENT_WORKFLOW_LOCAL_PARAMETERS,
    ArtifactKind.CONNECTIONS: ELEMENT_WORKFLOW_CONNECTIONS,
    ArtifactKind.APP_SETTINGS: ELEMENT_WORKFLOW_APP_SETTINGS,
    ArtifactKind.LOCAL_APP_SETTINGS: ELEMENT_WORKFLOW_LOCAL_APP_SETTINGS,
}

_OUTPUT_PARAMETERS: dict[ArtifactKind, str] = {
    ArtifactKind.DEFINITION: "workflowDefinitionFile",
    ArtifactKind.PARAMETERS: "workflowParametersFile",
    ArtifactKind.LOCAL_PARAMETERS: "workflowLocalParametersFile",
    ArtifactKind.CONNECTIONS: "workflowConnectionsFile",
    ArtifactKind.APP_SETTINGS: "workflowAppSettingsFile",
    ArtifactKind.LOCAL_APP_SETTINGS: "workflowLocalAppSettingsFile",
}
