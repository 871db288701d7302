"""Builders for semantic snippet keys.

A snippet key has the shape ``<family>.<elementKind>[.<typeTag>]``. Type tags
come from the workflow model and are lower-cased; every lookup against the
registered snippets is case-insensitive.
"""

from __future__ import annotations

from flowsmith.constants import (
    ELEMENT_PARAMETER,
    PLACEHOLDER,
    RESOURCE_TYPE_LOGIC_APP_CONSUMPTION,
    RESOURCE_TYPE_LOGIC_APP_STANDARD,
)

__all__ = [
    "snippet_key",
    "placeholder_key",
    "prefix_key",
    "parameter_key",
]


def snippet_key(
    element_kind: str,
    type_tag: str | None = None,
    *,
    family: str = RESOURCE_TYPE_LOGIC_APP_STANDARD,
) -> str:
    """Build the key of a snippet.

    Example:
        >>> snippet_key("activity", "Send")
        'microsoft.workflows.azurelogicapp.standard.activity.send'
        >>> snippet_key("workflowdefinition")
        'microsoft.workflows.azurelogicapp.standard.workflowdefinition'
    """
    key = f"{family}.{element_kind}"
    if type_tag:
        key = f"{key}.{type_tag.lower()}"
    return key


def placeholder_key(
    element_kind: str, *, family: str = RESOURCE_TYPE_LOGIC_APP_STANDARD
) -> str:
    """Key of the generic snippet used when no type-specific one exists."""
    return snippet_key(element_kind, PLACEHOLDER, family=family)


def prefix_key(key: str) -> str:
    """Prefix matching every snippet nested below ``key`` but not ``key`` itself."""
    return f"{key.lower()}."


def parameter_key() -> str:
    """Key of workflow parameter snippets (registered under the consumption family)."""
    return snippet_key(ELEMENT_PARAMETER, family=RESOURCE_TYPE_LOGIC_APP_CONSUMPTION)
