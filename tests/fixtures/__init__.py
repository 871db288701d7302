"""Shared test fixtures for the flowsmith test suite.

Available Fixtures
==================

Configuration (from tests/fixtures/config.py)
---------------------------------------------

Fixtures:
    sample_config: FlowsmithConfig loaded from a temporary flowsmith.yaml
        with a template path and generation path inside ``temp_dir``.

Snippets (from tests/fixtures/snippets.py)
------------------------------------------

Classes:
    SnippetWorkspace: Writes snippet files into a temporary template
        directory and registers them, then builds process managers,
        resolvers and assembly contexts over them.

Fixtures:
    workspace: A fresh SnippetWorkspace rooted in ``temp_dir``.
    standard_workspace: A workspace pre-loaded with the definition skeleton,
        activity/container placeholders and variable/message placeholders.
"""
