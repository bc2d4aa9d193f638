"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import funcmcp

    assert funcmcp.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from funcmcp.cli import main

    assert callable(main)


def test_lazy_import_from_funcmcp() -> None:
    import funcmcp

    assert funcmcp.McpServer is not None
    assert funcmcp.Tool is not None
    assert funcmcp.ToolMetadata is not None
