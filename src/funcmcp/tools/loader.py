"""Tool module discovery.

A tool package is a regular Python package whose public submodules are tool
modules; each submodule becomes one tool named after the module.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Mapping
from types import ModuleType

from funcmcp.tools.errors import ToolLoadError

logger = logging.getLogger(__name__)


def _import(target: str) -> ModuleType:
    try:
        return importlib.import_module(target)
    except ImportError as exc:
        raise ToolLoadError(target, str(exc)) from exc


def load_tool_package(package: str | ModuleType) -> dict[str, ModuleType]:
    """Import every public submodule of *package*, keyed by module basename.

    Submodules whose name starts with ``_`` are skipped.  Keys are sorted so
    the resulting tool order is stable across platforms.
    """
    pkg = _import(package) if isinstance(package, str) else package
    search_path = getattr(pkg, "__path__", None)
    if search_path is None:
        raise ToolLoadError(pkg.__name__, "not a package")

    modules: dict[str, ModuleType] = {}
    for info in sorted(pkgutil.iter_modules(search_path), key=lambda m: m.name):
        if info.name.startswith("_"):
            continue
        modules[info.name] = _import(f"{pkg.__name__}.{info.name}")

    logger.debug("Loaded %d tool module(s) from %s", len(modules), pkg.__name__)
    return modules


def load_tool_modules(targets: Mapping[str, str]) -> dict[str, ModuleType]:
    """Import explicitly named tool modules (``tool name -> dotted module path``)."""
    return {name: _import(path) for name, path in targets.items()}
