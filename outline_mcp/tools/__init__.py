"""Outline tools exposed over MCP.

Tools are registered from a fixed manifest of modules rather than by scanning
the package directory. Each module in TOOL_MODULES exposes a ``TOOLS`` list of
ToolDefinition; build_registry() registers them in manifest order, which is
the order tools/list reports them in.

Tool modules:
- documents: document retrieval, search, Q&A, create/update/move/archive/delete
- collections: list/get/create/update collections
- comments: create/update/delete comments
- users: list users
"""

import logging
from collections.abc import Callable
from types import ModuleType

from . import collections, comments, documents, users
from .registry import ToolDefinition, ToolHandler, ToolRegistry

logger = logging.getLogger(__name__)

TOOL_MODULES: tuple[ModuleType, ...] = (documents, collections, comments, users)


def load_all_tools(
    registry: ToolRegistry,
    on_tool_loaded: Callable[[ToolDefinition], object] | None = None,
) -> ToolRegistry:
    """Register every tool from TOOL_MODULES into ``registry``."""
    for module in TOOL_MODULES:
        for definition in module.TOOLS:
            registry.register(definition)
            if on_tool_loaded is not None:
                on_tool_loaded(definition)
    return registry


def build_registry() -> ToolRegistry:
    """Create a sealed registry holding all Outline tools."""
    registry = load_all_tools(ToolRegistry())
    registry.seal()
    logger.info(f"Loaded {len(registry)} tools")
    return registry


__all__ = [
    "TOOL_MODULES",
    "ToolDefinition",
    "ToolHandler",
    "ToolRegistry",
    "build_registry",
    "load_all_tools",
]
