"""Tool registry for the MCP endpoint.

Each tool is declared once as a ToolDefinition: a unique name, a description,
a pydantic input model (published as ``inputSchema``), an optional output
model (published as ``outputSchema``) and an async handler.

Handlers receive the validated input model and the RequestContext of the
request being served, and return any JSON-serializable value:

    async def handle_get_document(params: GetDocumentParams, ctx: RequestContext) -> dict:
        async with get_outline_client(ctx) as client:
            return await client.post("documents.info", {"id": params.id})

The registry is populated before serving starts and sealed; it is never
mutated while requests are in flight.
"""

import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from ..context import RequestContext
from ..errors import (
    DuplicateToolError,
    InvalidArgumentsError,
    ToolExecutionError,
    ToolNotFoundError,
)

logger = logging.getLogger(__name__)

# Type alias for tool handler functions
ToolHandler = Callable[[Any, RequestContext], Coroutine[Any, Any, Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """A callable operation exposed through tools/list and tools/call."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler
    output_model: type[BaseModel] | None = None

    def metadata(self) -> dict[str, Any]:
        """Public description of the tool. Never includes the handler."""
        info: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(),
        }
        if self.output_model is not None:
            info["outputSchema"] = self.output_model.model_json_schema()
        return info


class ToolRegistry:
    """Ordered collection of tool definitions keyed by name."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._sealed = False

    def register(self, definition: ToolDefinition) -> None:
        """Add a tool.

        Raises:
            DuplicateToolError: if a tool with the same name is registered
            RuntimeError: if the registry has been sealed
        """
        if self._sealed:
            raise RuntimeError(f"Cannot register {definition.name}: tool registry is sealed")
        if definition.name in self._tools:
            raise DuplicateToolError(definition.name)
        self._tools[definition.name] = definition
        logger.debug(f"Registered tool {definition.name}")

    def seal(self) -> None:
        """Reject further registrations."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def names(self) -> list[str]:
        return list(self._tools)

    def list(self) -> list[dict[str, Any]]:
        """Tool metadata in registration order."""
        return [definition.metadata() for definition in self._tools.values()]

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    async def invoke(self, name: str, args: dict[str, Any], context: RequestContext) -> Any:
        """Validate ``args`` against the tool's input model and run its handler.

        Args:
            name: Registered tool name
            args: Raw arguments from the tools/call request
            context: Credential context of the current request

        Returns:
            The handler's result, validated against the output model if one is declared

        Raises:
            ToolNotFoundError: no tool named ``name``
            InvalidArgumentsError: ``args`` do not match the input model
            ToolExecutionError: the handler raised, or returned a non-conforming result
        """
        definition = self._tools.get(name)
        if definition is None:
            raise ToolNotFoundError(name)

        try:
            params = definition.input_model.model_validate(args)
        except ValidationError as e:
            raise InvalidArgumentsError(
                name, e.errors(include_url=False, include_context=False)
            ) from e

        try:
            result = await definition.handler(params, context)
        except Exception as e:
            raise ToolExecutionError(name, e) from e

        if definition.output_model is not None:
            try:
                result = definition.output_model.model_validate(result)
            except ValidationError as e:
                raise ToolExecutionError(name, e) from e

        return result
