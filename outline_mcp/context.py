"""Request-scoped credential context.

The Outline API key for the request being handled lives in a RequestContext.
The active instance is held in a ContextVar, so each asyncio task (one per
inbound request) sees its own slot even though the accessor is process-wide.

The transport must bracket every request with ``request_scope`` so the
context is reset on every exit path, including a failure while the
credential is being resolved:

    with request_scope() as context:
        context.set_credential(resolve_credential(headers))
        response = await dispatcher.dispatch(body, context)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar


class RequestContext:
    """Holder of the credential for one request."""

    _active: ContextVar["RequestContext | None"] = ContextVar(
        "outline_request_context", default=None
    )

    def __init__(self) -> None:
        self._credential: str | None = None

    @classmethod
    def get_instance(cls) -> "RequestContext":
        """Return the active context, creating an empty one if none exists."""
        instance = cls._active.get()
        if instance is None:
            instance = cls()
            cls._active.set(instance)
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Discard the active context. The next get_instance() starts empty."""
        cls._active.set(None)

    def set_credential(self, value: str | None) -> None:
        self._credential = value

    def get_credential(self) -> str | None:
        return self._credential

    def __repr__(self) -> str:
        state = "set" if self._credential else "absent"
        return f"RequestContext(credential={state})"


@contextmanager
def request_scope(credential: str | None = None) -> Iterator[RequestContext]:
    """Activate the context for one request and reset it on exit.

    reset_instance() runs exactly once when the block exits, whether it
    completes, returns early or raises.
    """
    try:
        context = RequestContext.get_instance()
        if credential is not None:
            context.set_credential(credential)
        yield context
    finally:
        RequestContext.reset_instance()
