# =============================================================================
# core/dispatcher.py  —  Dispatcher (list-tools / invoke-tool)
# =============================================================================
#
# HOW AN INVOCATION FLOWS:
#   1. Look the tool up in the catalog      → unknown: error envelope
#   2. Validate the arguments               → invalid: error envelope
#   3. Run the handler (one upstream call)  → UpstreamError: error envelope
#   4. Anything else that blows up          → generic error envelope
#
# invoke() never raises.  Each caught fault is logged to stderr; the caller
# only ever sees an Envelope.
#
# The client, catalog and handler table are injected, so tests can swap any
# of them.  The dispatcher keeps no state between calls.
# =============================================================================

import logging
from typing import Any, Iterable, Mapping

from core import envelope
from core.catalog import list_tools as default_catalog
from core.errors import InvalidArguments, UnknownTool, UpstreamError
from core.forms_client import DocumentServiceClient
from core.handlers import HANDLERS, ToolHandler
from core.models import Envelope, InvocationRequest, ToolDescriptor
from core.validation import Invalid, validate

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(
        self,
        client: DocumentServiceClient,
        catalog: Iterable[ToolDescriptor] | None = None,
        handlers: Mapping[str, ToolHandler] | None = None,
    ):
        self._client = client
        self._catalog = tuple(default_catalog() if catalog is None else catalog)
        self._descriptors = {d.name: d for d in self._catalog}
        self._handlers = dict(HANDLERS if handlers is None else handlers)

        unhandled = [name for name in self._descriptors if name not in self._handlers]
        if unhandled:
            raise ValueError(f"No handler registered for tool(s): {', '.join(unhandled)}")

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return self._catalog

    def invoke_tool(self, tool_name: str, arguments: dict[str, Any] | None = None) -> Envelope:
        return self.invoke(InvocationRequest(tool_name=tool_name, arguments=arguments or {}))

    def invoke(self, request: InvocationRequest) -> Envelope:
        """Run one tool call and return its envelope.  Never raises."""
        name = request.tool_name
        descriptor = self._descriptors.get(name)
        if descriptor is None:
            problem = UnknownTool(name)
            logger.warning("Rejected call: %s", problem)
            return envelope.error(str(problem))

        try:
            result = validate(descriptor, request.arguments)
            if isinstance(result, Invalid):
                problem = InvalidArguments(name, result.message)
                logger.warning("Rejected call: %s", problem)
                return envelope.error(str(problem))

            return self._handlers[name](result.arguments, self._client)
        except UpstreamError as exc:
            logger.error("Error in tool execution (%s): %s", name, exc)
            return envelope.error(str(exc))
        except Exception:
            logger.exception("Unexpected error in tool execution (%s)", name)
            return envelope.error(f"Internal error while running {name}")
