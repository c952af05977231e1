# =============================================================================
# tools/mcp_server.py  —  MCP Tool Server (Google Forms tools over stdio)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Connects the adapter core (core/dispatcher.py) to the Model Context
#   Protocol.  It registers two request handlers on the MCP SDK's low-level
#   server:
#
#     tools/list  →  Dispatcher.list_tools()  →  list[types.Tool]
#     tools/call  →  Dispatcher.invoke()      →  types.CallToolResult
#
#   Tool names, descriptions and input schemas come from core/catalog.py;
#   nothing about an individual tool is declared in this file.
#
# INPUT VALIDATION:
#   The catalog is the schema and core/validation.py turns bad arguments
#   into an error envelope.  The SDK's own input validation is off
#   (validate_input=False) so every call reaches the dispatcher.
#
# RUNNING THIS SERVER:
#   python main.py              (or the google-forms-mcp console script)
# =============================================================================

import asyncio
import json
import logging
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from core.dispatcher import Dispatcher
from core.models import Envelope, InvocationRequest, ToolDescriptor

SERVER_NAME = "google-forms-mcp"
SERVER_VERSION = "0.1.0"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON-RPC stream, and a stray log
# line there would corrupt it.
#
#   CYAN   incoming tool calls (name + arguments)
#   GREEN  responses
#   YELLOW status / errors
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_MAX_LOGGED_RESPONSE = 500


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, arguments: dict[str, Any]) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_response(tool_name: str, result: Envelope) -> Envelope:
    """Log the envelope (truncated) in GREEN, or YELLOW for errors, then return it."""
    text = result.text
    if len(text) > _MAX_LOGGED_RESPONSE:
        text = text[:_MAX_LOGGED_RESPONSE] + "..."
    if result.is_error:
        logging.info(f"{_YELLOW}  ← {tool_name} failed: {text}{_RESET}")
    else:
        logging.info(f"{_GREEN}  ← {tool_name} response: {text}{_RESET}")
    return result


# =============================================================================
# Conversions between core types and MCP SDK types
# =============================================================================
def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema(),
    )


def to_call_tool_result(result: Envelope) -> types.CallToolResult:
    return types.CallToolResult.model_validate(result.to_dict())


# =============================================================================
# Request handlers
# =============================================================================
async def handle_list_tools(dispatcher: Dispatcher) -> list[types.Tool]:
    return [to_mcp_tool(d) for d in dispatcher.list_tools()]


async def handle_call_tool(
    dispatcher: Dispatcher, name: str, arguments: dict[str, Any] | None
) -> types.CallToolResult:
    """Run one tool call.

    The Google client blocks on HTTP, so the dispatch runs on a worker
    thread and the event loop keeps reading frames meanwhile.
    """
    arguments = arguments or {}
    _log_request(name, arguments)
    request = InvocationRequest(tool_name=name, arguments=arguments)
    result = await asyncio.to_thread(dispatcher.invoke, request)
    return to_call_tool_result(_log_response(name, result))


def build_server(dispatcher: Dispatcher) -> Server:
    """Create the MCP server with the list-tools and call-tool handlers bound."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return await handle_list_tools(dispatcher)

    @server.call_tool(validate_input=False)
    async def _call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        return await handle_call_tool(dispatcher, name, arguments)

    return server


async def serve(dispatcher: Dispatcher) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logging.info(
            "Google Forms MCP server running on stdio (%d tools: %s)",
            len(dispatcher.list_tools()),
            json.dumps([d.name for d in dispatcher.list_tools()]),
        )
        await server.run(read_stream, write_stream, server.create_initialization_options())
