# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP layer.  mcp_server.py maps MCP list-tools / call-tool requests onto
# core.dispatcher.Dispatcher and converts envelopes into SDK result types.
# It holds no tool logic of its own.
# =============================================================================
