# =============================================================================
# core/__init__.py
# =============================================================================
# The adapter core: tool catalog, argument validation, handlers, dispatcher
# and envelopes, plus configuration and the Google Forms client they use.
#
# Nothing in this package imports the MCP SDK.  The protocol wiring lives in
# tools/; everything here can be driven directly with a fake client.
# =============================================================================
