# =============================================================================
# main.py  —  Entry Point for the Google Forms MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or: google-forms-mcp)
#
# WHAT HAPPENS:
#   1. Loads settings from the environment / .env (core/config.py)
#      Missing credentials → logged to stderr, exit status 1, nothing served
#   2. Builds the Google Forms client and the dispatcher
#   3. Serves MCP over stdin/stdout (tools/mcp_server.py)
#   4. SIGINT / SIGTERM → flush, exit status 0
#
# MCP clients (Claude Desktop, Google ADK's MCPToolset, ...) start this file
# as a subprocess and speak JSON-RPC over its standard streams.
# =============================================================================

import asyncio
import logging
import os
import signal
import sys

from core.config import load_settings
from core.dispatcher import Dispatcher
from core.errors import FatalConfigurationError
from core.forms_client import GoogleFormsClient
from tools.mcp_server import configure_logging, serve


def _shutdown_handler(signum: int, frame: object) -> None:
    """Exit with status 0 on SIGINT/SIGTERM.

    The stdio transport reads stdin on a worker thread that cancellation
    cannot interrupt, so the process exits directly once the output
    channel has been flushed.
    """
    logging.info("Received %s, shutting down", signal.Signals(signum).name)
    logging.shutdown()
    sys.stdout.flush()
    os._exit(0)


def main() -> int:
    try:
        settings = load_settings()
    except FatalConfigurationError as exc:
        configure_logging()
        logging.error("Configuration error: %s", exc)
        return 1

    configure_logging(settings.log_level)
    dispatcher = Dispatcher(GoogleFormsClient.from_settings(settings))

    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)

    asyncio.run(serve(dispatcher))
    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
