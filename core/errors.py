# =============================================================================
# core/errors.py  —  Error taxonomy
# =============================================================================
#
#   UnknownTool              requested tool is not in the catalog
#   InvalidArguments         missing required field / wrong type
#   UpstreamError            the Google Forms call failed (any reason)
#   FatalConfigurationError  required credential missing at startup
#
# The first three are recovered by the dispatcher and turned into error
# envelopes.  Only FatalConfigurationError stops the process.
# =============================================================================


class FormsServerError(Exception):
    """Base class for every error raised by this package."""


class UnknownTool(FormsServerError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class InvalidArguments(FormsServerError):
    def __init__(self, tool_name: str, message: str):
        self.tool_name = tool_name
        self.message = message
        super().__init__(f"Invalid arguments for {tool_name}: {message}")


class UpstreamError(FormsServerError):
    """A Document Service Client call failed.

    Args:
        tool_name: The tool whose handler made the call.
        operation: Human label of the operation, e.g. "create form".
        message: The upstream's own message text.
    """

    def __init__(self, tool_name: str, operation: str, message: str):
        self.tool_name = tool_name
        self.operation = operation
        self.message = message
        super().__init__(f"Failed to {operation}: {message}")


class FatalConfigurationError(FormsServerError):
    def __init__(self, missing: list[str], detail: str = ""):
        self.missing = list(missing)
        if detail:
            text = detail
        else:
            text = f"{', '.join(self.missing)} environment variable(s) are required"
        super().__init__(text)
