# =============================================================================
# core/envelope.py  —  Envelope Builder
# =============================================================================
# Structured payloads are serialized as indented JSON so a human scanning the
# MCP client's output can read them.  Error text carries an "Error: " prefix.
# =============================================================================

import json
from typing import Any

from core.models import Envelope, TextBlock


def ok(text: str) -> Envelope:
    return Envelope(content=(TextBlock(text=text),))


def ok_json(payload: Any) -> Envelope:
    """Success envelope whose text is ``payload`` as indented JSON."""
    return ok(json.dumps(payload, indent=2, ensure_ascii=False))


def error(message: str) -> Envelope:
    return Envelope(content=(TextBlock(text=f"Error: {message}"),), is_error=True)
