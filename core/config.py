# =============================================================================
# core/config.py  —  Environment configuration
# =============================================================================
#
# REQUIRED (the server refuses to start without all three):
#   GOOGLE_CLIENT_ID       OAuth client id
#   GOOGLE_CLIENT_SECRET   OAuth client secret
#   GOOGLE_REFRESH_TOKEN   long-lived refresh token for the Forms scopes
#
# OPTIONAL:
#   FORMS_REQUEST_TIMEOUT  socket timeout per Google API request (seconds, default 30)
#   LOG_LEVEL              stderr log level (default INFO)
#
# Values are read from the process environment after a .env file in the
# working directory (if any) has been merged in by python-dotenv.  Variables
# already set in the environment win over the .env file.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from core.errors import FatalConfigurationError

REQUIRED_VARIABLES = ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN")
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class Settings:
    client_id: str
    client_secret: str
    refresh_token: str
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # Secrets stay out of logs and tracebacks.
        return (
            f"Settings(client_id={self.client_id!r}, client_secret='***', "
            f"refresh_token='***', request_timeout={self.request_timeout}, "
            f"log_level={self.log_level!r})"
        )


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise FatalConfigurationError(
            ["FORMS_REQUEST_TIMEOUT"],
            detail=f"FORMS_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}",
        ) from None
    if value <= 0:
        raise FatalConfigurationError(
            ["FORMS_REQUEST_TIMEOUT"],
            detail=f"FORMS_REQUEST_TIMEOUT must be positive, got {raw!r}",
        )
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ.  When omitted, a
            .env file is loaded into os.environ first.

    Raises:
        FatalConfigurationError: A required variable is missing or blank, or
            the timeout is not a positive number.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    missing = [name for name in REQUIRED_VARIABLES if not (environ.get(name) or "").strip()]
    if missing:
        raise FatalConfigurationError(missing)

    return Settings(
        client_id=environ["GOOGLE_CLIENT_ID"].strip(),
        client_secret=environ["GOOGLE_CLIENT_SECRET"].strip(),
        refresh_token=environ["GOOGLE_REFRESH_TOKEN"].strip(),
        request_timeout=_parse_timeout(environ.get("FORMS_REQUEST_TIMEOUT")),
        log_level=(environ.get("LOG_LEVEL") or "INFO").strip().upper(),
    )
