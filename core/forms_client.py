# =============================================================================
# core/forms_client.py  —  Document Service Client (Google Forms API v1)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the four Google Forms API calls the tools need behind a small
#   interface, DocumentServiceClient.  Handlers depend on the interface only,
#   so tests pass a fake and never touch the network.
#
#   create_form(body)           → forms.create
#   batch_update(form_id, body) → forms.batchUpdate
#   get_form(form_id)           → forms.get
#   list_responses(form_id)     → forms.responses.list
#
# CREDENTIALS:
#   google-auth exchanges the refresh token for access tokens and refreshes
#   them on expiry; nothing here tracks token lifetimes.
#
# TIMEOUTS & RETRIES:
#   Every request carries a socket timeout (Settings.request_timeout).
#   Requests are executed once; failures propagate to the handler, which
#   wraps them as UpstreamError.
# =============================================================================

import logging
import threading
from typing import Any, Protocol

import httplib2
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from core.config import Settings

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
SCOPES = (
    "https://www.googleapis.com/auth/forms.body",
    "https://www.googleapis.com/auth/forms.responses.readonly",
)


class DocumentServiceClient(Protocol):
    """The capability the tool handlers need from the Forms API."""

    def create_form(self, body: dict[str, Any]) -> dict[str, Any]: ...

    def batch_update(self, form_id: str, body: dict[str, Any]) -> dict[str, Any]: ...

    def get_form(self, form_id: str) -> dict[str, Any]: ...

    def list_responses(self, form_id: str) -> dict[str, Any]: ...


def build_credentials(settings: Settings) -> Credentials:
    return Credentials(
        token=None,
        refresh_token=settings.refresh_token,
        client_id=settings.client_id,
        client_secret=settings.client_secret,
        token_uri=TOKEN_URI,
        scopes=list(SCOPES),
    )


class GoogleFormsClient:
    """DocumentServiceClient backed by googleapiclient.

    Args:
        service: A ``forms`` v1 service resource, as returned by
            ``googleapiclient.discovery.build``.
    """

    def __init__(self, service: Any):
        self._service = service
        # httplib2.Http is not thread-safe and requests run on worker threads.
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "GoogleFormsClient":
        http = AuthorizedHttp(
            build_credentials(settings),
            http=httplib2.Http(timeout=settings.request_timeout),
        )
        service = build("forms", "v1", http=http, cache_discovery=False)
        logger.debug("Google Forms client ready (timeout=%ss)", settings.request_timeout)
        return cls(service)

    def _execute(self, request: Any) -> dict[str, Any]:
        with self._lock:
            return request.execute(num_retries=0)

    def create_form(self, body: dict[str, Any]) -> dict[str, Any]:
        return self._execute(self._service.forms().create(body=body))

    def batch_update(self, form_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return self._execute(self._service.forms().batchUpdate(formId=form_id, body=body))

    def get_form(self, form_id: str) -> dict[str, Any]:
        return self._execute(self._service.forms().get(formId=form_id))

    def list_responses(self, form_id: str) -> dict[str, Any]:
        return self._execute(self._service.forms().responses().list(formId=form_id))


def describe_upstream_error(exc: BaseException) -> str:
    """Turn a client failure into the message text shown to the caller.

    HttpError carries the API's own reason ("Requested entity was not
    found.") plus the HTTP status; timeouts get a fixed phrase; anything
    else falls back to str(exc), or the class name if that is empty.
    """
    if isinstance(exc, HttpError):
        status = getattr(exc.resp, "status", None)
        reason = exc.reason or "HTTP error"
        return f"{reason} (HTTP {status})" if status else reason
    if isinstance(exc, TimeoutError):
        return "request to Google Forms API timed out"
    return str(exc) or type(exc).__name__
