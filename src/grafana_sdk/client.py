"""
HTTP transport for the Grafana API.

``Client`` owns the base URL, the credentials and a ``requests.Session``.
It knows nothing about resources: the API modules (``datasources``) build
paths and bodies, call one of the verb helpers and interpret the returned
``RawResponse`` themselves.

Authentication:
  - an API key / service account token is sent as ``Authorization: Bearer``
  - ``"user:password"`` is sent as HTTP basic auth

Organization scoping: a positive ``org_id`` is sent as ``X-Grafana-Org-Id``;
``0`` leaves the header out and Grafana uses the caller's current org.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from requests.auth import HTTPBasicAuth

from grafana_sdk.services.http import build_retry, create_session

if TYPE_CHECKING:
    from types import TracebackType

    import requests

    from grafana_sdk.config import Settings

logger = logging.getLogger(__name__)

ORG_HEADER = "X-Grafana-Org-Id"


@dataclass(frozen=True)
class RawResponse:
    """Undecoded response: body bytes plus the HTTP status code."""

    body: bytes
    status_code: int

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Client:
    """Thin wrapper over a session that issues one request per call."""

    def __init__(
        self,
        base_url: str,
        auth: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or create_session()
        self._basic_auth: HTTPBasicAuth | None = None
        self._bearer: str | None = None
        if auth:
            if ":" in auth:
                user, _, password = auth.partition(":")
                self._basic_auth = HTTPBasicAuth(user, password)
            else:
                self._bearer = auth

    @classmethod
    def from_settings(cls, settings: Settings) -> Client:
        """Build a client from ``Settings`` (URL, credentials, timeout, retries)."""
        session = create_session(
            retry=build_retry(settings.max_retries),
            timeout=settings.request_timeout,
        )
        return cls(settings.grafana_url, auth=settings.grafana_auth, session=session)

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r})"

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    # -------------------------------------------------------------------------
    # Verb helpers
    # -------------------------------------------------------------------------

    def get(self, path: str, params: dict[str, Any] | None = None, org_id: int = 0) -> RawResponse:
        return self.request("GET", path, params=params, org_id=org_id)

    def post(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        body: bytes | None = None,
        org_id: int = 0,
    ) -> RawResponse:
        return self.request("POST", path, params=params, body=body, org_id=org_id)

    def put(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        body: bytes | None = None,
        org_id: int = 0,
    ) -> RawResponse:
        return self.request("PUT", path, params=params, body=body, org_id=org_id)

    def delete(self, path: str, org_id: int = 0) -> RawResponse:
        return self.request("DELETE", path, org_id=org_id)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: bytes | None = None,
        org_id: int = 0,
    ) -> RawResponse:
        """
        Send a single request and return its raw body and status.

        Transport failures (``requests.RequestException``) propagate unchanged;
        the status code is not checked here.
        """
        url = self.url_for(path)
        logger.debug("%s %s (org=%s)", method, url, org_id or "current")
        resp = self.session.request(
            method,
            url,
            params=params,
            data=body,
            headers=self._headers(org_id),
            auth=self._basic_auth,
        )
        logger.debug("%s %s -> %d", method, url, resp.status_code)
        return RawResponse(body=resp.content, status_code=resp.status_code)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, org_id: int) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self._bearer:
            headers["Authorization"] = f"Bearer {self._bearer}"
        if org_id:
            headers[ORG_HEADER] = str(org_id)
        return headers
