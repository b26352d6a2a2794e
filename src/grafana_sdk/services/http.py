"""
Shared HTTP session factory.

Provides a pre-configured ``requests.Session`` with a default timeout and an
adapter mounted for both schemes.  Retries are off by default; when enabled
they only cover idempotent reads (GET/HEAD/OPTIONS) on transient errors, so a
create or delete is never sent twice.

Usage::

    from grafana_sdk.services.http import create_session

    s = create_session(timeout=10)
    resp = s.get("http://localhost:3000/api/health")
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from grafana_sdk import __version__

#: Default retry strategy: a single attempt, errors surface to the caller.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"grafana-sdk/{__version__}"

_TRANSIENT_STATUSES = [429, 502, 503, 504]
_SAFE_METHODS = ["GET", "HEAD", "OPTIONS"]


def build_retry(total: int, backoff_factor: float = 2) -> Retry:
    """
    Build a retry strategy for idempotent reads.

    Args:
        total: Number of retries after the first attempt (0 disables).
        backoff_factor: Exponential backoff base (0s, 2s, 4s, ... by default).
    """
    if total <= 0:
        return DEFAULT_RETRY
    return Retry(
        total=total,
        backoff_factor=backoff_factor,
        status_forcelist=_TRANSIENT_STATUSES,
        allowed_methods=_SAFE_METHODS,
        raise_on_status=False,  # status handling belongs to the API layer
    )


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
