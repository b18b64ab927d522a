"""
Shared HTTP session factory.

Provides a pre-configured ``requests.Session`` for the API clients. Requests
are sent exactly once: the mounted adapter never retries, and redirects are
left to ``requests`` itself. No timeout is applied unless the caller asks for
one, so a hung upstream blocks until the transport gives up.

Usage::

    from weatherline.services.http import create_session

    s = create_session()
    resp = s.get("https://api.example.com/v1/data")
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weatherline import __version__

#: Send once, fail fast. Same as the requests default, spelled out.
NO_RETRY = Retry(total=0, read=False, redirect=False, raise_on_status=False)

DEFAULT_TIMEOUT: float | None = None

USER_AGENT = f"weatherline/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with a non-retrying adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request, or None to wait
            indefinitely.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    if timeout is None:
        return s

    # Wrap send to inject a default timeout so callers don't need to pass
    # ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
