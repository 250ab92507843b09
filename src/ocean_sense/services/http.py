"""
Shared HTTP client with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries on transient
network errors (timeouts, connection resets, 502/503/504) with exponential
backoff.  All datasource modules should use this instead of bare ``requests.get``.

Feed locations may be URLs or local paths (the bundled CSV exports), so
``fetch_text`` and ``fetch_json`` accept either. Any failure to obtain the
payload is raised as ``SourceUnavailableError`` so the flows can mark that
one feed unavailable and carry on with the rest.

Usage::

    from ocean_sense.services.http import session

    resp = session.get("https://api.example.com/v1/data", timeout=30)
    resp.raise_for_status()
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Default retry strategy — handles the transient errors we see in practice.
DEFAULT_RETRY = Retry(
    total=4,
    backoff_factor=2,  # 0s, 2s, 4s, 8s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds


class SourceUnavailableError(RuntimeError):
    """A feed could not be fetched (network error, HTTP error, missing file)."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"{location}: {reason}")
        self.location = location
        self.reason = reason


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = "ocean-sense/0.1 (fisheries and cyclone explorer)"

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session()


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def get_json(url: str, params: dict[str, Any] | None = None) -> Any:
    """GET ``url`` and decode JSON, raising SourceUnavailableError on failure."""
    try:
        resp = session.get(url, params=params)
        resp.raise_for_status()
        return resp.json()
    except requests.RequestException as exc:  # includes JSON decode errors
        raise SourceUnavailableError(url, str(exc)) from exc


def fetch_text(location: str) -> str:
    """Return the text at a URL or local path."""
    if is_url(location):
        try:
            resp = session.get(location)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise SourceUnavailableError(location, str(exc)) from exc
        return resp.text

    path = Path(location)
    try:
        return path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise SourceUnavailableError(location, str(exc)) from exc


def fetch_json(location: str) -> Any:
    """Return decoded JSON from a URL or local path."""
    if is_url(location):
        return get_json(location)
    text = fetch_text(location)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SourceUnavailableError(location, f"invalid JSON: {exc}") from exc
