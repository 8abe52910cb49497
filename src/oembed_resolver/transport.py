"""
Transport capability used by schemas and endpoints.

The core never performs network I/O itself. Callers hand in any object that
implements :class:`Transport`; :class:`RequestsTransport` is a ready-made
implementation on top of ``requests``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
from urllib.parse import quote

import requests

if TYPE_CHECKING:
    from .settings import Settings

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """
    URL-encoding and retrieval operations required by fetches.

    Implementations signal failure by raising; the caller wraps the
    exception into the matching ``OEmbedError`` subclass.
    """

    def url_encode(self, s: str) -> str:
        """Return ``s`` encoded for use as a URL query-parameter value."""
        ...

    def get(self, url: str) -> str:
        """Return the full body of the resource at ``url`` as text."""
        ...


class RequestsTransport:
    """
    Transport backed by a ``requests.Session``.
    """

    def __init__(
        self,
        timeout: float = 30,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RequestsTransport":
        return cls(timeout=settings.request_timeout, user_agent=settings.user_agent)

    def url_encode(self, s: str) -> str:
        return quote(s, safe="")

    def get(self, url: str) -> str:
        logger.debug("GET %s", url)
        with self.session.get(url, timeout=self.timeout) as r:
            r.raise_for_status()
            return r.text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
