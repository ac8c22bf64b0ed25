"""Transport configuration for SDK clients."""
from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class AdapterTimeout:
    """Timeout settings applied to the HTTP client handed to each SDK."""

    connect: float = 5.0
    request: float = 60.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect,
            read=self.request,
            write=self.request,
            pool=self.connect,
        )


def build_http_client(timeout: AdapterTimeout | None = None) -> httpx.Client:
    """Create the :mod:`httpx` client shared by an SDK client."""
    t = timeout or AdapterTimeout()
    return httpx.Client(timeout=t.to_httpx(), follow_redirects=True)
