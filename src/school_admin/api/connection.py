from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = 20.0


class ApiConnection:
    """HTTP client factory for the school backend.

    Note: We create short-lived clients per call (safe for simple Flask apps).
    A transport can be injected so tests run against ``httpx.MockTransport``.
    """

    def __init__(self, config: ApiConfig, *, transport: Optional[httpx.BaseTransport] = None):
        self._config = config
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def connect(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._config.base_url,
            timeout=float(self._config.timeout),
            transport=self._transport,
        )
