from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Mapping

import httpx

DEFAULT_HEADERS = {"Accept": "application/json"}

@dataclass(frozen=True)
class ClientConfig:
    """Transport settings chosen by whoever owns the HttpClient. Host and paths are not configurable."""
    connect_timeout: float = 5.0
    read_timeout: float = 30.0
    follow_redirects: bool = True
    headers: Mapping[str, str] = field(default_factory=dict)

    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout,
            read=self.read_timeout,
            write=self.read_timeout,
            pool=self.read_timeout,
        )

    def request_headers(self) -> Dict[str, str]:
        return {**DEFAULT_HEADERS, **self.headers}
