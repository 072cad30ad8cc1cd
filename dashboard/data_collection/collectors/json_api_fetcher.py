"""
JSON API Fetcher
Holt ein JSON-Objekt per GET und rendert eine Zusammenfassung
"""

import json
from typing import Any, Optional

import requests

from dashboard.common.http import SessionFactory, fetch_json
from dashboard.domain.contracts import FetchResult
from .base import DataFetcher, FetchError

SUMMARY_PREFIX = "Data from API: "


def render_summary(payload: dict[str, Any]) -> str:
    """Deterministic text form of a decoded payload."""
    # ASCII escapes keep lone surrogates and other unencodable code points storable
    return SUMMARY_PREFIX + json.dumps(payload, sort_keys=True, default=str)


class JsonApiFetcher(DataFetcher):
    """Fetcher für beliebige JSON-APIs, die ein Objekt zurückliefern"""

    def __init__(self, timeout: float = 30.0, session_factory: Optional[SessionFactory] = None):
        super().__init__("json_api")
        self.timeout = timeout
        self.session_factory = session_factory

    def fetch(self, source: str) -> FetchResult:
        try:
            data = fetch_json(source, timeout=self.timeout, session_factory=self.session_factory)
        except (requests.RequestException, ValueError) as e:
            # requests' JSONDecodeError subclasses both; either way it is one FetchError
            raise FetchError(source, e) from e

        if not isinstance(data, dict):
            raise FetchError(
                source, ValueError(f"expected a JSON object, got {type(data).__name__}")
            )

        self.logger.debug(f"Fetched {len(data)} fields from {source}")
        return FetchResult(source=source, summary=render_summary(data), payload=data)
