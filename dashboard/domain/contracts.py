from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

# Typed data transfer objects shared across layers


@dataclass(frozen=True)
class FetchResult:
    """Decoded response of one source; never persisted directly."""

    source: str
    summary: str
    payload: Dict[str, Any] = field(default_factory=dict, compare=False)
