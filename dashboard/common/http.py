from typing import Any, Callable, Optional

import requests

# Shared defaults
DEFAULT_USER_AGENT = "data-summary-dashboard/1.0 (+https://github.com/)"
JSON_ACCEPT = "application/json, text/plain, */*"

SessionFactory = Callable[[], requests.Session]


def build_headers(user_agent: str = DEFAULT_USER_AGENT, *, accept_json: bool = False) -> dict[str, str]:
    headers = {"User-Agent": user_agent}
    if accept_json:
        headers["Accept"] = JSON_ACCEPT
    return headers


def fetch_json(
    url: str,
    *,
    timeout: float,
    user_agent: str = DEFAULT_USER_AGENT,
    session_factory: Optional[SessionFactory] = None,
) -> Any:
    """Single GET request returning the decoded JSON body.

    No retries: connection errors, timeouts and non-2xx statuses raise the
    matching ``requests`` exception, an undecodable body raises ``ValueError``.
    """
    session = (session_factory or requests.Session)()
    try:
        headers = build_headers(user_agent, accept_json=True)
        r = session.get(url, timeout=timeout, headers=headers)
        r.raise_for_status()
        return r.json()
    finally:
        session.close()
