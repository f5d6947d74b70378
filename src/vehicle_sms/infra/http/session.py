from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

# Lazy initialization - only create the session when the first adapter needs it
_session: requests.Session | None = None


def get_http_session() -> requests.Session:
    """
    Get or create the shared outbound HTTP session (lazy initialization).

    Adapter configuration:
    - pool_connections / pool_maxsize: one small pool per host (catalog, SMS webhook)
    - max_retries=0: a failed call is reported, never replayed

    The session is process-wide and stateless apart from its connection pool.
    """
    global _session
    if _session is None:
        session = requests.Session()
        adapter = HTTPAdapter(pool_connections=2, pool_maxsize=4, max_retries=0)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        session.headers.update({"Accept": "application/json"})
        _session = session
    return _session


def close_http_session() -> None:
    """Close and forget the shared session."""
    global _session
    if _session is not None:
        _session.close()
        _session = None
