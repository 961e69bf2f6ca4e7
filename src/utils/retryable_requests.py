import requests
from requests.adapters import HTTPAdapter
from urllib3 import Retry

# Only idempotent methods are retried; writes go out exactly once.
IDEMPOTENT_METHODS = frozenset(["GET", "HEAD", "OPTIONS"])


def retryable_requests_session(
    total_retries=3, backoff_factor=1, status_forcelist=None, headers=None
):
    retry_strategy = Retry(
        total=total_retries,
        backoff_factor=backoff_factor,
        status_forcelist=status_forcelist or [429, 500, 502, 503, 504],
        allowed_methods=IDEMPOTENT_METHODS,
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers["Content-Type"] = "application/json"
    if headers:
        session.headers.update(headers)
    return session
