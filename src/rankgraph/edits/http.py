from __future__ import annotations

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter


def default_timeout() -> httpx.Timeout:
    return httpx.Timeout(connect=10.0, read=60.0, write=20.0, pool=10.0)


def default_limits() -> httpx.Limits:
    return httpx.Limits(max_connections=10, max_keepalive_connections=5)


class HttpClientFactory:
    """Creates shared httpx clients with sane defaults.

    Keep one client per preparer; do not create per-request.
    """

    @staticmethod
    def client(base_url: str | None = None, headers: dict | None = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url or "",
            headers=headers,
            timeout=default_timeout(),
            limits=default_limits(),
            follow_redirects=True,
        )


# The request never reached the service, so resending cannot duplicate work.
UndeliveredHttpError = (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout)


def connect_retry(attempts: int = 3):
    return retry(
        reraise=True,
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait_exponential_jitter(initial=0.5, max=5.0),
        retry=retry_if_exception_type(UndeliveredHttpError),
    )
