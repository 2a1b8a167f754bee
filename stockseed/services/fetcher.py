"""Fetch the source CSV over HTTP."""

import logging

import httpx

from stockseed.exceptions import NetworkError

logger = logging.getLogger(__name__)


def build_http_client(
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return an ``AsyncClient`` that follows redirects and applies *timeout* to every phase."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        transport=transport,
    )


async def fetch_csv(client: httpx.AsyncClient, url: str) -> str:
    """GET *url* once and return the decoded body.

    Raises :class:`NetworkError` on any transport failure or non-2xx status.
    There is no retry.
    """
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        raise NetworkError(
            url,
            f"GET {url} returned HTTP {status_code}",
            status_code=status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise NetworkError(url, f"GET {url} failed: {exc}") from exc

    logger.info("Fetched %d bytes from %s", len(response.content), url)
    return response.text
