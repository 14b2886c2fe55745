"""
Remote call adapter.

Every journal endpoint is a plain JSON-over-HTTP service. This module performs
one request/response exchange per call: JSON body in, text body out, parsed
opportunistically as JSON. Non-2xx responses raise RemoteCallError no matter
what the body contains.
"""

import json
from typing import Any, Dict, Optional

import httpx

from .errors import ConfigurationError, RemoteCallError
from .logger import get_logger
from .utils import parse_body

logger = get_logger("remote")

JSON_HEADERS = {"Content-Type": "application/json"}


def require_endpoint(url: Optional[str], name: str) -> str:
    """Return `url`, or raise ConfigurationError naming the missing variable."""
    if not url:
        raise ConfigurationError(f"Missing {name} in .env")
    return url


def _error_message(data: Any, text: str, status_code: int) -> str:
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return text or f"Request failed: {status_code}"


async def call(
    endpoint_url: str,
    method: str = "POST",
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """
    Send `body` as JSON to `endpoint_url` and return the parsed response.

    Args:
        endpoint_url: Absolute URL of the endpoint. Empty means unconfigured.
        method: HTTP method, POST for every journal endpoint.
        body: JSON-serializable request body, or None for no body.
        headers: Extra headers merged over the JSON content type.
        client: Optional shared AsyncClient; a short-lived one is used otherwise.

    Returns:
        The decoded JSON value, the raw text when the body is not JSON,
        or None for an empty body.
    """
    if not endpoint_url:
        raise ConfigurationError("Missing endpoint URL")

    merged_headers = {**JSON_HEADERS, **(headers or {})}
    content = json.dumps(body) if body is not None else None

    try:
        if client is not None:
            response = await client.request(method, endpoint_url, content=content, headers=merged_headers)
        else:
            # No timeout: the caller waits until the transport resolves or fails
            async with httpx.AsyncClient(timeout=None) as own_client:
                response = await own_client.request(method, endpoint_url, content=content, headers=merged_headers)
    except httpx.HTTPError as e:
        logger.debug(f"{method} {endpoint_url} failed: {e}")
        raise RemoteCallError(str(e) or f"Request to {endpoint_url} failed") from e

    text = response.text
    data = parse_body(text)
    logger.debug(f"{method} {endpoint_url} -> {response.status_code}")

    if not response.is_success:
        message = _error_message(data, text, response.status_code)
        logger.debug(f"{method} {endpoint_url} returned {response.status_code}: {message}")
        raise RemoteCallError(message, status_code=response.status_code)

    return data
