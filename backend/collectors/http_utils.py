"""Shared HTTP helpers for collectors: defensive JSON fetch and the fail-soft boundary"""
import functools
import logging
from typing import Any, Awaitable, Callable, Dict, List, Union

import httpx

from config import HTTP_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

JSON = Union[Dict[str, Any], List[Any]]


def make_client(**kwargs) -> httpx.AsyncClient:
    """AsyncClient with the project-wide timeout and User-Agent"""
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    headers.update(kwargs.pop("headers", {}))
    return httpx.AsyncClient(
        timeout=kwargs.pop("timeout", HTTP_TIMEOUT),
        follow_redirects=True,
        headers=headers,
        **kwargs,
    )


async def fetch_json(client: httpx.AsyncClient, url: str, **kwargs) -> JSON:
    """GET a URL and decode the body as JSON.

    Non-200 responses and malformed bodies decode to an empty dict. Transport
    errors are left to the caller's fail-soft boundary.
    """
    resp = await client.get(url, **kwargs)
    if resp.status_code != 200:
        logger.warning("%s returned %s", url, resp.status_code)
        return {}
    try:
        return resp.json()
    except ValueError as e:
        logger.warning("Malformed JSON from %s: %s", url, e)
        return {}


def fail_soft(fn: Callable[..., Awaitable[List[str]]]) -> Callable[..., Awaitable[List[str]]]:
    """Wrap a collector so it never raises: any error becomes an empty result."""

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs) -> List[str]:
        try:
            return await fn(*args, **kwargs)
        except httpx.TimeoutException:
            logger.warning("%s timed out", fn.__module__)
        except Exception as e:
            logger.warning("%s failed: %s", fn.__module__, e)
        return []

    return wrapper
