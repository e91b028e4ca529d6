"""Outbound request guard and whole-document fetcher.

Every URL the service requests on a caller's behalf, the page itself and each
stylesheet it links, goes through :func:`validate_url`.  Redirects are never
followed by httpx; :func:`redirect_target` validates each hop first.
"""

import ipaddress
import logging
import socket
from typing import Optional
from urllib.parse import urljoin, urlparse

import httpx

logger = logging.getLogger(__name__)

MAX_CONTENT_SIZE = 10 * 1024 * 1024  # 10 MB
TIMEOUT = 15  # seconds, whole document
MAX_REDIRECTS = 10
ALLOWED_SCHEMES = {"http", "https"}
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


def _is_private_address(hostname: str) -> bool:
    """Return True if *hostname* resolves to a private, loopback, link-local or reserved address."""
    try:
        infos = socket.getaddrinfo(hostname, None)
    except socket.gaierror:
        return False

    for info in infos:
        # Strip IPv6 zone IDs (e.g. "::1%eth0" → "::1")
        raw_ip = info[4][0].split("%")[0]
        try:
            addr = ipaddress.ip_address(raw_ip)
        except ValueError:
            continue
        if addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved:
            return True
    return False


def validate_url(url: str) -> None:
    """Raise ValueError unless *url* is a well-formed http(s) URL on a public host."""
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as exc:
        raise ValueError(f"Malformed URL '{url}': {exc}") from exc

    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Scheme '{parsed.scheme}' is not allowed. Use http or https.")

    if not hostname:
        raise ValueError("URL must have a valid hostname.")

    # httpx is stricter than urlparse (ports, hosts); reject what it cannot request
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ValueError(f"Malformed URL '{url}': {exc}") from exc

    if _is_private_address(hostname):
        raise ValueError("Requests to private/internal addresses are not allowed.")


def redirect_target(current_url: str, response: httpx.Response) -> str:
    """Return the validated absolute URL *response* redirects to.

    Raises:
        ValueError: if the target fails :func:`validate_url`.
    """
    next_url = urljoin(current_url, response.headers.get("location", ""))
    validate_url(next_url)
    logger.info("Following redirect %s -> %s", current_url, next_url)
    return next_url


async def _read_limited(response: httpx.Response) -> bytes:
    content_length = response.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > MAX_CONTENT_SIZE:
        raise RuntimeError("Response body exceeds the maximum allowed size.")

    chunks = []
    total = 0
    async for chunk in response.aiter_bytes():
        total += len(chunk)
        if total > MAX_CONTENT_SIZE:
            raise RuntimeError("Response body exceeds the maximum allowed size.")
        chunks.append(chunk)
    return b"".join(chunks)


async def _fetch(client: httpx.AsyncClient, url: str) -> str:
    current_url = url
    for _ in range(MAX_REDIRECTS + 1):
        async with client.stream(
            "GET",
            current_url,
            headers={"User-Agent": BROWSER_USER_AGENT},
            follow_redirects=False,
            timeout=TIMEOUT,
        ) as response:
            if response.is_redirect:
                current_url = redirect_target(current_url, response)
                continue

            response.raise_for_status()
            body = await _read_limited(response)
            return body.decode(response.encoding or "utf-8", errors="replace")

    raise RuntimeError("Too many redirects.")


async def fetch_url(url: str, *, client: Optional[httpx.AsyncClient] = None) -> str:
    """Fetch *url* and return the decoded HTML.

    Args:
        url: Public http(s) URL of the page.
        client: Optional HTTP client to reuse. A private one is created and
            closed when omitted.

    Raises:
        ValueError: if the URL, or a redirect target, fails validation.
        httpx.HTTPError: on network errors, timeouts or a non-success status.
        RuntimeError: if the body exceeds MAX_CONTENT_SIZE or redirects loop.
    """
    validate_url(url)

    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await _fetch(own_client, url)
    return await _fetch(client, url)
