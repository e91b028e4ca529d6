"""External stylesheet inlining.

Design analysis only sees style text that is present in the document, so
``<link rel="stylesheet">`` references are fetched and replaced by inline
``<style>`` blocks before a page is summarized.

Stylesheets are fetched one at a time, in document order, so which of them
fit in the budget never depends on network timing.  Two budget checks apply:

* the loop guard stops the whole pass before the next fetch once the running
  total is above the budget;
* the commit check skips one stylesheet whose normalized text would take the
  running total above the budget, and moves on to the next link.

Stylesheet URLs, and every redirect hop, pass the same public-host check as
the page fetch.  Any failure on a single stylesheet (bad or blocked URL,
timeout, non-2xx status, transport error) is logged and that link is left
untouched.
"""

import logging
import re
from typing import List, NamedTuple, Optional
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup, Tag

from app.services.design import is_stylesheet_link
from app.services.fetcher import MAX_REDIRECTS, redirect_target, validate_url

logger = logging.getLogger(__name__)

DEFAULT_CSS_BUDGET = 80_000  # characters of normalized CSS per pass
STYLESHEET_TIMEOUT = 3  # seconds, per stylesheet
USER_AGENT = "Mozilla/5.0 (compatible; UIUX-Analyzer/1.0)"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


class InlineEdit(NamedTuple):
    """Replace stylesheet *link* with an inline ``<style>`` holding *css*."""

    link: Tag
    css: str


def normalize_css(css: str) -> str:
    """Strip ``/* */`` comments, collapse whitespace runs and trim."""
    css = _COMMENT_RE.sub("", css)
    return _WHITESPACE_RE.sub(" ", css).strip()


def _resolve(href: str, base_url: str) -> str:
    """Return *href* resolved against *base_url*.

    Raises:
        ValueError: if the result is malformed, not http(s), or points at a
            private/internal host.
    """
    try:
        url = urljoin(base_url, href)
    except ValueError as exc:
        raise ValueError(f"Cannot resolve stylesheet URL '{href}': {exc}") from exc
    validate_url(url)
    return url


async def _get(client: httpx.AsyncClient, url: str, timeout: float) -> httpx.Response:
    """GET *url*, following up to MAX_REDIRECTS validated redirects by hand."""
    current_url = url
    for _ in range(MAX_REDIRECTS + 1):
        response = await client.get(
            current_url,
            timeout=timeout,
            follow_redirects=False,
            headers={"User-Agent": USER_AGENT, "Accept": "text/css"},
        )
        if not response.is_redirect:
            return response
        current_url = redirect_target(current_url, response)
    raise httpx.TooManyRedirects(f"Exceeded {MAX_REDIRECTS} redirects.", request=response.request)


async def _fetch_stylesheet(client: httpx.AsyncClient, url: str, timeout: float) -> Optional[str]:
    """Fetch one stylesheet, returning ``None`` on any failure."""
    try:
        response = await _get(client, url, timeout)
    except httpx.TimeoutException:
        logger.warning("Timeout fetching stylesheet %s", url)
        return None
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.warning("Could not fetch stylesheet %s: %s", url, exc)
        return None

    if not response.is_success:
        logger.warning("Stylesheet %s returned HTTP %s", url, response.status_code)
        return None
    return response.text


async def plan_inlining(
    soup: BeautifulSoup,
    base_url: str,
    client: httpx.AsyncClient,
    budget: int = DEFAULT_CSS_BUDGET,
    timeout: float = STYLESHEET_TIMEOUT,
) -> List[InlineEdit]:
    """Fetch the stylesheets linked from *soup* and return the edits that fit in *budget*.

    *soup* is not modified.
    """
    links = [link for link in soup.find_all("link", href=True) if is_stylesheet_link(link)]
    edits: List[InlineEdit] = []
    total = 0

    for link in links:
        if total > budget:
            logger.info("CSS budget exhausted (%d > %d) – skipping remaining stylesheets", total, budget)
            break

        href = str(link["href"]).strip()
        if not href:
            continue

        try:
            css_url = _resolve(href, base_url)
        except ValueError as exc:
            logger.warning("Skipping stylesheet: %s", exc)
            continue

        css = await _fetch_stylesheet(client, css_url, timeout)
        if css is None:
            continue

        css = normalize_css(css)
        if total + len(css) > budget:
            logger.info(
                "Stylesheet %s (%d chars) does not fit in the remaining CSS budget – skipped",
                css_url,
                len(css),
            )
            continue

        edits.append(InlineEdit(link, css))
        total += len(css)

    return edits


def apply_edits(soup: BeautifulSoup, edits: List[InlineEdit]) -> BeautifulSoup:
    """Replace each planned link with an inline ``<style>`` in the same position."""
    for edit in edits:
        style = soup.new_tag("style")
        style.string = edit.css
        edit.link.replace_with(style)
    return soup


async def inline_stylesheets(
    html: str,
    base_url: str,
    budget: int = DEFAULT_CSS_BUDGET,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = STYLESHEET_TIMEOUT,
) -> str:
    """Return *html* with external stylesheets inlined, within *budget* characters of CSS.

    Args:
        html: Raw HTML document.
        base_url: URL the document was fetched from; relative ``href`` values
            are resolved against it.
        budget: Ceiling on the cumulative length of inlined CSS.
        client: Optional HTTP client to reuse. A private one is created and
            closed when omitted.
        timeout: Per-stylesheet timeout in seconds.

    Raises:
        ValueError: if *budget* is negative.
    """
    if budget < 0:
        raise ValueError("CSS budget must not be negative.")

    soup = BeautifulSoup(html or "", "lxml")

    if client is None:
        async with httpx.AsyncClient() as own_client:
            edits = await plan_inlining(soup, base_url, own_client, budget, timeout)
    else:
        edits = await plan_inlining(soup, base_url, client, budget, timeout)

    logger.info("Inlined %d stylesheet(s) for %s", len(edits), base_url)
    return str(apply_edits(soup, edits))
