import logging

import httpx
from fastapi import APIRouter, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.models.fetch_response import FetchHtmlResponse
from app.services.fetcher import fetch_url
from app.services.inliner import inline_stylesheets

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()

LARGE_HTML_THRESHOLD = 500_000


@router.get(
    "/fetch-html",
    response_model=FetchHtmlResponse,
    summary="Fetch a page and inline its external stylesheets",
)
@limiter.limit("10/minute")
async def fetch_html(
    request: Request,
    url: str = Query(min_length=1, description="Absolute http(s) URL of the page to fetch."),
) -> FetchHtmlResponse:
    """Fetch *url* and return its HTML with external stylesheets inlined.

    Stylesheets that fail to load or do not fit in the CSS budget are left
    as ``<link>`` elements.
    """
    logger.info("Fetch request received", extra={"url": url})

    try:
        html = await fetch_url(url)
    except ValueError as exc:
        logger.warning("Invalid or blocked URL: %s – %s", url, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except httpx.TimeoutException:
        logger.error("Timeout fetching URL: %s", url)
        raise HTTPException(status_code=504, detail="The target URL timed out.")
    except httpx.HTTPStatusError as exc:
        logger.error("HTTP error fetching URL %s: %s", url, exc)
        raise HTTPException(
            status_code=502, detail=f"Target URL returned HTTP {exc.response.status_code}."
        )
    except (httpx.RequestError, RuntimeError) as exc:
        logger.error("Error fetching URL %s: %s", url, exc)
        raise HTTPException(status_code=502, detail=str(exc))

    logger.info("Fetched HTML length: %d", len(html))
    inlined = await inline_stylesheets(html, url)
    logger.info("HTML length after CSS inlining: %d", len(inlined))

    return FetchHtmlResponse(
        html=inlined,
        original_size=len(html),
        inlined_size=len(inlined),
        warning="Large HTML detected" if len(inlined) > LARGE_HTML_THRESHOLD else None,
    )
