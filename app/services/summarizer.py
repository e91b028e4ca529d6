"""Website summary aggregation.

:func:`summarize` parses a document once and runs the six analyzers over the
parsed tree.  It never raises: an analyzer that fails unexpectedly is logged
and replaced by its all-default record.
"""

import logging
from typing import Callable, TypeVar

from bs4 import BeautifulSoup
from pydantic import BaseModel

from app.models.summary import (
    Accessibility,
    Content,
    Design,
    Metadata,
    Structure,
    Technical,
    WebsiteSummary,
)
from app.services.accessibility import analyze_accessibility
from app.services.content import extract_content
from app.services.design import analyze_design
from app.services.metadata import extract_metadata
from app.services.structure import analyze_structure
from app.services.technical import analyze_technical

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _run(name: str, analyzer: Callable[[], RecordT], default: RecordT) -> RecordT:
    try:
        return analyzer()
    except Exception:
        logger.exception("%s analyzer failed – using defaults", name)
        return default


def summarize(html: str, url: str = "") -> WebsiteSummary:
    """Build a :class:`WebsiteSummary` for *html*.

    Args:
        html: Raw HTML. Run the CSS inliner first if design analysis should
            see external stylesheets.
        url: Optional source URL, only used to derive the domain.
    """
    soup = BeautifulSoup(html or "", "lxml")

    return WebsiteSummary(
        metadata=_run("metadata", lambda: extract_metadata(soup, url or ""), Metadata()),
        structure=_run("structure", lambda: analyze_structure(soup), Structure()),
        content=_run("content", lambda: extract_content(soup), Content()),
        design=_run("design", lambda: analyze_design(soup), Design()),
        technical=_run("technical", lambda: analyze_technical(soup), Technical()),
        accessibility=_run("accessibility", lambda: analyze_accessibility(soup), Accessibility()),
    )
