import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.models.analyze_request import AnalyzeRequest
from app.models.analyze_response import AnalyzeResponse
from app.services.enhancer import enhance_template
from app.services.summarizer import summarize
from app.services.template import reduce_template

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Summarize a page and build its clean template",
)
@limiter.limit("10/minute")
async def analyze(request: Request, body: AnalyzeRequest) -> AnalyzeResponse:
    """Return the website summary, the clean template and a baseline-enhanced template.

    Send HTML returned by ``/fetch-html`` so that external stylesheets are
    already inlined; otherwise colours and fonts from linked CSS are missed.
    """
    logger.info("Received HTML for analysis: %d characters", len(body.html))

    summary = summarize(body.html, body.url or "")
    template = reduce_template(body.html)
    logger.info("Summary generated. Template size: %d characters", len(template))

    return AnalyzeResponse(
        website_summary=summary,
        clean_template=template,
        enhanced_html=enhance_template(template, summary),
        original_size=len(body.html),
        template_size=len(template),
    )
