from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.models.summary import WebsiteSummary


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    website_summary: WebsiteSummary
    clean_template: str
    enhanced_html: str
    """Clean template with the summary-driven baseline stylesheet applied."""
    original_size: int
    template_size: int
    processing_method: Literal["summary-based-fallback"] = "summary-based-fallback"
