from typing import Optional

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    html: str = Field(min_length=1, description="Raw HTML document to analyze.")
    url: Optional[str] = Field(
        default=None,
        description="Source URL of the document. Only used to derive the domain.",
    )
