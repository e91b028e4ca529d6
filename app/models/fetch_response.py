from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FetchHtmlResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    html: str
    original_size: int
    """Length of the document as fetched, before stylesheet inlining."""
    inlined_size: int
    warning: Optional[str] = None
