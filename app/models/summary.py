"""Website summary records.

Every field carries a total default so an analyzer that finds nothing still
produces a complete record.  Attributes are snake_case; the JSON wire format
uses the camelCase names the browser client expects.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LayoutType = Literal["sidebar-layout", "multi-section", "article-based", "simple-page"]
ContentType = Literal["e-commerce", "portfolio", "blog", "business", "application", "informational"]
DesignSystem = Literal["bootstrap", "tailwind", "material", "custom"]
HtmlVersion = Literal["HTML5", "Legacy HTML"]


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Metadata(_Record):
    title: str = "Untitled"
    description: str = ""
    keywords: str = ""
    domain: str = ""
    language: str = "en"
    viewport: str = "missing"
    """Content of the viewport meta tag, or the literal ``"missing"``."""


class Structure(_Record):
    has_header: bool = False
    has_nav: bool = False
    has_main: bool = False
    has_sidebar: bool = False
    has_footer: bool = False
    sections: int = Field(default=0, ge=0)
    articles: int = Field(default=0, ge=0)
    layout_type: LayoutType = "simple-page"


class Headings(_Record):
    h1: List[str] = []
    h2: List[str] = []
    h3: List[str] = []


class Content(_Record):
    headings: Headings = Headings()
    paragraph_count: int = Field(default=0, ge=0)
    image_count: int = Field(default=0, ge=0)
    link_count: int = Field(default=0, ge=0)
    form_count: int = Field(default=0, ge=0)
    button_count: int = Field(default=0, ge=0)
    type: ContentType = "informational"


class Design(_Record):
    colors: List[str] = []
    fonts: List[str] = []
    has_animations: bool = False
    has_grid_layout: bool = False
    has_flex_layout: bool = False
    has_responsive: bool = False
    dark_mode: bool = False
    design_system: DesignSystem = "custom"


class Technical(_Record):
    has_javascript: bool = Field(default=False, alias="hasJavaScript")
    external_stylesheets: int = Field(default=0, ge=0)
    inline_styles: int = Field(default=0, ge=0)
    meta_tags: int = Field(default=0, ge=0)
    html_version: HtmlVersion = "Legacy HTML"
    has_service_worker: bool = False
    has_manifest: bool = False


class HeadingStructure(_Record):
    has_h1: bool = False
    multiple_h1: bool = False
    proper_hierarchy: bool = True


class FormLabels(_Record):
    total: int = Field(default=0, ge=0)
    labeled: int = Field(default=0, ge=0)
    percentage: int = Field(default=100, ge=0, le=100)


class Accessibility(_Record):
    has_alt_texts: bool = True
    has_aria_labels: bool = False
    has_semantic_html: bool = Field(default=False, alias="hasSemanticHTML")
    has_skip_links: bool = False
    heading_structure: HeadingStructure = HeadingStructure()
    form_labels: FormLabels = FormLabels()
    color_contrast: Literal["unknown"] = "unknown"
    """Contrast is not evaluated; always ``"unknown"``."""


class WebsiteSummary(_Record):
    """Aggregate of the six analyzer records for one document."""

    metadata: Metadata = Metadata()
    structure: Structure = Structure()
    content: Content = Content()
    design: Design = Design()
    technical: Technical = Technical()
    accessibility: Accessibility = Accessibility()
