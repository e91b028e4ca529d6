"""Summary-driven baseline enhancement of a clean template.

Used when no generated redesign is available: the template gets one extra
stylesheet with a modern reset, typography based on the page's own fonts and
a few layout rules chosen from the summary's classifications.
"""

from bs4 import BeautifulSoup

from app.models.summary import WebsiteSummary

DEFAULT_FONT_STACK = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif'

_BASE_CSS = """
* {{ box-sizing: border-box; margin: 0; padding: 0; }}
html {{ scroll-behavior: smooth; }}
body {{
  font-family: {font};
  line-height: 1.6;
  color: #333;
}}
"""

_SIDEBAR_CSS = """
.container { display: grid; grid-template-columns: 250px 1fr; gap: 2rem; }
@media (max-width: 768px) { .container { grid-template-columns: 1fr; } }
"""

_ECOMMERCE_CSS = """
.product-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(250px, 1fr)); gap: 1.5rem; }
.btn-primary { background: #007bff; color: white; padding: 0.75rem 1.5rem; border: none; border-radius: 0.375rem; }
"""

_RESPONSIVE_CSS = """
@media (max-width: 768px) {
  body { font-size: 16px; padding: 1rem; }
  h1 { font-size: 1.75rem; }
  h2 { font-size: 1.5rem; }
}
"""


def build_baseline_css(summary: WebsiteSummary) -> str:
    fonts = summary.design.fonts
    css = _BASE_CSS.format(font=fonts[0] if fonts else DEFAULT_FONT_STACK)

    if summary.structure.layout_type == "sidebar-layout":
        css += _SIDEBAR_CSS
    elif summary.content.type == "e-commerce":
        css += _ECOMMERCE_CSS

    return css + _RESPONSIVE_CSS


def enhance_template(template: str, summary: WebsiteSummary) -> str:
    """Return *template* with the baseline stylesheet appended to ``<head>``."""
    soup = BeautifulSoup(template or "", "lxml")

    head = soup.find("head")
    if head is None:
        head = soup.new_tag("head")
        root = soup.find("html")
        if root is None:
            root = soup.new_tag("html")
            soup.append(root)
        root.insert(0, head)

    style = soup.new_tag("style")
    style.string = build_baseline_css(summary)
    head.append(style)
    return str(soup)
