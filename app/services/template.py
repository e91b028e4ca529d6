"""Clean-template reduction.

The reducer prunes trackers, ads and other non-essential nodes from a
document.  When the pruned document is still larger than
:data:`TEMPLATE_SIZE_LIMIT` characters it is discarded in favour of a small
structural skeleton that keeps one representative of each landmark.
"""

import html as html_lib

from bs4 import BeautifulSoup

TEMPLATE_SIZE_LIMIT = 50_000

# Selectors for nodes that carry no design information worth keeping
PRUNE_SELECTORS = (
    'script[src*="analytics"]',
    'script[src*="gtag"]',
    'script[src*="facebook"]',
    "script[async]:not([essential])",
    "noscript",
    ".ads",
    ".advertisement",
    "[data-ad]",
)

_SKELETON = """<!DOCTYPE html>
<html lang="{lang}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  {style}
</head>
<body>
  {header}
  {nav}
  {main}
  {footer}
</body>
</html>"""


def prune(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove every node matching :data:`PRUNE_SELECTORS` from *soup* in place."""
    for tag in soup.select(", ".join(PRUNE_SELECTORS)):
        # An ancestor matched too and already took this node with it
        if tag.decomposed:
            continue
        tag.decompose()
    return soup


def _outer(soup: BeautifulSoup, name: str) -> str:
    tag = soup.find(name)
    return str(tag) if tag is not None else ""


def build_skeleton(soup: BeautifulSoup) -> str:
    """Return the fixed-shape structural skeleton of *soup*."""
    root = soup.find("html")
    lang = (root.get("lang") if root is not None else None) or "en"

    title_tag = soup.find("title")
    title = (title_tag.get_text() if title_tag is not None else "") or "Website"

    main = soup.find("main")
    if main is not None:
        main_markup = str(main)
    else:
        body = soup.find("body")
        main_markup = body.decode_contents() if body is not None else ""

    return _SKELETON.format(
        lang=html_lib.escape(str(lang)),
        title=html_lib.escape(title, quote=False),
        style=_outer(soup, "style"),
        header=_outer(soup, "header"),
        nav=_outer(soup, "nav"),
        main=main_markup,
        footer=_outer(soup, "footer"),
    )


def reduce_template(html: str, size_limit: int = TEMPLATE_SIZE_LIMIT) -> str:
    """Return the clean template for *html*.

    The pruned document is returned when its serialization fits in
    *size_limit* characters; otherwise the structural skeleton is returned.
    """
    soup = prune(BeautifulSoup(html or "", "lxml"))
    template = str(soup)
    if len(template) <= size_limit:
        return template
    return build_skeleton(soup)
