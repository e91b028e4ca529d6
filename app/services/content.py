"""Content inventory and content-type classification."""

from typing import List

from bs4 import BeautifulSoup, Comment

from app.models.summary import Content, ContentType, Headings

# Per-level caps on the number of heading texts kept in the summary
HEADING_LIMITS = {"h1": 3, "h2": 5, "h3": 5}

# Ordered (label, keywords) rules; the first rule with a keyword hit wins.
# "blog" also wins when the page has <article> elements, and "application"
# when it has forms (see classify_content).
_KEYWORD_RULES = (
    ("e-commerce", ("shop", "product", "cart", "buy")),
    ("portfolio", ("portfolio", "work", "project")),
    ("blog", ("blog", "article")),
    ("business", ("service", "business", "company")),
)

# Text inside these tags is never rendered
_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


def _heading_texts(soup: BeautifulSoup, level: str) -> List[str]:
    return [h.get_text().strip() for h in soup.find_all(level, limit=HEADING_LIMITS[level])]


def visible_text(soup: BeautifulSoup) -> str:
    """Return the text of ``<body>`` without script/style content or comments."""
    body = soup.find("body")
    if body is None:
        return ""
    parts = []
    for text in body.find_all(string=True):
        if isinstance(text, Comment):
            continue
        if text.find_parent(_INVISIBLE_TAGS) is not None:
            continue
        parts.append(str(text))
    return "".join(parts)


def classify_content(text: str, article_count: int, form_count: int) -> ContentType:
    """Classify a page by keyword hits in *text* (case-insensitive), in priority order."""
    lowered = text.lower()
    for label, keywords in _KEYWORD_RULES:
        if any(keyword in lowered for keyword in keywords):
            return label
        if label == "blog" and article_count > 0:
            return label
    if form_count > 0:
        return "application"
    return "informational"


def extract_content(soup: BeautifulSoup) -> Content:
    form_count = len(soup.find_all("form"))
    article_count = len(soup.find_all("article"))
    button_count = len(soup.find_all("button")) + len(
        soup.select('input[type="button"], input[type="submit"]')
    )

    return Content(
        headings=Headings(
            h1=_heading_texts(soup, "h1"),
            h2=_heading_texts(soup, "h2"),
            h3=_heading_texts(soup, "h3"),
        ),
        paragraph_count=len(soup.find_all("p")),
        image_count=len(soup.find_all("img")),
        link_count=len(soup.find_all("a")),
        form_count=form_count,
        button_count=button_count,
        type=classify_content(visible_text(soup), article_count, form_count),
    )
