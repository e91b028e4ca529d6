from urllib.parse import urlparse

from bs4 import BeautifulSoup

from app.models.summary import Metadata


def _meta_content(soup: BeautifulSoup, name: str) -> str:
    meta = soup.find("meta", attrs={"name": name})
    if meta and meta.get("content") is not None:
        return str(meta["content"])
    return ""


def _extract_domain(url: str) -> str:
    """Return the hostname of *url*, or an empty string when it cannot be parsed."""
    if not url:
        return ""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def extract_metadata(soup: BeautifulSoup, url: str = "") -> Metadata:
    title_tag = soup.find("title")
    title = title_tag.get_text().strip() if title_tag else ""

    root = soup.find("html")
    language = str(root.get("lang") or "") if root else ""

    viewport = soup.find("meta", attrs={"name": "viewport"})

    return Metadata(
        title=title or "Untitled",
        description=_meta_content(soup, "description"),
        keywords=_meta_content(soup, "keywords"),
        domain=_extract_domain(url),
        language=language or "en",
        viewport=str(viewport["content"]) if viewport and viewport.get("content") else "missing",
    )
