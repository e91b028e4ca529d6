import re

from bs4 import BeautifulSoup, Doctype

from app.models.summary import Technical
from app.services.design import is_stylesheet_link

_SERVICE_WORKER_RE = re.compile(r"service-?worker")


def _has_doctype(soup: BeautifulSoup) -> bool:
    return any(isinstance(node, Doctype) for node in soup.contents)


def analyze_technical(soup: BeautifulSoup) -> Technical:
    body = soup.find("body")
    body_markup = body.decode_contents() if body is not None else ""

    return Technical(
        has_javascript=soup.find("script") is not None,
        external_stylesheets=sum(1 for link in soup.find_all("link") if is_stylesheet_link(link)),
        inline_styles=len(soup.find_all("style")),
        meta_tags=len(soup.find_all("meta")),
        html_version="HTML5" if _has_doctype(soup) else "Legacy HTML",
        has_service_worker=bool(_SERVICE_WORKER_RE.search(body_markup)),
        has_manifest=soup.find("link", rel="manifest") is not None,
    )
