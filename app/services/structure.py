from bs4 import BeautifulSoup

from app.models.summary import LayoutType, Structure

# A landmark counts as present when the tag itself, or an element carrying one
# of the conventional class/id names, exists anywhere in the document.
HEADER_SELECTOR = "header, .header, #header"
NAV_SELECTOR = "nav, .nav, .navigation, .menu"
MAIN_SELECTOR = "main, .main, #main, .content"
SIDEBAR_SELECTOR = "aside, .sidebar, .side-nav"
FOOTER_SELECTOR = "footer, .footer, #footer"


def classify_layout(has_sidebar: bool, sections: int, articles: int) -> LayoutType:
    """Return the single highest-priority layout label.

    Priority: sidebar, then more than three sections, then any article.
    """
    if has_sidebar:
        return "sidebar-layout"
    if sections > 3:
        return "multi-section"
    if articles > 0:
        return "article-based"
    return "simple-page"


def analyze_structure(soup: BeautifulSoup) -> Structure:
    has_sidebar = soup.select_one(SIDEBAR_SELECTOR) is not None
    sections = len(soup.find_all("section"))
    articles = len(soup.find_all("article"))

    return Structure(
        has_header=soup.select_one(HEADER_SELECTOR) is not None,
        has_nav=soup.select_one(NAV_SELECTOR) is not None,
        has_main=soup.select_one(MAIN_SELECTOR) is not None,
        has_sidebar=has_sidebar,
        has_footer=soup.select_one(FOOTER_SELECTOR) is not None,
        sections=sections,
        articles=articles,
        layout_type=classify_layout(has_sidebar, sections, articles),
    )
