from bs4 import BeautifulSoup, Tag

from app.models.summary import Design, DesignSystem
from app.services.style_miner import mine_styles


def is_stylesheet_link(tag: Tag) -> bool:
    """Return True for ``<link>`` elements whose ``rel`` is exactly ``stylesheet``.

    Alternate stylesheets (``rel="alternate stylesheet"``) are not applied by
    default and do not count.
    """
    if tag.name != "link":
        return False
    return [value.lower() for value in tag.get("rel") or []] == ["stylesheet"]


def collect_style_text(soup: BeautifulSoup) -> str:
    """Concatenate the text of every ``<style>`` and stylesheet ``<link>`` element.

    Stylesheet links only contribute text once they have been replaced by
    inline ``<style>`` blocks, so run the CSS inliner first.
    """
    nodes = soup.find_all(lambda tag: tag.name == "style" or is_stylesheet_link(tag))
    return " ".join(node.get_text() for node in nodes)


def _body_classes(soup: BeautifulSoup) -> str:
    body = soup.find("body")
    if body is None:
        return ""
    return " ".join(body.get("class") or [])


def detect_design_system(body_classes: str, styles: str) -> DesignSystem:
    if "bootstrap" in body_classes or "bootstrap" in styles:
        return "bootstrap"
    if "tailwind" in body_classes or "tailwind" in styles:
        return "tailwind"
    if "material" in styles or "mat-" in body_classes:
        return "material"
    return "custom"


def analyze_design(soup: BeautifulSoup) -> Design:
    styles = collect_style_text(soup)
    tokens = mine_styles(styles)

    return Design(
        colors=tokens.colors,
        fonts=tokens.fonts,
        has_animations=tokens.has_animations,
        has_grid_layout=tokens.has_grid_layout,
        has_flex_layout=tokens.has_flex_layout,
        has_responsive=tokens.has_responsive,
        dark_mode=tokens.dark_mode,
        design_system=detect_design_system(_body_classes(soup), styles),
    )
