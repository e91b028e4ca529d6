"""Accessibility heuristics.

These are presence checks, not an audit: colour contrast in particular is
never evaluated and is always reported as ``"unknown"``.
"""

import math
from typing import Sequence

from bs4 import BeautifulSoup, Tag

from app.models.summary import Accessibility, FormLabels, HeadingStructure

SEMANTIC_SELECTOR = "header, nav, main, article, section, aside, footer"
HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
FORM_CONTROL_TAGS = ["input", "textarea", "select"]


def is_proper_heading_hierarchy(levels: Sequence[int]) -> bool:
    """Return True unless some heading is more than one level deeper than the one before it.

    Going back up (``h3`` → ``h1``) and repeating a level are always allowed.
    """
    return all(current <= previous + 1 for previous, current in zip(levels, levels[1:]))


def analyze_heading_structure(soup: BeautifulSoup) -> HeadingStructure:
    levels = [int(h.name[1]) for h in soup.find_all(HEADING_TAGS)]
    h1_count = levels.count(1)
    return HeadingStructure(
        has_h1=h1_count > 0,
        multiple_h1=h1_count > 1,
        proper_hierarchy=is_proper_heading_hierarchy(levels),
    )


def _is_labeled(soup: BeautifulSoup, control: Tag) -> bool:
    if control.has_attr("aria-label") or control.has_attr("aria-labelledby"):
        return True
    control_id = control.get("id")
    if control_id and soup.find("label", attrs={"for": control_id}) is not None:
        return True
    return control.find_parent("label") is not None


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def analyze_form_labels(soup: BeautifulSoup) -> FormLabels:
    controls = soup.find_all(FORM_CONTROL_TAGS)
    total = len(controls)
    labeled = sum(1 for control in controls if _is_labeled(soup, control))
    # No form controls counts as fully labeled
    percentage = _round_half_up(labeled / total * 100) if total else 100
    return FormLabels(total=total, labeled=labeled, percentage=percentage)


def analyze_accessibility(soup: BeautifulSoup) -> Accessibility:
    return Accessibility(
        has_alt_texts=all(img.has_attr("alt") for img in soup.find_all("img")),
        has_aria_labels=soup.select_one("[aria-label], [aria-labelledby]") is not None,
        has_semantic_html=soup.select_one(SEMANTIC_SELECTOR) is not None,
        has_skip_links=soup.select_one('a[href^="#"]') is not None,
        heading_structure=analyze_heading_structure(soup),
        form_labels=analyze_form_labels(soup),
    )
