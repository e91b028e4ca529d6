"""Pattern-based mining of palette and typography tokens from style text.

This is a deliberate approximation of a CSS parser: tokens are found with
regular expressions over the concatenated text of a page's style blocks.
Colour- or font-like substrings inside string literals are not told apart
from real declarations.  Callers only depend on :func:`mine_styles`, so a
real parser can replace the patterns without touching them.
"""

import re
from typing import List

from pydantic import BaseModel, ConfigDict

MAX_COLORS = 10
MAX_FONTS = 5

_NAMED_COLORS = (
    "red",
    "blue",
    "green",
    "black",
    "white",
    "gray",
    "yellow",
    "orange",
    "purple",
    "pink",
    "brown",
)

# One alternation so matches come back in text order regardless of kind.
# Named colours only count when they follow a colon (i.e. a declaration value).
_COLOR_RE = re.compile(
    r"#[0-9a-fA-F]{3,6}"
    r"|rgb\([^)]+\)"
    r"|:\s*(?P<named>" + "|".join(_NAMED_COLORS) + r")\b"
)

_FONT_FAMILY_RE = re.compile(r"font-family:\s*([^;}]+)")

_ANIMATION_RE = re.compile(r"animation|transition|transform")
_GRID_RE = re.compile(r"display:\s*grid|grid-template")
_FLEX_RE = re.compile(r"display:\s*flex|flex-direction")
_MEDIA_RE = re.compile(r"@media")
_DARK_RE = re.compile(r"dark|night")


class StyleTokens(BaseModel):
    model_config = ConfigDict(frozen=True)

    colors: List[str] = []
    fonts: List[str] = []
    has_animations: bool = False
    has_grid_layout: bool = False
    has_flex_layout: bool = False
    has_responsive: bool = False
    dark_mode: bool = False


def _unique(values, limit: int) -> List[str]:
    seen: set = set()
    result: List[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
        if len(result) == limit:
            break
    return result


def extract_colors(styles: str) -> List[str]:
    """Return up to :data:`MAX_COLORS` distinct colour tokens in order of first occurrence.

    Hex (3–6 digits), ``rgb(...)`` and a fixed set of named colours are
    recognised.  Named colours are reported without the leading colon.
    """
    tokens = (m.group("named") or m.group(0) for m in _COLOR_RE.finditer(styles))
    return _unique(tokens, MAX_COLORS)


def extract_fonts(styles: str) -> List[str]:
    """Return up to :data:`MAX_FONTS` distinct ``font-family`` values."""
    values = (m.group(1).strip() for m in _FONT_FAMILY_RE.finditer(styles))
    return _unique((v for v in values if v), MAX_FONTS)


def mine_styles(styles: str) -> StyleTokens:
    """Mine colours, fonts and layout/feature flags from *styles*."""
    return StyleTokens(
        colors=extract_colors(styles),
        fonts=extract_fonts(styles),
        has_animations=bool(_ANIMATION_RE.search(styles)),
        has_grid_layout=bool(_GRID_RE.search(styles)),
        has_flex_layout=bool(_FLEX_RE.search(styles)),
        has_responsive=bool(_MEDIA_RE.search(styles)),
        dark_mode=bool(_DARK_RE.search(styles.lower())),
    )
