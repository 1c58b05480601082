"""Color extraction from free-text vehicle descriptions."""

import re
from typing import Any

from dealer_listings.splitting.vocabulary import DESCRIPTION_COLORS

# Text between dash/slash delimiters, e.g. "... Black Interior - Sky Blue"
_DELIMITED_SEGMENT_RE = re.compile(r"[-/]\s*([A-Za-z\s]+)(?:\s*[-/]|$)")
MAX_SEGMENT_COLOR_LENGTH = 30


def extract_color_from_description(description: Any) -> str:
    """Extract a color from a description string.

    The color list is searched in order and the first entry contained in
    the text wins, even when a longer entry later in the list is also
    present ("Blue" wins over "Sky Blue"). If no listed color occurs, the
    last dash- or slash-delimited segment is used when it is shorter than
    30 characters.

    Args:
        description: Description text, e.g. a "Material Name" column.

    Returns:
        Detected color, or "" if none.

    Examples:
        >>> extract_color_from_description("Tiguan L 330TSI - Sky Blue")
        'Blue'
        >>> extract_color_from_description("Accord 260TURBO / Lunar Silver")
        'Silver'
        >>> extract_color_from_description("Model 3 - Midnight")
        'Midnight'
    """
    if not description or not isinstance(description, str):
        return ""

    normalized = description.lower()
    for color in DESCRIPTION_COLORS:
        if color.lower() in normalized:
            return color

    matches = list(_DELIMITED_SEGMENT_RE.finditer(description))
    if matches:
        candidate = matches[-1].group(1).strip()
        if len(candidate) < MAX_SEGMENT_COLOR_LENGTH:
            return candidate

    return ""
