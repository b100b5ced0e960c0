"""Rule-based error category classifier.

Maps an error message to a ``Category`` without looking at any rule text.
Pure regex tests, checked in order; the first hit wins.
"""

from __future__ import annotations

import re

from jsexplain.explainer.models import Category

# Order matters: "SyntaxError: Unexpected token < in JSON" is a SyntaxError,
# not a JSON error.
_CATEGORY_PATTERNS: tuple[tuple[Category, re.Pattern[str]], ...] = (
    (Category.REFERENCE_ERROR, re.compile(r"ReferenceError", re.IGNORECASE)),
    (Category.TYPE_ERROR, re.compile(r"TypeError", re.IGNORECASE)),
    (Category.SYNTAX_ERROR, re.compile(r"SyntaxError", re.IGNORECASE)),
    (Category.RANGE_ERROR, re.compile(r"RangeError", re.IGNORECASE)),
    (Category.URI_ERROR, re.compile(r"URIError", re.IGNORECASE)),
    (Category.JSON, re.compile(r"JSON", re.IGNORECASE)),
)


def classify(message: str) -> Category:
    """Classify an error message into one of the known categories.

    Returns:
        The first category whose marker appears anywhere in *message*,
        or ``Category.UNKNOWN``.
    """
    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.search(message):
            return category
    return Category.UNKNOWN
