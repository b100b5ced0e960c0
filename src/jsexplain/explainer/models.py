"""Types shared by the classifier, the rule table and the resolver."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Category(StrEnum):
    """Coarse classification of a JavaScript error message."""

    REFERENCE_ERROR = "ReferenceError"
    TYPE_ERROR = "TypeError"
    SYNTAX_ERROR = "SyntaxError"
    RANGE_ERROR = "RangeError"
    URI_ERROR = "URIError"
    JSON = "JSON"
    UNKNOWN = "Unknown"
    # Reported in place of UNKNOWN when nothing matched
    ERROR = "Error"


@dataclass(frozen=True)
class Rule:
    """One pattern-to-explanation mapping within a category.

    ``explain`` and ``tip`` receive the regex match so they can personalize
    their text with captured identifiers.
    """

    pattern: re.Pattern[str]
    explain: Callable[[re.Match[str]], str]
    tip: Callable[[re.Match[str]], str]


class ExplanationResult(BaseModel):
    """What an error message means and how to fix it."""

    model_config = ConfigDict(frozen=True)

    category: Category
    explanation: str
    tip: str
