"""Resolve an error message to an explanation and a fix-it tip."""

from __future__ import annotations

import logging

from jsexplain.explainer.classifier import classify
from jsexplain.explainer.models import Category, ExplanationResult
from jsexplain.explainer.rules import rules_for

logger = logging.getLogger("jsexplain.explainer")

FALLBACK_EXPLANATION = "Something went wrong in your code."
FALLBACK_TIP = "Read the error message carefully and check the line number for clues."


def explain(message: str | None) -> ExplanationResult | None:
    """Explain *message* in plain language.

    The message is classified first, then the category's rules are tried in
    order and the first match produces the result. When nothing matches a
    generic explanation is returned, labelled with the detected category or
    ``Category.ERROR`` if none was detected.

    Returns ``None`` for an empty or missing message.
    """
    if not message:
        return None

    category = classify(message)

    for index, rule in enumerate(rules_for(category)):
        match = rule.pattern.search(message)
        if match:
            logger.debug("Matched %s rule #%d (%s)", category, index, rule.pattern.pattern)
            return ExplanationResult(
                category=category,
                explanation=rule.explain(match),
                tip=rule.tip(match),
            )

    logger.debug("No %s rule matched, using fallback", category)
    return ExplanationResult(
        category=category if category != Category.UNKNOWN else Category.ERROR,
        explanation=FALLBACK_EXPLANATION,
        tip=FALLBACK_TIP,
    )
