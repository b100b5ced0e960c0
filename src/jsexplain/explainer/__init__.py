"""Error explanation: category classification and ordered rule lookup."""

from jsexplain.explainer.classifier import classify
from jsexplain.explainer.models import Category, ExplanationResult, Rule
from jsexplain.explainer.resolver import explain

__all__ = ["Category", "ExplanationResult", "Rule", "classify", "explain"]
