"""explain-error: plain-language explanations for JavaScript error messages."""

__version__ = "0.1.0"
