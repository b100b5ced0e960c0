"""Names and default values used across the project."""

PROGRAM_NAME = "explain-error"
TITLE = "JS Error Explainer"
TAGLINE = "Turns JavaScript error messages into plain language."

# Width of the boxed headers, borders included
BOX_WIDTH = 50

# Output formats
FORMAT_TEXT = "text"
FORMAT_JSON = "json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

# Recognized anywhere in the arguments, even after the message starts
HELP_FLAGS = ("--help", "-h")
