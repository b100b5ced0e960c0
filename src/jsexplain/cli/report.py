"""Terminal rendering for explain-error: boxed headers, the report and help."""

from __future__ import annotations

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from jsexplain.config.constants import BOX_WIDTH, PROGRAM_NAME, TITLE
from jsexplain.explainer.models import ExplanationResult
from jsexplain.explainer.rules import CATEGORY_DESCRIPTIONS

STYLE_ERROR = "bold red"
STYLE_CATEGORY = "bold magenta"
STYLE_EXPLAIN = "cyan"
STYLE_TIP = "green"
STYLE_LABEL = "dim"
STYLE_HIGHLIGHT = "bold yellow"
STYLE_HEADER = "bold blue"

EXAMPLES = (
    "ReferenceError: x is not defined",
    "TypeError: Cannot read property of undefined",
    "SyntaxError: Unexpected token }",
)


def _line(console: Console, *parts: str | tuple[str, str] | Text) -> None:
    # soft_wrap keeps long messages on one line so piped output stays greppable
    console.print(Text.assemble(*parts), soft_wrap=True)


def print_box(console: Console, title: str, suffix: str = "") -> None:
    """Print a three-line box around *title* (plus an unstyled *suffix*)."""
    inner = BOX_WIDTH - 2
    label = f"  📚 {title}{suffix}"
    padding = " " * max(inner - cell_len(label), 0)

    _line(console, ("┌" + "─" * inner + "┐", STYLE_HEADER))
    _line(
        console,
        ("│", STYLE_HEADER),
        "  📚 ",
        (title, STYLE_HIGHLIGHT),
        suffix,
        padding,
        ("│", STYLE_HEADER),
    )
    _line(console, ("└" + "─" * inner + "┘", STYLE_HEADER))


def print_report(console: Console, message: str, result: ExplanationResult) -> None:
    """Print the decorated explanation for *message*."""
    console.print()
    print_box(console, "Error Explained")
    console.print()

    _line(console, ("  Original Error:", STYLE_LABEL))
    _line(console, ("  " + message, STYLE_ERROR))
    console.print()

    _line(console, ("  Type:       ", STYLE_LABEL), (f"[ {result.category} ]", STYLE_CATEGORY))
    console.print()

    _line(console, ("  What it means:", STYLE_LABEL))
    _line(console, ("  → " + result.explanation, STYLE_EXPLAIN))
    console.print()

    _line(console, ("  How to fix:", STYLE_LABEL))
    _line(console, ("  ✓ " + result.tip, STYLE_TIP))
    console.print()

    _line(console, ("─" * BOX_WIDTH, STYLE_LABEL))
    console.print()


def print_json(console: Console, message: str, result: ExplanationResult) -> None:
    """Print the result as a JSON object for scripts."""
    console.print_json(data={"message": message, **result.model_dump(mode="json")})


def print_help(console: Console) -> None:
    """Print usage, examples, supported categories and options."""
    console.print()
    print_box(console, TITLE, " - Help")
    console.print()

    _line(console, ("  USAGE:", STYLE_LABEL))
    _line(console, f"    {PROGRAM_NAME} ", ('"<error message>"', STYLE_EXPLAIN))
    console.print()

    _line(console, ("  EXAMPLES:", STYLE_LABEL))
    for example in EXAMPLES:
        _line(console, (f'    {PROGRAM_NAME} "{example}"', STYLE_TIP))
    console.print()

    _line(console, ("  SUPPORTED ERROR TYPES:", STYLE_LABEL))
    name_width = max(len(category) for category in CATEGORY_DESCRIPTIONS)
    for category, description in CATEGORY_DESCRIPTIONS.items():
        _line(
            console,
            "    • ",
            (str(category), STYLE_CATEGORY),
            " " * (name_width - len(category)),
            f" - {description}",
        )
    console.print()

    _line(console, ("  OPTIONS:", STYLE_LABEL))
    _line(console, "    --help, -h     Show this help message")
    _line(console, "    --json         Print the result as JSON")
    _line(console, "    --no-color     Disable colored output")
    _line(console, "    --verbose      Log which rule matched (to stderr)")
    _line(console, "    --version, -v  Show version")
    console.print()
