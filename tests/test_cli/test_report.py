"""Tests for report and help rendering."""

from __future__ import annotations

import io

from rich.cells import cell_len
from rich.console import Console

from jsexplain.cli.report import print_box, print_help, print_report
from jsexplain.config.constants import BOX_WIDTH
from jsexplain.explainer import Category, ExplanationResult


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=60, color_system=None, highlight=False), buffer


def test_box_lines_share_one_width():
    console, buffer = _console()
    print_box(console, "Error Explained")
    lines = buffer.getvalue().splitlines()
    assert len(lines) == 3
    assert {cell_len(line) for line in lines} == {BOX_WIDTH}


def test_report_sections_in_order():
    console, buffer = _console()
    result = ExplanationResult(
        category=Category.TYPE_ERROR,
        explanation="You're trying to reassign a const variable.",
        tip='Use "let" instead of "const" if you need to change the value later.',
    )
    print_report(console, "TypeError: Assignment to constant variable.", result)
    output = buffer.getvalue()

    labels = ["Original Error:", "Type:", "What it means:", "How to fix:"]
    positions = [output.index(label) for label in labels]
    assert positions == sorted(positions)
    assert "[ TypeError ]" in output
    assert "→ You're trying to reassign a const variable." in output
    assert '✓ Use "let" instead of "const" if you need to change the value later.' in output


def test_help_lists_every_category():
    console, buffer = _console()
    print_help(console)
    output = buffer.getvalue()
    for category in ("ReferenceError", "TypeError", "SyntaxError", "RangeError", "URIError", "JSON"):
        assert category in output
    assert "--no-color" in output
