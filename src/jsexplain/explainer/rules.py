"""Explanation rules, grouped by category.

Within a category the rules are tried top to bottom and the first pattern
that matches wins, so more specific patterns must come before broader ones.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from jsexplain.explainer.models import Category, Rule

_FLAGS = re.IGNORECASE


def _group(match: re.Match[str], *indices: int, default: str) -> str:
    """Return the first non-empty capture among *indices*, else *default*.

    Indices the pattern does not define are skipped rather than raising.
    """
    for index in indices:
        if index > match.re.groups:
            continue
        value = match.group(index)
        if value:
            return value
    return default


def _text(value: str) -> Callable[[re.Match[str]], str]:
    return lambda _match: value


def _rule(
    pattern: str,
    explain: Callable[[re.Match[str]], str],
    tip: Callable[[re.Match[str]], str],
) -> Rule:
    return Rule(pattern=re.compile(pattern, _FLAGS), explain=explain, tip=tip)


REFERENCE_ERROR_RULES: tuple[Rule, ...] = (
    _rule(
        r"ReferenceError: ([\w$]+) is not defined",  # widened: "$" is a valid identifier character
        lambda m: f'You\'re trying to use "{_group(m, 1, default="a variable")}" but it doesn\'t exist yet.',
        _text("Declare the variable first using let, const, or var before using it."),
    ),
    _rule(
        r"ReferenceError: Cannot access .* before initialization",
        _text("You're using a variable before it's been assigned a value."),
        _text("Move your variable declaration above where you're trying to use it."),
    ),
)

TYPE_ERROR_RULES: tuple[Rule, ...] = (
    # Old V8 wording names the property before "of undefined", newer V8 puts
    # it in a "(reading 'x')" suffix, and some engines omit it entirely. Only the
    # old named form matched before; the other two got the generic TypeError text.
    _rule(
        r"TypeError: Cannot read propert(?:y|ies) (?:['\"]?([\w$]+)['\"]? )?of undefined"
        r"(?: \(reading ['\"]([^'\"]+)['\"]\))?",
        lambda m: (
            f'You\'re trying to access "{_group(m, 1, 2, default="a property")}" '
            "on something that is undefined."
        ),
        _text(
            "Check that the object exists before accessing its properties. "
            "Use optional chaining: obj?.property"
        ),
    ),
    _rule(
        r"TypeError: Cannot read propert(?:y|ies) (?:.* )?of null",  # widened to V8 "properties of null (reading 'x')"
        _text("You're trying to access a property on null."),
        _text("Verify the variable isn't null before using it. Use: if (variable !== null)"),
    ),
    _rule(
        r"TypeError: ([\w$.]+) is not a function",  # widened to dotted names: "items.map is not a function"
        lambda m: (
            f'You\'re calling "{_group(m, 1, default="something")}" as a function, '
            "but it's not one."
        ),
        _text("Check the spelling and make sure it's actually a function. Maybe it's a property?"),
    ),
    _rule(
        r"TypeError: Assignment to constant variable",
        _text("You're trying to reassign a const variable."),
        _text('Use "let" instead of "const" if you need to change the value later.'),
    ),
    _rule(
        r"TypeError: Cannot set propert(?:y|ies) (?:.* )?of undefined",  # widened to V8 "properties of undefined (setting 'x')"
        _text("You're trying to set a property on something that doesn't exist."),
        _text("Initialize the object first: const obj = {} before setting obj.property = value"),
    ),
    _rule(
        r"TypeError: .* is not iterable",
        _text("You're trying to loop over something that can't be looped."),
        _text("Make sure you're iterating over an array, string, or other iterable object."),
    ),
)

SYNTAX_ERROR_RULES: tuple[Rule, ...] = (
    _rule(
        r"SyntaxError: Unexpected token",
        _text("There's an unexpected character in your code."),
        _text("Check for missing/extra brackets, commas, or quotes near the error line."),
    ),
    _rule(
        r"SyntaxError: Unexpected end of input",
        _text("Your code ended unexpectedly - something is incomplete."),
        _text("You're likely missing a closing } bracket, ) parenthesis, or quote."),
    ),
    _rule(
        r"SyntaxError: Identifier .* has already been declared",
        _text("You declared the same variable name twice in the same scope."),
        _text("Rename one of the variables or remove the duplicate declaration."),
    ),
    _rule(
        r"SyntaxError: missing \) after argument list",
        _text("A function call is missing its closing parenthesis."),
        _text("Count your opening and closing parentheses - they should match."),
    ),
    _rule(
        r"SyntaxError: Unexpected identifier",
        _text("JavaScript found a word where it wasn't expected."),
        _text("Check for missing operators, commas, or semicolons before this line."),
    ),
)

RANGE_ERROR_RULES: tuple[Rule, ...] = (
    _rule(
        r"RangeError: Maximum call stack size exceeded",
        _text("Your function is calling itself infinitely (infinite recursion)."),
        _text("Add a base case/exit condition to stop the recursion."),
    ),
    _rule(
        r"RangeError: Invalid array length",
        _text("You're trying to create an array with an invalid size."),
        _text("Array length must be a positive integer less than 2^32."),
    ),
)

URI_ERROR_RULES: tuple[Rule, ...] = (
    _rule(
        r"URIError",
        _text("There's an invalid character in a URI/URL."),
        _text("Use encodeURIComponent() to encode special characters in URLs."),
    ),
)

JSON_RULES: tuple[Rule, ...] = (
    _rule(
        r"JSON\.parse|SyntaxError:.*JSON",
        _text("Your JSON data has invalid syntax."),
        _text("Validate your JSON at jsonlint.com. Check for missing quotes, commas, or brackets."),
    ),
)

RULES: dict[Category, tuple[Rule, ...]] = {
    Category.REFERENCE_ERROR: REFERENCE_ERROR_RULES,
    Category.TYPE_ERROR: TYPE_ERROR_RULES,
    Category.SYNTAX_ERROR: SYNTAX_ERROR_RULES,
    Category.RANGE_ERROR: RANGE_ERROR_RULES,
    Category.URI_ERROR: URI_ERROR_RULES,
    Category.JSON: JSON_RULES,
}

# Shown on the help screen, in display order
CATEGORY_DESCRIPTIONS: dict[Category, str] = {
    Category.REFERENCE_ERROR: "Using undefined variables",
    Category.TYPE_ERROR: "Wrong type operations",
    Category.SYNTAX_ERROR: "Code syntax mistakes",
    Category.RANGE_ERROR: "Value out of range",
    Category.URI_ERROR: "Invalid URI encoding",
    Category.JSON: "Malformed JSON data",
}


def rules_for(category: Category) -> tuple[Rule, ...]:
    """Ordered rules for *category*; empty for ``Category.UNKNOWN``."""
    return RULES.get(category, ())
