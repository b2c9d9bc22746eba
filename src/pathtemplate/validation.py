"""Template validation.

Checks run in a fixed order and stop at the first violation::

    result = validate_template("/{prefix}/{id}")
    if not result:
        print(result.rule.message)

``check_template()`` is the raising variant used while building registries.
"""

import re
from dataclasses import dataclass
from enum import Enum

from pathtemplate.chars import template_re
from pathtemplate.config import SEPARATOR
from pathtemplate.errors import InvalidTemplate


class Rule(Enum):
    """A structural rule a template pattern can violate."""

    EMPTY = "empty"
    MISSING_LEADING_SEPARATOR = "missing_leading_separator"
    TRAILING_SEPARATOR = "trailing_separator"
    ADJACENT_PLACEHOLDERS = "adjacent_placeholders"
    EMPTY_PLACEHOLDER = "empty_placeholder"
    INVALID_CHARACTERS = "invalid_characters"
    UNBALANCED_BRACES = "unbalanced_braces"
    DUPLICATE_PLACEHOLDER = "duplicate_placeholder"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[Rule, str] = {
    Rule.EMPTY: "template cannot be None or empty",
    Rule.MISSING_LEADING_SEPARATOR: "template must start with the separator",
    Rule.TRAILING_SEPARATOR: "template cannot end with the separator",
    Rule.ADJACENT_PLACEHOLDERS: (
        "placeholders ({var}) cannot be next to each other, "
        "there must be something between them"
    ),
    Rule.EMPTY_PLACEHOLDER: "placeholders cannot be empty ({})",
    Rule.INVALID_CHARACTERS: (
        "template can only contain letters, digits, the separator, "
        "braces and _ - . = : ;"
    ),
    Rule.UNBALANCED_BRACES: "braces must open and close in pairs without nesting",
    Rule.DUPLICATE_PLACEHOLDER: "a placeholder name can appear only once",
}

_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating one template pattern.

    Falsy when invalid; ``rule`` is the first violated rule.
    """

    pattern: str | None
    rule: Rule | None = None

    @property
    def is_valid(self) -> bool:
        return self.rule is None

    def __bool__(self) -> bool:
        return self.is_valid


def placeholder_names(pattern: str) -> list[str]:
    """Return the placeholder names of *pattern* in order of appearance."""
    return _PLACEHOLDER_RE.findall(pattern)


def _balanced(pattern: str) -> bool:
    depth = 0
    for char in pattern:
        if char == "{":
            if depth:
                return False
            depth = 1
        elif char == "}":
            if not depth:
                return False
            depth = 0
    return depth == 0


def _first_violation(pattern: str | None, separator: str) -> Rule | None:
    if not pattern:
        return Rule.EMPTY
    if pattern[0] != separator:
        return Rule.MISSING_LEADING_SEPARATOR
    if pattern[-1] == separator:
        return Rule.TRAILING_SEPARATOR
    if "}{" in pattern:
        return Rule.ADJACENT_PLACEHOLDERS
    if "{}" in pattern:
        return Rule.EMPTY_PLACEHOLDER
    if template_re(separator).fullmatch(pattern) is None:
        return Rule.INVALID_CHARACTERS
    if not _balanced(pattern):
        return Rule.UNBALANCED_BRACES
    names = placeholder_names(pattern)
    if len(set(names)) != len(names):
        return Rule.DUPLICATE_PLACEHOLDER
    return None


def validate_template(pattern: str | None, *, separator: str = SEPARATOR) -> ValidationResult:
    """Validate *pattern*, returning a result that names the first broken rule.

    Checks, in order: empty, leading separator, trailing separator,
    adjacent placeholders (``}{``), empty placeholders (``{}``), allowed
    characters, balanced braces, and unique placeholder names.
    """
    return ValidationResult(pattern=pattern, rule=_first_violation(pattern, separator))


def check_template(pattern: str | None, *, separator: str = SEPARATOR) -> str:
    """Validate *pattern* and return it unchanged.

    Raises ``InvalidTemplate`` carrying the violated rule.
    """
    result = validate_template(pattern, separator=separator)
    if result.rule is not None:
        raise InvalidTemplate(pattern=pattern, rule=result.rule)
    return pattern  # type: ignore[return-value]
