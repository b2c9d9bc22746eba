"""pathtemplate exception hierarchy.

Shared across the validator, compiler, matcher, merger and registry so
every module raises and catches the same types.

An unresolved path is not an error: matching returns ``None``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathtemplate.validation import Rule


class PathTemplateError(Exception):
    """Base for all pathtemplate errors."""


class ConfigurationError(PathTemplateError):
    """Raised when a config or registry definition is invalid.

    Typically raised while building a ``TemplateRegistry`` at startup.
    """


class InvalidTemplate(PathTemplateError, ValueError):
    """A template pattern failed validation.

    ``rule`` names the first violated check.
    """

    def __init__(self, pattern: str | None, rule: Rule) -> None:
        super().__init__(pattern, rule)
        self.pattern = pattern
        self.rule = rule

    def __str__(self) -> str:
        return f"Invalid template {self.pattern!r}: {self.rule.message}"


class InvalidTemplateKey(PathTemplateError, KeyError):
    """A template key is not one of the registered keys."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Invalid template key: {self.key!r}"


class InvalidArgument(PathTemplateError, ValueError):
    """An argument was missing or empty."""


class InvalidInput(InvalidArgument):
    """The path handed to the matcher is empty, too long, or uses disallowed characters."""

    def __init__(self, path: str | None, reason: str) -> None:
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid input {self.path!r}: {self.reason}"


class IncompleteMerge(PathTemplateError, ValueError):
    """Merging left placeholders in the template unreplaced."""

    def __init__(self, pattern: str, expected: int, replaced: int) -> None:
        super().__init__(pattern, expected, replaced)
        self.pattern = pattern
        self.expected = expected
        self.replaced = replaced

    def __str__(self) -> str:
        return (
            f"Failed merge of {self.pattern!r}: could not replace all "
            f"variables ({self.expected}), only replaced {self.replaced}"
        )
