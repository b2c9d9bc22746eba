"""Template, CompiledTemplate and MatchResult frozen dataclasses."""

import re
from dataclasses import dataclass
from enum import Enum


class TemplateKey(Enum):
    """The logical operation a template represents."""

    LIST = "list"
    SHOW = "show"
    NEW = "new"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class Template:
    """A template definition: a key and its pattern.

    ``pattern`` interleaves literal runs with ``{name}`` placeholders,
    e.g. ``/{prefix}/{id}/edit``.
    """

    key: TemplateKey
    pattern: str


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """A template compiled into a matcher.

    ``variable_names[i]`` names the i-th capture group of ``matcher``,
    in left-to-right order of appearance in ``pattern``.
    """

    key: TemplateKey
    pattern: str
    matcher: re.Pattern[str]
    variable_names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a successful path match.

    Created fresh per match call; ``bindings`` belongs to the caller.
    """

    template: CompiledTemplate
    bindings: dict[str, str]
    extension: str | None = None

    @property
    def key(self) -> TemplateKey:
        return self.template.key

    @property
    def pattern(self) -> str:
        return self.template.pattern

    @property
    def matcher(self) -> re.Pattern[str]:
        return self.template.matcher

    @property
    def variable_names(self) -> tuple[str, ...]:
        return self.template.variable_names
