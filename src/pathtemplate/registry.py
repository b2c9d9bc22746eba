"""Template registries — ordered, validated, compiled template sets.

A registry is built once and never mutated. Its order is its match
priority. Build as many as you need; nothing is global except the
cached default::

    registry = TemplateRegistry.from_pairs([
        ("edit", "/{prefix}/{id}/edit"),
        ("show", "/{prefix}/{id}"),
    ])
    match = registry.match("/user/42/edit")
    if match is None:
        ...  # not found
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import cache

from pathtemplate.compiler import compile_templates
from pathtemplate.config import SEPARATOR, TemplateConfig
from pathtemplate.errors import ConfigurationError, InvalidTemplateKey
from pathtemplate.matcher import match_path
from pathtemplate.merge import merge_template
from pathtemplate.template import CompiledTemplate, MatchResult, Template, TemplateKey
from pathtemplate.validation import check_template

logger = logging.getLogger("pathtemplate.registry")

PREFIX = "prefix"
ID = "id"

# Most specific first: the first template to match wins.
DEFAULT_TEMPLATES: tuple[Template, ...] = (
    Template(TemplateKey.EDIT, f"{SEPARATOR}{{{PREFIX}}}{SEPARATOR}{{{ID}}}{SEPARATOR}edit"),
    Template(TemplateKey.DELETE, f"{SEPARATOR}{{{PREFIX}}}{SEPARATOR}{{{ID}}}{SEPARATOR}delete"),
    Template(TemplateKey.NEW, f"{SEPARATOR}{{{PREFIX}}}{SEPARATOR}new"),
    Template(TemplateKey.SHOW, f"{SEPARATOR}{{{PREFIX}}}{SEPARATOR}{{{ID}}}"),
    Template(TemplateKey.LIST, f"{SEPARATOR}{{{PREFIX}}}"),
)


def check_template_key(key: TemplateKey | str) -> TemplateKey:
    """Coerce *key* to a ``TemplateKey``.

    Accepts a member, its value (``"edit"``) or its name (``"EDIT"``).

    Raises ``InvalidTemplateKey`` for anything else.
    """
    if isinstance(key, TemplateKey):
        return key
    try:
        return TemplateKey(key)
    except ValueError:
        pass
    try:
        return TemplateKey[key]  # type: ignore[misc]
    except (KeyError, TypeError):
        raise InvalidTemplateKey(key) from None


def get_default_template(key: TemplateKey | str) -> str:
    """Return the default pattern for *key*."""
    key = check_template_key(key)
    for template in DEFAULT_TEMPLATES:
        if template.key is key:
            return template.pattern
    raise InvalidTemplateKey(key)


class TemplateRegistry:
    """An immutable, ordered set of compiled templates.

    Every pattern is validated and compiled in ``__init__``; a bad
    template raises ``InvalidTemplate`` there rather than at match time.
    """

    __slots__ = ("_by_key", "_config", "_templates")

    def __init__(
        self,
        templates: Iterable[Template] | None = None,
        config: TemplateConfig | None = None,
    ) -> None:
        self._config = config or TemplateConfig()
        templates = tuple(DEFAULT_TEMPLATES if templates is None else templates)
        if not templates:
            msg = "A template registry needs at least one template."
            raise ConfigurationError(msg)

        seen: set[TemplateKey] = set()
        for template in templates:
            if template.key in seen:
                msg = f"Template key {template.key.value!r} is registered twice."
                raise ConfigurationError(msg)
            check_template(template.pattern, separator=self._config.separator)
            seen.add(template.key)

        self._templates = compile_templates(templates)
        self._by_key = {compiled.key: compiled for compiled in self._templates}
        logger.debug(
            "Built template registry: %s",
            ", ".join(compiled.key.value for compiled in self._templates),
        )

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[TemplateKey | str, str]],
        config: TemplateConfig | None = None,
    ) -> TemplateRegistry:
        """Build a registry from ``(key, pattern)`` pairs, in priority order."""
        return cls(
            (Template(check_template_key(key), pattern) for key, pattern in pairs),
            config=config,
        )

    @property
    def config(self) -> TemplateConfig:
        return self._config

    @property
    def templates(self) -> tuple[CompiledTemplate, ...]:
        """Compiled templates in priority order."""
        return self._templates

    @property
    def keys(self) -> tuple[TemplateKey, ...]:
        return tuple(compiled.key for compiled in self._templates)

    def __iter__(self) -> Iterator[CompiledTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, key: object) -> bool:
        try:
            return check_template_key(key) in self._by_key  # type: ignore[arg-type]
        except InvalidTemplateKey:
            return False

    def __repr__(self) -> str:
        patterns = ", ".join(f"{c.key.value}={c.pattern}" for c in self._templates)
        return f"TemplateRegistry({patterns})"

    def get(self, key: TemplateKey | str) -> CompiledTemplate:
        """Return the compiled template registered under *key*.

        Raises ``InvalidTemplateKey`` if *key* is unknown or not registered.
        """
        key = check_template_key(key)
        try:
            return self._by_key[key]
        except KeyError:
            raise InvalidTemplateKey(key) from None

    def match(self, path: str | None) -> MatchResult | None:
        """Match *path* against this registry. ``None`` means unresolved."""
        return match_path(
            path,
            self._templates,
            separator=self._config.separator,
            max_length=self._config.max_input_length,
        )

    def merge(self, key: TemplateKey | str, values: Mapping[str, str]) -> str:
        """Build a path from the template under *key* and *values*."""
        return merge_template(self.get(key).pattern, values)


@cache
def default_registry() -> TemplateRegistry:
    """Return the registry of the five default templates.

    Built on first use and shared afterwards; it is immutable.
    """
    return TemplateRegistry(DEFAULT_TEMPLATES)
