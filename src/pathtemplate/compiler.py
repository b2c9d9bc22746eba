"""Template compilation.

A pattern is split on its braces into alternating literal and
placeholder parts::

    "/{prefix}/{id}/edit" -> ["/", "prefix", "/", "id", "/edit"]

Even indices are literals (possibly empty), odd indices are placeholder
names. Literals are matched verbatim; each placeholder becomes a capture
group of one or more variable characters, so it never spans a separator.

Compilation does not validate. Run ``check_template()`` first.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from pathtemplate.chars import VARIABLE_CLASS
from pathtemplate.template import CompiledTemplate, Template, TemplateKey

_BRACES = re.compile(r"[{}]")


@lru_cache(maxsize=512)
def _compile(key: TemplateKey, pattern: str) -> CompiledTemplate:
    names: list[str] = []
    regex: list[str] = []
    for index, part in enumerate(_BRACES.split(pattern)):
        if index % 2 == 0:
            regex.append(re.escape(part))
        else:
            names.append(part)
            regex.append(f"({VARIABLE_CLASS}+)")
    return CompiledTemplate(
        key=key,
        pattern=pattern,
        matcher=re.compile("".join(regex)),
        variable_names=tuple(names),
    )


def compile_template(template: Template) -> CompiledTemplate:
    """Compile one template.

    Results are memoized per ``(key, pattern)``: compiling the same
    template twice returns the same ``CompiledTemplate``.
    """
    return _compile(template.key, template.pattern)


def compile_templates(templates: Iterable[Template]) -> tuple[CompiledTemplate, ...]:
    """Compile *templates*, preserving their order."""
    return tuple(compile_template(template) for template in templates)
