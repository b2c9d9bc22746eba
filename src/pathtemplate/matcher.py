"""Path matching against compiled templates in priority order.

The first template that fully matches wins, so a registry lists its
most specific templates first::

    /{prefix}/{id}/edit   before   /{prefix}/{id}   before   /{prefix}

Each template tolerates at most one extra trailing segment after its own
structure. A path that no template matches yields ``None``; only
malformed input raises.
"""

import logging
import re
from collections.abc import Sequence
from functools import lru_cache

from pathtemplate.chars import VARIABLE_CLASS, input_re
from pathtemplate.config import DEFAULT_MAX_INPUT_LENGTH, SEPARATOR
from pathtemplate.errors import InvalidInput
from pathtemplate.extension import extract_extension
from pathtemplate.template import CompiledTemplate, MatchResult

logger = logging.getLogger("pathtemplate.matcher")


@lru_cache(maxsize=512)
def _trial(matcher: re.Pattern[str], separator: str) -> re.Pattern[str]:
    """*matcher* followed by one optional extra segment."""
    extra = f"(?:{re.escape(separator)}{VARIABLE_CLASS}+|$)"
    return re.compile(matcher.pattern + extra)


def check_input(
    path: str | None,
    *,
    separator: str = SEPARATOR,
    max_length: int = DEFAULT_MAX_INPUT_LENGTH,
) -> str:
    """Return *path* if it is acceptable matcher input, else raise ``InvalidInput``."""
    if not path:
        raise InvalidInput(path, "input cannot be None or empty")
    if len(path) > max_length:
        raise InvalidInput(path, f"input is longer than {max_length} characters")
    if input_re(separator).fullmatch(path) is None:
        raise InvalidInput(
            path,
            f"input can only contain letters, digits, {separator!r} and _ - . = : ;",
        )
    return path


def match_path(
    path: str | None,
    templates: Sequence[CompiledTemplate] | None = None,
    *,
    separator: str = SEPARATOR,
    max_length: int = DEFAULT_MAX_INPUT_LENGTH,
) -> MatchResult | None:
    """Match *path* against *templates*, returning the first full match.

    *templates* defaults to the compiled default registry. The path's
    extension (see ``extract_extension``) is stripped before matching and
    reported on the result.

    Returns ``None`` if no template matches.
    Raises ``InvalidInput`` if *path* is empty, too long, or contains
    disallowed characters.
    """
    if templates is None:
        from pathtemplate.registry import default_registry

        templates = default_registry().templates

    path = check_input(path, separator=separator, max_length=max_length)
    split = extract_extension(path)

    for compiled in templates:
        trial = _trial(compiled.matcher, separator)
        if trial.groups != len(compiled.variable_names):
            continue
        found = trial.fullmatch(split.base)
        if found is None:
            continue
        bindings = {
            name: value
            for name, value in zip(compiled.variable_names, found.groups(), strict=True)
            if value is not None
        }
        return MatchResult(template=compiled, bindings=bindings, extension=split.extension)

    logger.debug("No template matches %r", path)
    return None
