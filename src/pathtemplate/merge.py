"""Template merging: substitute values into a pattern to build a path.

The inverse of matching::

    merge_template("/{prefix}/{id}", {"prefix": "user", "id": "42"})
    # "/user/42"
"""

import re
from collections.abc import Mapping

from pathtemplate.errors import IncompleteMerge, InvalidArgument

_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


def merge_template(pattern: str, values: Mapping[str, str]) -> str:
    """Replace each ``{name}`` in *pattern* with ``values[name]``.

    Substitution is a single pass over *pattern*: braces inside a value
    are copied as-is, never substituted again. Entries in *values* with
    no matching placeholder are ignored. The result is not validated
    against the template grammar.

    Raises ``InvalidArgument`` if *pattern* is empty or *values* is None.
    Raises ``IncompleteMerge`` if any placeholder is left unreplaced.
    """
    if not pattern or values is None:
        msg = "Cannot merge into an empty template or from None values"
        raise InvalidArgument(msg)

    expected = pattern.count("{")
    replaced = sum(1 for name in values if f"{{{name}}}" in pattern)
    if replaced != expected:
        raise IncompleteMerge(pattern=pattern, expected=expected, replaced=replaced)

    def substitute(found: re.Match[str]) -> str:
        name = found.group(1)
        return values[name] if name in values else found.group(0)

    return _PLACEHOLDER_RE.sub(substitute, pattern)
