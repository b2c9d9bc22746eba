"""Character classes for placeholders, inputs and templates.

All classes are ASCII-only: letters, digits and ``_ - . = : ;``.
Non-ASCII letters are rejected everywhere, never silently accepted.
"""

import re
import string
from functools import cache

# Characters a placeholder value may contain (never the separator)
VARIABLE_CHARS = frozenset(string.ascii_letters + string.digits + "_-.=:;")

VARIABLE_CLASS = r"[A-Za-z0-9_\-.=:;]"


@cache
def input_class(separator: str) -> str:
    """Regex class for a path to be matched: variable chars plus *separator*."""
    return rf"[A-Za-z0-9_\-.=:;{re.escape(separator)}]"


@cache
def template_class(separator: str) -> str:
    """Regex class for a template: input chars plus the braces."""
    return rf"[A-Za-z0-9_\-.=:;{re.escape(separator)}{{}}]"


@cache
def input_re(separator: str) -> re.Pattern[str]:
    """Compiled full-string check for matcher input."""
    return re.compile(f"{input_class(separator)}+")


@cache
def template_re(separator: str) -> re.Pattern[str]:
    """Compiled full-string check for template patterns."""
    return re.compile(f"{template_class(separator)}+")
