"""Trailing extension detection."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SplitPath:
    """A path split into its base and optional extension."""

    base: str
    extension: str | None = None


def extract_extension(path: str) -> SplitPath:
    """Split *path* at its last ``.`` into base and extension.

    A dot at index 0 or at the very end is not an extension delimiter::

        >>> extract_extension("/user/42.xml")
        SplitPath(base='/user/42', extension='xml')
        >>> extract_extension(".42")
        SplitPath(base='.42', extension=None)
        >>> extract_extension("42.")
        SplitPath(base='42.', extension=None)
    """
    dot = path.rfind(".")
    if dot <= 0 or dot == len(path) - 1:
        return SplitPath(base=path)
    return SplitPath(base=path[:dot], extension=path[dot + 1 :])
