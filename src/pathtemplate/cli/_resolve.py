"""Registry resolution — builds a registry from ``--template KEY=PATTERN`` options.

Shared by every subcommand. With no options the default registry is used.
"""

import argparse
import sys

from pathtemplate.errors import PathTemplateError
from pathtemplate.registry import TemplateRegistry, default_registry


def parse_assignment(text: str) -> tuple[str, str]:
    """Split ``"name=value"`` at its first ``=``.

    Raises ``ValueError`` if there is no ``=`` or the name is empty.
    """
    name, sep, value = text.partition("=")
    if not sep or not name:
        msg = f"expected NAME=VALUE, got {text!r}"
        raise ValueError(msg)
    return name, value


def resolve_registry(args: argparse.Namespace) -> TemplateRegistry:
    """Return the registry selected by ``args.template``.

    Prints the problem and exits with status 2 on a malformed option or
    an invalid template.
    """
    if not args.template:
        return default_registry()
    try:
        return TemplateRegistry.from_pairs(parse_assignment(t) for t in args.template)
    except (ValueError, PathTemplateError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
