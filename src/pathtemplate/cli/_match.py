"""``pathtemplate match`` — resolve a path to a template.

Prints the matching key, bindings and extension. Exits with code 1
when no template matches and 2 when the path is not valid input.
"""

import argparse
import json
import sys

from pathtemplate.cli._resolve import resolve_registry
from pathtemplate.errors import InvalidInput


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.path`` against the selected registry."""
    registry = resolve_registry(args)
    try:
        match = registry.match(args.path)
    except InvalidInput as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    if match is None:
        print(f"No template matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    if args.json:
        payload = {
            "key": match.key.value,
            "pattern": match.pattern,
            "bindings": match.bindings,
            "extension": match.extension,
        }
        print(json.dumps(payload, sort_keys=True))
        return

    print(f"key:        {match.key.value}")
    print(f"pattern:    {match.pattern}")
    for name in match.variable_names:
        if name in match.bindings:
            print(f"{name + ':':<12}{match.bindings[name]}")
    print(f"extension:  {match.extension or '-'}")
