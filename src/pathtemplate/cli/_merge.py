"""``pathtemplate merge`` — build a path from a template and values."""

import argparse
import sys

from pathtemplate.cli._resolve import parse_assignment, resolve_registry
from pathtemplate.errors import IncompleteMerge, InvalidTemplateKey


def run_merge(args: argparse.Namespace) -> None:
    """Merge ``args.values`` into the template registered under ``args.key``.

    Exits with code 2 on a bad value, an unknown key or an incomplete merge.
    """
    registry = resolve_registry(args)
    try:
        values = dict(parse_assignment(v) for v in args.values)
        path = registry.merge(args.key, values)
    except (ValueError, InvalidTemplateKey, IncompleteMerge) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    print(path)
