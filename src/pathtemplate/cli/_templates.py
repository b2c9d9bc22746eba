"""``pathtemplate templates`` — list templates in priority order."""

import argparse

from pathtemplate.cli._resolve import resolve_registry


def run_templates(args: argparse.Namespace) -> None:
    """Print a table of PRIORITY, KEY, PATTERN and VARIABLES."""
    registry = resolve_registry(args)

    rows: list[tuple[str, str, str, str]] = [
        (str(index), compiled.key.value, compiled.pattern, ", ".join(compiled.variable_names))
        for index, compiled in enumerate(registry, start=1)
    ]

    max_key = max(max(len(r[1]) for r in rows), 3)  # "KEY" header
    max_pattern = max(max(len(r[2]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<8}}  {{:<{max_key}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("PRIORITY", "KEY", "PATTERN", "VARIABLES"))
    sep_len = 8 + max_key + max_pattern + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
