"""pathtemplate CLI — resolve paths, build paths, list templates.

Entry point registered as ``pathtemplate`` in ``pyproject.toml``::

    [project.scripts]
    pathtemplate = "pathtemplate.cli:main"
"""

import argparse
import sys


def _add_template_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--template",
        "-t",
        action="append",
        default=[],
        metavar="KEY=PATTERN",
        help="Use a custom template (repeat, most specific first); replaces the defaults",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathtemplate`` command."""
    parser = argparse.ArgumentParser(
        prog="pathtemplate",
        description="pathtemplate — match paths against ordered {placeholder} templates.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathtemplate match -------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a path to a template")
    match_parser.add_argument("path", help="Path to resolve (e.g. /user/42/edit)")
    match_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the match as JSON",
    )
    _add_template_option(match_parser)

    # -- pathtemplate merge -------------------------------------------------
    merge_parser = subparsers.add_parser("merge", help="Build a path from a template")
    merge_parser.add_argument("key", help="Template key (list, show, new, edit, delete)")
    merge_parser.add_argument(
        "values",
        nargs="*",
        metavar="NAME=VALUE",
        help="Placeholder values",
    )
    _add_template_option(merge_parser)

    # -- pathtemplate templates ---------------------------------------------
    templates_parser = subparsers.add_parser(
        "templates", help="List templates in priority order"
    )
    _add_template_option(templates_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from pathtemplate.cli._match import run_match

        run_match(args)
    elif args.command == "merge":
        from pathtemplate.cli._merge import run_merge

        run_merge(args)
    elif args.command == "templates":
        from pathtemplate.cli._templates import run_templates

        run_templates(args)
