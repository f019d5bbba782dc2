"""Perch CLI: inspect the routes inferred from service modules.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch: convention-based REST route registration.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes inferred from modules")
    routes_parser.add_argument(
        "modules",
        nargs="+",
        help="Dotted module paths to scan (e.g. myapp.services)",
    )
    routes_parser.add_argument(
        "--id-field",
        default=None,
        help="Identifier member that adds a detail route (default: id)",
    )
    routes_parser.add_argument("--prefix", default=None, help="Prefix for every service path")
    routes_parser.add_argument(
        "--recursive",
        action="store_true",
        help="Scan submodules of packages too",
    )
    routes_parser.add_argument(
        "--ignore-all",
        action="store_true",
        help="Treat every public class as exported, even when __all__ is set",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from perch.cli._routes import run_routes

        run_routes(args)
