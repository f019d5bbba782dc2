"""``perch routes``: list inferred routes.

Scans the given modules into a fresh ``ServiceRoutes`` table and prints
every entry with its verbs, path, and request type.
"""

import argparse
import sys

from perch.config import RoutesConfig
from perch.errors import ConfigurationError
from perch.routing.router import ServiceRoutes
from perch.routing.scan import add_from_module


def build_config(args: argparse.Namespace) -> RoutesConfig:
    """Translate CLI flags into a ``RoutesConfig``, keeping defaults for unset flags."""
    overrides: dict[str, object] = {}
    if args.id_field is not None:
        overrides["id_field"] = args.id_field
    if args.prefix is not None:
        overrides["path_prefix"] = args.prefix
    if args.recursive:
        overrides["include_submodules"] = True
    if args.ignore_all:
        overrides["respect_all"] = False
    return RoutesConfig(**overrides)  # type: ignore[arg-type]


def run_routes(args: argparse.Namespace) -> None:
    """Scan ``args.modules`` and print a table of VERBS, PATH, and REQUEST."""
    routes = ServiceRoutes()
    try:
        add_from_module(routes, *args.modules, config=build_config(args))
    except (ImportError, SyntaxError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes registered.")
        return

    # Build rows: (verbs, path, request type)
    rows: list[tuple[str, str, str]] = [
        (r.verbs or "ANY", r.path, r.request_type.__qualname__) for r in routes
    ]

    # Column widths
    max_verbs = max(max(len(r[0]) for r in rows), 5)  # "VERBS" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_verbs}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("VERBS", "PATH", "REQUEST"))
    sep_len = max_verbs + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for verbs, path, request in rows:
        print(fmt.format(verbs, path, request))
