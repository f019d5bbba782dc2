"""Service route table.

Routes are registered during setup and frozen before the consuming
framework reads them. The helpers in ``perch.routing`` talk to any
object that satisfies ``RouteRegistry``; ``ServiceRoutes`` is the
in-process implementation.
"""

import logging
from collections.abc import Iterator
from typing import Protocol, Self

from perch.errors import ConfigurationError
from perch.routing.route import PathSegment, RestPath
from perch.verbs import parse_verbs

logger = logging.getLogger("perch.routing")

# Types a placeholder may declare, as in {id:int}
PARAM_TYPES = frozenset({"str", "int", "float", "path"})


class RouteRegistry(Protocol):
    """Anything that accepts route registrations.

    ``add`` returns the registry so calls can be chained.
    """

    def add(
        self,
        request_type: type,
        path: str,
        verbs: str | None = None,
        content_type: str | None = None,
    ) -> Self: ...


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "users"          -> [PathSegment("users")]
        "users/{id}"     -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "users/{id:int}" -> [PathSegment("users"), PathSegment("{id:int}", ..., param_type="int")]

    Raises ``ConfigurationError`` for ``<param>`` placeholders, unknown
    parameter types and stray braces.
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route path {path!r} uses <param> placeholders; "
                "use {param} instead."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if not param_name.isidentifier():
                msg = f"Invalid parameter name {param_name!r} in route path {path!r}."
                raise ConfigurationError(msg)
            if param_type not in PARAM_TYPES:
                msg = f"Unknown parameter type {param_type!r} in route path {path!r}."
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        elif "{" in part or "}" in part:
            msg = f"Unbalanced placeholder {part!r} in route path {path!r}."
            raise ConfigurationError(msg)
        else:
            segments.append(PathSegment(value=part))
    return segments


class ServiceRoutes:
    """Ordered table of ``RestPath`` entries.

    Usage::

        routes = ServiceRoutes()
        routes.add(Customer, "customers", "GET POST").add(Customer, "customers/{id}", "GET")
        routes.freeze()
        for rest_path in routes:
            ...
    """

    __slots__ = ("_frozen", "_routes")

    def __init__(self) -> None:
        self._routes: list[RestPath] = []
        self._frozen = False

    def add(
        self,
        request_type: type,
        path: str,
        verbs: str | None = None,
        content_type: str | None = None,
    ) -> Self:
        """Register a route. Must be called before freeze().

        *verbs* is a space- or comma-separated method list; ``None`` or
        ``""`` accepts any verb.
        """
        if self._frozen:
            msg = "Cannot add routes after the table is frozen."
            raise RuntimeError(msg)

        parse_path(path)
        methods = parse_verbs(verbs)
        rest_path = RestPath(
            request_type=request_type,
            path=path,
            verbs=" ".join(methods) or None,
            content_type=content_type,
        )
        self._routes.append(rest_path)
        logger.debug(
            "Registered %s %s -> %s",
            rest_path.verbs or "ANY",
            path,
            request_type.__name__,
        )
        return self

    @property
    def routes(self) -> list[RestPath]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def for_request_type(self, request_type: type) -> list[RestPath]:
        """Routes registered for *request_type*."""
        return [r for r in self._routes if r.request_type is request_type]

    def freeze(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[RestPath]:
        return iter(self._routes)
