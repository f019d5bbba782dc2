"""Perch: convention-based REST route registration.

Derives a route table from service classes: each service handles one
request type, and the handler hooks it overrides decide its verbs.

Basic usage::

    from dataclasses import dataclass

    from perch import RestServiceBase, ServiceRoutes, add_from_module

    @dataclass
    class Customer:
        id: int = 0
        name: str = ""

    class Customers(RestServiceBase[Customer]):
        def on_get(self, request):
            ...

    routes = add_from_module(ServiceRoutes(), "myapp.services")
    # Customers           GET -> Customer
    # Customers/{id}      GET -> Customer

Explicit registration::

    from perch import ApplyTo, add_template, add_verbs

    add_verbs(routes, Customer, "customers", ApplyTo.GET | ApplyTo.POST)
    add_template(routes, Customer, "GET", "shops/{0}/customers", lambda c: c.shop_id)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ApplyTo",
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "PerchError",
    "RestPath",
    "RestServiceBase",
    "RouteFormatError",
    "RouteRegistry",
    "RoutesConfig",
    "ServiceRoutes",
    "UnsupportedExpressionError",
    "add_from_module",
    "add_template",
    "add_verbs",
    "format_route",
    "is_subclass_of_raw_generic",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "ApplyTo":
        from perch.verbs import ApplyTo

        return ApplyTo

    if name == "RoutesConfig":
        from perch.config import RoutesConfig

        return RoutesConfig

    if name == "RestServiceBase":
        from perch.services import RestServiceBase

        return RestServiceBase

    if name in (
        "RestPath",
        "RouteRegistry",
        "ServiceRoutes",
        "add_from_module",
        "add_template",
        "add_verbs",
        "format_route",
        "is_subclass_of_raw_generic",
    ):
        from perch import routing as _routing

        return getattr(_routing, name)

    if name in (
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "PerchError",
        "RouteFormatError",
        "UnsupportedExpressionError",
    ):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
