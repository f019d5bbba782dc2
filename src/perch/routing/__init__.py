"""Routing: service route table and the helpers that fill it.

Routes are inferred from service classes or registered explicitly during
setup, then frozen before the consuming framework reads them.
"""

from perch.routing.generics import is_subclass_of_raw_generic, request_type_of
from perch.routing.registration import add_template, add_verbs
from perch.routing.route import PathSegment, RestPath
from perch.routing.router import RouteRegistry, ServiceRoutes, parse_path
from perch.routing.scan import add_from_module, exported_types, has_id_field, service_types
from perch.routing.selectors import format_route, property_name

__all__ = [
    "PathSegment",
    "RestPath",
    "RouteRegistry",
    "ServiceRoutes",
    "add_from_module",
    "add_template",
    "add_verbs",
    "exported_types",
    "format_route",
    "has_id_field",
    "is_subclass_of_raw_generic",
    "parse_path",
    "property_name",
    "request_type_of",
    "service_types",
]
