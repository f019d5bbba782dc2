"""Registration shortcuts over ``RouteRegistry.add``.

Both helpers only translate their arguments; validation that fails raises
before the registry is touched.
"""

from perch.routing.router import RouteRegistry
from perch.routing.selectors import Selector, format_route
from perch.verbs import ApplyTo, to_verbs_string


def add_verbs(
    routes: RouteRegistry,
    request_type: type,
    path: str,
    verbs: ApplyTo,
    content_type: str | None = None,
) -> RouteRegistry:
    """Register *path* with the verbs set in *verbs*.

    ``add_verbs(routes, Customer, "customers", ApplyTo.GET | ApplyTo.POST)``
    is ``routes.add(Customer, "customers", "GET POST", None)``.
    """
    return routes.add(request_type, path, to_verbs_string(verbs), content_type)


def add_template(
    routes: RouteRegistry,
    request_type: type,
    http_method: str,
    url: str,
    *selectors: Selector,
) -> RouteRegistry:
    """Register a route whose placeholders are named by property selectors.

    ::

        add_template(routes, Order, "GET", "users/{0}/orders/{1}",
                     lambda o: o.user_id, lambda o: o.order_id)
        # -> routes.add(Order, "users/{user_id}/orders/{order_id}", "GET", None)
    """
    path = format_route(url, *selectors, request_type=request_type)
    return routes.add(request_type, path, http_method, None)
