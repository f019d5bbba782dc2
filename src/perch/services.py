"""REST service base class and handler-hook detection.

A service handles exactly one request type and names it through the
generic parameter::

    @dataclass
    class Customer:
        id: int = 0
        name: str = ""

    class Customers(RestServiceBase[Customer]):
        def on_get(self, request: Customer) -> Any: ...
        def on_post(self, request: Customer) -> Any: ...

Overriding a hook is how a service says it supports that verb. A service
can also state its verbs outright with ``allowed_verbs = ApplyTo.GET``.
"""

import logging
from typing import Any, Generic, TypeVar

from perch.errors import MethodNotAllowed
from perch.verbs import (
    DELETE,
    GET,
    HTTP_METHODS,
    PATCH,
    POST,
    PUT,
    ApplyTo,
    parse_verbs,
    to_verbs_string,
)

logger = logging.getLogger("perch.services")

TRequest = TypeVar("TRequest")

# Hook name -> HTTP method, in canonical verb order
HANDLER_HOOKS: dict[str, str] = {
    "on_get": GET,
    "on_post": POST,
    "on_put": PUT,
    "on_delete": DELETE,
    "on_patch": PATCH,
}


class RestServiceBase(Generic[TRequest]):
    """Base for services that handle one request type.

    Every hook rejects the call with ``MethodNotAllowed`` unless the
    subclass overrides it.
    """

    def on_get(self, request: TRequest) -> Any:
        self._reject(GET)

    def on_post(self, request: TRequest) -> Any:
        self._reject(POST)

    def on_put(self, request: TRequest) -> Any:
        self._reject(PUT)

    def on_delete(self, request: TRequest) -> Any:
        self._reject(DELETE)

    def on_patch(self, request: TRequest) -> Any:
        self._reject(PATCH)

    def _reject(self, method: str) -> None:
        allowed = frozenset(supported_verbs(type(self)))
        logger.debug("%s does not handle %s", type(self).__name__, method)
        raise MethodNotAllowed(allowed)


def overridden_verbs(service_type: type) -> tuple[str, ...]:
    """Return the verbs whose hooks are declared on *service_type* itself.

    Only the class's own namespace counts: a hook overridden by an
    intermediate base and inherited here is not reported.
    """
    own = vars(service_type)
    return tuple(method for hook, method in HANDLER_HOOKS.items() if hook in own)


def supported_verbs(service_type: type) -> tuple[str, ...]:
    """Verbs a service supports, in canonical order.

    An ``allowed_verbs`` attribute declared on the class wins over hook
    detection. It may be an ``ApplyTo`` or a verb string.
    """
    declared = vars(service_type).get("allowed_verbs")
    if declared is None:
        return overridden_verbs(service_type)
    if isinstance(declared, ApplyTo):
        declared = to_verbs_string(declared)
    methods = parse_verbs(declared)
    return tuple(method for method in HTTP_METHODS if method in methods)
