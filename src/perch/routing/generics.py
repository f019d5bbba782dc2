"""Generic base-class introspection.

``RestServiceBase[Customer]`` is not a class; it is recorded in the
subclass's ``__orig_bases__``. These helpers read those records to answer
"is this a service" and "which request type does it handle".
"""

from typing import Any, TypeVar, get_args, get_origin

from perch.errors import ConfigurationError


def _own_generic_bases(cls: type) -> tuple[Any, ...]:
    # __orig_bases__ is inherited as a plain attribute; only the class's own counts
    return vars(cls).get("__orig_bases__", ())


def is_subclass_of_raw_generic(to_check: Any, generic: type) -> bool:
    """Return True if *to_check* is *generic* or derives from any parameterisation of it.

    Intermediate bases may be generic or not, at any depth::

        class Base(RestServiceBase[Customer]): ...
        class Customers(Base): ...

        is_subclass_of_raw_generic(Customers, RestServiceBase)  # True
        is_subclass_of_raw_generic(int, RestServiceBase)        # False
    """
    if not isinstance(to_check, type):
        return False
    for cls in to_check.__mro__:
        if cls is object:
            break
        if cls is generic:
            return True
        for base in _own_generic_bases(cls):
            if get_origin(base) is generic:
                return True
    return False


def request_type_of(service_type: type, generic: type | None = None) -> type:
    """Return the first type argument of the nearest parameterisation of *generic*.

    Walks from *service_type* towards ``object``; the first class that
    names a parameterised base deriving from *generic* (default
    ``RestServiceBase``) supplies the argument. Other generic bases, such
    as mixins listed before the service base, are ignored.

    Raises ``ConfigurationError`` naming the service when no generic
    ancestor exists or when the argument is still an unbound type variable.
    """
    if generic is None:
        from perch.services import RestServiceBase

        generic = RestServiceBase

    for cls in service_type.__mro__:
        for base in _own_generic_bases(cls):
            if not is_subclass_of_raw_generic(get_origin(base), generic):
                continue
            args = get_args(base)
            if not args:
                continue
            request_type = args[0]
            if isinstance(request_type, TypeVar):
                msg = (
                    f"{service_type.__qualname__} does not bind a request type: "
                    f"{base!r} is still generic."
                )
                raise ConfigurationError(msg)
            return request_type

    msg = (
        f"{service_type.__qualname__} has no generic base class; "
        "services must derive from RestServiceBase[RequestType]."
    )
    raise ConfigurationError(msg)
