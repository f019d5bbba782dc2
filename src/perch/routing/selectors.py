"""Property selectors and route template formatting.

A selector names one member of a request type. It can be the name itself,
or a callable that performs exactly one attribute access on its argument::

    "user_id"
    lambda r: r.user_id
    operator.attrgetter("user_id")

Callables are run against a recording proxy rather than a real request,
so anything other than a single member access (method calls, nested
access, arithmetic, constants) is rejected with
``UnsupportedExpressionError``.
"""

import inspect
import string
from collections.abc import Callable
from typing import Any

from perch.errors import RouteFormatError, UnsupportedExpressionError

type Selector = str | Callable[[Any], Any]

_FORMATTER = string.Formatter()


class _MemberAccess:
    """Result of one attribute access on the recorder."""

    __slots__ = ("_member",)

    def __init__(self, member: str) -> None:
        self._member = member

    def __getattr__(self, name: str) -> Any:
        msg = f"Nested member access {self._member}.{name} is not supported."
        raise UnsupportedExpressionError(msg)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        msg = f"Method call {self._member}(...) is not supported."
        raise UnsupportedExpressionError(msg)

    def __bool__(self) -> bool:
        msg = f"Boolean test on {self._member} is not supported."
        raise UnsupportedExpressionError(msg)


class _Recorder:
    """Stand-in request passed to selector callables."""

    __slots__ = ("_accessed", "_request_type")

    def __init__(self, request_type: type | None) -> None:
        self._request_type = request_type
        self._accessed: list[str] = []

    def __getattr__(self, name: str) -> _MemberAccess:
        if self._request_type is not None:
            _check_member(self._request_type, name)
        self._accessed.append(name)
        return _MemberAccess(name)


def member_names(request_type: type) -> frozenset[str]:
    """Data members of *request_type*.

    Annotated fields anywhere in the MRO, plus non-callable class
    attributes and properties. Methods are excluded.
    """
    names: set[str] = set()
    for cls in request_type.__mro__:
        if cls is object:
            continue
        names.update(inspect.get_annotations(cls))
        for name, value in vars(cls).items():
            if name.startswith("__") or isinstance(value, (classmethod, staticmethod)):
                continue
            if isinstance(value, property) or not callable(value):
                names.add(name)
    return frozenset(names)


def _check_member(request_type: type, name: str) -> None:
    if name in member_names(request_type):
        return
    if callable(getattr(request_type, name, None)):
        msg = f"{request_type.__name__}.{name} is a method, not a property."
    else:
        msg = f"{request_type.__name__} has no member named {name!r}."
    raise UnsupportedExpressionError(msg)


def property_name(selector: Selector, request_type: type | None = None) -> str:
    """Resolve *selector* to the member name it selects.

    When *request_type* is given, the name must be one of its data members.

    Raises ``UnsupportedExpressionError`` for anything but a single
    direct member access.
    """
    if isinstance(selector, str):
        if not selector.isidentifier():
            msg = f"{selector!r} is not a member name."
            raise UnsupportedExpressionError(msg)
        if request_type is not None:
            _check_member(request_type, selector)
        return selector

    if not callable(selector):
        msg = f"Selector must be a member name or a callable, got {type(selector).__name__}."
        raise UnsupportedExpressionError(msg)

    recorder = _Recorder(request_type)
    try:
        result = selector(recorder)
    except UnsupportedExpressionError:
        raise
    except Exception as exc:
        msg = f"Selector {selector!r} is not a simple member access: {exc}"
        raise UnsupportedExpressionError(msg) from exc

    if not isinstance(result, _MemberAccess):
        msg = f"Selector {selector!r} must return a member of its argument."
        raise UnsupportedExpressionError(msg)
    if len(recorder._accessed) != 1:
        msg = (
            f"Selector {selector!r} reads {len(recorder._accessed)} members "
            f"({', '.join(recorder._accessed)}); it must read exactly one."
        )
        raise UnsupportedExpressionError(msg)
    return object.__getattribute__(result, "_member")


def format_route(
    url: str,
    *selectors: Selector,
    request_type: type | None = None,
) -> str:
    """Substitute ``{name}`` placeholders for positional markers in *url*.

    ``format_route("api/{0}/{1}", "user_id", "name")`` returns
    ``"api/{user_id}/{name}"``. A format spec becomes the parameter type:
    ``"{0:int}"`` yields ``"{user_id:int}"``. Write literal braces as
    ``{{`` and ``}}``.

    Every selector must be referenced and every marker must have a
    selector, otherwise ``RouteFormatError``.
    """
    names = [property_name(s, request_type) for s in selectors]

    try:
        parsed = list(_FORMATTER.parse(url))
    except ValueError as exc:
        msg = f"Malformed route template {url!r}: {exc}"
        raise RouteFormatError(msg) from exc

    parts: list[str] = []
    used: set[int] = set()
    auto_index = 0
    numbering: str | None = None
    for literal, field, spec, conversion in parsed:
        parts.append(literal)
        if field is None:
            continue
        if conversion:
            msg = f"Conversion !{conversion} is not allowed in route template {url!r}."
            raise RouteFormatError(msg)
        if field == "":
            index = auto_index
            auto_index += 1
            style = "automatic"
        elif field.isdigit():
            index = int(field)
            style = "manual"
        else:
            msg = f"Route template {url!r} uses named field {field!r}; use positional markers."
            raise RouteFormatError(msg)
        if numbering is not None and style != numbering:
            msg = (
                f"Route template {url!r} mixes automatic {{}} and manual {{N}} "
                "field numbering."
            )
            raise RouteFormatError(msg)
        numbering = style
        if index >= len(names):
            msg = (
                f"Route template {url!r} references marker {{{index}}} "
                f"but only {len(names)} selector(s) were supplied."
            )
            raise RouteFormatError(msg)
        used.add(index)
        parts.append(f"{{{names[index]}:{spec}}}" if spec else f"{{{names[index]}}}")

    if len(used) != len(names):
        msg = (
            f"Route template {url!r} has {len(used)} marker(s) "
            f"for {len(names)} selector(s)."
        )
        raise RouteFormatError(msg)
    return "".join(parts)
