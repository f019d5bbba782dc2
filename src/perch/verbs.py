"""HTTP method names and the ``ApplyTo`` verb flags.

Verb lists travel through the route table as a single space-joined string
(``"GET POST"``). The order is always GET, POST, PUT, DELETE, PATCH, no
matter how the flags were combined, so consumers can parse it reliably.
"""

import re
from enum import Flag

from perch.errors import ConfigurationError

GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"
PATCH = "PATCH"
HEAD = "HEAD"
OPTIONS = "OPTIONS"

# Every method a route may name; canonical ordering for the first five
HTTP_METHODS: tuple[str, ...] = (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS)

_SEPARATOR_RE = re.compile(r"[\s,]+")


class ApplyTo(Flag):
    """Bit-set of the REST verbs a route accepts.

    Combine members with ``|``::

        ApplyTo.GET | ApplyTo.POST
    """

    NONE = 0
    GET = 1
    POST = 2
    PUT = 4
    DELETE = 8
    PATCH = 16
    ALL = GET | POST | PUT | DELETE | PATCH

    def to_verbs_string(self) -> str:
        return to_verbs_string(self)


# (flag, method) pairs in canonical order
_FLAG_METHODS: tuple[tuple[ApplyTo, str], ...] = (
    (ApplyTo.GET, GET),
    (ApplyTo.POST, POST),
    (ApplyTo.PUT, PUT),
    (ApplyTo.DELETE, DELETE),
    (ApplyTo.PATCH, PATCH),
)


def to_verbs_string(verbs: ApplyTo) -> str:
    """Render *verbs* as the canonical space-joined verb list.

    ``ApplyTo.NONE`` renders as an empty string.
    """
    return " ".join(method for flag, method in _FLAG_METHODS if flag in verbs)


def parse_verbs(verbs: str | None) -> tuple[str, ...]:
    """Split a verb string into upper-cased method names.

    Accepts whitespace and/or comma separators. ``None`` and the empty
    string both mean "any verb" and return ``()``.

    Raises ``ConfigurationError`` for names that are not HTTP methods.
    """
    if not verbs:
        return ()
    methods: list[str] = []
    for token in _SEPARATOR_RE.split(verbs.strip()):
        if not token:
            continue
        method = token.upper()
        if method not in HTTP_METHODS:
            msg = f"Unknown HTTP method {token!r} in verb list {verbs!r}."
            raise ConfigurationError(msg)
        if method not in methods:
            methods.append(method)
    return tuple(methods)
