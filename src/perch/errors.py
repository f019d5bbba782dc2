"""Perch exception hierarchy.

Shared across the registry, the scanner and the registration helpers so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when route configuration is invalid.

    Surfaces at startup while the route table is being built.
    """


class RouteFormatError(ConfigurationError):
    """Path template placeholders do not line up with the supplied selectors."""


class UnsupportedExpressionError(ConfigurationError):
    """A property selector is not a single direct member access."""


@dataclass(frozen=True, slots=True)
class HTTPError(PerchError):
    """An error that maps directly to an HTTP status code.

    Raised by service hooks. The consuming framework translates these
    into responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: the service does not handle this HTTP method.

    Includes an ``Allow`` header listing the valid methods and embeds
    the allowed methods in the detail string for developer visibility.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
