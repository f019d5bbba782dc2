"""RestPath and PathSegment frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``users``  (is_param=False)
    Param:   ``{id}``   (is_param=True, param_name="id")
    Typed:   ``{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class RestPath:
    """A registered route: request type, path template, verbs, content type.

    ``verbs`` is the canonical space-joined verb string. ``None`` means
    the route accepts any verb.
    """

    request_type: type
    path: str
    verbs: str | None = None
    content_type: str | None = None

    @property
    def methods(self) -> frozenset[str]:
        """The verbs as a set. Empty when any verb is accepted."""
        if not self.verbs:
            return frozenset()
        return frozenset(self.verbs.split(" "))

    @property
    def allows_any_verb(self) -> bool:
        return not self.verbs

    @property
    def param_names(self) -> tuple[str, ...]:
        """Placeholder names in template order."""
        from perch.routing.router import parse_path

        return tuple(seg.param_name for seg in parse_path(self.path) if seg.param_name)
