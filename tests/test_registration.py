"""Tests for perch.routing.registration: flag and selector shortcuts."""

from dataclasses import dataclass

import pytest

from perch.errors import RouteFormatError, UnsupportedExpressionError
from perch.routing.registration import add_template, add_verbs
from perch.routing.route import RestPath
from perch.routing.router import ServiceRoutes
from perch.verbs import ApplyTo


@dataclass
class UserOrder:
    user_id: int = 0
    name: str = ""

    def total(self) -> int:
        return 0


class TestAddVerbs:
    def test_flags_become_canonical_string(self) -> None:
        routes = ServiceRoutes()
        add_verbs(routes, UserOrder, "orders", ApplyTo.POST | ApplyTo.GET)
        assert routes.routes == [RestPath(UserOrder, "orders", "GET POST", None)]

    def test_content_type(self) -> None:
        routes = ServiceRoutes()
        add_verbs(routes, UserOrder, "orders", ApplyTo.PUT, "application/json")
        assert routes.routes[0].content_type == "application/json"

    def test_returns_registry(self) -> None:
        routes = ServiceRoutes()
        assert add_verbs(routes, UserOrder, "orders", ApplyTo.GET) is routes

    def test_delegates_empty_string_for_none(self) -> None:
        calls: list[tuple[object, ...]] = []

        class Recorder:
            def add(self, request_type, path, verbs=None, content_type=None):  # type: ignore[no-untyped-def]
                calls.append((request_type, path, verbs, content_type))
                return self

        add_verbs(Recorder(), UserOrder, "orders", ApplyTo.NONE)
        assert calls == [(UserOrder, "orders", "", None)]


class TestAddTemplate:
    def test_builds_path_from_selectors(self) -> None:
        routes = ServiceRoutes()
        add_template(
            routes,
            UserOrder,
            "GET",
            "api/{0}/{1}",
            lambda x: x.user_id,
            lambda x: x.name,
        )
        assert routes.routes == [RestPath(UserOrder, "api/{user_id}/{name}", "GET", None)]

    def test_string_selectors(self) -> None:
        routes = ServiceRoutes()
        add_template(routes, UserOrder, "DELETE", "users/{0}", "user_id")
        assert routes.routes[0].path == "users/{user_id}"
        assert routes.routes[0].verbs == "DELETE"

    def test_method_call_adds_nothing(self) -> None:
        routes = ServiceRoutes()
        with pytest.raises(UnsupportedExpressionError):
            add_template(routes, UserOrder, "GET", "api/{0}", lambda x: x.total())
        assert len(routes) == 0

    def test_marker_mismatch_adds_nothing(self) -> None:
        routes = ServiceRoutes()
        with pytest.raises(RouteFormatError):
            add_template(routes, UserOrder, "GET", "api/{0}/{1}", lambda x: x.user_id)
        assert len(routes) == 0
