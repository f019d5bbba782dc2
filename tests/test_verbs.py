"""Tests for perch.verbs: ApplyTo flags and verb strings."""

import itertools

import pytest

from perch.errors import ConfigurationError
from perch.verbs import ApplyTo, parse_verbs, to_verbs_string

_SINGLE = [ApplyTo.GET, ApplyTo.POST, ApplyTo.PUT, ApplyTo.DELETE, ApplyTo.PATCH]
_CANONICAL = ["GET", "POST", "PUT", "DELETE", "PATCH"]


class TestToVerbsString:
    def test_single(self) -> None:
        assert to_verbs_string(ApplyTo.GET) == "GET"
        assert to_verbs_string(ApplyTo.PATCH) == "PATCH"

    def test_pair(self) -> None:
        assert to_verbs_string(ApplyTo.GET | ApplyTo.POST) == "GET POST"

    def test_order_independent_of_combination_order(self) -> None:
        assert to_verbs_string(ApplyTo.PATCH | ApplyTo.GET | ApplyTo.DELETE) == "GET DELETE PATCH"

    def test_empty(self) -> None:
        assert to_verbs_string(ApplyTo.NONE) == ""

    def test_all(self) -> None:
        assert to_verbs_string(ApplyTo.ALL) == "GET POST PUT DELETE PATCH"

    def test_every_combination_is_canonical(self) -> None:
        for size in range(1, len(_SINGLE) + 1):
            for combo in itertools.permutations(_SINGLE, size):
                flags = ApplyTo.NONE
                for flag in combo:
                    flags |= flag
                rendered = to_verbs_string(flags).split(" ")
                assert rendered == [m for m in _CANONICAL if m in rendered]
                assert len(rendered) == size

    def test_method_form(self) -> None:
        assert (ApplyTo.PUT | ApplyTo.POST).to_verbs_string() == "POST PUT"


class TestParseVerbs:
    def test_none_means_any(self) -> None:
        assert parse_verbs(None) == ()

    def test_empty_means_any(self) -> None:
        assert parse_verbs("") == ()

    def test_space_separated(self) -> None:
        assert parse_verbs("GET POST") == ("GET", "POST")

    def test_comma_separated(self) -> None:
        assert parse_verbs("get, put") == ("GET", "PUT")

    def test_keeps_given_order(self) -> None:
        assert parse_verbs("DELETE GET") == ("DELETE", "GET")

    def test_drops_duplicates(self) -> None:
        assert parse_verbs("GET get") == ("GET",)

    def test_head_and_options(self) -> None:
        assert parse_verbs("HEAD OPTIONS") == ("HEAD", "OPTIONS")

    def test_unknown_method(self) -> None:
        with pytest.raises(ConfigurationError, match="FETCH"):
            parse_verbs("GET FETCH")
