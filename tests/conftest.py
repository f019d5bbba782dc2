"""Shared fixtures: throwaway service modules registered on sys.modules."""

import sys
import types
from collections.abc import Callable

import pytest

type ModuleFactory = Callable[..., types.ModuleType]


@pytest.fixture
def make_module(monkeypatch: pytest.MonkeyPatch) -> ModuleFactory:
    """Build a module whose classes look as if they were defined in it.

    ``make_module("shop", Customers=Customers, Customer=Customer)`` sets each
    class's ``__module__`` to ``"shop"`` and registers the module so it can
    also be scanned by import string.
    """

    def factory(name: str, /, **members: object) -> types.ModuleType:
        module = types.ModuleType(name)
        for attr, value in members.items():
            if isinstance(value, type):
                value.__module__ = name
            setattr(module, attr, value)
        monkeypatch.setitem(sys.modules, name, module)
        return module

    return factory
