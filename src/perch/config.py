"""Route scanning configuration.

RoutesConfig is a frozen dataclass, immutable after creation and IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """Controls how services are discovered and how their paths are built.

    All fields have sensible defaults. Override what you need::

        config = RoutesConfig(id_field="pk", path_prefix="api/")
    """

    # Member on the request type that triggers the "{name}/{id}" detail route
    id_field: str = "id"

    # Prepended verbatim to the service class name
    path_prefix: str = ""

    # Use a module's __all__ as its export list when present
    respect_all: bool = True

    # Walk packages and scan every submodule
    include_submodules: bool = False
