"""Convention-based route inference from service modules.

Every public ``RestServiceBase`` subclass in the scanned modules gets a
collection route named after the class and, when its request type has an
identifier member, a detail route ``{name}/{id}``. The verbs come from the
hooks the service overrides.
"""

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Iterator
from types import ModuleType

from perch.config import RoutesConfig
from perch.routing.generics import is_subclass_of_raw_generic, request_type_of
from perch.routing.router import RouteRegistry
from perch.routing.selectors import member_names
from perch.services import RestServiceBase, supported_verbs

logger = logging.getLogger("perch.routing")


def add_from_module(
    routes: RouteRegistry,
    *modules: ModuleType | str,
    config: RoutesConfig | None = None,
) -> RouteRegistry:
    """Scan *modules* for REST services and register their routes.

    Args:
        routes: Registry that receives the routes.
        modules: Module objects or dotted import strings.
        config: Scanning options. Defaults to ``RoutesConfig()``.

    Returns:
        The same *routes* object, for chaining.

    Raises:
        ImportError: If an import string cannot be imported.
        ConfigurationError: If a service has no parameterised generic base.
    """
    cfg = config or RoutesConfig()
    for module in _expand(modules, cfg):
        count = 0
        for service_type in service_types(module, cfg):
            count += _register_service(routes, service_type, cfg)
        logger.info("Registered %d route(s) from %s", count, module.__name__)
    return routes


def _register_service(routes: RouteRegistry, service_type: type, cfg: RoutesConfig) -> int:
    request_type = request_type_of(service_type)
    methods = supported_verbs(service_type)
    if not methods:
        logger.debug("Skipping %s: no handler hooks overridden", service_type.__qualname__)
        return 0

    verbs = " ".join(methods)
    path = cfg.path_prefix + service_type.__name__
    routes.add(request_type, path, verbs, None)
    if not has_id_field(request_type, cfg.id_field):
        return 1

    routes.add(request_type, f"{path}/{{{cfg.id_field}}}", verbs, None)
    return 2


def service_types(module: ModuleType, config: RoutesConfig | None = None) -> list[type]:
    """Concrete service classes exported by *module*, in definition order.

    Abstract classes and services that are still generic (unbound type
    parameters) are left out.
    """
    return [
        obj
        for obj in exported_types(module, config)
        if is_subclass_of_raw_generic(obj, RestServiceBase)
        and obj is not RestServiceBase
        and not inspect.isabstract(obj)
        and not getattr(obj, "__parameters__", ())
    ]


def exported_types(module: ModuleType, config: RoutesConfig | None = None) -> list[type]:
    """Public classes defined in *module*.

    With ``respect_all`` the module's ``__all__`` is the export list when
    present; otherwise names without a leading underscore are public.
    Classes imported from elsewhere are not considered exported, and a
    class exported under several names is returned once.
    """
    cfg = config or RoutesConfig()
    exported = getattr(module, "__all__", None) if cfg.respect_all else None
    if exported is None:
        names = [name for name in vars(module) if not name.startswith("_")]
    else:
        names = list(exported)

    classes: list[type] = []
    for name in names:
        obj = getattr(module, name, None)
        if isinstance(obj, type) and obj.__module__ == module.__name__:
            classes.append(obj)
    # Aliases and repeated __all__ entries name the same class.
    return list(dict.fromkeys(classes))


def has_id_field(request_type: type, id_field: str = "id") -> bool:
    """Whether *request_type* exposes the identifier member."""
    return id_field in member_names(request_type)


def _expand(modules: tuple[ModuleType | str, ...], cfg: RoutesConfig) -> Iterator[ModuleType]:
    seen: set[str] = set()
    for entry in modules:
        module = importlib.import_module(entry) if isinstance(entry, str) else entry
        for found in _walk(module, cfg.include_submodules):
            if found.__name__ in seen:
                continue
            seen.add(found.__name__)
            yield found


def _walk(module: ModuleType, recursive: bool) -> Iterator[ModuleType]:
    yield module
    path = getattr(module, "__path__", None)
    if not recursive or path is None:
        return
    for info in pkgutil.walk_packages(path, prefix=f"{module.__name__}."):
        yield importlib.import_module(info.name)
