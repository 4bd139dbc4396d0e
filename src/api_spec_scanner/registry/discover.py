"""Auto-detect the registries of an application module."""

import importlib
from types import ModuleType

from .advice import AdviceRegistry
from .endpoints import EndpointRegistry


class RegistryNotFoundError(LookupError):
    """The target does not resolve to an endpoint registry."""


def discover_registries(target: str) -> tuple[EndpointRegistry, AdviceRegistry | None]:
    """Resolve ``'package.module'`` or ``'package.module:attr'``.

    With an attribute it must name an EndpointRegistry; without one, the first
    EndpointRegistry found in the module is used. An AdviceRegistry living in
    the same module is returned alongside, or None.
    """
    module_name, _, attr = target.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise RegistryNotFoundError(f"Cannot import '{module_name}': {e}") from e

    if attr:
        registry = getattr(module, attr, None)
        if not isinstance(registry, EndpointRegistry):
            raise RegistryNotFoundError(f"'{target}' is not an EndpointRegistry")
    else:
        registry = _find_instance(module, EndpointRegistry)
        if registry is None:
            raise RegistryNotFoundError(f"No EndpointRegistry found in '{module_name}'")

    return registry, _find_instance(module, AdviceRegistry)


def _find_instance(module: ModuleType, kind: type):
    for value in vars(module).values():
        if isinstance(value, kind):
            return value
    return None
