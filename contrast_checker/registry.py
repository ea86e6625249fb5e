"""Technique auto-discovery and registration.

Scans contrast_checker/techniques/ for modules that define a `technique`
object of type Technique and collects them into a dict keyed by name.
Two modules claiming the same technique name is a packaging error.
"""

import importlib
import pkgutil

from contrast_checker.core.types import Technique

_registry: dict[str, Technique] = {}


def register(tech: Technique, registry: dict[str, Technique]) -> None:
    """Add a technique, refusing a name that is already taken."""
    if not tech.runnable:
        raise RuntimeError(f'Technique {tech.name} has no run function')
    if tech.name in registry and registry[tech.name] is not tech:
        raise RuntimeError(f'Duplicate technique name: {tech.name}')
    registry[tech.name] = tech


def discover() -> dict[str, Technique]:
    """Import all technique modules and return the registry."""
    if _registry:
        return _registry

    import contrast_checker.techniques as pkg

    found: dict[str, Technique] = {}
    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'contrast_checker.techniques.{modname}')
        tech = getattr(module, 'technique', None)
        if isinstance(tech, Technique):
            register(tech, found)

    _registry.update(found)
    return _registry


def get(name: str) -> Technique:
    """Get a technique by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown technique: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_techniques() -> dict[str, Technique]:
    """Return all registered techniques."""
    return discover()
