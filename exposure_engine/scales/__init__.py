from .registry import ScaleRegistry, get_registry
from .tables import StopTableCache, generate
from .types import ScaleDefinition, StopEntry, StopTable

__all__ = [
    # Registry entry types (frozen, loaded from YAML)
    "ScaleDefinition",
    # Generated tables
    "StopEntry",
    "StopTable",
    "StopTableCache",
    "generate",
    # Registry
    "ScaleRegistry",
    "get_registry",
]
