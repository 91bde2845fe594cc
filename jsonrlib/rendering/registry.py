"""Component registry.

Maps a structured node's ``type`` to what the renderer should construct:
either a tag name passed straight to the host, or a factory. Resolution
is an explicit three-tier lookup:

1. an exact match in the caller's custom entries
2. one of the built-in markers (``Fragment``, ``Portal``)
3. the type name itself, used as a generic tag

so every non-empty string resolves. Rejecting unknown types is the job of a
validation visitor, not of the registry. A custom entry set to ``None``
blocks its type: resolution fails and the renderer reports it.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional

from ..core.node import FRAGMENT, PORTAL


class BuiltinComponent:
    """Marker for a structural node kind the renderer handles itself."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


FRAGMENT_COMPONENT = BuiltinComponent(FRAGMENT)
PORTAL_COMPONENT = BuiltinComponent(PORTAL)

BUILTIN_COMPONENTS: Mapping[str, BuiltinComponent] = MappingProxyType({
    FRAGMENT: FRAGMENT_COMPONENT,
    PORTAL: PORTAL_COMPONENT,
})


class ComponentRegistry(Mapping):
    """Read-only type-name lookup with built-in and generic-tag fallback.

    Registries are immutable; ``extend`` returns a new one. Iteration and
    ``len`` cover the custom entries only, since the effective key space
    is every string.
    """

    def __init__(self, custom_entries: Optional[Mapping[str, Any]] = None):
        self._custom: Dict[str, Any] = dict(custom_entries or {})

    @property
    def custom_entries(self) -> Mapping[str, Any]:
        return MappingProxyType(self._custom)

    def resolve(self, type_name: Any) -> Optional[Any]:
        """Resolve a type name to a tag, factory or built-in marker.

        Args:
            type_name: The node's ``type`` value

        Returns:
            The resolved component, or None if the name is not a non-empty
            string or is explicitly blocked
        """
        if not isinstance(type_name, str) or not type_name:
            return None
        if type_name in self._custom:
            return self._custom[type_name]
        if type_name in BUILTIN_COMPONENTS:
            return BUILTIN_COMPONENTS[type_name]
        return type_name

    def is_builtin(self, type_name: str) -> bool:
        """Check if a type name resolves to a built-in marker."""
        return isinstance(self.resolve(type_name), BuiltinComponent)

    def extend(self, entries: Mapping[str, Any]) -> 'ComponentRegistry':
        """Return a new registry with ``entries`` layered over this one."""
        merged = dict(self._custom)
        merged.update(entries)
        return ComponentRegistry(merged)

    def __getitem__(self, type_name: str) -> Any:
        component = self.resolve(type_name)
        if component is None:
            raise KeyError(type_name)
        return component

    def __contains__(self, type_name: object) -> bool:
        return self.resolve(type_name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._custom)

    def __len__(self) -> int:
        return len(self._custom)

    def __repr__(self) -> str:
        return f"ComponentRegistry({sorted(self._custom)!r})"


def create_registry(custom_entries: Optional[Mapping[str, Any]] = None) -> ComponentRegistry:
    """Create a registry from custom entries.

    Args:
        custom_entries: Mapping of type name to tag string or factory.
                        Entries may override ``Fragment``/``Portal`` and
                        generic tags; an entry set to None blocks its type.

    Returns:
        ComponentRegistry resolving every non-empty string type
    """
    if isinstance(custom_entries, ComponentRegistry):
        return ComponentRegistry(custom_entries.custom_entries)
    return ComponentRegistry(custom_entries)
