"""Render host: the boundary to a concrete UI framework.

The renderer never builds framework objects itself. It resolves types,
props, keys and children, then asks a ``RenderHost`` to construct the
element. ``DefaultRenderHost`` builds plain ``Element`` records, which is
what tests and server-side consumers use; a framework binding subclasses
``RenderHost`` and returns its own element objects.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class Element:
    """A constructed element.

    Attributes:
        type: Tag name or factory the element was built from
        props: Resolved props (handler names already replaced by callables)
        children: Already-rendered children, flattened
        key: Identity key, or None when unkeyed
    """
    type: Any
    props: Dict[str, Any] = field(default_factory=dict)
    children: List[Any] = field(default_factory=list)
    key: Optional[str] = None


@dataclass
class PortalElement:
    """Children rendered into a container outside the surrounding tree."""
    container: Any
    children: List[Any] = field(default_factory=list)
    key: Optional[str] = None


class RenderHost(ABC):
    """Abstract element construction interface for a UI framework."""

    @abstractmethod
    def create_element(self, component: Any, props: Dict[str, Any],
                       children: List[Any], key: Optional[str] = None) -> Any:
        """Construct an element.

        Args:
            component: Tag name or factory from the registry
            props: Resolved props
            children: Already-rendered children
            key: Identity key or None

        Returns:
            Framework element
        """
        pass

    @abstractmethod
    def create_portal(self, children: List[Any], container: Any, key: Optional[str] = None) -> Any:
        """Construct an element that renders ``children`` into ``container``."""
        pass

    @abstractmethod
    def find_container(self, selector: str) -> Optional[Any]:
        """Look up a portal target by selector.

        Returns:
            The container, or None if nothing matches
        """
        pass

    @property
    @abstractmethod
    def default_container(self) -> Any:
        """Fallback portal target (the document root)."""
        pass


class DefaultRenderHost(RenderHost):
    """In-memory host producing ``Element`` and ``PortalElement`` records.

    Containers are registered by name. ``find_container('#modal')`` matches
    a container registered as ``'#modal'`` or as ``'modal'``.
    """

    def __init__(self, containers: Optional[Mapping[str, Any]] = None, default_container: Any = 'body'):
        self.containers: Dict[str, Any] = dict(containers or {})
        self._default_container = default_container

    def create_element(self, component, props, children, key=None):
        return Element(type=component, props=props, children=children, key=key)

    def create_portal(self, children, container, key=None):
        return PortalElement(container=container, children=children, key=key)

    def find_container(self, selector):
        if selector in self.containers:
            return self.containers[selector]
        if selector.startswith('#'):
            return self.containers.get(selector[1:])
        return None

    @property
    def default_container(self):
        return self._default_container

    def add_container(self, name: str, container: Any) -> None:
        self.containers[name] = container
