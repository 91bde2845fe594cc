"""Rendering of JSON trees into host framework elements."""

from .registry import (
    BuiltinComponent,
    ComponentRegistry,
    FRAGMENT_COMPONENT,
    PORTAL_COMPONENT,
    create_registry,
)
from .host import DefaultRenderHost, Element, PortalElement, RenderHost
from .renderer import RenderContext, Renderer, render

__all__ = [
    # Registry
    'BuiltinComponent',
    'ComponentRegistry',
    'FRAGMENT_COMPONENT',
    'PORTAL_COMPONENT',
    'create_registry',
    # Host boundary
    'DefaultRenderHost',
    'Element',
    'PortalElement',
    'RenderHost',
    # Renderer
    'RenderContext',
    'Renderer',
    'render',
]
