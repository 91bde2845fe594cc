"""Ready-made visitors."""

from .event_handlers import EventHandlerPlugin, create_event_handler_plugin

__all__ = [
    'EventHandlerPlugin',
    'create_event_handler_plugin',
]
