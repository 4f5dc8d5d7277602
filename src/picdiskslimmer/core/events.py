"""Event system for decoupled communication between components."""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of events that can be emitted."""

    SETTINGS_LOADED = "settings_loaded"
    SETTINGS_LOAD_FAILED = "settings_load_failed"
    SETTINGS_SAVED = "settings_saved"
    SETTINGS_SAVE_FAILED = "settings_save_failed"


@dataclass
class Event:
    """An event with type and associated data."""

    type: EventType
    data: Any = None


class EventBus:
    """Simple event bus for publish/subscribe communication."""

    def __init__(self):
        self._subscribers: dict[EventType, list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: EventType, callback: Callable[[Event], None]) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to
            callback: Function to call when event is published
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def unsubscribe(self, event_type: EventType, callback: Callable[[Event], None]) -> None:
        """Unsubscribe from events of a specific type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribers.

        A failing handler is logged and does not stop the others.

        Args:
            event: The event to publish
        """
        for callback in list(self._subscribers.get(event.type, [])):
            try:
                callback(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type}: {e}")
