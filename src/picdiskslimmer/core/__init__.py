"""Core modules for PicDiskSlimmer."""

from .events import EventBus, Event, EventType

__all__ = ["EventBus", "Event", "EventType"]
