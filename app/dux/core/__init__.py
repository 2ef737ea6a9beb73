"""Core explorer logic.

This module provides the navigation state machine, the event
multiplexer, the control loop, and settings/theme loading.
"""

from dux.core.config import ConfigError, ExplorerSettings, load_settings
from dux.core.engine import NavigationEngine, Presenter
from dux.core.events import CommandEvent, EventMultiplexer, InputClosedEvent, SignalEvent
from dux.core.navigation import NavigationState, Phase, transition

__all__ = [
    "CommandEvent",
    "ConfigError",
    "EventMultiplexer",
    "ExplorerSettings",
    "InputClosedEvent",
    "NavigationEngine",
    "NavigationState",
    "Phase",
    "Presenter",
    "SignalEvent",
    "load_settings",
    "transition",
]
