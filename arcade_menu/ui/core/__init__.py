"""Core UI components"""
from .controller import MenuSession, SelectionController, SessionOwner
from .state import SessionState, SessionContext, SelectionData
from .events import EventDispatcher, Event, EventType

__all__ = [
    'MenuSession',
    'SelectionController',
    'SessionOwner',
    'SessionState',
    'SessionContext',
    'SelectionData',
    'EventDispatcher',
    'Event',
    'EventType',
]
