"""Step-tree walker and listener broadcasting."""
from .broadcaster import Broadcaster
from .config import ListenerErrorPolicy, WalkerConfig
from .errors import ListenerError
from .events import Event, EventMode, EventName, after, before, event_name
from .registry import ListenerRegistry, supports
from .tree_walker import TreeWalker

__all__ = [
    'Broadcaster',
    'Event',
    'EventMode',
    'EventName',
    'ListenerError',
    'ListenerErrorPolicy',
    'ListenerRegistry',
    'TreeWalker',
    'WalkerConfig',
    'after',
    'before',
    'event_name',
    'supports'
]
