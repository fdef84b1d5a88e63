from .base import HoleNotFound, RoundNotFound, ShotStore
from .files import JsonShotStore
from .memory import InMemoryShotStore

__all__ = [
    "HoleNotFound",
    "InMemoryShotStore",
    "JsonShotStore",
    "RoundNotFound",
    "ShotStore",
]
