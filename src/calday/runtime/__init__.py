"""Runtime: compiled-layout cache, formatter, parser executor and engine.

Python 3.13+.
"""

from .cache import LayoutCache, SupportsCacheSize
from .cache_config import CacheConfig
from .engine import LayoutEngine, get_default_engine
from .rwlock import RWLock

__all__ = [
    "CacheConfig",
    "LayoutCache",
    "LayoutEngine",
    "RWLock",
    "SupportsCacheSize",
    "get_default_engine",
]
