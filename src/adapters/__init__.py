"""Adapters for external systems.

This module contains implementations of the pager protocol that do not need
a real widget toolkit.
"""

from src.adapters.memory_pager import MemoryPager

__all__ = [
    "MemoryPager",
]
