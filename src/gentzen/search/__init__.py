"""Proof search."""

from .strategy import (
    DEFAULT_ORDER, SearchStrategy,
    search, get_strategy
)

__all__ = [
    'DEFAULT_ORDER', 'SearchStrategy',
    'search', 'get_strategy'
]
