"""
Repository implementations
"""

from .in_memory_category_repository import InMemoryCategoryRepository

__all__ = ["InMemoryCategoryRepository"]
