"""
Domain repository interfaces

Contains the repository capabilities that define contracts for data access.
These follow the Repository pattern and Dependency Inversion principle.
"""

from .category_repository import CategoryRepository

__all__ = ["CategoryRepository"]
