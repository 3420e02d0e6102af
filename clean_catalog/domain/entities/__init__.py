"""
Domain entities package

Contains the core business entities of the catalog.
"""

from .category_entity import Category

__all__ = ["Category"]
