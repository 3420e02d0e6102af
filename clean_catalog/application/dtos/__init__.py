"""
Data Transfer Objects

Plain data carriers crossing the application boundary.
"""

from .category_dtos import (
    CategoryResponse,
    CreateCategoryRequest,
    RenameCategoryRequest,
)

__all__ = ["CategoryResponse", "CreateCategoryRequest", "RenameCategoryRequest"]
