"""
Category DTOs

Data Transfer Objects for category-related operations.
"""

from dataclasses import dataclass


@dataclass
class CreateCategoryRequest:
    """Request to create a category"""
    name: str


@dataclass
class RenameCategoryRequest:
    """Request to rename an existing category"""
    category_id: int
    new_name: str


@dataclass
class CategoryResponse:
    """Persisted category as returned by a use case"""
    id: int
    name: str
