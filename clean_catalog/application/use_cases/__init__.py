"""
Use Cases

Contains the business use cases of the application.
Each use case represents a single business operation.
"""

from .create_category_use_case import CreateCategoryUseCase
from .rename_category_use_case import RenameCategoryUseCase

__all__ = [
    'CreateCategoryUseCase',
    'RenameCategoryUseCase',
]
