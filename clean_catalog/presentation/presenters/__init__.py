"""
Presenters

Turn use case output DTOs into wire formats.
"""

from .category_presenter import SUPPORTED_FORMATS, CategoryPresenter

__all__ = ["CategoryPresenter", "SUPPORTED_FORMATS"]
