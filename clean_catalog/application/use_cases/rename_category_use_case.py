"""
Rename Category Use Case

Handles the business logic for renaming a stored category.
"""

import logging

from clean_catalog.application.dtos.category_dtos import (
    CategoryResponse,
    RenameCategoryRequest,
)
from clean_catalog.domain.exceptions import (
    CatalogError,
    NotFoundError,
    ValidationError,
)
from clean_catalog.domain.repositories.category_repository import CategoryRepository


class RenameCategoryUseCase:
    """Use case for renaming an existing category"""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repository = category_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(self, request: RenameCategoryRequest) -> CategoryResponse:
        """
        Execute category rename use case

        Args:
            request: The rename request with the category ID and new name

        Returns:
            CategoryResponse with the updated name

        Raises:
            NotFoundError: If no stored category has the ID
            ValidationError: If the new name is empty
        """
        try:
            category = self._category_repository.find_by_id(request.category_id)
            if category is None:
                raise NotFoundError(request.category_id)

            if not request.new_name:
                raise ValidationError("New category name is required", field="new_name")

            category.rename(request.new_name)
            saved_category = self._category_repository.save(category)
        except CatalogError as e:
            self._logger.warning(
                "Category %s rename failed: %s",
                request.category_id,
                e,
                extra={"category_id": request.category_id, "error_code": e.error_code},
            )
            raise

        self._logger.info(
            "Category renamed: %s",
            saved_category.id,
            extra={"category_id": saved_category.id},
        )
        return CategoryResponse(id=saved_category.id, name=saved_category.name)
