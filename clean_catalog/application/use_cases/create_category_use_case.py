"""
Create Category Use Case

Handles the business logic for adding a new category to the catalog.
"""

import logging

from clean_catalog.application.dtos.category_dtos import (
    CategoryResponse,
    CreateCategoryRequest,
)
from clean_catalog.domain.entities.category_entity import Category
from clean_catalog.domain.exceptions import CatalogError, ValidationError
from clean_catalog.domain.repositories.category_repository import CategoryRepository


class CreateCategoryUseCase:
    """
    Use case for category creation

    Handles:
    1. Request validation
    2. Entity construction
    3. Persistence through the repository capability
    """

    def __init__(self, category_repository: CategoryRepository):
        self._category_repository = category_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(self, request: CreateCategoryRequest) -> CategoryResponse:
        """
        Execute category creation use case

        Args:
            request: The creation request containing the category name

        Returns:
            CategoryResponse with the ID assigned by the repository

        Raises:
            ValidationError: If the name is empty
            RepositoryError: Propagated unchanged from the repository
        """
        try:
            self._validate_request(request)

            category = Category.create(request.name)
            saved_category = self._category_repository.save(category)
        except CatalogError as e:
            self._logger.warning(
                "Category creation failed: %s",
                e,
                extra={"error_code": e.error_code},
            )
            raise

        self._logger.info(
            "New category created: %s",
            saved_category.id,
            extra={"category_id": saved_category.id},
        )
        return CategoryResponse(id=saved_category.id, name=saved_category.name)

    def _validate_request(self, request: CreateCategoryRequest):
        """Validate the incoming request"""
        # Category construction checks the name again.
        if not request.name:
            raise ValidationError("Category name is required", field="name")
