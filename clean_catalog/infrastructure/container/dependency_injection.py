"""
Dependency Injection Container

Manages the instantiation and lifecycle of dependencies for Clean Architecture.
"""

import logging
import threading
from typing import Any, Dict

from ...application.dtos.category_dtos import CategoryResponse
from ...application.use_cases.create_category_use_case import CreateCategoryUseCase
from ...application.use_cases.rename_category_use_case import RenameCategoryUseCase
from ...domain.repositories.category_repository import CategoryRepository
from ...presentation.presenters.category_presenter import CategoryPresenter
from ..configuration.config import Settings, get_config
from ..repositories.in_memory_category_repository import InMemoryCategoryRepository


class DependencyContainer:
    """
    Dependency injection container for Clean Architecture

    Manages the instantiation and lifecycle of:
    - Repositories (Infrastructure layer)
    - Use Cases (Application layer)
    - Presenters (Presentation layer)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        category_repository: CategoryRepository | None = None,
    ):
        self._instances: Dict[str, Any] = {}
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings = settings or get_config()
        self._setup_dependencies(category_repository)

    def _setup_dependencies(self, category_repository: CategoryRepository | None):
        """Setup all dependencies and their relationships"""
        self._logger.info("Setting up dependency injection container...")

        # Infrastructure Layer - Repositories
        self._register_repositories(category_repository)

        # Application Layer - Use Cases
        self._register_use_cases()

        self._logger.info("Dependency injection container setup complete")

    def _register_repositories(self, category_repository: CategoryRepository | None):
        """Register repository implementations"""
        if category_repository is None:
            category_repository = InMemoryCategoryRepository()
        self._instances["category_repository"] = category_repository

        self._logger.debug("Repositories registered successfully")

    def _register_use_cases(self):
        """Register use case implementations with their dependencies"""
        self._instances["create_category_use_case"] = CreateCategoryUseCase(
            category_repository=self.get_category_repository()
        )

        self._instances["rename_category_use_case"] = RenameCategoryUseCase(
            category_repository=self.get_category_repository()
        )

        self._logger.debug("Use cases registered successfully")

    @property
    def settings(self) -> Settings:
        return self._settings

    # Repository getters
    def get_category_repository(self) -> CategoryRepository:
        """Get category repository instance"""
        return self._instances["category_repository"]

    # Use Case getters
    def get_create_category_use_case(self) -> CreateCategoryUseCase:
        """Get create category use case instance"""
        return self._instances["create_category_use_case"]

    def get_rename_category_use_case(self) -> RenameCategoryUseCase:
        """Get rename category use case instance"""
        return self._instances["rename_category_use_case"]

    # Presenters
    def presenter_for(self, response: CategoryResponse) -> CategoryPresenter:
        """Build a presenter using the configured XML root tag and default format"""
        return CategoryPresenter(
            response,
            xml_root_tag=self._settings.xml_root_tag,
            default_format=self._settings.default_format,
        )

    def cleanup(self):
        """Cleanup resources when shutting down"""
        self._logger.info("Cleaning up dependency container...")
        self._instances.clear()


# Global container instance
_container: DependencyContainer | None = None
_container_lock = threading.Lock()


def get_container() -> DependencyContainer:
    """Get the global dependency container instance, ensuring thread safety."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = DependencyContainer()
    return _container


def reset_container():
    """Reset the global container (useful for testing)"""
    global _container
    with _container_lock:
        if _container:
            _container.cleanup()
        _container = None
