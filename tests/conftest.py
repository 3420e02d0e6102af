"""
Test configuration and fixtures for the catalog
"""

import os
from unittest.mock import patch

import pytest

from clean_catalog.application.use_cases.create_category_use_case import (
    CreateCategoryUseCase,
)
from clean_catalog.application.use_cases.rename_category_use_case import (
    RenameCategoryUseCase,
)
from clean_catalog.infrastructure.configuration.config import reset_config
from clean_catalog.infrastructure.container.dependency_injection import reset_container
from clean_catalog.infrastructure.repositories.in_memory_category_repository import (
    InMemoryCategoryRepository,
)


# Mock environment variables for testing
@pytest.fixture(autouse=True)
def mock_env():
    """Isolate tests from the developer's environment"""
    test_env = {
        'CATALOG_ENVIRONMENT': 'test',
        'CATALOG_LOG_LEVEL': 'DEBUG',
    }

    with patch.dict(os.environ, test_env, clear=True):
        reset_config()
        reset_container()
        yield test_env
        reset_container()
        reset_config()


@pytest.fixture
def repository():
    """Fresh in-memory repository"""
    return InMemoryCategoryRepository()


@pytest.fixture
def create_use_case(repository):
    """Create use case bound to the fresh repository"""
    return CreateCategoryUseCase(repository)


@pytest.fixture
def rename_use_case(repository):
    """Rename use case bound to the fresh repository"""
    return RenameCategoryUseCase(repository)
