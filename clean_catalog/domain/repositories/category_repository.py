"""
Category repository interface

Defines the contract for category data access operations. Any storage
backend providing these methods satisfies it; no inheritance is required.
"""

from typing import List, Optional, Protocol, runtime_checkable

from clean_catalog.domain.entities.category_entity import Category


@runtime_checkable
class CategoryRepository(Protocol):
    """Repository capability for category operations"""

    def save(self, category: Optional[Category]) -> Category:
        """Save category, assigning an ID on first save"""

    def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find category by ID"""

    def find_all(self) -> List[Category]:
        """Find all categories in save order"""

    def count(self) -> int:
        """Number of stored categories"""
