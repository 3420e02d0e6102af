"""
In-memory implementation of the category repository
"""

import copy
import logging
import threading
from typing import List, Optional

from clean_catalog.domain.entities.category_entity import Category
from clean_catalog.domain.exceptions import NilEntityError, NotFoundError

logger = logging.getLogger(__name__)


class InMemoryCategoryRepository:
    """
    Process-lifetime category store

    Keeps snapshots in save order together with the next-ID counter. A single
    lock guards both, for writes and for reads that walk the collection.
    """

    def __init__(self):
        self._categories: List[Category] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, category: Optional[Category]) -> Category:
        """Store a snapshot of the category and return an identified copy"""
        if category is None:
            raise NilEntityError("save")

        snapshot = copy.deepcopy(category)
        with self._lock:
            if snapshot.id is None:
                snapshot.id = self._next_id
                self._next_id += 1
                self._categories.append(snapshot)
                logger.debug("Stored new category %s", snapshot.id)
            else:
                index = self._index_of(snapshot.id)
                if index is None:
                    raise NotFoundError(snapshot.id)
                self._categories[index] = snapshot
                logger.debug("Replaced category %s", snapshot.id)

            return copy.deepcopy(snapshot)

    def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find category by ID"""
        with self._lock:
            index = self._index_of(category_id)
            if index is None:
                return None
            return copy.deepcopy(self._categories[index])

    def find_all(self) -> List[Category]:
        """Find all categories in save order"""
        with self._lock:
            return [copy.deepcopy(category) for category in self._categories]

    def count(self) -> int:
        """Number of stored categories"""
        with self._lock:
            return len(self._categories)

    def _index_of(self, category_id: int) -> Optional[int]:
        # Caller must hold the lock.
        for index, category in enumerate(self._categories):
            if category.id == category_id:
                return index
        return None

    def __repr__(self):
        return f"InMemoryCategoryRepository(count={self.count()})"
