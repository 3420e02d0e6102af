"""
Repository Tests
"""

import threading

import pytest

from clean_catalog.domain.entities.category_entity import Category
from clean_catalog.domain.exceptions import NilEntityError, NotFoundError
from clean_catalog.domain.repositories.category_repository import CategoryRepository
from clean_catalog.infrastructure.repositories.in_memory_category_repository import (
    InMemoryCategoryRepository,
)


class TestInMemoryCategoryRepository:
    """Test in-memory category repository"""

    def test_satisfies_capability(self, repository):
        """Test structural conformance to the repository capability"""
        assert isinstance(repository, CategoryRepository)

    def test_sequential_ids(self, repository):
        """Test IDs are assigned 1..N in save order"""
        names = ["Electronics", "Books", "Garden", "Toys"]
        saved = [repository.save(Category.create(name)) for name in names]

        assert [category.id for category in saved] == [1, 2, 3, 4]
        assert [category.name for category in repository.find_all()] == names
        assert repository.count() == 4

    def test_save_nil_entity(self, repository):
        """Test saving nothing fails"""
        with pytest.raises(NilEntityError):
            repository.save(None)
        assert repository.count() == 0

    def test_save_does_not_touch_input(self, repository):
        """Test the caller's instance keeps its unset ID"""
        category = Category.create("Electronics")
        saved = repository.save(category)

        assert category.id is None
        assert saved.id == 1

    def test_value_semantics(self, repository):
        """Test stored snapshots are independent of returned copies"""
        category = Category.create("Electronics")
        saved = repository.save(category)

        saved.name = "Changed after save"
        category.name = "Changed original"

        assert repository.find_by_id(1).name == "Electronics"

        found = repository.find_by_id(1)
        found.rename("Changed lookup")
        assert repository.find_by_id(1).name == "Electronics"

    def test_resave_replaces_snapshot(self, repository):
        """Test saving an identified entity updates it in place"""
        repository.save(Category.create("Electronics"))
        repository.save(Category.create("Books"))

        category = repository.find_by_id(1)
        category.rename("Gadgets")
        saved = repository.save(category)

        assert saved.id == 1
        assert [c.name for c in repository.find_all()] == ["Gadgets", "Books"]
        assert repository.count() == 2

        # The counter is untouched by updates
        assert repository.save(Category.create("Garden")).id == 3

    def test_resave_unknown_id(self, repository):
        """Test saving an entity with an unknown ID fails"""
        with pytest.raises(NotFoundError) as exc_info:
            repository.save(Category(id=99, name="Ghost"))
        assert exc_info.value.entity_id == 99
        assert repository.count() == 0

    def test_find_by_id_missing(self, repository):
        """Test missing lookups return None"""
        assert repository.find_by_id(1) is None

    def test_concurrent_saves(self):
        """Test concurrent saves never share an ID"""
        repository = InMemoryCategoryRepository()
        results = []
        results_lock = threading.Lock()

        def worker(prefix):
            for i in range(50):
                saved = repository.save(Category.create(f"{prefix}-{i}"))
                with results_lock:
                    results.append(saved.id)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == list(range(1, 401))
        assert repository.count() == 400
