"""
Unit tests for the in-memory product store.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from store import ProductStore


@pytest.fixture
def store():
    return ProductStore.with_seed_data()


class TestSeedData:
    """Tests for the initial store contents."""

    def test_seed_products(self, store):
        """A fresh store holds Laptop, Keyboard and Mouse with ids 1..3."""
        products = store.list()
        assert [(p.id, p.name, p.price) for p in products] == [
            (1, "Laptop", 1200),
            (2, "Keyboard", 75),
            (3, "Mouse", 25),
        ]

    def test_seed_counter(self, store):
        assert store.next_id == 4

    def test_empty_store(self):
        assert len(ProductStore()) == 0
        assert ProductStore().list() == []


class TestCreate:
    """Tests for ProductStore.create."""

    def test_create_then_get(self, store):
        """The created product is returned by get and takes the counter value."""
        expected_id = store.next_id
        product = store.create("Widget", 10)
        assert product.id == expected_id
        assert store.get(product.id) == product

    def test_ids_strictly_increasing(self, store):
        ids = [store.create(f"Item {i}", i).id for i in range(5)]
        assert ids == sorted(set(ids))
        assert ids == [4, 5, 6, 7, 8]

    def test_ids_not_reused_after_delete(self, store):
        product = store.create("Temp", 1)
        assert store.delete(product.id)
        assert store.create("Next", 2).id == product.id + 1

    def test_concurrent_creates_get_distinct_ids(self, store):
        """Threads creating at the same time never share an id."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(lambda i: store.create(f"Item {i}", i), range(200)))
        ids = [p.id for p in created]
        assert len(set(ids)) == 200
        assert sorted(ids) == list(range(4, 204))
        assert len(store) == 203
        assert store.next_id == 204

    def test_list_keeps_insertion_order(self, store):
        store.create("Monitor", 300)
        assert [p.name for p in store.list()] == ["Laptop", "Keyboard", "Mouse", "Monitor"]


class TestGet:
    """Tests for ProductStore.get."""

    def test_get_existing(self, store):
        assert store.get(2).name == "Keyboard"

    def test_get_missing(self, store):
        assert store.get(999) is None


class TestUpdate:
    """Tests for ProductStore.update."""

    def test_update_keeps_id(self, store):
        product = store.update(2, "X", 5)
        assert product.id == 2
        assert product.name == "X"
        assert product.price == 5

    def test_update_leaves_others_untouched(self, store):
        store.update(2, "X", 5)
        others = [(p.id, p.name, p.price) for p in store.list() if p.id != 2]
        assert others == [(1, "Laptop", 1200), (3, "Mouse", 25)]

    def test_update_missing(self, store):
        assert store.update(999, "X", 5) is None
        assert len(store) == 3


class TestDelete:
    """Tests for ProductStore.delete."""

    def test_delete_removes_exactly_one(self, store):
        assert store.delete(1) is True
        assert len(store) == 2
        assert store.get(1) is None

    def test_delete_missing(self, store):
        assert store.delete(999) is False
        assert len(store) == 3

    def test_list_is_a_snapshot(self, store):
        snapshot = store.list()
        store.delete(1)
        assert len(snapshot) == 3
