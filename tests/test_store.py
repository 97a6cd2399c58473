"""
Tests for the in-memory record store
"""

import threading
from uuid import uuid4

from app.models import Employee


def _employee(first="Grace", last="Hopper"):
    return Employee(uuid=uuid4(), first_name=first, last_name=last, full_name=f"{first} {last}")


class TestStoreOperations:
    def test_put_then_get(self, store):
        e = _employee()
        store.put(e.uuid, e)

        assert store.get(e.uuid) == e
        assert e.uuid in store
        assert len(store) == 1

    def test_get_missing_returns_none(self, store):
        assert store.get(uuid4()) is None

    def test_put_overwrites(self, store):
        e = _employee()
        store.put(e.uuid, e)
        replacement = e.model_copy(update={"salary": 10})
        store.put(e.uuid, replacement)

        assert store.get(e.uuid).salary == 10
        assert len(store) == 1

    def test_remove_returns_prior_value(self, store):
        e = _employee()
        store.put(e.uuid, e)

        assert store.remove(e.uuid) == e
        assert store.get(e.uuid) is None
        assert store.remove(e.uuid) is None


class TestSnapshot:
    def test_list_all_is_independent_copy(self, store):
        first = _employee()
        store.put(first.uuid, first)

        snapshot = store.list_all()
        snapshot.clear()
        assert len(store) == 1

        second = _employee("Alan", "Turing")
        store.put(second.uuid, second)
        assert len(snapshot) == 0
        assert len(store.list_all()) == 2

    def test_empty_store_lists_nothing(self, store):
        assert store.list_all() == []


class TestConcurrency:
    def test_concurrent_puts_and_removes(self, store):
        records = [_employee(first=f"P{i}") for i in range(200)]
        keep = records[::2]
        drop = records[1::2]
        for e in drop:
            store.put(e.uuid, e)

        def writer(chunk):
            for e in chunk:
                store.put(e.uuid, e)

        def remover(chunk):
            for e in chunk:
                store.remove(e.uuid)

        threads = [threading.Thread(target=writer, args=(keep[i::4],)) for i in range(4)]
        threads += [threading.Thread(target=remover, args=(drop[i::4],)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert {e.uuid for e in store.list_all()} == {e.uuid for e in keep}
