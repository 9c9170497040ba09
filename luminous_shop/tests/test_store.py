from __future__ import annotations

import json
import threading

import pytest

from luminous_shop.catalog import CatalogLoadError, CatalogStore
from luminous_shop.search import search


def test_reload_publishes_new_snapshot(catalog_file):
    store = CatalogStore(catalog_file)
    assert len(store.current_snapshot()) == 0

    first = store.reload()
    assert store.current_snapshot() is first
    assert len(first) == 5

    catalog_file.write_text(json.dumps([{"id": "only", "name": "Only One"}]), encoding="utf-8")
    second = store.reload()
    assert store.current_snapshot() is second
    assert len(second) == 1
    # the old snapshot is untouched
    assert len(first) == 5


def test_failed_reload_keeps_previous_snapshot(catalog_file):
    store = CatalogStore(catalog_file)
    good = store.reload()

    catalog_file.write_text("not json", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        store.reload()
    assert store.current_snapshot() is good
    assert store.try_reload() is False
    assert store.current_snapshot() is good


def test_query_sees_one_consistent_snapshot(catalog_file):
    store = CatalogStore(catalog_file)
    store.reload()
    snapshot = store.current_snapshot()

    catalog_file.write_text(json.dumps([{"id": "new", "name": "New Thing"}]), encoding="utf-8")
    store.reload()

    result = search(snapshot, "", limit=50)
    assert result.total == 5


def test_concurrent_reads_during_reloads(catalog_file):
    store = CatalogStore(catalog_file)
    store.reload()
    mismatches = []
    errors = []

    def reader():
        try:
            for _ in range(50):
                snap = store.current_snapshot()
                if search(snap, "", limit=50).total != len(snap):
                    mismatches.append(len(snap))
        except Exception as e:  # pragma: no cover - surfaced by the assert below
            errors.append(e)

    def reloader():
        for _ in range(10):
            store.reload()

    threads = [threading.Thread(target=reader) for _ in range(4)] + [threading.Thread(target=reloader)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errors
    assert not mismatches
    assert len(store.current_snapshot()) == 5
