"""Tests for the in-memory string store"""
import sys
import threading

from string_analyzer.database import StringStore
from string_analyzer.models import FilterSpec
from string_analyzer.utils import analyze_string


def test_add_then_lookup(store):
    record = analyze_string("radar")
    store.add(record)

    assert store.get_by_id(record.id) == record
    assert store.get_by_value("radar") == record
    assert store.exists("radar")
    assert store.exists_by_id(record.id)
    assert len(store) == 1


def test_delete_removes_record(store):
    record = analyze_string("radar")
    store.add(record)

    assert store.delete("radar") is True
    assert store.get_by_id(record.id) is None
    assert not store.exists("radar")
    assert store.delete("radar") is False


def test_lookup_is_exact(store):
    store.add(analyze_string("Radar"))
    assert not store.exists("radar")
    assert store.get_by_value("radar") is None


def test_add_replaces_same_id(store):
    store.add(analyze_string("same"))
    store.add(analyze_string("same"))
    assert store.count() == 1


def test_get_filtered_keeps_insertion_order(store):
    for value in ["level", "hello world", "noon", "abc"]:
        store.add(analyze_string(value))

    palindromes = store.get_filtered(FilterSpec(is_palindrome=True))
    assert [r.value for r in palindromes] == ["level", "noon"]
    assert len(store.get_filtered(FilterSpec())) == 4
    assert store.get_filtered(FilterSpec(min_length=5, max_length=1)) == []


def test_concurrent_adds_are_not_lost():
    store = StringStore()

    def worker(offset):
        for i in range(200):
            store.add(analyze_string(f"value-{offset}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.count() == 1600



def test_scans_are_safe_while_writers_run():
    """Readers never see the map change size mid-scan"""
    store = StringStore()
    for i in range(500):
        store.add(analyze_string(f"seed {i}"))

    errors = []
    writers_done = threading.Event()

    def writer(offset):
        try:
            for i in range(300):
                value = f"w{offset} {i}"
                store.add(analyze_string(value))
                if i % 2:
                    store.delete(value)
        except Exception as exc:
            errors.append(exc)

    def reader():
        try:
            while not writers_done.is_set():
                store.get_all()
                store.get_filtered(FilterSpec(word_count=2, contains_character="w"))
                store.exists("missing")
        except Exception as exc:
            errors.append(exc)

    old_interval = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        writers = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        readers = [threading.Thread(target=reader) for _ in range(4)]
        for thread in readers + writers:
            thread.start()
        for thread in writers:
            thread.join()
        writers_done.set()
        for thread in readers:
            thread.join()
    finally:
        sys.setswitchinterval(old_interval)

    assert errors == []
    assert store.count() == 500 + 4 * 150
