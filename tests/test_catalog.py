import pytest

from cosmetics_report.queries.catalog import INJECTIONS, QUERIES, all_entries, is_injection, select, split


def test_catalog_sizes():
    assert len(QUERIES) == 10
    assert len(INJECTIONS) == 3


def test_keys_are_unique():
    keys = [e.key for e in all_entries()]
    assert len(keys) == len(set(keys))


def test_titles_are_numbered_in_order():
    for i, q in enumerate(QUERIES, start=1):
        assert q.title.startswith(f"QUERY {i}:")
    for i, q in enumerate(INJECTIONS, start=1):
        assert q.title.startswith(f"INJECTION {i}:")


def test_select_keeps_catalog_order():
    picked = select(["inj3", "Q1", "q10"])
    assert [e.key for e in picked] == ["q1", "q10", "inj3"]


def test_select_none_returns_everything():
    assert select(None) == all_entries()


def test_select_unknown_key():
    with pytest.raises(KeyError, match="q99"):
        select(["q1", "q99"])


def test_split_separates_injections():
    queries, injections = split(all_entries())
    assert queries == list(QUERIES)
    assert injections == list(INJECTIONS)
    assert all(is_injection(e) for e in injections)
