# tests/test_store.py

import pytest

from utils import store


def _create(tid='T-001', first_name='Ann', last_name='Lee', address='1 Main St'):
    store.create_taxpayer(tid, first_name, last_name, address)
    return {'tid': tid, 'first_name': first_name, 'last_name': last_name, 'address': address}


@pytest.fixture(params=['sqlite', 'supabase'])
def backend(request):
    """Run store tests against both backends."""
    if request.param == 'supabase':
        request.getfixturevalue('supabase_store')
    return request.param


def test_backend_selection(backend) -> None:
    assert store.get_store_backend() == backend


def test_create_then_list_contains_exact_record(backend) -> None:
    record = _create(address="12 Rue de l'Église, Apt 3")

    assert store.list_taxpayers() == [record]


def test_list_is_empty_initially(backend) -> None:
    assert store.list_taxpayers() == []


def test_search_returns_last_written_record(backend) -> None:
    _create()
    _create(tid='T-002', first_name='Bo')

    assert store.search_taxpayer('T-002')['first_name'] == 'Bo'

    store.update_taxpayer('T-002', 'Bob', 'Kim', '2 Side Rd')
    assert store.search_taxpayer('T-002') == {
        'tid': 'T-002', 'first_name': 'Bob', 'last_name': 'Kim', 'address': '2 Side Rd',
    }


def test_search_missing_returns_none(backend) -> None:
    _create()

    assert store.search_taxpayer('NOPE') is None


def test_update_changes_mutable_fields_only(backend) -> None:
    _create()

    assert store.update_taxpayer('T-001', 'Anna', 'Leigh', '9 High St') is True
    assert store.list_taxpayers() == [
        {'tid': 'T-001', 'first_name': 'Anna', 'last_name': 'Leigh', 'address': '9 High St'},
    ]


def test_update_missing_returns_false_and_leaves_store(backend) -> None:
    record = _create()

    assert store.update_taxpayer('T-999', 'X', 'Y', 'Z') is False
    assert store.list_taxpayers() == [record]


def test_duplicate_tid_is_rejected(backend) -> None:
    record = _create()

    with pytest.raises(store.DuplicateTaxPayerError):
        store.create_taxpayer('T-001', 'Other', 'Person', 'Elsewhere')
    assert store.list_taxpayers() == [record]


def test_list_is_ordered_by_tid(backend) -> None:
    _create(tid='B')
    _create(tid='A')
    _create(tid='C')

    assert [t['tid'] for t in store.list_taxpayers()] == ['A', 'B', 'C']


def test_export_csv(backend) -> None:
    assert store.export_taxpayers_csv() == ''

    _create()
    lines = store.export_taxpayers_csv().splitlines()
    assert lines == ['TID,First Name,Last Name,Address', 'T-001,Ann,Lee,1 Main St']


def test_unknown_backend_raises(monkeypatch) -> None:
    monkeypatch.setenv('STORE_BACKEND', 'mongo')

    with pytest.raises(store.StoreError):
        store.list_taxpayers()


def test_supabase_without_credentials_raises(monkeypatch) -> None:
    from utils import supabase_client as sb

    monkeypatch.setenv('STORE_BACKEND', 'supabase')
    monkeypatch.setattr(sb, 'SUPABASE_URL', '')

    with pytest.raises(store.StoreError):
        store.search_taxpayer('T-001')


def test_backend_failures_become_store_errors(monkeypatch) -> None:
    from utils import database as db

    def broken():
        raise RuntimeError("disk I/O error")

    monkeypatch.setattr(db, 'get_taxpayers', broken)

    with pytest.raises(store.StoreError):
        store.list_taxpayers()


@pytest.mark.parametrize('count', [5, 4])
def test_supabase_list_reads_past_row_cap(supabase_store, monkeypatch, count) -> None:
    from utils import supabase_client as sb

    supabase_store.max_rows = 2
    monkeypatch.setattr(sb, 'LIST_PAGE_SIZE', 2)
    for i in range(count):
        _create(tid=f'T-{i:03d}')

    assert [t['tid'] for t in store.list_taxpayers()] == [f'T-{i:03d}' for i in range(count)]
    assert len(store.export_taxpayers_csv().splitlines()) == count + 1
