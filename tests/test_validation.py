# tests/test_validation.py

import pytest

from utils import validation as valid


def test_validate_taxpayer_strips_and_keeps_exact_values() -> None:
    record = valid.validate_taxpayer(' T-001 ', "Ann", "O'Brien", '1 Main St <Apt 2>')

    assert record == {
        'tid': 'T-001',
        'first_name': 'Ann',
        'last_name': "O'Brien",
        'address': '1 Main St <Apt 2>',
    }


def test_validate_taxpayer_reports_every_missing_field() -> None:
    with pytest.raises(valid.ValidationError) as exc_info:
        valid.validate_taxpayer('T-001', '   ', None, '')

    assert exc_info.value.fields == ('first_name', 'last_name', 'address')
    assert 'First Name' in str(exc_info.value)
    assert valid.missing_flags(exc_info.value) == [False, True, True, True]


def test_clean_text_strips_and_handles_none() -> None:
    assert valid.clean_text(' A1 ') == 'A1'
    assert valid.clean_text('   ') == ''
    assert valid.clean_text(None) == ''
