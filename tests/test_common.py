import pytest

from gsheet_source.common import ReturnType, SourceError


def test_success_is_zero():
    assert ReturnType(0) is ReturnType.SUCCESS
    assert ReturnType["SUCCESS"] == 0


def test_codes_are_ordered_by_severity():
    order = [
        ReturnType.SUCCESS,
        ReturnType.RETRY,
        ReturnType.WARNING,
        ReturnType.ERROR,
        ReturnType.CRITICAL,
    ]
    assert [ReturnType(value) for value in range(len(order))] == order
    assert sorted(ReturnType, key=int) == order


def test_unknown_code_is_rejected():
    with pytest.raises(ValueError):
        ReturnType(5)


def test_source_error_defaults_to_error():
    err = SourceError("boom")
    assert err.code is ReturnType.ERROR
    assert "boom" in str(err)


def test_source_error_keeps_code():
    err = SourceError("later", ReturnType.RETRY)
    assert err.code is ReturnType.RETRY
    with pytest.raises(SourceError) as info:
        raise err
    assert info.value.code == ReturnType.RETRY


def test_source_error_accepts_int_code():
    err = SourceError("x", 4)
    assert err.code is ReturnType.CRITICAL