import pytest

from canadapost_api.model import Message, Messages
from canadapost_api.result import ApiResult, describe_exception, format_carrier_errors


def test_success():
    result = ApiResult.success(['quote'])
    assert result.ok
    assert result.errors == ''
    value, errors = result
    assert value == ['quote']
    assert errors == ''


def test_failure():
    result = ApiResult.failure('Carrier error 004: No tracking info')
    assert not result.ok
    assert result.value is None


def test_value_and_errors_are_exclusive():
    with pytest.raises(ValueError):
        ApiResult(value='quote', errors='boom')


def test_empty_result_is_rejected():
    with pytest.raises(ValueError):
        ApiResult()
    with pytest.raises(ValueError):
        ApiResult.failure('')


def test_format_carrier_errors():
    messages = Messages(message=[Message(code='004', description='No tracking info'),
                                 Message(code='9111', description='Invalid postal code')])
    assert format_carrier_errors(messages) == ('Carrier error 004: No tracking info\n'
                                               'Carrier error 9111: Invalid postal code')
    assert format_carrier_errors(Messages()) == ''


def test_describe_exception_without_message():
    assert describe_exception(ConnectionError('reset by peer')) == 'reset by peer'
    assert describe_exception(ConnectionError()) == 'ConnectionError'
