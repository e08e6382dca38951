from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from canadapost_api.model import Messages

T = TypeVar('T')

CARRIER_ERROR_FORMAT = "Carrier error {code}: {description}"


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """
    Outcome of a single carrier call.

    Holds either a value with an empty error string, or no value with a
    non-empty error string. Unpacks as ``value, errors``.
    """

    value: Optional[T] = None
    errors: str = ''

    def __post_init__(self):
        if self.value is None and not self.errors:
            raise ValueError('ApiResult needs a value or an error description')
        if self.value is not None and self.errors:
            raise ValueError(f'ApiResult cannot hold a value and errors at once: {self.errors}')

    @classmethod
    def success(cls, value: T) -> 'ApiResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, errors: str) -> 'ApiResult[T]':
        return cls(errors=errors)

    @property
    def ok(self) -> bool:
        return self.value is not None

    def __iter__(self):
        yield self.value
        yield self.errors


def format_carrier_errors(messages: Messages) -> str:
    return '\n'.join(CARRIER_ERROR_FORMAT.format(code=message.code, description=message.description)
                     for message in messages.message)


def describe_exception(error: Exception) -> str:
    # some transport errors are raised without a message
    return str(error) or error.__class__.__name__
