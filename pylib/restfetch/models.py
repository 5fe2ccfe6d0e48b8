'''Records returned by the quote and greeting services.'''

from dataclasses import dataclass

from restfetch.schema import FieldSpec, Record


@dataclass(frozen=True)
class Value(Record):
    '''The quote body nested in a Quote.'''

    id: int = 0
    quote: str = ''

    schema = (
        FieldSpec('id', int),
        FieldSpec('quote', str),
    )


@dataclass(frozen=True)
class Quote(Record):
    '''
    Response of the quote service:
    {"type": "success", "value": {"id": 10, "quote": "..."}}
    '''

    type: str = ''
    value: Value | None = None

    schema = (
        FieldSpec('type', str),
        FieldSpec('value', Value),
    )


@dataclass(frozen=True)
class Greeting(Record):
    '''Response of the greeting service: {"id": 11, "content": "Hello, Allison!"}'''

    id: int = 0
    content: str = ''

    schema = (
        FieldSpec('id', int),
        FieldSpec('content', str),
    )
