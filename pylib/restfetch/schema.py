'''
Declarative record schemas and the generic JSON decoder.

A shape is a frozen dataclass deriving from Record whose `schema` lists
each field's attribute name, kind, and JSON key. decode() consults the
schema only: keys the schema does not name are dropped, named keys that
are missing (or null) take the default for their kind.
'''

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from restfetch.errors import DecodeError

T = TypeVar('T', bound='Record')

_DEFAULTS: dict[type, Any] = {int: 0, float: 0.0, str: '', bool: False}


@dataclass(frozen=True)
class FieldSpec:
    '''One field of a shape. key is the JSON key; defaults to name.'''

    name: str
    kind: type
    key: str | None = None

    @property
    def json_key(self) -> str:
        return self.key if self.key is not None else self.name

    @property
    def default(self) -> Any:
        if _is_shape(self.kind):
            return None
        return _DEFAULTS[self.kind]


class Record:
    '''Base for decodable shapes. Subclasses are frozen dataclasses.'''

    schema: ClassVar[tuple[FieldSpec, ...]] = ()

    def __str__(self) -> str:
        return render(self)


def _is_shape(kind: Any) -> bool:
    return isinstance(kind, type) and issubclass(kind, Record)


def _join(path: str, name: str) -> str:
    return f'{path}.{name}' if path else name


def _coerce(value: Any, spec: FieldSpec, path: str) -> Any:
    '''Check a present, non-null JSON value against the field's kind.'''
    kind = spec.kind
    if _is_shape(kind):
        if not isinstance(value, Mapping):
            raise DecodeError(f'expected object for {kind.__name__}, got {type(value).__name__}', path)
        return decode_object(value, kind, path)
    # bool is an int subclass in Python; JSON true/false is never a number
    if kind is bool:
        ok = isinstance(value, bool)
    elif kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif kind is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        if ok:
            value = float(value)
    elif kind is str:
        ok = isinstance(value, str)
    else:
        raise TypeError(f'unsupported field kind {kind!r} for {path}')
    if not ok:
        raise DecodeError(f'expected {kind.__name__}, got {type(value).__name__}', path)
    return value


def decode_object(data: Mapping, shape: type[T], path: str = '') -> T:
    '''
    Build a shape from an already-parsed JSON object.

    Args:
        data: parsed JSON object
        shape: Record subclass to build
        path: dotted path of data within the document, for error messages

    Returns:
        Instance of shape

    Raises:
        DecodeError: on a value whose type does not match its field
    '''
    kwargs: dict[str, Any] = {}
    for spec in shape.schema:
        field_path = _join(path, spec.name)
        value = data.get(spec.json_key)
        kwargs[spec.name] = spec.default if value is None else _coerce(value, spec, field_path)
    return shape(**kwargs)


def decode(body: bytes | str, shape: type[T]) -> T:
    '''
    Decode a JSON document into shape.

    Raises DecodeError if the body is not JSON, is not a JSON object, or
    holds a value of the wrong type for a declared field.
    '''
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeError(f'malformed JSON: {e}') from e
    if not isinstance(data, dict):
        raise DecodeError(f'expected JSON object for {shape.__name__}, got {type(data).__name__}')
    return decode_object(data, shape)


def _render_value(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def render(record: Record) -> str:
    '''Text form: TypeName{field=value, ...}, nested records inline.'''
    parts = [f'{spec.name}={_render_value(getattr(record, spec.name))}' for spec in record.schema]
    return f'{type(record).__name__}{{{", ".join(parts)}}}'
