"""JSON interchange format for module interfaces.

The binary interface artifact is decoded by an external parser; this module
reads and writes the same tables as a JSON document. Record fields are
decoded from their annotations, so every record class in ``ir`` round-trips
without per-class code.
"""

from __future__ import annotations

import dataclasses
import json
import types
from enum import Enum, IntFlag
from typing import Union, get_args, get_origin, get_type_hints

from .errors import ConversionError
from .ir.decl import DECL_CLASSES, OpaqueDecl
from .ir.expr import EXPR_CLASSES, OpaqueExpr
from .ir.index import DeclIndex, ExprIndex, NameIndex, Sequence, TypeIndex
from .ir.interface import ModuleInterface, UnitHeader
from .ir.sorts import DeclSort, ExprSort, NameSort, TypeSort, UnitSort
from .ir.types import TYPE_CLASSES, OpaqueType

FORMAT_VERSION = 1

_INDEX_SORTS = {
    DeclIndex: DeclSort,
    TypeIndex: TypeSort,
    ExprIndex: ExprSort,
    NameIndex: NameSort,
}

_PARTITIONS = (
    ('declarations', DeclSort, DECL_CLASSES, OpaqueDecl),
    ('types', TypeSort, TYPE_CLASSES, OpaqueType),
    ('expressions', ExprSort, EXPR_CLASSES, OpaqueExpr),
)


def _encode_value(value):
    if isinstance(value, tuple(_INDEX_SORTS)):
        return [value.sort.name, value.index]
    if isinstance(value, IntFlag):
        return int(value)
    if isinstance(value, Enum):
        return value.name
    return value


def _decode_simple(value, expected):
    if expected in _INDEX_SORTS:
        sort_name, position = value
        return expected(_INDEX_SORTS[expected][sort_name], int(position))
    if isinstance(expected, type) and issubclass(expected, IntFlag):
        if not isinstance(value, int):
            raise TypeError(f'Expected an integer flag set, got {value!r}')
        return expected(value)
    if isinstance(expected, type) and issubclass(expected, Enum):
        if not isinstance(value, str):
            raise TypeError(f'Expected an enumerator name, got {value!r}')
        return expected[value]
    if expected in (int, str):
        # pylint: disable=unidiomatic-typecheck
        if type(value) is not expected:
            raise TypeError(f'Expected {expected.__name__}, got {type(value).__name__}')
        return value
    raise TypeError(f'Unsupported field annotation: {expected!r}')


def _decode_value(value, expected):
    origin = get_origin(expected)
    if origin is Union or origin is types.UnionType:
        variants = get_args(expected)
        if value is None and type(None) in variants:
            return None
        for variant in variants:
            if variant is type(None):
                continue
            try:
                return _decode_simple(value, variant)
            except (TypeError, KeyError, ValueError):
                continue
        raise TypeError(f'{value!r} matches none of {expected!r}')
    return _decode_simple(value, expected)


def encode_record(record) -> dict:
    '''A JSON-ready mapping of a record's fields.'''
    return {f.name: _encode_value(getattr(record, f.name)) for f in dataclasses.fields(record)}


def decode_record(cls, data: dict):
    '''Rebuild a record of class ``cls`` from ``encode_record`` output.'''
    hints = get_type_hints(cls)
    values = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            values[f.name] = _decode_value(data[f.name], hints[f.name])
    return cls(**values)


def _encode_sequence(sequence: Sequence):
    return [sequence.start, sequence.cardinality]


def _decode_sequence(value) -> Sequence:
    start, cardinality = value
    return Sequence(int(start), int(cardinality))


def dumps_interface(interface: ModuleInterface, indent: int | None = None) -> str:
    '''Serialize ``interface`` into the JSON interchange format.'''
    document = {
        'version': FORMAT_VERSION,
        'header': {'unit': interface.header.sort.name, 'name': interface.header.name},
        'strings': interface.strings,
        'operators': interface.operators,
        'global_scope': _encode_sequence(interface.global_scope),
        'scope_members': [_encode_value(i) for i in interface.scope_members],
        'scope_descriptors': [_encode_sequence(s) for s in interface.scope_descriptors],
        'type_heap': [_encode_value(i) for i in interface.type_heap],
        'friend_heap': [_encode_value(i) for i in interface.friend_heap],
        'friendships': [[_encode_value(k), _encode_sequence(v)]
                        for k, v in interface.friendships.items()],
    }
    for key, _sorts, _classes, _opaque in _PARTITIONS:
        partitions = getattr(interface, key)
        document[key] = {sort.name: [encode_record(r) for r in records]
                         for sort, records in partitions.items()}
    return json.dumps(document, indent=indent)


def _decode_partitions(raw: dict, sorts, classes, opaque):
    partitions = {}
    for sort_name, records in raw.items():
        sort = sorts[sort_name]
        cls = classes.get(sort, opaque)
        partitions[sort] = [decode_record(cls, r) for r in records]
    return partitions


def loads_interface(text: str) -> ModuleInterface:
    '''Parse the JSON interchange format.

    Raises:
        ConversionError: If the document is not a well-formed interface.
    '''
    try:
        document = json.loads(text)
        version = document.get('version', FORMAT_VERSION)
        if version != FORMAT_VERSION:
            raise ValueError(f'unsupported format version {version}')
        header = document['header']
        interface = ModuleInterface(
            header=UnitHeader(UnitSort[header['unit']], header['name']),
            strings=list(document.get('strings', [])),
            operators=list(document.get('operators', [])),
            global_scope=_decode_sequence(document.get('global_scope', [0, 0])),
            scope_members=[_decode_simple(i, DeclIndex)
                           for i in document.get('scope_members', [])],
            scope_descriptors=[_decode_sequence(s)
                               for s in document.get('scope_descriptors', [])],
            type_heap=[_decode_simple(i, TypeIndex) for i in document.get('type_heap', [])],
            friend_heap=[_decode_simple(i, DeclIndex) for i in document.get('friend_heap', [])],
            friendships={_decode_simple(k, DeclIndex): _decode_sequence(v)
                         for k, v in document.get('friendships', [])},
        )
        for key, sorts, classes, opaque in _PARTITIONS:
            setattr(interface, key,
                    _decode_partitions(document.get(key, {}), sorts, classes, opaque))
    except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError,
            RecursionError) as err:
        raise ConversionError(f'Malformed interface document: {err}') from err
    return interface


def load_interface(path) -> ModuleInterface:
    '''Read and parse an interface document from ``path``.'''
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as err:
        raise ConversionError(f"Could not read '{path}': {err}") from err
    return loads_interface(text)


__all__ = [
    'dumps_interface', 'loads_interface', 'load_interface',
    'encode_record', 'decode_record', 'FORMAT_VERSION',
]
