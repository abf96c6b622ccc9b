"""Unit tests for the JSON interchange format."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json

import pytest

from neat_codegen.backend import generate
from neat_codegen.builder import InterfaceBuilder
from neat_codegen.errors import ConversionError, InterfaceError
from neat_codegen.ir import (
    Access, BasicSpecifiers, FieldDecl, NameIndex, NameSort, OpaqueType, Qualifiers,
    QualifiedType, ScopeDecl, TypeBasis, TypeIndex, TypeSort, UnitSort,
)
from neat_codegen.loader import (
    FORMAT_VERSION, decode_record, dumps_interface, encode_record, load_interface,
    loads_interface,
)


def _game(b):
    int_t = b.fundamental(TypeBasis.Int)
    with b.namespace('Neat'):
        hook = b.function('reflect_private_members', b.void())
    with b.namespace('Game'):
        with b.struct('Base') as base:
            b.field('health', int_t)
        with b.class_('Derived', bases=[base]):
            b.field('damage', b.fundamental(TypeBasis.Double), Access.Private)
            b.method('==', b.fundamental(TypeBasis.Bool), [int_t], Access.Public, operator=True)
            b.method('name', b.pointer(b.qualified(b.fundamental(TypeBasis.Char),
                                                   Qualifiers.Const)), access=Access.Public)
            b.friend(hook)
        with b.union('Bits'):
            pass
        with b.struct('Hidden', exported=False):
            pass


def _built_game():
    b = InterfaceBuilder('Game')
    _game(b)
    return b.build()


def test_round_trip_generates_the_same_document():
    interface = _built_game()
    restored = loads_interface(dumps_interface(interface, indent=2))
    assert restored == interface
    assert generate(restored) == generate(interface)


def test_document_layout():
    document = json.loads(dumps_interface(_built_game()))
    assert document['version'] == FORMAT_VERSION
    assert document['header'] == {'unit': 'Primary', 'name': 'Game'}
    assert 'Scope' in document['declarations']
    assert document['declarations']['Scope'][0]['kind'] == 'Namespace'


def test_records():
    field = FieldDecl(3, TypeIndex(TypeSort.Pointer, 1), None, Access.Private)
    encoded = encode_record(field)
    assert encoded == {
        'name': 3,
        'type': ['Pointer', 1],
        'home_scope': None,
        'access': 'Private',
        'specifiers': 0,
    }
    assert decode_record(FieldDecl, encoded) == field


def test_flags_and_opaque_records():
    qualified = QualifiedType(TypeIndex(TypeSort.Fundamental, 0),
                              Qualifiers.Const | Qualifiers.Volatile)
    assert decode_record(QualifiedType, encode_record(qualified)) == qualified
    opaque = OpaqueType(TypeSort.Decltype)
    assert decode_record(OpaqueType, encode_record(opaque)) == opaque


def test_non_exported_specifier():
    scope = ScopeDecl(NameIndex(NameSort.Identifier, 0), TypeBasis.Struct,
                      specifiers=BasicSpecifiers.NonExported)
    restored = decode_record(ScopeDecl, encode_record(scope))
    assert restored.specifiers == BasicSpecifiers.NonExported


def test_raw_access_survives_and_is_rejected_later():
    b = InterfaceBuilder('Broken')
    with b.struct('S'):
        b.field('x', b.fundamental(TypeBasis.Int), 9)
    restored = loads_interface(dumps_interface(b.build()))
    with pytest.raises(InterfaceError, match='got 9'):
        generate(restored)


def test_unit_sort_is_kept():
    b = InterfaceBuilder('Part', unit=UnitSort.Partition)
    restored = loads_interface(dumps_interface(b.build()))
    assert restored.header.sort == UnitSort.Partition


@pytest.mark.parametrize('text', [
    'not json',
    '[]',
    '{}',
    '{"header": {"unit": "Primary"}}',
    '{"header": {"unit": "Nope", "name": "M"}}',
    '{"header": {"unit": "Primary", "name": "M"}, "types": {"Pointer": [{"pointee": 5}]}}',
    '{"header": {"unit": "Primary", "name": "M"}, "scope_members": [["Nope", 0]]}',
])
def test_malformed(text):
    with pytest.raises(ConversionError, match='Malformed interface document'):
        loads_interface(text)


def test_unsupported_version():
    with pytest.raises(ConversionError, match='unsupported format version 99'):
        loads_interface('{"version": 99, "header": {"unit": "Primary", "name": "M"}}')


def test_load_missing_file(tmp_path):
    with pytest.raises(ConversionError, match='Could not read'):
        load_interface(tmp_path / 'missing.ifc.json')


def test_load_file(tmp_path):
    path = tmp_path / 'game.ifc.json'
    path.write_text(dumps_interface(_built_game()), encoding='utf-8')
    assert load_interface(path).module_name == 'Game'


def test_load_undecodable_file(tmp_path):
    path = tmp_path / 'latin.ifc.json'
    path.write_bytes(b'{"header": "\xff\xfe"}')
    with pytest.raises(ConversionError, match='Could not read'):
        load_interface(path)


def test_deeply_nested_document():
    with pytest.raises(ConversionError, match='Malformed interface document'):
        loads_interface('[' * 100000)
