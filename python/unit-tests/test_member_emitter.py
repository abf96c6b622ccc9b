"""Unit tests for base, field and method fragments."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from neat_codegen.builder import InterfaceBuilder
from neat_codegen.codegen import emit_type
from neat_codegen.codegen.members import (
    BaseFragment, FieldFragment, MethodFragment, emit_bases, emit_members,
)
from neat_codegen.errors import InterfaceError
from neat_codegen.ir import Access, DeclSort, MethodDecl, Qualifiers, ScopeDecl, TypeBasis


def _scope(interface, index):
    return interface.decl(index)


class TestMembers:
    """Access filtering and declaration order."""

    def test_struct_reflects_public_members_only(self):
        b = InterfaceBuilder('Members')
        int_t = b.fundamental(TypeBasis.Int)
        double_t = b.fundamental(TypeBasis.Double)
        with b.struct('S') as s:
            b.field('a', int_t)
            b.field('b', double_t, Access.Private)
            b.method('f', b.void())
            b.method('g', b.void(), access=Access.Protected)
            b.field('c', double_t, Access.Public)
        interface = b.build()

        fields, methods = emit_members(interface, _scope(interface, s), 'S')
        assert fields == [
            FieldFragment('S', 'int', 'a', Access.Public),
            FieldFragment('S', 'double', 'c', Access.Public),
        ]
        assert methods == [MethodFragment('S', 'void', '', 'f', Access.Public)]

    def test_class_defaults_to_private(self):
        b = InterfaceBuilder('Members')
        with b.class_('C') as c:
            b.field('hidden', b.fundamental(TypeBasis.Int))
            b.field('shown', b.fundamental(TypeBasis.Int), Access.Public)
        interface = b.build()

        fields, methods = emit_members(interface, _scope(interface, c), 'C')
        assert [f.name for f in fields] == ['shown']
        assert methods == []

    def test_private_members_on_opt_in(self):
        b = InterfaceBuilder('Members')
        int_t = b.fundamental(TypeBasis.Int)
        with b.class_('C') as c:
            b.field('x', int_t)
            b.field('y', int_t, Access.Protected)
            b.method('z', int_t, access=Access.Public)
        interface = b.build()

        fields, methods = emit_members(interface, _scope(interface, c), 'C', True)
        assert [(f.name, f.access) for f in fields] == \
            [('x', Access.Private), ('y', Access.Protected)]
        assert [(m.name, m.access) for m in methods] == [('z', Access.Public)]

    def test_method_parameters(self):
        b = InterfaceBuilder('Members')
        int_t = b.fundamental(TypeBasis.Int)
        char_t = b.fundamental(TypeBasis.Char)
        with b.struct('Calc') as calc:
            b.method('add', int_t, [int_t, int_t])
            b.method('name', b.pointer(b.qualified(char_t, Qualifiers.Const)))
        interface = b.build()

        _, methods = emit_members(interface, _scope(interface, calc), 'Calc')
        assert methods == [
            MethodFragment('Calc', 'int', 'int, int', 'add', Access.Public),
            MethodFragment('Calc', 'char const*', '', 'name', Access.Public),
        ]

    def test_operator_method(self):
        b = InterfaceBuilder('Members')
        bool_t = b.fundamental(TypeBasis.Bool)
        with b.struct('Point') as point:
            b.method('==', bool_t, [b.designated(point)], operator=True)
        interface = b.build()

        _, methods = emit_members(interface, _scope(interface, point), 'Point')
        assert methods == [MethodFragment('Point', 'bool', 'Point', 'operator==', Access.Public)]

    def test_other_members_are_ignored(self):
        b = InterfaceBuilder('Members')
        with b.struct('Outer') as outer:
            with b.struct('Inner'):
                b.field('deep', b.fundamental(TypeBasis.Int))
            b.opaque_decl(DeclSort.Constructor, member=True)
            b.function('helper', b.void())
            b.enumeration('Kind')
        interface = b.build()

        assert emit_members(interface, _scope(interface, outer), 'Outer') == ([], [])

    def test_method_with_non_method_type(self):
        b = InterfaceBuilder('Members')
        with b.struct('S') as s:
            b.add_decl(MethodDecl(b.identifier('f'), b.function_type(b.void()), s))
        interface = b.build()

        with pytest.raises(InterfaceError) as info:
            emit_members(interface, _scope(interface, s), 'S')
        assert info.value.message == 'Method declared with a non-method type: Function#0'
        assert info.value.context == ["emitting members of 'S'"]

    def test_invalid_access(self):
        b = InterfaceBuilder('Members')
        with b.struct('S') as s:
            b.field('x', b.fundamental(TypeBasis.Int), 9)
        interface = b.build()

        with pytest.raises(InterfaceError) as info:
            emit_members(interface, _scope(interface, s), 'S')
        assert 'got 9' in info.value.message
        assert info.value.context == ["emitting members of 'S'"]


class TestBases:
    """Direct bases, their order and default access."""

    def test_no_bases(self):
        b = InterfaceBuilder('Bases')
        with b.struct('S') as s:
            pass
        interface = b.build()
        assert emit_bases(interface, _scope(interface, s), 'S') == []

    def test_struct_base_defaults_to_public(self):
        b = InterfaceBuilder('Bases')
        with b.namespace('Game'):
            with b.struct('Base') as base:
                pass
            with b.struct('Derived', bases=[base]) as derived:
                pass
        interface = b.build()

        assert emit_bases(interface, _scope(interface, derived), 'Game::Derived') == \
            [BaseFragment('Game::Base', Access.Public)]

    def test_class_base_defaults_to_private(self):
        b = InterfaceBuilder('Bases')
        with b.struct('Base') as base:
            pass
        with b.class_('Derived', bases=base) as derived:
            pass
        interface = b.build()

        assert emit_bases(interface, _scope(interface, derived), 'Derived') == \
            [BaseFragment('Base', Access.Private)]

    def test_multiple_bases_keep_order(self):
        b = InterfaceBuilder('Bases')
        with b.struct('A') as a:
            pass
        with b.struct('B') as b_:
            pass
        with b.class_('C', bases=[b.base(b_, Access.Public), b.base(a, Access.Protected)]) as c:
            pass
        interface = b.build()

        assert emit_bases(interface, _scope(interface, c), 'C') == [
            BaseFragment('B', Access.Public),
            BaseFragment('A', Access.Protected),
        ]

    def test_unexpected_base_sort(self):
        b = InterfaceBuilder('Bases')
        s = b.add_decl(ScopeDecl(b.identifier('S'), TypeBasis.Struct,
                                 base=b.fundamental(TypeBasis.Int)))
        interface = b.build()

        with pytest.raises(InterfaceError) as info:
            emit_bases(interface, _scope(interface, s), 'S')
        assert info.value.message == 'Unexpected base class type sort: Fundamental'
        assert info.value.context == ["emitting base classes of 'S'"]

    def test_unexpected_tuple_element(self):
        b = InterfaceBuilder('Bases')
        bases = b.tuple([b.fundamental(TypeBasis.Int)])
        s = b.add_decl(ScopeDecl(b.identifier('S'), TypeBasis.Struct, base=bases))
        interface = b.build()

        with pytest.raises(InterfaceError, match='Unexpected base type: Fundamental'):
            emit_bases(interface, _scope(interface, s), 'S')


def test_emit_type():
    b = InterfaceBuilder('Game')
    with b.namespace('Game'):
        with b.struct('Base') as base:
            b.field('health', b.fundamental(TypeBasis.Int))
        with b.struct('Derived', bases=[base]) as derived:
            b.field('damage', b.fundamental(TypeBasis.Double))
            b.method('Hit', b.void())
    interface = b.build()

    registration = emit_type(interface, derived, _scope(interface, derived))
    assert registration.name == 'Game::Derived'
    assert registration.bases == [BaseFragment('Game::Base', Access.Public)]
    assert registration.fields == \
        [FieldFragment('Game::Derived', 'double', 'damage', Access.Public)]
    assert registration.methods == \
        [MethodFragment('Game::Derived', 'void', '', 'Hit', Access.Public)]
