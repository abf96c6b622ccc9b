'''The read-only module-interface object graph.

A ``ModuleInterface`` is a set of append-only, index-addressed tables. It is
produced once (by the builder or the JSON loader) and never mutated while a
conversion reads it.
'''

from __future__ import annotations

import typing
from dataclasses import dataclass, field

from ..errors import InterfaceError
from .index import DeclIndex, ExprIndex, NameIndex, Sequence, TypeIndex
from .sorts import DeclSort, ExprSort, NameSort, TypeSort, UnitSort

if typing.TYPE_CHECKING:
    from .decl import Declaration, ScopeDecl
    from .expr import Expression
    from .types import TupleType, Type


@dataclass(frozen=True)
class UnitHeader:
    '''The unit sort and the name of the module the interface belongs to.'''
    sort: UnitSort
    name: str


#pylint: disable=too-many-instance-attributes
@dataclass
class ModuleInterface:
    '''Index-keyed tables of one compiled translation unit.'''

    header: UnitHeader
    strings: list[str] = field(default_factory=list)
    operators: list[str] = field(default_factory=list)
    declarations: dict[DeclSort, list] = field(default_factory=dict)
    types: dict[TypeSort, list] = field(default_factory=dict)
    expressions: dict[ExprSort, list] = field(default_factory=dict)
    global_scope: Sequence = Sequence(0, 0)
    scope_members: list[DeclIndex] = field(default_factory=list)
    scope_descriptors: list[Sequence] = field(default_factory=list)
    type_heap: list[TypeIndex] = field(default_factory=list)
    friend_heap: list[DeclIndex] = field(default_factory=list)
    friendships: dict[DeclIndex, Sequence] = field(default_factory=dict)

    @property
    def module_name(self) -> str:
        '''Name of the module this interface was compiled from.'''
        return self.header.name

    def get_string(self, offset: int) -> str:
        '''Resolve a text offset.'''
        return _lookup(self.strings, offset, 'string')

    def decl(self, index: DeclIndex) -> Declaration:
        '''Resolve a declaration index to its record.'''
        partition = self.declarations.get(index.sort, [])
        return _lookup(partition, index.index, f'{index.sort.name} declaration')

    def type(self, index: TypeIndex) -> Type:
        '''Resolve a type index to its record.'''
        partition = self.types.get(index.sort, [])
        return _lookup(partition, index.index, f'{index.sort.name} type')

    def expr(self, index: ExprIndex) -> Expression:
        '''Resolve an expression index to its record.'''
        partition = self.expressions.get(index.sort, [])
        return _lookup(partition, index.index, f'{index.sort.name} expression')

    def name(self, index: NameIndex) -> str:
        '''Render a name the way users spell it.'''
        if index.sort == NameSort.Identifier:
            return self.get_string(index.index)
        if index.sort == NameSort.Operator:
            return f'operator{_lookup(self.operators, index.index, "operator name")}'
        raise InterfaceError(f'Unsupported name sort: {index.sort.name}')

    def global_declarations(self) -> list[DeclIndex]:
        '''Members of the global scope, in declaration order.'''
        return self._slice(self.scope_members, self.global_scope)

    def members_of(self, scope: ScopeDecl) -> list[DeclIndex]:
        '''Members of ``scope``, in declaration order.'''
        if scope.initializer is None:
            return []
        descriptor = _lookup(self.scope_descriptors, scope.initializer, 'scope descriptor')
        return self._slice(self.scope_members, descriptor)

    def tuple_elements(self, tuple_type: TupleType) -> list[TypeIndex]:
        '''Element types of a tuple, in order.'''
        return self._slice(self.type_heap, Sequence(tuple_type.start, tuple_type.cardinality))

    def friends_of(self, index: DeclIndex) -> list[DeclIndex]:
        '''The friend declarations recorded for the class ``index``.'''
        sequence = self.friendships.get(index)
        if sequence is None:
            return []
        return self._slice(self.friend_heap, sequence)

    @staticmethod
    def _slice(heap, sequence: Sequence):
        if sequence.start < 0 or sequence.start + sequence.cardinality > len(heap):
            raise InterfaceError(
                f'Sequence [{sequence.start}, +{sequence.cardinality}) is out of range '
                f'of a heap of {len(heap)} entries')
        return heap[sequence.start:sequence.start + sequence.cardinality]


def _lookup(table, position, what):
    if not 0 <= position < len(table):
        raise InterfaceError(f'Dangling {what} reference: {position} (table size {len(table)})')
    return table[position]
