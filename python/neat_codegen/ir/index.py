'''Tagged indices into the partitions of a module interface.

Every cross reference in the object graph is a ``(sort, index)`` pair rather
than a Python reference; a null reference is spelled ``None``.
'''

from __future__ import annotations

from typing import NamedTuple

from .sorts import DeclSort, TypeSort, ExprSort, NameSort


class DeclIndex(NamedTuple):
    '''Index of a declaration within its sort's partition.'''
    sort: DeclSort
    index: int

    def __str__(self):
        return f'{self.sort.name}#{self.index}'


class TypeIndex(NamedTuple):
    '''Index of a type within its sort's partition.'''
    sort: TypeSort
    index: int

    def __str__(self):
        return f'{self.sort.name}#{self.index}'


class ExprIndex(NamedTuple):
    '''Index of an expression within its sort's partition.'''
    sort: ExprSort
    index: int

    def __str__(self):
        return f'{self.sort.name}#{self.index}'


class NameIndex(NamedTuple):
    '''Index of a name. Identifier names index the string table directly.'''
    sort: NameSort
    index: int

    def __str__(self):
        return f'{self.sort.name}#{self.index}'


class Sequence(NamedTuple):
    '''A contiguous ``[start, start + cardinality)`` slice of a heap.'''
    start: int
    cardinality: int

