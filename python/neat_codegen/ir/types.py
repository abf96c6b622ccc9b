'''Type records stored in the type partitions.'''

from __future__ import annotations

from dataclasses import dataclass

from .index import DeclIndex, TypeIndex
from .sorts import (
    Access, BaseSpecifiers, Qualifiers, TypeBasis, TypePrecision, TypeSign, TypeSort,
)


@dataclass(frozen=True)
class Type:
    '''Base class of all type records.'''

    SORT = None


@dataclass(frozen=True)
class FundamentalType(Type):
    '''A built-in arithmetic or void type.'''
    SORT = TypeSort.Fundamental

    basis: TypeBasis
    precision: TypePrecision = TypePrecision.Default
    sign: TypeSign = TypeSign.Plain


@dataclass(frozen=True)
class DesignatedType(Type):
    '''A type named by a declaration.'''
    SORT = TypeSort.Designated

    decl: DeclIndex


@dataclass(frozen=True)
class PointerType(Type):
    '''``T*``'''
    SORT = TypeSort.Pointer

    pointee: TypeIndex


@dataclass(frozen=True)
class LvalueReferenceType(Type):
    '''``T&``'''
    SORT = TypeSort.LvalueReference

    referee: TypeIndex


@dataclass(frozen=True)
class RvalueReferenceType(Type):
    '''``T&&``'''
    SORT = TypeSort.RvalueReference

    referee: TypeIndex


@dataclass(frozen=True)
class QualifiedType(Type):
    '''A cv-qualified type.'''
    SORT = TypeSort.Qualified

    unqualified: TypeIndex
    qualifiers: Qualifiers


@dataclass(frozen=True)
class BaseType(Type):
    '''A base-class specifier: the base type plus its access and virtuality.'''
    SORT = TypeSort.Base

    type: TypeIndex
    access: Access | int = Access.None_
    specifiers: BaseSpecifiers = BaseSpecifiers.None_


@dataclass(frozen=True)
class PlaceholderType(Type):
    '''``auto``-like type; ``elaboration`` is the deduced type, if recorded.'''
    SORT = TypeSort.Placeholder

    basis: TypeBasis = TypeBasis.Auto
    elaboration: TypeIndex | None = None


@dataclass(frozen=True)
class TupleType(Type):
    '''An ordered slice of the type heap.'''
    SORT = TypeSort.Tuple

    start: int
    cardinality: int


@dataclass(frozen=True)
class FunctionType(Type):
    '''``target(source)``; ``source`` is a Tuple, a single type or ``None``.'''
    SORT = TypeSort.Function

    target: TypeIndex
    source: TypeIndex | None = None


@dataclass(frozen=True)
class MethodType(Type):
    '''The type of a non-static member function of ``class_type``.'''
    SORT = TypeSort.Method

    target: TypeIndex
    source: TypeIndex | None = None
    class_type: TypeIndex | None = None


@dataclass(frozen=True)
class OpaqueType(Type):
    '''A type variant this tool does not look inside.'''
    sort: TypeSort


TYPE_CLASSES = {
    cls.SORT: cls for cls in (
        FundamentalType, DesignatedType, PointerType, LvalueReferenceType,
        RvalueReferenceType, QualifiedType, BaseType, PlaceholderType,
        TupleType, FunctionType, MethodType,
    )
}
