'''Declaration records stored in the declaration partitions.

Each record class is bound to one ``DeclSort`` through ``SORT``. Records are
frozen: the graph is built once and only read afterwards.
'''

from __future__ import annotations

from dataclasses import dataclass

from .index import DeclIndex, ExprIndex, NameIndex, TypeIndex
from .sorts import Access, BasicSpecifiers, DeclSort, TypeBasis

#pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Declaration:
    '''Base class of all declaration records.'''

    SORT = None


@dataclass(frozen=True)
class ScopeDecl(Declaration):
    '''A class, struct, union or namespace.

    ``initializer`` is the scope descriptor holding the members, ``base`` is
    ``None``, a single Base type or a Tuple of Base types.
    '''
    SORT = DeclSort.Scope

    name: NameIndex
    kind: TypeBasis
    home_scope: DeclIndex | None = None
    base: TypeIndex | None = None
    initializer: int | None = None
    access: Access | int = Access.None_
    specifiers: BasicSpecifiers = BasicSpecifiers.Cxx


@dataclass(frozen=True)
class FieldDecl(Declaration):
    '''A non-static data member. ``name`` is a text offset.'''
    SORT = DeclSort.Field

    name: int
    type: TypeIndex
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_
    specifiers: BasicSpecifiers = BasicSpecifiers.Cxx


@dataclass(frozen=True)
class MethodDecl(Declaration):
    '''A non-static member function; ``type`` is a Method type.'''
    SORT = DeclSort.Method

    name: NameIndex
    type: TypeIndex
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_
    specifiers: BasicSpecifiers = BasicSpecifiers.Cxx


@dataclass(frozen=True)
class VariableDecl(Declaration):
    '''A variable, including static data members.'''
    SORT = DeclSort.Variable

    name: NameIndex
    type: TypeIndex
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_
    specifiers: BasicSpecifiers = BasicSpecifiers.Cxx


@dataclass(frozen=True)
class FunctionDecl(Declaration):
    '''A free function or static member function.'''
    SORT = DeclSort.Function

    name: NameIndex
    type: TypeIndex
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_
    specifiers: BasicSpecifiers = BasicSpecifiers.Cxx


@dataclass(frozen=True)
class ConstructorDecl(Declaration):
    '''A constructor.'''
    SORT = DeclSort.Constructor

    name: NameIndex
    type: TypeIndex
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_


@dataclass(frozen=True)
class DestructorDecl(Declaration):
    '''A destructor.'''
    SORT = DeclSort.Destructor

    name: NameIndex
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_


@dataclass(frozen=True)
class EnumerationDecl(Declaration):
    '''An enumeration. ``name`` is a text offset.'''
    SORT = DeclSort.Enumeration

    name: int
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_
    specifiers: BasicSpecifiers = BasicSpecifiers.Cxx


@dataclass(frozen=True)
class AliasDecl(Declaration):
    '''A type alias.'''
    SORT = DeclSort.Alias

    name: int
    aliasee: TypeIndex
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_


@dataclass(frozen=True)
class TemplateDecl(Declaration):
    '''A template; ``entity`` is the templated declaration, if recorded.'''
    SORT = DeclSort.Template

    name: NameIndex
    home_scope: DeclIndex | None = None
    entity: DeclIndex | None = None
    access: Access | int = Access.None_


@dataclass(frozen=True)
class ConceptDecl(Declaration):
    '''A concept.'''
    SORT = DeclSort.Concept

    name: int
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_


@dataclass(frozen=True)
class IntrinsicDecl(Declaration):
    '''A compiler intrinsic.'''
    SORT = DeclSort.Intrinsic

    name: int
    type: TypeIndex
    home_scope: DeclIndex | None = None


@dataclass(frozen=True)
class UsingDecl(Declaration):
    '''A using-declaration.'''
    SORT = DeclSort.UsingDeclaration

    name: NameIndex
    resolution: DeclIndex | None = None
    home_scope: DeclIndex | None = None
    access: Access | int = Access.None_


@dataclass(frozen=True)
class ParameterDecl(Declaration):
    '''A function or template parameter. ``name`` is a text offset.'''
    SORT = DeclSort.Parameter

    name: int
    type: TypeIndex | None = None
    position: int = 0


@dataclass(frozen=True)
class FriendDecl(Declaration):
    '''A friend declaration; ``entity`` names the befriended entity.'''
    SORT = DeclSort.Friend

    entity: ExprIndex


@dataclass(frozen=True)
class OpaqueDecl(Declaration):
    '''Any declaration this tool never looks inside.

    The sort is stored per record since one class covers many partitions.
    '''
    sort: DeclSort
    name: NameIndex | None = None


DECL_CLASSES = {
    cls.SORT: cls for cls in (
        ScopeDecl, FieldDecl, MethodDecl, VariableDecl, FunctionDecl,
        ConstructorDecl, DestructorDecl, EnumerationDecl, AliasDecl,
        TemplateDecl, ConceptDecl, IntrinsicDecl, UsingDecl, ParameterDecl,
        FriendDecl,
    )
}
