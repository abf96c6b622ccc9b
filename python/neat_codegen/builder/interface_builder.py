'''Append-only construction of a ``ModuleInterface``.

Scopes are opened as context managers, mirroring how the declarations nest in
the source::

    builder = InterfaceBuilder('Game')
    with builder.namespace('Game'):
        with builder.struct('Base') as base:
            builder.field('health', builder.fundamental(TypeBasis.Int))
    interface = builder.build()
'''

from __future__ import annotations

import contextlib

from ..ir.decl import (
    EnumerationDecl, FieldDecl, FriendDecl, FunctionDecl, MethodDecl, OpaqueDecl,
    ScopeDecl,
)
from ..ir.expr import NamedDeclExpr, OpaqueExpr
from ..ir.index import DeclIndex, ExprIndex, NameIndex, Sequence, TypeIndex
from ..ir.interface import ModuleInterface, UnitHeader
from ..ir.sorts import (
    Access, BaseSpecifiers, BasicSpecifiers, DeclSort, NameSort, Qualifiers,
    TypeBasis, TypePrecision, TypeSign, TypeSort, UnitSort,
)
from ..ir.types import (
    BaseType, DesignatedType, FunctionType, FundamentalType, LvalueReferenceType,
    MethodType, OpaqueType, PlaceholderType, PointerType, QualifiedType,
    RvalueReferenceType, TupleType,
)


class _ScopeFrame:  # pylint: disable=too-few-public-methods
    '''Members and friends collected while a scope is open.'''

    def __init__(self, index, descriptor):
        self.index = index
        self.descriptor = descriptor
        self.members = []
        self.friends = []


#pylint: disable=too-many-public-methods
class InterfaceBuilder:
    '''Builds the tables of one module interface.'''

    def __init__(self, module_name: str, unit: UnitSort = UnitSort.Primary):
        self._interface = ModuleInterface(UnitHeader(unit, module_name))
        self._text_offsets = {}
        self._stack = [_ScopeFrame(None, None)]
        self._built = False

    # Names

    def text(self, value: str) -> int:
        '''Intern ``value`` in the string table and return its offset.'''
        offset = self._text_offsets.get(value)
        if offset is None:
            offset = len(self._interface.strings)
            self._interface.strings.append(value)
            self._text_offsets[value] = offset
        return offset

    def identifier(self, value: str) -> NameIndex:
        '''An identifier name.'''
        return NameIndex(NameSort.Identifier, self.text(value))

    def operator_name(self, symbol: str) -> NameIndex:
        '''An operator function name such as ``==``.'''
        self._interface.operators.append(symbol)
        return NameIndex(NameSort.Operator, len(self._interface.operators) - 1)

    # Types

    def add_type(self, record) -> TypeIndex:
        '''Append a type record to its partition.'''
        sort = record.sort if isinstance(record, OpaqueType) else record.SORT
        partition = self._interface.types.setdefault(sort, [])
        partition.append(record)
        return TypeIndex(sort, len(partition) - 1)

    def fundamental(self, basis: TypeBasis, precision: TypePrecision = TypePrecision.Default,
                    sign: TypeSign = TypeSign.Plain) -> TypeIndex:
        '''A fundamental type.'''
        return self.add_type(FundamentalType(basis, precision, sign))

    def void(self) -> TypeIndex:
        '''Shorthand for ``void``.'''
        return self.fundamental(TypeBasis.Void)

    def pointer(self, pointee: TypeIndex) -> TypeIndex:
        '''``pointee*``'''
        return self.add_type(PointerType(pointee))

    def lvalue_reference(self, referee: TypeIndex) -> TypeIndex:
        '''``referee&``'''
        return self.add_type(LvalueReferenceType(referee))

    def rvalue_reference(self, referee: TypeIndex) -> TypeIndex:
        '''``referee&&``'''
        return self.add_type(RvalueReferenceType(referee))

    def qualified(self, unqualified: TypeIndex, qualifiers: Qualifiers) -> TypeIndex:
        '''A cv-qualified type.'''
        return self.add_type(QualifiedType(unqualified, qualifiers))

    def designated(self, decl: DeclIndex) -> TypeIndex:
        '''The type named by ``decl``.'''
        return self.add_type(DesignatedType(decl))

    def base(self, base, access: Access | int = Access.None_,
             specifiers: BaseSpecifiers = BaseSpecifiers.None_) -> TypeIndex:
        '''A base-class specifier. ``base`` is a declaration or a type.'''
        if isinstance(base, DeclIndex):
            base = self.designated(base)
        return self.add_type(BaseType(base, access, specifiers))

    def tuple(self, elements) -> TypeIndex:
        '''A tuple of the given types, laid out on the type heap.'''
        heap = self._interface.type_heap
        start = len(heap)
        heap.extend(elements)
        return self.add_type(TupleType(start, len(heap) - start))

    def function_type(self, target: TypeIndex, params=()) -> TypeIndex:
        '''``target(params...)``'''
        return self.add_type(FunctionType(target, self._params(params)))

    def method_type(self, target: TypeIndex, params=(), class_type=None) -> TypeIndex:
        '''The type of a member function.'''
        return self.add_type(MethodType(target, self._params(params), class_type))

    def placeholder(self, elaboration: TypeIndex | None = None) -> TypeIndex:
        '''An ``auto`` placeholder, optionally with its deduced type.'''
        return self.add_type(PlaceholderType(TypeBasis.Auto, elaboration))

    def opaque_type(self, sort: TypeSort) -> TypeIndex:
        '''A type of a sort that is never looked inside.'''
        return self.add_type(OpaqueType(sort))

    def _params(self, params):
        params = list(params)
        return self.tuple(params) if params else None

    # Declarations

    @property
    def current_scope(self) -> DeclIndex | None:
        '''The innermost open scope; ``None`` for the global scope.'''
        return self._stack[-1].index

    def add_decl(self, record, member: bool = True) -> DeclIndex:
        '''Append a declaration record; ``member`` also lists it in the open scope.'''
        sort = record.sort if isinstance(record, OpaqueDecl) else record.SORT
        partition = self._interface.declarations.setdefault(sort, [])
        partition.append(record)
        index = DeclIndex(sort, len(partition) - 1)
        if member:
            self._stack[-1].members.append(index)
        return index

    # pylint: disable=too-many-arguments
    @contextlib.contextmanager
    def scope(self, name: str, kind: TypeBasis, bases=(), access: Access | int = Access.None_,
              exported: bool = True):
        '''Open a scope of the given kind; yields its declaration index.'''
        descriptor = len(self._interface.scope_descriptors)
        self._interface.scope_descriptors.append(Sequence(0, 0))
        specifiers = BasicSpecifiers.Cxx if exported else BasicSpecifiers.NonExported
        record = ScopeDecl(
            name=self.identifier(name),
            kind=kind,
            home_scope=self.current_scope,
            base=self._base_specifier(bases),
            initializer=descriptor,
            access=access,
            specifiers=specifiers,
        )
        index = self.add_decl(record)
        frame = _ScopeFrame(index, descriptor)
        self._stack.append(frame)
        try:
            yield index
        finally:
            self._stack.pop()
            self._close(frame)

    def namespace(self, name: str, exported: bool = True):
        '''Open a namespace.'''
        return self.scope(name, TypeBasis.Namespace, exported=exported)

    def struct(self, name: str, bases=(), exported: bool = True, access=Access.None_):
        '''Open a struct.'''
        return self.scope(name, TypeBasis.Struct, bases, access, exported)

    def class_(self, name: str, bases=(), exported: bool = True, access=Access.None_):
        '''Open a class.'''
        return self.scope(name, TypeBasis.Class, bases, access, exported)

    def union(self, name: str, exported: bool = True):
        '''Open a union.'''
        return self.scope(name, TypeBasis.Union, exported=exported)

    def field(self, name: str, type_index: TypeIndex,
              access: Access | int = Access.None_) -> DeclIndex:
        '''A data member of the open scope.'''
        return self.add_decl(FieldDecl(self.text(name), type_index, self.current_scope, access))

    # pylint: disable=too-many-arguments
    def method(self, name, target: TypeIndex, params=(), access: Access | int = Access.None_,
               operator: bool = False) -> DeclIndex:
        '''A member function of the open scope. ``operator`` names ``operator<name>``.'''
        scope = self.current_scope
        class_type = self.designated(scope) if scope is not None else None
        method_type = self.method_type(target, params, class_type)
        name_index = self.operator_name(name) if operator else self.identifier(name)
        return self.add_decl(MethodDecl(name_index, method_type, self.current_scope, access))

    def function(self, name: str, target: TypeIndex, params=()) -> DeclIndex:
        '''A function declared in the open scope.'''
        return self.add_decl(FunctionDecl(
            self.identifier(name), self.function_type(target, params), self.current_scope))

    def enumeration(self, name: str, exported: bool = True) -> DeclIndex:
        '''An enumeration declared in the open scope.'''
        specifiers = BasicSpecifiers.Cxx if exported else BasicSpecifiers.NonExported
        return self.add_decl(EnumerationDecl(
            self.text(name), self.current_scope, specifiers=specifiers))

    def opaque_decl(self, sort: DeclSort, member: bool = False) -> DeclIndex:
        '''A declaration of a sort that is never looked inside.'''
        return self.add_decl(OpaqueDecl(sort), member=member)

    # Friends

    def add_expr(self, record) -> ExprIndex:
        '''Append an expression record to its partition.'''
        sort = record.sort if isinstance(record, OpaqueExpr) else record.SORT
        partition = self._interface.expressions.setdefault(sort, [])
        partition.append(record)
        return ExprIndex(sort, len(partition) - 1)

    def friend(self, target: DeclIndex, type_index: TypeIndex | None = None) -> DeclIndex:
        '''Befriend the declaration ``target`` from the open class.

        ``type_index`` defaults to the target's own type when it has one.
        '''
        if type_index is None:
            type_index = self._interface.decl(target).type
        return self.friend_expr(self.add_expr(NamedDeclExpr(type_index, target)))

    def friend_expr(self, entity: ExprIndex) -> DeclIndex:
        '''Record a friend whose entity is an arbitrary expression.'''
        if self.current_scope is None:
            raise ValueError('Friends can only be declared inside a class')
        index = self.add_decl(FriendDecl(entity), member=False)
        self._stack[-1].friends.append(index)
        return index

    # Finalization

    def build(self) -> ModuleInterface:
        '''Lay out the global scope and return the finished interface.'''
        if len(self._stack) != 1:
            raise RuntimeError('Cannot build an interface while a scope is still open')
        if self._built:
            raise RuntimeError('The interface has already been built')
        heap = self._interface.scope_members
        start = len(heap)
        heap.extend(self._stack[0].members)
        self._interface.global_scope = Sequence(start, len(heap) - start)
        self._built = True
        return self._interface

    def _close(self, frame: _ScopeFrame):
        heap = self._interface.scope_members
        start = len(heap)
        heap.extend(frame.members)
        self._interface.scope_descriptors[frame.descriptor] = Sequence(start, len(frame.members))
        if frame.friends:
            friends = self._interface.friend_heap
            friend_start = len(friends)
            friends.extend(frame.friends)
            self._interface.friendships[frame.index] = Sequence(friend_start, len(frame.friends))

    def _base_specifier(self, bases):
        if isinstance(bases, (DeclIndex, TypeIndex)):
            bases = [bases]
        specifiers = [
            b if isinstance(b, TypeIndex) and b.sort == TypeSort.Base else self.base(b)
            for b in bases
        ]
        if not specifiers:
            return None
        if len(specifiers) == 1:
            return specifiers[0]
        return self.tuple(specifiers)
