'''The read-only object graph of one module interface.'''

from .sorts import (
    Access, BaseSpecifiers, BasicSpecifiers, DeclSort, ExprSort, NameSort,
    Qualifiers, TypeBasis, TypePrecision, TypeSign, TypeSort, UnitSort,
)
from .index import DeclIndex, ExprIndex, NameIndex, Sequence, TypeIndex
from .decl import (
    AliasDecl, ConceptDecl, ConstructorDecl, DECL_CLASSES, Declaration, DestructorDecl,
    EnumerationDecl, FieldDecl, FriendDecl, FunctionDecl, IntrinsicDecl, MethodDecl,
    OpaqueDecl, ParameterDecl, ScopeDecl, TemplateDecl, UsingDecl, VariableDecl,
)
from .types import (
    BaseType, DesignatedType, FunctionType, FundamentalType, LvalueReferenceType,
    MethodType, OpaqueType, PlaceholderType, PointerType, QualifiedType,
    RvalueReferenceType, TYPE_CLASSES, TupleType, Type,
)
from .expr import EXPR_CLASSES, Expression, NamedDeclExpr, OpaqueExpr
from .interface import ModuleInterface, UnitHeader
from .visitor import Visitor
