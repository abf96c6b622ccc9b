'''Expression records. Only named-declaration references are inspected.'''

from __future__ import annotations

from dataclasses import dataclass

from .index import DeclIndex, TypeIndex
from .sorts import ExprSort


@dataclass(frozen=True)
class Expression:
    '''Base class of all expression records.'''

    SORT = None


@dataclass(frozen=True)
class NamedDeclExpr(Expression):
    '''A use of a declaration by name, e.g. the target of a friend.'''
    SORT = ExprSort.NamedDecl

    type: TypeIndex
    resolution: DeclIndex


@dataclass(frozen=True)
class OpaqueExpr(Expression):
    '''Any expression kind this tool does not look inside.'''
    sort: ExprSort


EXPR_CLASSES = {NamedDeclExpr.SORT: NamedDeclExpr}
