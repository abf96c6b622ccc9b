'''The module for the interface scope visitor pattern'''

from __future__ import annotations

from .decl import ScopeDecl
from .index import DeclIndex
from .interface import ModuleInterface
from .sorts import DeclSort, TypeBasis


class Visitor:
    '''Pre-order, depth-first walk over the scopes of an interface.'''

    interface: ModuleInterface

    def __init__(self, interface: ModuleInterface):
        self.interface = interface

    def visit_interface(self):
        '''Enter the global scope'''
        for index in self.interface.global_declarations():
            self.dispatch(index)

    def dispatch(self, index: DeclIndex):
        '''Dispatch a member of a namespace; only nested scopes are of interest'''
        if index.sort == DeclSort.Scope:
            scope = self.interface.decl(index)
            if scope.kind == TypeBasis.Namespace:
                self.visit_namespace(scope, index)
            elif scope.kind in (TypeBasis.Class, TypeBasis.Struct):
                self.visit_aggregate(scope, index)
            elif scope.kind == TypeBasis.Union:
                self.visit_union(scope, index)

    def visit_namespace(self, node: ScopeDecl, index: DeclIndex):  # pylint: disable=unused-argument
        '''Enter a namespace'''
        for member in self.interface.members_of(node):
            self.dispatch(member)

    def visit_aggregate(self, node: ScopeDecl, index: DeclIndex):
        '''Enter a class or struct'''

    def visit_union(self, node: ScopeDecl, index: DeclIndex):
        '''Enter a union'''
