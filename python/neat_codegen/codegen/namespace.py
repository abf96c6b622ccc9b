"""Reconstruct qualified names by walking home-scope links."""

from __future__ import annotations

import typing

from ..errors import InterfaceError, with_context
from ..ir.sorts import DeclSort

if typing.TYPE_CHECKING:
    from ..ir.index import DeclIndex
    from ..ir.interface import ModuleInterface

SCOPE_SEPARATOR = '::'

# Declaration variants that record their enclosing scope.
HOME_SCOPED_SORTS = frozenset({
    DeclSort.Variable,
    DeclSort.Field,
    DeclSort.Scope,
    DeclSort.Intrinsic,
    DeclSort.Enumeration,
    DeclSort.Alias,
    DeclSort.Template,
    DeclSort.Concept,
    DeclSort.Function,
    DeclSort.Method,
    DeclSort.Constructor,
    DeclSort.Destructor,
    DeclSort.UsingDeclaration,
})


def _text_name(interface, record):
    return interface.get_string(record.name)


def _user_name(interface, record):
    return interface.name(record.name)


_DECL_NAME_DISPATCH = {
    DeclSort.Parameter: _text_name,
    DeclSort.Scope: _user_name,
    DeclSort.Template: _user_name,
    DeclSort.Function: _user_name,
    DeclSort.Enumeration: _text_name,
    DeclSort.Alias: _text_name,
}


def render_referred_declaration(interface: ModuleInterface, index: DeclIndex) -> str:
    '''The unqualified name of the declaration a type or expression refers to.

    Declarations that cannot name a type render as a marker token.
    '''
    handler = _DECL_NAME_DISPATCH.get(index.sort)
    if handler is None:
        return f'<UNEXPECTED_DECLSORT {index.sort.name}>'
    return handler(interface, interface.decl(index))


@with_context('resolving the enclosing namespace of {index}')
def render_namespace(interface: ModuleInterface, index: DeclIndex) -> str:
    '''The qualified-name prefix of ``index``, e.g. ``Game::`` for ``Game::Base``.

    Returns an empty string for declarations of the global scope.
    '''
    if index.sort not in HOME_SCOPED_SORTS:
        raise InterfaceError(f'Cannot get the home scope for a decl sort of: {index.sort.name}')

    home_scope = interface.decl(index).home_scope
    if home_scope is None:
        return ''

    prefix = render_namespace(interface, home_scope) \
        + render_referred_declaration(interface, home_scope)
    if not prefix:
        return ''
    return prefix + SCOPE_SEPARATOR


def qualified_name(interface: ModuleInterface, index: DeclIndex) -> str:
    '''The fully-qualified name of ``index``.'''
    return render_namespace(interface, index) + render_referred_declaration(interface, index)
