"""Per-type registration fragments: base classes, fields and methods."""

from __future__ import annotations

import logging
import typing
from typing import NamedTuple

from ..errors import InterfaceError, with_context
from ..ir.sorts import Access, DeclSort, TypeSort
from .namespace import qualified_name
from .types import render_type
from .visibility import effective_access, is_member_reflected, reflects_private_members

if typing.TYPE_CHECKING:
    from ..ir.decl import ScopeDecl
    from ..ir.index import DeclIndex
    from ..ir.interface import ModuleInterface

log = logging.getLogger(__name__)


class BaseFragment(NamedTuple):
    '''One direct base class.'''
    type: str
    access: Access


class FieldFragment(NamedTuple):
    '''One reflected data member.'''
    owner: str
    type: str
    name: str
    access: Access


class MethodFragment(NamedTuple):
    '''One reflected member function. ``parameters`` is the comma-joined list.'''
    owner: str
    return_type: str
    parameters: str
    name: str
    access: Access


class TypeRegistration(NamedTuple):
    '''Everything registered for one exported class or struct.'''
    name: str
    bases: list[BaseFragment]
    fields: list[FieldFragment]
    methods: list[MethodFragment]


@with_context("emitting base classes of '{type_name}'")
def emit_bases(interface: ModuleInterface, scope: ScopeDecl,
               type_name: str) -> list[BaseFragment]:  # pylint: disable=unused-argument
    '''Direct bases in declaration order, without deduplication.'''
    if scope.base is None:
        return []

    if scope.base.sort == TypeSort.Base:
        specifiers = [scope.base]
    elif scope.base.sort == TypeSort.Tuple:
        specifiers = interface.tuple_elements(interface.type(scope.base))
    else:
        raise InterfaceError(f'Unexpected base class type sort: {scope.base.sort.name}')

    bases = []
    for specifier in specifiers:
        if specifier.sort != TypeSort.Base:
            raise InterfaceError(f'Unexpected base type: {specifier.sort.name}')
        base = interface.type(specifier)
        access = effective_access(base.access, scope.kind)
        bases.append(BaseFragment(render_type(interface, base.type), access))
    return bases


def _field(interface, record, type_name, kind):
    return FieldFragment(
        owner=type_name,
        type=render_type(interface, record.type),
        name=interface.get_string(record.name),
        access=effective_access(record.access, kind),
    )


def _method(interface, record, type_name, kind):
    if record.type.sort != TypeSort.Method:
        raise InterfaceError(f'Method declared with a non-method type: {record.type}')
    method_type = interface.type(record.type)
    parameters = ''
    if method_type.source is not None:
        parameters = render_type(interface, method_type.source)
    return MethodFragment(
        owner=type_name,
        return_type=render_type(interface, method_type.target),
        parameters=parameters,
        name=interface.name(record.name),
        access=effective_access(record.access, kind),
    )


@with_context("emitting members of '{type_name}'")
def emit_members(interface: ModuleInterface, scope: ScopeDecl, type_name: str,
                 reflect_privates: bool = False):
    '''Fields and methods of ``scope`` that pass the access filter.

    Returns ``(fields, methods)``, each in declaration order.
    '''
    fields = []
    methods = []
    for index in interface.members_of(scope):
        if index.sort not in (DeclSort.Field, DeclSort.Method):
            continue
        record = interface.decl(index)
        if not is_member_reflected(record, scope.kind, reflect_privates):
            continue
        if index.sort == DeclSort.Field:
            fields.append(_field(interface, record, type_name, scope.kind))
        else:
            methods.append(_method(interface, record, type_name, scope.kind))
    return fields, methods


def emit_type(interface: ModuleInterface, index: DeclIndex, scope: ScopeDecl,
              runtime_namespace: str = 'Neat',
              private_hook: str = 'reflect_private_members') -> TypeRegistration:
    '''Collect the full registration of one exported class or struct.'''
    type_name = qualified_name(interface, index)
    reflect_privates = reflects_private_members(
        interface, index, runtime_namespace, private_hook)
    log.debug('Emitting %s (private members %s)', type_name,
              'included' if reflect_privates else 'excluded')
    fields, methods = emit_members(interface, scope, type_name, reflect_privates)
    bases = emit_bases(interface, scope, type_name)
    return TypeRegistration(type_name, bases, fields, methods)
