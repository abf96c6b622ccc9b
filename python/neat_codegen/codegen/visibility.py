"""Which types are exported and which of their members get reflected."""

from __future__ import annotations

import logging
import typing

from ..errors import InterfaceError, with_context
from ..ir.sorts import Access, BasicSpecifiers, DeclSort, ExprSort, TypeBasis, TypeSort
from .namespace import SCOPE_SEPARATOR, qualified_name
from .types import render_type

if typing.TYPE_CHECKING:
    from ..ir.index import DeclIndex, TypeIndex
    from ..ir.interface import ModuleInterface

log = logging.getLogger(__name__)

PRIVATE_HOOK_SIGNATURE = 'void()'


def to_access(value) -> Access:
    '''Validate a raw access value read from the interface.'''
    try:
        return Access(value)
    except ValueError as err:
        raise InterfaceError(
            f'Invalid access value: expected {int(Access.None_)} to {int(Access.Public)} '
            f'(inclusive), got {value!r}') from err


def default_access(kind: TypeBasis) -> Access:
    '''Access of members and bases that do not spell one out.'''
    return Access.Private if kind == TypeBasis.Class else Access.Public


def effective_access(value, kind: TypeBasis) -> Access:
    '''The written access, or the default of the enclosing ``kind``.'''
    access = to_access(value)
    if access == Access.None_:
        return default_access(kind)
    return access


def is_member_reflected(member, kind: TypeBasis, reflect_privates: bool) -> bool:
    '''Public members are always reflected; others only on opt-in.'''
    access = effective_access(member.access, kind)
    return reflect_privates or access == Access.Public


def is_decl_exported(interface: ModuleInterface, index: DeclIndex) -> bool:
    '''Whether a scope or enumeration is visible outside its module.'''
    if index.sort not in (DeclSort.Scope, DeclSort.Enumeration):
        raise InterfaceError(
            'Unexpected declaration while checking if the type decl was exported. '
            f'type decl sort: {index.sort.name}')
    specifiers = interface.decl(index).specifiers
    return not specifiers & BasicSpecifiers.NonExported


@with_context('checking whether type {index} is exported')
def is_type_exported(interface: ModuleInterface, index: TypeIndex) -> bool:
    '''Whether every declaration a type mentions is exported.'''
    if index.sort in (TypeSort.Fundamental, TypeSort.Pointer):
        return True
    record = interface.type(index)
    if index.sort == TypeSort.Designated:
        return is_decl_exported(interface, record.decl)
    if index.sort == TypeSort.Method:
        return is_type_exported(interface, record.target) and (
            record.source is None or is_type_exported(interface, record.source))
    if index.sort == TypeSort.Tuple:
        return all(is_type_exported(interface, element)
                   for element in interface.tuple_elements(record))
    raise InterfaceError(
        'Unexpected type while checking if the type was exported. '
        f'type sort: {index.sort.name}')


@with_context('looking for the private reflection friend of {index}')
def reflects_private_members(interface: ModuleInterface, index: DeclIndex,
                             runtime_namespace: str = 'Neat',
                             private_hook: str = 'reflect_private_members') -> bool:
    '''Whether the class befriends ``<runtime_namespace>::<private_hook>``.

    Only friends naming a declaration are inspected; other friend forms are
    reported and skipped.
    '''
    expected = f'{runtime_namespace}{SCOPE_SEPARATOR}{private_hook}'
    for friend_index in interface.friends_of(index):
        if friend_index.sort != DeclSort.Friend:
            raise InterfaceError(f'Expected a friend declaration, got {friend_index}')
        entity = interface.decl(friend_index).entity
        if entity.sort != ExprSort.NamedDecl:
            log.warning('Unexpected expr sort in friend declaration of %s: %s',
                        index, entity.sort.name)
            continue

        named = interface.expr(entity)
        if qualified_name(interface, named.resolution) == expected \
                and render_type(interface, named.type) == PRIVATE_HOOK_SIGNATURE:
            return True
    return False
