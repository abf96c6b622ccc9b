"""Render type references into canonical C++ type names.

Qualifiers are written east-const: after the type they apply to, so that they
compose with declarators without parentheses (``int const*`` is a pointer to
const int, ``int* const`` a const pointer). Directly nested qualified types
are merged and always spelled in the order ``const volatile``.
"""

from __future__ import annotations

import typing

from ..errors import InterfaceError, with_context
from ..ir.sorts import Qualifiers, TypeBasis, TypePrecision, TypeSign, TypeSort
from .namespace import render_namespace, render_referred_declaration

if typing.TYPE_CHECKING:
    from ..ir.index import TypeIndex
    from ..ir.interface import ModuleInterface
    from ..ir.types import FundamentalType


_BASIS_KEYWORDS = {
    TypeBasis.Void: 'void',
    TypeBasis.Bool: 'bool',
    TypeBasis.Char: 'char',
    TypeBasis.Wchar_t: 'wchar_t',
    TypeBasis.Int: 'int',
    TypeBasis.Float: 'float',
    TypeBasis.Double: 'double',
}

_SIZED_CHARACTERS = {
    TypePrecision.Bit8: 'char8_t',
    TypePrecision.Bit16: 'char16_t',
    TypePrecision.Bit32: 'char32_t',
}

# Variants that render as a self-describing token instead of a type name.
UNSUPPORTED_TYPE_SORTS = frozenset({
    TypeSort.VendorExtension,
    TypeSort.Tor,
    TypeSort.Syntactic,
    TypeSort.Expansion,
    TypeSort.PointerToMember,
    TypeSort.Method,
    TypeSort.Array,
    TypeSort.Typename,
    TypeSort.Decltype,
    TypeSort.Forall,
    TypeSort.Unaligned,
    TypeSort.SyntaxTree,
})


def unsupported_type_token(sort: TypeSort) -> str:
    '''Token that makes a downstream compile fail loudly.'''
    return f'<UNSUPPORTED_TYPE {sort.name}>'


def render_fundamental(record: FundamentalType) -> str:
    """Render a fundamental type: sign, precision, then basis."""
    if record.basis == TypeBasis.Char and record.precision in _SIZED_CHARACTERS:
        return _SIZED_CHARACTERS[record.precision]

    rendered = ''
    if record.sign == TypeSign.Unsigned:
        rendered = 'unsigned '
    elif record.sign == TypeSign.Signed and record.basis == TypeBasis.Char:
        # plain char and signed char are distinct types
        rendered = 'signed '

    precision = record.precision
    if precision == TypePrecision.Short:
        return rendered + 'short'
    if precision == TypePrecision.Bit64:
        return rendered + 'long long'
    if precision == TypePrecision.Long:
        rendered += 'long '
    elif precision != TypePrecision.Default:
        rendered += f'<UNEXPECTED_BITNESS {precision.name}>'

    keyword = _BASIS_KEYWORDS.get(record.basis)
    if keyword is None:
        keyword = f'<UNEXPECTED_FUNDAMENTAL_TYPE {record.basis.name}>'
    return rendered + keyword


def render_qualifiers(qualifiers: Qualifiers) -> str:
    '''The east-const suffix for ``qualifiers``; ``restrict`` is dropped.'''
    rendered = ''
    if qualifiers & Qualifiers.Const:
        rendered += ' const'
    if qualifiers & Qualifiers.Volatile:
        rendered += ' volatile'
    return rendered


def _fundamental(_interface, record):
    return render_fundamental(record)


def _designated(interface, record):
    return render_namespace(interface, record.decl) \
        + render_referred_declaration(interface, record.decl)


def _pointer(interface, record):
    return render_type(interface, record.pointee) + '*'


def _lvalue_reference(interface, record):
    return render_type(interface, record.referee) + '&'


def _rvalue_reference(interface, record):
    return render_type(interface, record.referee) + '&&'


def _qualified(interface, record):
    qualifiers = record.qualifiers
    underlying = record.unqualified
    while underlying.sort == TypeSort.Qualified:
        nested = interface.type(underlying)
        qualifiers |= nested.qualifiers
        underlying = nested.unqualified
    return render_type(interface, underlying) + render_qualifiers(qualifiers)


def _base(interface, record):
    # Access and virtuality belong to the base-class fragment.
    return render_type(interface, record.type)


def _tuple(interface, record):
    return ', '.join(render_type(interface, element)
                     for element in interface.tuple_elements(record))


def _function(interface, record):
    parameters = '' if record.source is None else render_type(interface, record.source)
    return f'{render_type(interface, record.target)}({parameters})'


def _placeholder(interface, record):
    if record.elaboration is None:
        raise InterfaceError('Placeholder type has no recorded elaboration')
    return render_type(interface, record.elaboration)


_TYPE_RENDER_DISPATCH = {
    TypeSort.Fundamental: _fundamental,
    TypeSort.Designated: _designated,
    TypeSort.Pointer: _pointer,
    TypeSort.LvalueReference: _lvalue_reference,
    TypeSort.RvalueReference: _rvalue_reference,
    TypeSort.Qualified: _qualified,
    TypeSort.Base: _base,
    TypeSort.Tuple: _tuple,
    TypeSort.Function: _function,
    TypeSort.Placeholder: _placeholder,
}

assert set(_TYPE_RENDER_DISPATCH) | UNSUPPORTED_TYPE_SORTS == set(TypeSort)


@with_context('rendering type {index}')
def render_type(interface: ModuleInterface, index: TypeIndex) -> str:
    '''Render the type ``index`` as canonical C++ text.'''
    handler = _TYPE_RENDER_DISPATCH.get(index.sort)
    if handler is None:
        return unsupported_type_token(index.sort)
    return handler(interface, interface.type(index))
