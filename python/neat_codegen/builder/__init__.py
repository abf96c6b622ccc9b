'''Construction helpers for module interfaces and generated identifiers.'''

from .interface_builder import InterfaceBuilder
from .unique_name import UniqueNameCache

__all__ = [
    'InterfaceBuilder',
    'UniqueNameCache',
]
