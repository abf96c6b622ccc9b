"""Reflection registration code generator for C++ module interfaces."""

from . import ir
from . import builder
from . import codegen
from . import backend
from .builder import InterfaceBuilder
from .backend import config, generate, convert, convert_file, scan
from .errors import CodeGenError, ConversionError, InterfaceError
from .loader import dumps_interface, load_interface, loads_interface

__all__ = [
    'ir', 'builder', 'codegen', 'backend',
    'InterfaceBuilder',
    'config', 'generate', 'convert', 'convert_file', 'scan',
    'CodeGenError', 'ConversionError', 'InterfaceError',
    'dumps_interface', 'load_interface', 'loads_interface',
]
