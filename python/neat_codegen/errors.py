"""Contextual errors for the reflection code generator.

A ``CodeGenError`` collects human-readable context frames while it unwinds,
innermost first, so that a failure deep inside type rendering reads like::

    Placeholder type has no recorded elaboration
      while rendering type Placeholder#0
      while rendering type Pointer#2
      while emitting members of 'Game::Player'
      while converting 'game.ifc.json' to 'game.cpp'

Frames are attached by the ``with_context`` decorator on the recursive
functions, or by ``context_area`` around an inline block.
"""

from __future__ import annotations

import contextlib
import inspect

from decorator import decorator


class CodeGenError(Exception):
    '''Failure that aborts the conversion of the current artifact.'''

    def __init__(self, message: str, *context: str):
        super().__init__(message)
        self.message = message
        self.context = list(context)

    def add_context(self, frame: str) -> None:
        '''Append an outer context frame.'''
        self.context.append(frame)

    def __str__(self):
        lines = [self.message]
        lines.extend(f'  while {frame}' for frame in self.context)
        return '\n'.join(lines)


class InterfaceError(CodeGenError):
    '''The interface graph violates one of its own invariants.'''


class ConversionError(CodeGenError):
    '''The artifact could not be read or the output could not be written.'''


def with_context(fmt: str):
    '''Attach ``fmt`` as a context frame to any ``CodeGenError`` raised inside.

    ``fmt`` is formatted with the decorated function's bound arguments, so
    ``@with_context('rendering type {index}')`` reads the ``index`` argument.
    '''

    @decorator
    def _contextual(func, *args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CodeGenError as err:
            bound = inspect.signature(func).bind(*args, **kwargs)
            bound.apply_defaults()
            err.add_context(fmt.format(**bound.arguments))
            raise

    return _contextual


@contextlib.contextmanager
def context_area(frame: str):
    '''The ``with`` form of ``with_context`` for a block of statements.'''
    try:
        yield
    except CodeGenError as err:
        err.add_context(frame)
        raise
