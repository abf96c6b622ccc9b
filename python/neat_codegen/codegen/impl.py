'''The module to generate the reflection document for a module interface'''

from __future__ import annotations

from ..errors import InterfaceError, context_area
from ..ir.interface import ModuleInterface
from ..ir.sorts import UnitSort
from . import template
from .assembler import Assembler
from .members import emit_type
from .scanner import scan_aggregates


def codegen(interface: ModuleInterface, **kwargs) -> str:
    '''
    Generate the reflection registration source for ``interface``.

    Args:
        interface (ModuleInterface): The parsed module interface
        runtime_namespace: Namespace of the runtime type registry
        private_hook: Friend function name opting a class into private reflection
        template: Document template, ``None`` for the built-in one
        verbose: Whether to print every registered type
    '''
    if interface.header.sort != UnitSort.Primary:
        raise InterfaceError(
            'Only primary module interface units are supported, '
            f'got a {interface.header.sort.name} unit')

    runtime_namespace = kwargs.get('runtime_namespace') or template.DEFAULT_RUNTIME_NAMESPACE
    private_hook = kwargs.get('private_hook') or template.DEFAULT_PRIVATE_HOOK
    assembler = Assembler(runtime_namespace, private_hook, kwargs.get('template'))

    with context_area(f"generating reflection data for module '{interface.module_name}'"):
        try:
            aggregates = scan_aggregates(interface)
            for index, scope in aggregates:
                registration = emit_type(interface, index, scope, runtime_namespace, private_hook)
                identifier = assembler.add(registration)
                if kwargs.get('verbose'):
                    print(f'Registered {registration.name} as {identifier}: '
                          f'{len(registration.bases)} bases, {len(registration.fields)} fields, '
                          f'{len(registration.methods)} methods')
        except RecursionError as err:
            # the graph must be acyclic; a cycle recurses without bound
            raise InterfaceError(
                'The interface graph is cyclic or nested too deeply to render') from err

    return assembler.document(interface.module_name)
