"""Test utilities for neat_codegen."""

from neat_codegen.builder import InterfaceBuilder
from neat_codegen.backend import generate


def run_codegen(name: str, builder: callable, checker: callable,
                print_dump: bool = False, **kwargs):
    """
    Lightweight code generation test utility.

    Args:
        name: Module name of the interface being built
        builder: Callable that populates the interface (receives the InterfaceBuilder)
        checker: Callable that validates the generated document (receives a string)
        print_dump: Whether to print the generated document to stdout
        **kwargs: Additional config passed to generate()

    Returns:
        The generated document.
    """
    interface_builder = InterfaceBuilder(name)
    builder(interface_builder)
    interface = interface_builder.build()

    document = generate(interface, **kwargs)

    if print_dump:
        print(f"\n=== {name} reflection data ===")
        print(document)

    checker(document)
    return document
