"""Find the exported classes and structs of an interface."""

from __future__ import annotations

import logging

from ..ir.visitor import Visitor
from .visibility import is_decl_exported

log = logging.getLogger(__name__)


class DeclarationScanner(Visitor):
    """Collects eligible aggregates in depth-first pre-order.

    Namespaces are entered, classes and structs are collected when exported,
    unions are skipped. Members of aggregates are left to the emitter.
    """

    def __init__(self, interface):
        super().__init__(interface)
        self.aggregates = []

    def visit_aggregate(self, node, index):
        if is_decl_exported(self.interface, index):
            self.aggregates.append((index, node))
        else:
            log.debug('Skipping non-exported %s', index)

    def visit_union(self, node, index):
        log.debug('Skipping union %s, unions are not reflected', index)


def scan_aggregates(interface):
    '''Exported classes and structs as ``(index, scope)`` pairs, in scan order.'''
    scanner = DeclarationScanner(interface)
    scanner.visit_interface()
    return scanner.aggregates
