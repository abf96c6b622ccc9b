"""Assemble per-type registrations into one reflection document."""

from __future__ import annotations

from ..builder.unique_name import UniqueNameCache
from . import template


def to_identifier(name: str) -> str:
    """Transliterate a qualified name into a C++ identifier.

    Lowercases, separates words at every lower-to-upper transition, and maps
    every other non-alphanumeric character to ``_``. A trailing ``_`` keeps
    the result clear of keywords: ``Game::PlayerState`` becomes
    ``game___player_state_``.
    """
    result = []
    previous_upper = True
    for c in name:
        if not previous_upper and c.isupper():
            result.append('_')
        result.append(c.lower() if c.isalnum() else '_')
        previous_upper = c.isupper()
    result.append('_')
    return ''.join(result)


def render_access(access, runtime_namespace=template.DEFAULT_RUNTIME_NAMESPACE) -> str:
    '''``Neat::Access::Public`` and friends.'''
    return template.ACCESS.format(runtime_namespace=runtime_namespace, access=access.name)


def render_document(text: str, module_name: str, registration_body: str,
                    runtime_namespace=template.DEFAULT_RUNTIME_NAMESPACE,
                    private_hook=template.DEFAULT_PRIVATE_HOOK) -> str:
    '''Splice the placeholders of a document template.'''
    # The body goes in last so its text is never scanned for placeholders.
    return text.replace(template.MODULE_NAME, module_name) \
        .replace(template.RUNTIME_NAMESPACE, runtime_namespace) \
        .replace(template.PRIVATE_HOOK, private_hook) \
        .replace(template.REGISTRATION_BODY, registration_body)


class Assembler:
    """Accumulates registration statements in scan order."""

    def __init__(self, runtime_namespace=template.DEFAULT_RUNTIME_NAMESPACE,
                 private_hook=template.DEFAULT_PRIVATE_HOOK, document=None):
        self.runtime_namespace = runtime_namespace
        self.private_hook = private_hook
        self.document_template = template.DOCUMENT if document is None else document
        self._names = UniqueNameCache()
        self._statements = []

    def _access(self, access):
        return render_access(access, self.runtime_namespace)

    def render_bases(self, bases):
        '''Base-class fragments, in order.'''
        return ''.join(
            template.BASE.format(type=base.type, access=self._access(base.access))
            for base in bases)

    def render_fields(self, fields):
        '''Field fragments, in order.'''
        return ''.join(
            template.FIELD.format(owner=field.owner, type=field.type, name=field.name,
                                  access=self._access(field.access))
            for field in fields)

    def render_methods(self, methods):
        '''Method fragments, in order.'''
        return ''.join(
            template.METHOD.format(
                owner=method.owner,
                return_type=method.return_type,
                parameters=f', {method.parameters}' if method.parameters else '',
                name=method.name,
                access=self._access(method.access))
            for method in methods)

    def add(self, registration):
        '''Append the statement registering one type; returns its identifier.'''
        identifier = self._names.get_unique_name(to_identifier(registration.name))
        self._statements.append(template.REGISTRATION.format(
            identifier=identifier,
            name=registration.name,
            bases=self.render_bases(registration.bases),
            fields=self.render_fields(registration.fields),
            methods=self.render_methods(registration.methods),
        ))
        return identifier

    @property
    def body(self) -> str:
        '''All registration statements so far.'''
        return ''.join(self._statements)

    def document(self, module_name: str) -> str:
        '''The complete document for ``module_name``.'''
        return render_document(self.document_template, module_name, self.body,
                               self.runtime_namespace, self.private_hook)
