"""
Scoped Attribute Resolver

Resolves receiver-less identifiers (`${menu}`, `${Boolean}`, `${TRUE}`):
1. claim the identifier, hit or miss, so no other resolver is consulted
2. search the scope chain, narrowest first
3. on a miss, and only when the gate allows it, ask the import service for a
   class or a statically imported member

The gate skips class resolution for identifiers the parser already marked as
plain variable references, and for any identifier that does not start with an
upper-case letter. Class and static member names are expected to follow the
upper-case convention; a lower-case class name never resolves here.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from typing_extensions import TypeAlias

from ..runtime.context import ResolutionContext
from ..runtime.environment import AttributeScopes
from ..shared.errors import MissingContextError
from ..shared.scope import Scope, DEFAULT_SCOPE_ORDER, validate_scope_order
from ..shared.values import ClassReference, FeatureDescriptor, read_static_member
from ..utils.config import hint_key_name
from .hints import probe_hint_key

logger: logging.Logger = logging.getLogger(__name__)

# None: no hint available for this identifier node
IdentifierHint: TypeAlias = Optional[bool]

_PROBE = object()


def should_attempt_class_resolution(identifier: str, hint: IdentifierHint = None) -> bool:
    """
    Decide whether a scope-chain miss is worth a class/static lookup.

    False when the parser already classified the node as a plain variable
    reference, or when the identifier does not start with an upper-case letter.
    """
    if hint:
        return False
    if not identifier or not identifier[0].isupper():
        return False
    return True


def require_context(context: Optional[ResolutionContext]) -> ResolutionContext:
    if context is None:
        raise MissingContextError("Resolution context must not be None")
    return context


class ScopedAttributeResolver:
    """
    Resolver for identifiers without a receiving object.

    Args:
        scopes: scope priority, narrowest first; fixed for the resolver's lifetime
        hint_key: marker under which the parser stores identifier hints in the
            context. Probed by name (config.hint_key_name()) when omitted;
            None disables the hint and leaves only the naming convention.
    """

    def __init__(self, scopes: Iterable[Scope] = DEFAULT_SCOPE_ORDER, hint_key: Any = _PROBE):
        self._scopes: Tuple[Scope, ...] = validate_scope_order(scopes)
        if hint_key is _PROBE:
            hint_key = probe_hint_key(hint_key_name())
        self._hint_key = hint_key

    @property
    def scopes(self) -> Tuple[Scope, ...]:
        return self._scopes

    @property
    def hint_key(self) -> Optional[Any]:
        return self._hint_key

    # -- collaborators ---------------------------------------------------------

    @staticmethod
    def _storage(context: ResolutionContext) -> AttributeScopes:
        storage = context.get_context(AttributeScopes)
        if storage is None:
            raise MissingContextError("Resolution context carries no attribute storage")
        return storage

    def _hint(self, context: ResolutionContext) -> IdentifierHint:
        if self._hint_key is None:
            return None
        value = context.get_context(self._hint_key)
        return None if value is None else bool(value)

    # -- scope chain -----------------------------------------------------------

    def _lookup(self, storage: AttributeScopes, key: str) -> Optional[Any]:
        for scope in self._scopes:
            if not storage.is_active(scope):
                continue
            value = storage.get_attribute(key, scope)
            if value is not None:
                return value
        return None

    def _bound_scope(self, storage: AttributeScopes, key: str) -> Optional[Scope]:
        for scope in self._scopes:
            if storage.is_active(scope) and storage.get_attribute(key, scope) is not None:
                return scope
        return None

    def _default_scope(self, storage: AttributeScopes) -> Scope:
        """Narrowest active tier. With none active, the narrowest configured one, which the storage refuses."""
        for scope in self._scopes:
            if storage.is_active(scope):
                return scope
        return self._scopes[0]

    # -- class / static fallback -----------------------------------------------

    def resolve_class_or_static(self, context: ResolutionContext, key: str) -> Optional[Any]:
        """Imported class (as a ClassReference) or statically imported member value, else None."""
        import_handler = context.import_handler
        if import_handler is None:
            return None

        klass = import_handler.resolve_class(key)
        if klass is not None:
            return ClassReference(klass)

        klass = import_handler.resolve_static(key)
        if klass is None:
            return None
        lookup = read_static_member(klass, key)
        if not lookup.found:
            logger.debug(f"Static member {klass.__qualname__}.{key} unresolved ({lookup.status.value}): {lookup.reason}")
            return None
        return lookup.value

    # -- resolver operations ---------------------------------------------------

    def get_value(self, context: ResolutionContext, base: Any, property: Any) -> Optional[Any]:
        require_context(context)
        if base is not None:
            return None
        context.set_property_resolved(base, property)
        if property is None:
            return None

        key = str(property)
        storage = self._storage(context)
        result = self._lookup(storage, key)
        if result is not None:
            return result

        if not should_attempt_class_resolution(key, self._hint(context)):
            logger.debug(f"Skipping class resolution for '{key}'")
            return None
        return self.resolve_class_or_static(context, key)

    def get_type(self, context: ResolutionContext, base: Any, property: Any) -> Optional[type]:
        require_context(context)
        if base is not None:
            return None
        context.set_property_resolved(base, property)
        return object

    def set_value(self, context: ResolutionContext, base: Any, property: Any, value: Any) -> None:
        require_context(context)
        if base is not None:
            return
        context.set_property_resolved(base, property)
        if property is None:
            return

        key = str(property)
        storage = self._storage(context)
        scope = self._bound_scope(storage, key)
        if scope is None:
            scope = self._default_scope(storage)
        storage.set_attribute(key, value, scope)

    def is_read_only(self, context: ResolutionContext, base: Any, property: Any) -> bool:
        require_context(context)
        if base is None:
            context.set_property_resolved(base, property)
        return False

    def get_feature_descriptors(self, context: ResolutionContext, base: Any) -> Optional[List[FeatureDescriptor]]:
        """All bound attributes, in scope priority order then storage order. Inactive tiers are skipped."""
        require_context(context)
        if base is not None:
            return None
        storage = self._storage(context)
        descriptors: List[FeatureDescriptor] = []
        for scope in self._scopes:
            if not storage.is_active(scope):
                continue
            for name in storage.attribute_names(scope):
                value = storage.get_attribute(name, scope)
                if value is None:
                    continue
                descriptors.append(FeatureDescriptor(
                    name=name,
                    scope=scope.label,
                    type=type(value),
                    short_description=scope.description,
                ))
        return descriptors

    def get_common_property_type(self, context: ResolutionContext, base: Any) -> Optional[type]:
        return str if base is None else None
