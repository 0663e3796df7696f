"""
scopedattr: scoped attribute resolution for expression runtimes.

Bare identifiers in expressions resolve against page, request, session and
application scopes, falling back to imported classes and static members.
"""

from .shared import (
    Scope, DEFAULT_SCOPE_ORDER,
    ClassReference, FeatureDescriptor, StaticLookup, StaticLookupStatus, read_static_member,
    ScopedAttrError, MissingContextError, ScopeUnavailableError,
    ImportResolutionError, ImportConflictError, AmbiguousImportError,
    ResolverConfigurationError,
)
from .runtime import AttributeScopes, ImportHandler, ResolutionContext, IDENTIFIER_HINT
from .resolver import (
    ScopedAttributeResolver, CompositeResolver, should_attempt_class_resolution, probe_hint_key,
)

__version__ = "0.1.0"
