"""
Shared components: scopes, errors and resolution values.
"""

from .errors import (
    ScopedAttrError, MissingContextError, ScopeUnavailableError,
    ImportResolutionError, ImportConflictError, AmbiguousImportError,
    ResolverConfigurationError,
)
from .scope import Scope, DEFAULT_SCOPE_ORDER, validate_scope_order
from .values import (
    ClassReference, FeatureDescriptor, StaticLookup, StaticLookupStatus, read_static_member,
)
