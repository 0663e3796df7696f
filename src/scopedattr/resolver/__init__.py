"""
Resolvers for receiver-less identifiers.
"""

from .scoped_attribute import ScopedAttributeResolver, should_attempt_class_resolution
from .composite import CompositeResolver
from .hints import probe_hint_key
