"""
Composite resolver chain.

Resolvers are asked in order; the first one that claims the property (sets
context.property_resolved) wins, even when its answer is None. That is why
the scoped attribute resolver claims on a miss: nothing after it in the chain
gets to reinterpret a bare name.
"""

import logging
from typing import Any, Callable, List, Optional

from ..runtime.context import ResolutionContext
from ..shared.values import FeatureDescriptor
from .scoped_attribute import require_context

logger = logging.getLogger(__name__)


class CompositeResolver:
    def __init__(self, resolvers: Optional[List[Any]] = None):
        self._resolvers: List[Any] = list(resolvers) if resolvers else []

    def add(self, resolver: Any) -> None:
        if resolver is None:
            raise ValueError("add: resolver must not be None.")
        self._resolvers.append(resolver)

    def __len__(self) -> int:
        return len(self._resolvers)

    def _first_claim(self, context: ResolutionContext, call: Callable[[Any], Any], default: Any) -> Any:
        require_context(context)
        context.property_resolved = False
        for resolver in self._resolvers:
            result = call(resolver)
            if context.property_resolved:
                logger.debug(f"Resolved by {type(resolver).__name__}")
                return result
        return default

    def get_value(self, context: ResolutionContext, base: Any, property: Any) -> Optional[Any]:
        return self._first_claim(context, lambda r: r.get_value(context, base, property), None)

    def get_type(self, context: ResolutionContext, base: Any, property: Any) -> Optional[type]:
        return self._first_claim(context, lambda r: r.get_type(context, base, property), None)

    def set_value(self, context: ResolutionContext, base: Any, property: Any, value: Any) -> None:
        self._first_claim(context, lambda r: r.set_value(context, base, property, value), None)

    def is_read_only(self, context: ResolutionContext, base: Any, property: Any) -> bool:
        return self._first_claim(context, lambda r: r.is_read_only(context, base, property), False)

    def get_feature_descriptors(self, context: ResolutionContext, base: Any) -> List[FeatureDescriptor]:
        descriptors: List[FeatureDescriptor] = []
        for resolver in self._resolvers:
            found = resolver.get_feature_descriptors(context, base)
            if found:
                descriptors.extend(found)
        return descriptors

    def get_common_property_type(self, context: ResolutionContext, base: Any) -> Optional[type]:
        for resolver in self._resolvers:
            common = resolver.get_common_property_type(context, base)
            if common is not None:
                return common
        return None
