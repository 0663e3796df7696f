"""
Attribute scopes: the ordered tiers of a scope chain.

Each tier is a name → value store with its own lifetime (one render pass,
one request, one session, the whole application). Priority is not implied by
the numeric code: resolvers are handed an explicit ordered tuple of scopes
(DEFAULT_SCOPE_ORDER unless configured otherwise).
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from ..utils.config import (
    PAGE_SCOPE_CODE, REQUEST_SCOPE_CODE, SESSION_SCOPE_CODE, APPLICATION_SCOPE_CODE,
    PAGE_SCOPE_LABEL, REQUEST_SCOPE_LABEL, SESSION_SCOPE_LABEL, APPLICATION_SCOPE_LABEL,
    PAGE_SCOPE_DESCRIPTION, REQUEST_SCOPE_DESCRIPTION, SESSION_SCOPE_DESCRIPTION,
    APPLICATION_SCOPE_DESCRIPTION,
)
from .errors import ResolverConfigurationError


# -----------------------------------------------------------------------------
# Scope tier
# -----------------------------------------------------------------------------


class Scope(Enum):
    PAGE = (PAGE_SCOPE_CODE, PAGE_SCOPE_LABEL, PAGE_SCOPE_DESCRIPTION)
    REQUEST = (REQUEST_SCOPE_CODE, REQUEST_SCOPE_LABEL, REQUEST_SCOPE_DESCRIPTION)
    SESSION = (SESSION_SCOPE_CODE, SESSION_SCOPE_LABEL, SESSION_SCOPE_DESCRIPTION)
    APPLICATION = (APPLICATION_SCOPE_CODE, APPLICATION_SCOPE_LABEL, APPLICATION_SCOPE_DESCRIPTION)

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def label(self) -> str:
        """Human-readable scope label ("page", "request", ...)."""
        return self.value[1]

    @property
    def description(self) -> str:
        """Short description used on feature descriptors."""
        return self.value[2]

    def __str__(self) -> str:
        return self.label


# Narrowest first
DEFAULT_SCOPE_ORDER: Tuple[Scope, ...] = (
    Scope.PAGE,
    Scope.REQUEST,
    Scope.SESSION,
    Scope.APPLICATION,
)


def validate_scope_order(scopes: Iterable[Scope]) -> Tuple[Scope, ...]:
    """Freeze a scope order, rejecting empty orders, duplicates and non-Scope entries."""
    order = tuple(scopes)
    if not order:
        raise ResolverConfigurationError("Scope order must name at least one scope")
    for scope in order:
        if not isinstance(scope, Scope):
            raise ResolverConfigurationError(f"Not a scope: {scope!r}")
    if len(set(order)) != len(order):
        labels = ", ".join(s.label for s in order)
        raise ResolverConfigurationError(f"Scope order contains duplicates: {labels}")
    return order
