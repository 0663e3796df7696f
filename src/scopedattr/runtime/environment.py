"""
Attribute Storage

In-memory backing for the four attribute scopes. One dict per tier; the
session tier exists only while a session is active.

Rule: a value of None is never stored. Setting None removes the binding, so
"bound" always means "has a non-None value".
"""

import logging
from typing import Any, Dict, Iterator, Optional

from ..shared.errors import ScopeUnavailableError
from ..shared.scope import Scope

logger = logging.getLogger(__name__)


class AttributeScopes:
    """
    Scope storage collaborator.
    - get_attribute(name, scope): value in one tier (None if unbound)
    - set_attribute(name, value, scope): bind in one tier (None removes)
    - remove_attribute(name, scope=None): unbind in one tier, or in all
    - attribute_names(scope): names bound in one tier, insertion order
    - is_active(scope): False for the session tier when there is no session
    """
    _tiers: Dict[Scope, Optional[Dict[str, Any]]]

    def __init__(self, session: bool = False):
        self._tiers = {
            Scope.PAGE: {},
            Scope.REQUEST: {},
            Scope.SESSION: {} if session else None,
            Scope.APPLICATION: {},
        }

    # -- session lifecycle -----------------------------------------------------

    @property
    def session_active(self) -> bool:
        return self._tiers[Scope.SESSION] is not None

    def start_session(self) -> None:
        """Activate the session tier (no-op when already active)."""
        if self._tiers[Scope.SESSION] is None:
            self._tiers[Scope.SESSION] = {}
            logger.debug("Session scope started")

    def invalidate_session(self) -> None:
        """Drop the session tier and everything bound in it."""
        self._tiers[Scope.SESSION] = None
        logger.debug("Session scope invalidated")

    def is_active(self, scope: Scope) -> bool:
        return self._tiers[scope] is not None

    def _tier(self, scope: Scope) -> Dict[str, Any]:
        tier = self._tiers[scope]
        if tier is None:
            raise ScopeUnavailableError(scope)
        return tier

    # -- attribute access ------------------------------------------------------

    def get_attribute(self, name: str, scope: Scope = Scope.PAGE) -> Optional[Any]:
        if name is None:
            raise ValueError("get_attribute: name must not be None.")
        return self._tier(scope).get(name)

    def set_attribute(self, name: str, value: Any, scope: Scope = Scope.PAGE) -> None:
        if name is None:
            raise ValueError("set_attribute: name must not be None.")
        if value is None:
            self.remove_attribute(name, scope)
            return
        self._tier(scope)[name] = value

    def remove_attribute(self, name: str, scope: Optional[Scope] = None) -> None:
        """Remove name from one tier, or from every active tier when scope is None."""
        if scope is not None:
            self._tier(scope).pop(name, None)
            return
        for tier in self._tiers.values():
            if tier is not None:
                tier.pop(name, None)

    def attribute_names(self, scope: Scope) -> Iterator[str]:
        """Names bound in one tier. Snapshot, so callers may mutate while iterating."""
        return iter(list(self._tier(scope)))
