"""
Resolution Context

Per-evaluation state shared between the evaluator and its resolvers:
- context map: collaborators and parser hints keyed by marker objects
- property_resolved: set by the resolver that claims an identifier
- listeners: notified on every claim
- import handler: optional import service
"""

import logging
from typing import Any, Callable, Dict, Hashable, List, Optional

from .imports import ImportHandler

logger = logging.getLogger(__name__)


class _IdentifierHint:
    """
    Marker key under which the parser records, per identifier node, that the
    node was already classified as a plain variable reference.
    """

    def __repr__(self) -> str:
        return "IDENTIFIER_HINT"


IDENTIFIER_HINT = _IdentifierHint()

ResolutionListener = Callable[[Any, Any], None]


class ResolutionContext:
    """
    Per-evaluation context handed to every resolver call.

    The evaluator resets property_resolved before asking a resolver; a resolver
    that takes ownership of (base, property) calls set_property_resolved.
    """

    def __init__(
        self,
        import_handler: Optional[ImportHandler] = None,
        contexts: Optional[Dict[Hashable, Any]] = None,
    ):
        self.import_handler = import_handler
        self.property_resolved = False
        self._contexts: Dict[Hashable, Any] = dict(contexts) if contexts else {}
        self._listeners: List[ResolutionListener] = []

    def get_context(self, key: Hashable) -> Optional[Any]:
        return self._contexts.get(key)

    def put_context(self, key: Hashable, value: Any) -> None:
        if key is None:
            raise ValueError("put_context: key must not be None.")
        if value is None:
            self._contexts.pop(key, None)
            return
        self._contexts[key] = value

    def add_listener(self, listener: ResolutionListener) -> None:
        """Register a callback invoked as listener(base, property) on every claim."""
        self._listeners.append(listener)

    def set_property_resolved(self, base: Any, property: Any) -> None:
        """Claim (base, property): no other resolver will be asked about it."""
        self.property_resolved = True
        logger.debug(f"Property resolved: base={base!r} property={property!r}")
        for listener in self._listeners:
            listener(base, property)
