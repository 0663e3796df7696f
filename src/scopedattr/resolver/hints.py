"""
Parser hint probing.

The upstream parser may flag identifier nodes it already classified as plain
variable references, storing True in the resolution context under a marker
key. Whether such a parser (and therefore the marker) is present is only known
at startup, so the marker is looked up by dotted name and its absence simply
disables the hint.
"""

import importlib
import logging
from typing import Any, Optional

from ..utils.config import NAME_SEPARATOR

logger = logging.getLogger(__name__)


def probe_hint_key(dotted_name: Optional[str]) -> Optional[Any]:
    """Return the object named 'pkg.mod.Attr', or None when it cannot be found."""
    if not dotted_name:
        return None
    module_name, sep, attr = dotted_name.rpartition(NAME_SEPARATOR)
    if not sep or not module_name:
        logger.debug(f"Hint key '{dotted_name}' is not a qualified name; hints disabled")
        return None
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        logger.debug(f"Hint key module '{module_name}' not available; hints disabled")
        return None
    key = getattr(module, attr, None)
    if key is None:
        logger.debug(f"Hint key '{dotted_name}' not found; hints disabled")
    return key
