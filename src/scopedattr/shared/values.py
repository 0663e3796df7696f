"""
Values produced by resolution: class references, static member lookups and
feature descriptors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from ..utils.config import DESCRIPTOR_TYPE_KEY, DESCRIPTOR_DESIGN_TIME_KEY, PRIVATE_NAME_PREFIX

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Static member lookup result
# -----------------------------------------------------------------------------


class StaticLookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"


@dataclass(frozen=True)
class StaticLookup:
    """Outcome of reading a static member. Only FOUND carries a meaningful value."""
    status: StaticLookupStatus
    value: Any = None
    reason: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is StaticLookupStatus.FOUND


def read_static_member(klass: type, name: str) -> StaticLookup:
    """
    Read a class-level member the way an expression would see it.

    Private (underscore-prefixed) names are refused. AttributeError means the
    member does not exist; any other exception raised while reading (a
    descriptor or metaclass that refuses access, for instance) counts as
    access denied.
    """
    if not name or name.startswith(PRIVATE_NAME_PREFIX):
        return StaticLookup(StaticLookupStatus.ACCESS_DENIED, reason=f"'{name}' is not public")
    try:
        value = getattr(klass, name)
    except AttributeError:
        return StaticLookup(StaticLookupStatus.NOT_FOUND, reason=f"{klass.__qualname__} has no member '{name}'")
    except Exception as e:
        logger.debug(f"Static access {klass.__qualname__}.{name} failed: {e!r}")
        return StaticLookup(StaticLookupStatus.ACCESS_DENIED, reason=repr(e))
    return StaticLookup(StaticLookupStatus.FOUND, value=value)


# -----------------------------------------------------------------------------
# Class reference
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassReference:
    """First-class value standing for an imported class itself (e.g. `${Boolean}`)."""
    klass: type

    @property
    def name(self) -> str:
        return self.klass.__name__

    def get_static(self, member: str) -> StaticLookup:
        """Read a static member of the referenced class (e.g. `${Boolean.TRUE}`)."""
        return read_static_member(self.klass, member)

    def __str__(self) -> str:
        return f"{self.klass.__module__}.{self.klass.__qualname__}"


# -----------------------------------------------------------------------------
# Feature descriptor (design-time listing only; never used for resolution)
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class FeatureDescriptor:
    name: str
    scope: str
    type: type
    short_description: str = ""
    expert: bool = False
    hidden: bool = False
    preferred: bool = True
    resolvable_at_design_time: bool = False
    display_name: str = field(default="")

    def __post_init__(self):
        if not self.display_name:
            object.__setattr__(self, "display_name", self.name)

    def attributes(self) -> Dict[str, Any]:
        """Named attribute values in the classic descriptor key format."""
        return {
            DESCRIPTOR_TYPE_KEY: self.type,
            DESCRIPTOR_DESIGN_TIME_KEY: self.resolvable_at_design_time,
        }
