"""
Pytest configuration and shared fixtures for scopedattr tests.

Every test gets fresh storage, a fresh context and a recorder that counts
resolution claims.
"""

import sys
import pytest
from typing import Any, List, Tuple
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from scopedattr.runtime.context import ResolutionContext, IDENTIFIER_HINT
from scopedattr.runtime.environment import AttributeScopes
from scopedattr.runtime.imports import ImportHandler
from scopedattr.resolver.scoped_attribute import ScopedAttributeResolver


class ClaimRecorder:
    """Resolution listener that records every (base, property) claim."""

    def __init__(self):
        self.claims: List[Tuple[Any, Any]] = []

    def __call__(self, base: Any, property: Any) -> None:
        self.claims.append((base, property))

    def __len__(self) -> int:
        return len(self.claims)


# =============================================================================
# Collaborators
# =============================================================================

@pytest.fixture
def storage():
    """Attribute storage with no active session."""
    return AttributeScopes()


@pytest.fixture
def session_storage():
    """Attribute storage with an active session."""
    return AttributeScopes(session=True)


@pytest.fixture
def import_handler():
    return ImportHandler()


@pytest.fixture
def claims():
    return ClaimRecorder()


@pytest.fixture
def make_context(claims):
    """Factory: context carrying the given storage and import handler, with the claim recorder attached."""
    def _make_context(storage, import_handler=None):
        context = ResolutionContext(import_handler=import_handler)
        context.put_context(AttributeScopes, storage)
        context.add_listener(claims)
        return context
    return _make_context


@pytest.fixture
def context(make_context, storage, import_handler):
    return make_context(storage, import_handler)


@pytest.fixture
def resolver():
    return ScopedAttributeResolver(hint_key=IDENTIFIER_HINT)


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
