"""Tests for the per-evaluation resolution context."""

import pytest

from scopedattr.runtime.context import ResolutionContext, IDENTIFIER_HINT
from scopedattr.runtime.environment import AttributeScopes
from scopedattr.runtime.imports import ImportHandler


class TestResolutionContext:
    def test_defaults(self):
        context = ResolutionContext()
        assert context.import_handler is None
        assert context.property_resolved is False
        assert context.get_context(AttributeScopes) is None

    def test_initial_contexts(self):
        storage = AttributeScopes()
        context = ResolutionContext(ImportHandler(), contexts={AttributeScopes: storage})
        assert context.get_context(AttributeScopes) is storage
        assert isinstance(context.import_handler, ImportHandler)

    def test_put_and_clear(self):
        context = ResolutionContext()
        context.put_context(IDENTIFIER_HINT, True)
        assert context.get_context(IDENTIFIER_HINT) is True
        context.put_context(IDENTIFIER_HINT, None)
        assert context.get_context(IDENTIFIER_HINT) is None

    def test_none_key_rejected(self):
        with pytest.raises(ValueError):
            ResolutionContext().put_context(None, 1)

    def test_claim_notifies_every_listener(self):
        seen = []
        context = ResolutionContext()
        context.add_listener(lambda base, prop: seen.append(("first", prop)))
        context.add_listener(lambda base, prop: seen.append(("second", prop)))
        context.set_property_resolved(None, "menu")
        assert context.property_resolved
        assert seen == [("first", "menu"), ("second", "menu")]

    def test_hint_marker_repr(self):
        assert repr(IDENTIFIER_HINT) == "IDENTIFIER_HINT"
