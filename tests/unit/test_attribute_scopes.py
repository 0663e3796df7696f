"""
Tests for in-memory attribute storage and scope definitions.
"""

import pytest

from scopedattr.runtime.environment import AttributeScopes
from scopedattr.shared.errors import ScopeUnavailableError
from scopedattr.shared.scope import Scope, DEFAULT_SCOPE_ORDER


class TestScopeDefinitions:
    def test_default_order_narrowest_first(self):
        assert [s.code for s in DEFAULT_SCOPE_ORDER] == [1, 2, 3, 4]

    def test_labels(self):
        assert [str(s) for s in DEFAULT_SCOPE_ORDER] == ["page", "request", "session", "application"]


class TestAttributeScopes:
    def test_default_scope_is_page(self, storage):
        storage.set_attribute("a", 1)
        assert storage.get_attribute("a", Scope.PAGE) == 1
        assert storage.get_attribute("a") == 1

    def test_tiers_are_independent(self, storage):
        storage.set_attribute("a", 1, Scope.REQUEST)
        storage.set_attribute("a", 2, Scope.APPLICATION)
        assert storage.get_attribute("a", Scope.REQUEST) == 1
        assert storage.get_attribute("a", Scope.APPLICATION) == 2
        assert storage.get_attribute("a", Scope.PAGE) is None

    def test_set_none_removes(self, storage):
        storage.set_attribute("a", 1, Scope.REQUEST)
        storage.set_attribute("a", None, Scope.REQUEST)
        assert list(storage.attribute_names(Scope.REQUEST)) == []

    def test_remove_from_all_tiers(self, session_storage):
        for scope in DEFAULT_SCOPE_ORDER:
            session_storage.set_attribute("a", scope.code, scope)
        session_storage.remove_attribute("a")
        assert all(session_storage.get_attribute("a", s) is None for s in DEFAULT_SCOPE_ORDER)

    def test_names_in_insertion_order(self, storage):
        for name in ("c", "a", "b"):
            storage.set_attribute(name, name, Scope.APPLICATION)
        assert list(storage.attribute_names(Scope.APPLICATION)) == ["c", "a", "b"]

    def test_names_snapshot_allows_mutation(self, storage):
        storage.set_attribute("a", 1)
        storage.set_attribute("b", 2)
        for name in storage.attribute_names(Scope.PAGE):
            storage.remove_attribute(name, Scope.PAGE)
        assert list(storage.attribute_names(Scope.PAGE)) == []

    def test_none_name_rejected(self, storage):
        with pytest.raises(ValueError):
            storage.get_attribute(None)
        with pytest.raises(ValueError):
            storage.set_attribute(None, 1)


class TestSessionLifecycle:
    def test_no_session_by_default(self, storage):
        assert not storage.session_active
        assert not storage.is_active(Scope.SESSION)
        assert storage.is_active(Scope.PAGE)

    @pytest.mark.parametrize("call", [
        lambda s: s.get_attribute("a", Scope.SESSION),
        lambda s: s.set_attribute("a", 1, Scope.SESSION),
        lambda s: s.attribute_names(Scope.SESSION),
        lambda s: s.remove_attribute("a", Scope.SESSION),
    ])
    def test_inactive_session_access_raises(self, storage, call):
        with pytest.raises(ScopeUnavailableError) as exc_info:
            call(storage)
        assert exc_info.value.scope is Scope.SESSION

    def test_start_and_invalidate(self, storage):
        storage.start_session()
        storage.set_attribute("cart", [1], Scope.SESSION)
        storage.start_session()
        assert storage.get_attribute("cart", Scope.SESSION) == [1]
        storage.invalidate_session()
        assert not storage.session_active
        storage.start_session()
        assert storage.get_attribute("cart", Scope.SESSION) is None

    def test_remove_everywhere_skips_inactive_session(self, storage):
        storage.set_attribute("a", 1)
        storage.remove_attribute("a")
        assert storage.get_attribute("a") is None
