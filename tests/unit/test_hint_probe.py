"""Tests for probing the parser hint marker by dotted name."""

import pytest

from scopedattr.runtime.context import IDENTIFIER_HINT
from scopedattr.resolver.hints import probe_hint_key


@pytest.mark.parametrize("dotted_name", [
    None,
    "",
    "IDENTIFIER_HINT",
    "no_such_module.Marker",
    "scopedattr.runtime.context.NoSuchMarker",
])
def test_absent_marker_is_none(dotted_name):
    assert probe_hint_key(dotted_name) is None


def test_present_marker_is_returned():
    assert probe_hint_key("scopedattr.runtime.context.IDENTIFIER_HINT") is IDENTIFIER_HINT


def test_any_object_can_be_a_marker():
    import collections
    assert probe_hint_key("collections.OrderedDict") is collections.OrderedDict
