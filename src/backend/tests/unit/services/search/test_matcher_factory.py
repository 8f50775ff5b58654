"""
Unit tests for MatcherFactory

Tests building a registry from matchers.json content.
"""

import pytest

from flowsearch.exceptions import MatcherConfigurationError
from flowsearch.models.components import ComponentKind
from flowsearch.services.search.matcher_factory import MatcherFactory
from flowsearch.services.search.matchers import (
    BasicMatcher,
    CompositeMatcher,
    ConnectivityMatcher
)


@pytest.mark.unit
class TestMatcherFactory:
    """Test config-driven registry creation"""

    def test_single_matcher_registered_directly(self):
        registry = MatcherFactory({"component_kinds": {"connection": ["connectivity"]}}).create_registry()

        assert isinstance(registry.get_matcher(ComponentKind.CONNECTION), ConnectivityMatcher)

    def test_multiple_matchers_chained_in_order(self):
        config = {"component_kinds": {"connection": ["basic", "connectivity", "back_pressure"]}}

        matcher = MatcherFactory(config).create_registry().get_matcher("connection")

        assert isinstance(matcher, CompositeMatcher)
        assert [m.get_name() for m in matcher.matchers] == ["basic", "connectivity", "backpressure"]

    def test_registers_every_configured_kind(self):
        config = {"component_kinds": {"funnel": ["basic"], "label": ["basic", "label"]}}

        registry = MatcherFactory(config).create_registry()

        assert registry.registered_kinds() == [ComponentKind.FUNNEL, ComponentKind.LABEL]

    def test_every_known_matcher_can_be_created(self):
        factory = MatcherFactory({})
        for name in MatcherFactory.MATCHER_CLASSES:
            assert factory.create_matcher(name) is not None

    def test_fresh_instance_per_name(self):
        factory = MatcherFactory({})
        assert factory.create_matcher("basic") is not factory.create_matcher("basic")
        assert isinstance(factory.create_matcher("basic"), BasicMatcher)

    def test_unknown_matcher_raises(self):
        with pytest.raises(MatcherConfigurationError, match="fuzzy"):
            MatcherFactory({"component_kinds": {"connection": ["fuzzy"]}}).create_registry()

    def test_unknown_kind_raises(self):
        with pytest.raises(MatcherConfigurationError, match="widget"):
            MatcherFactory({"component_kinds": {"widget": ["basic"]}}).create_registry()

    def test_empty_matcher_list_raises(self):
        with pytest.raises(MatcherConfigurationError):
            MatcherFactory({"component_kinds": {"funnel": []}}).create_registry()

    def test_import_failure_raises(self, monkeypatch):
        monkeypatch.setitem(
            MatcherFactory.MATCHER_CLASSES, "broken", ("flowsearch.services.search.matchers.basic", "Missing")
        )

        with pytest.raises(MatcherConfigurationError, match="Missing"):
            MatcherFactory({}).create_matcher("broken")

    def test_empty_config_gives_empty_registry(self):
        assert MatcherFactory({}).create_registry().registered_kinds() == []
