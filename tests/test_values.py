"""Tests for value parsers and the registry."""

import pytest

from imc import (
    ConfigError,
    ListValueParser,
    RawValueParser,
    StructuredValueParser,
    ValueParserRegistry,
    registry_for,
)


class TestValueParsers:
    def test_raw(self):
        assert RawValueParser().parse("x;y") == [["x;y"]]

    def test_structured(self):
        value = StructuredValueParser().parse(";;123 Main St;Anytown;CA;12345;USA")
        assert value == [[""], [""], ["123 Main St"], ["Anytown"], ["CA"], ["12345"], ["USA"]]

    def test_structured_with_lists(self):
        assert StructuredValueParser().parse("Doe;John,J.") == [["Doe"], ["John", "J."]]

    def test_structured_without_lists(self):
        value = StructuredValueParser(split_lists=False).parse("ACME;Sales,Dept")
        assert value == [["ACME"], ["Sales,Dept"]]

    def test_list(self):
        assert ListValueParser().parse("a, b,c") == [["a", "b", "c"]]


class TestRegistry:
    def test_unknown_name_uses_default(self):
        registry = ValueParserRegistry()
        assert isinstance(registry.get("TEL"), RawValueParser)
        assert registry.parse("TEL", "555") == [["555"]]

    def test_names_uppercased(self):
        registry = ValueParserRegistry()
        registry.register("n", StructuredValueParser())
        assert "N" in registry
        assert "n" in registry
        assert registry.names() == ["N"]
        assert registry.parse("N", "Doe;John") == [["Doe"], ["John"]]

    def test_unregister(self):
        registry = ValueParserRegistry({"N": StructuredValueParser()})
        registry.unregister("n")
        assert "N" not in registry
        assert registry.parse("N", "Doe;John") == [["Doe;John"]]

    def test_custom_default(self):
        registry = ValueParserRegistry(default=ListValueParser())
        assert registry.parse("ANYTHING", "a,b") == [["a", "b"]]

    def test_vcard_profile(self):
        registry = registry_for("vcard")
        assert "N" in registry
        assert "ADR" in registry
        assert "TEL" not in registry

    def test_icalendar_profile(self):
        registry = registry_for("ICALENDAR")
        assert registry.parse("GEO", "37.386013;-122.082932") == [["37.386013"], ["-122.082932"]]
        assert "DTSTART" not in registry

    def test_generic_profile_is_empty(self):
        assert registry_for("generic").names() == []

    def test_profiles_are_independent(self):
        first = registry_for("vcard")
        first.unregister("N")
        assert "N" in registry_for("vcard")

    def test_unknown_profile(self):
        with pytest.raises(ConfigError):
            registry_for("nope")
