"""Unit tests for smokegen.api.option.OptionRegistry module."""

import dataclasses

import pytest

from smokegen.api.option.OptionDefinition import OptionDefinition
from smokegen.api.option.OptionKind import OptionKind
from smokegen.api.option.OptionRegistry import OptionRegistry

pytestmark = pytest.mark.unit


class TestOptionRegistry:
    """Test OptionRegistry class."""

    def test_build_has_builtin_options(self):
        registry = OptionRegistry.build()

        assert len(registry) == 2
        assert registry.get("h") == OptionDefinition(OptionKind.SHORT, "h", "help")
        assert registry.get("v") == OptionDefinition(OptionKind.SHORT, "v", "version")

    def test_build_preserves_insertion_order(self):
        registry = OptionRegistry.build()
        assert [d.value for d in registry] == ["h", "v"]

    def test_get_unknown_returns_none(self):
        registry = OptionRegistry.build()
        assert registry.get("x") is None
        assert "x" not in registry
        assert "h" in registry

    def test_build_with_extra_options(self):
        extra = OptionDefinition(OptionKind.SHORT, "V", "version")
        registry = OptionRegistry.build([extra])

        assert len(registry) == 3
        assert registry.get("V") is extra

    def test_duplicate_value_rejected(self):
        with pytest.raises(ValueError, match="Duplicate option"):
            OptionRegistry.build([OptionDefinition(OptionKind.SHORT, "h", "usage")])

    def test_build_is_deterministic(self):
        assert list(OptionRegistry.build()) == list(OptionRegistry.build())

    def test_definitions_are_immutable(self):
        definition = OptionRegistry.build().get("h")
        with pytest.raises(dataclasses.FrozenInstanceError):
            definition.keyword = "usage"  # type: ignore[misc]

    def test_entries_cannot_be_replaced(self):
        registry = OptionRegistry.build()
        with pytest.raises(TypeError):
            registry._entries["h"] = OptionDefinition(OptionKind.SHORT, "h", "usage")  # type: ignore[index]


class TestOptionDefinition:
    """Test OptionDefinition value object."""

    def test_short_flag(self):
        assert OptionDefinition(OptionKind.SHORT, "h", "help").flag == "-h"

    def test_long_flag(self):
        assert OptionDefinition(OptionKind.LONG, "help", "help").flag == "--help"
