"""Registry of options which can be easily tested."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from ._TESTABLE_OPTIONS import TESTABLE_OPTIONS
from .OptionDefinition import OptionDefinition


class OptionRegistry:
    """Read-only mapping from option value to its definition.

    Built fresh for every scan and never mutated afterwards, so the
    definitions handed out by a scan stay valid for as long as callers hold them.
    """

    def __init__(self, definitions: Iterable[OptionDefinition]):
        entries: dict[str, OptionDefinition] = {}
        for definition in definitions:
            if definition.value in entries:
                raise ValueError(f"Duplicate option in registry: {definition.value!r}")
            entries[definition.value] = definition
        self._entries = MappingProxyType(entries)

    @classmethod
    def build(cls, extra: Iterable[OptionDefinition] = ()) -> "OptionRegistry":
        """Build the registry from the built-in catalog plus optional extra entries.

        Args:
            extra: Additional option definitions (e.g. from configuration)

        Returns:
            New registry instance

        Raises:
            ValueError: If an extra entry reuses an existing option value
        """
        return cls([*TESTABLE_OPTIONS, *extra])

    def get(self, value: str) -> OptionDefinition | None:
        return self._entries.get(value)

    def __contains__(self, value: object) -> bool:
        return value in self._entries

    def __iter__(self) -> Iterator[OptionDefinition]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"OptionRegistry({', '.join(self._entries)})"
