"""Working set of macro parameters."""

from __future__ import annotations

from collections.abc import Iterator

from confluence_publisher.macro.options import MacroParameter


class ParameterSet:
    """Mapping from MacroParameter to value where the first write wins.

    Iteration follows MacroParameter declaration order, not insertion
    order, so rendered markup does not depend on the order of builder calls.

    Example:
        params = ParameterSet()
        params.set(MacroParameter.TITLE, "A")
        params.set(MacroParameter.TITLE, "B")  # ignored
        params.get(MacroParameter.TITLE)       # "A"
    """

    def __init__(self) -> None:
        self._values: dict[MacroParameter, str] = {}

    def set(self, name: MacroParameter, value: str) -> bool:
        """Store value unless name is already present.

        Returns:
            True if the value was stored, False if the call was a no-op
        """
        if name in self._values:
            return False
        self._values[name] = value
        return True

    def has(self, name: MacroParameter) -> bool:
        return name in self._values

    def get(self, name: MacroParameter, default: str | None = None) -> str | None:
        return self._values.get(name, default)

    def entries(self) -> Iterator[tuple[MacroParameter, str]]:
        """Yield (name, value) pairs in declaration order.

        Each call returns a new iterator.
        """
        return ((name, self._values[name]) for name in MacroParameter if name in self._values)

    def as_dict(self) -> dict[MacroParameter, str]:
        """Copy of the parameters in declaration order."""
        return dict(self.entries())

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[MacroParameter]:
        return (name for name, _ in self.entries())

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{name.wire_name}={value!r}" for name, value in self.entries())
        return f"ParameterSet({items})"
