"""Data-carrying parts: constants, stored values, defaults and change tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .parts import Chain, Part, render


def _chain_render(parent: Any) -> str:
    method = getattr(parent, "_render", None)
    return method() if method is not None else ""


@dataclass(frozen=True)
class StaticData(Part):
    """Part carrying a fixed value, reported by ``get()`` and rendered first."""

    value: Any

    def part(self, base: type) -> type:
        value = self.value

        class StaticDataPart(base):
            @staticmethod
            def get() -> Any:
                return value

            def _render(self) -> str:
                return render(value) + _chain_render(super())

        return StaticDataPart


def static_char(char: str) -> StaticData:
    """Fixed single character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return StaticData(char)


def static_int(number: int) -> StaticData:
    """Fixed integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {number!r}")
    return StaticData(number)


def static_text(text: str) -> StaticData:
    """Fixed text."""
    if not isinstance(text, str):
        raise TypeError(f"expected text, got {text!r}")
    return StaticData(text)


@dataclass(frozen=True)
class DefaultValue(Part):
    """Supply a value to the rest of the chain when constructed without arguments."""

    value: Any

    def part(self, base: type) -> type:
        value = self.value

        class DefaultValuePart(base):
            def __init__(self, *args: Any) -> None:
                super().__init__(*(args or (value,)))

            @staticmethod
            def default_value() -> Any:
                return value

        return DefaultValuePart


@dataclass(frozen=True)
class ReflexOf(Part):
    """Track changes of the watched value by keeping a copy to compare with."""

    def part(self, base: type) -> type:
        if not callable(getattr(base, "get", None)):
            raise TypeError(f"{base.__name__} has no get() to watch")

        class ReflexOfPart(base):
            def __init__(self, *args: Any) -> None:
                super().__init__(*args)
                self.sync()

            def changed(self) -> bool:
                """Whether the watched value differs from the stored copy."""
                return self.reflex != super().get()

            def sync(self) -> None:
                """Store the current watched value."""
                self.reflex = super().get()

            def last(self) -> Any:
                """The stored copy."""
                return self.reflex

            def set(self, value: Any) -> None:
                """Store the current value, then set the new one."""
                self.sync()
                super().set(value)

        return ReflexOfPart


@dataclass(frozen=True)
class Data(Part):
    """Part storing a value; ``kind()`` gives the value used when none is supplied."""

    kind: Callable[[], Any]

    @property
    def watch(self) -> Chain:
        """This data with change tracking on top."""
        return Chain(ReflexOf(), self)

    def part(self, base: type) -> type:
        kind = self.kind

        class DataPart(base):
            data_type = kind

            def __init__(self, *args: Any) -> None:
                if args:
                    value, *rest = args
                    super().__init__(*rest)
                    self.data = value
                else:
                    super().__init__()
                    self.data = kind()

            def get(self) -> Any:
                return self.data

            def set(self, value: Any) -> None:
                self.data = value

            def _render(self) -> str:
                return render(self.data) + _chain_render(super())

        return DataPart


CHAR = Data(str)
INT = Data(int)
FLOAT = Data(float)
TEXT = Data(str)


@dataclass(frozen=True)
class FieldValue(Part):
    """Expose a data part's value as a ``value`` attribute."""

    field: Part

    def part(self, base: type) -> type:
        inner = self.field.part(base)

        class FieldValuePart(inner):
            @property
            def value(self) -> Any:
                return super().get()

            @value.setter
            def value(self, new: Any) -> None:
                super().set(new)

        return FieldValuePart