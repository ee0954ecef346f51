"""Composable parts: build classes by stacking mixin parts onto a terminal base."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


def render(obj: Any) -> str:
    """Render a value the way a stream insertion would print it."""
    if isinstance(obj, bool):
        return "1" if obj else "0"
    method = getattr(obj, "_render", None)
    if callable(method):
        return method()
    return str(obj)


class Nil:
    """Default chain terminator: takes no constructor arguments and renders nothing."""

    def __init__(self, *args: Any) -> None:
        if args:
            raise TypeError(f"unused constructor arguments reached the chain end: {args!r}")
        super().__init__()

    def _render(self) -> str:
        return ""

    def __str__(self) -> str:
        return render(self)


class Part(ABC):
    """A part extends a base class into a new class."""

    @abstractmethod
    def part(self, base: type) -> type:
        """Return a new class that extends *base* with this part."""


class Chain(Part):
    """An open composition of parts; it is itself a part until closed by a terminal."""

    def __init__(self, *members: Part) -> None:
        if not members:
            raise ValueError("a chain needs at least one part")
        for member in members:
            if not isinstance(member, Part):
                raise TypeError(f"not a part: {member!r}")
        self.members: tuple[Part, ...] = tuple(members)

    def part(self, base: type) -> type:
        for member in reversed(self.members):
            base = member.part(base)
        return base

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        return self.members == other.members

    def __hash__(self) -> int:
        return hash(self.members)

    def __repr__(self) -> str:
        inner = ", ".join(repr(member) for member in self.members)
        return f"Chain({inner})"


def parts(*args: Any) -> Any:
    """Compose parts.

    When the last argument is a class it closes the chain and a new class is
    returned; otherwise the parts form a :class:`Chain`, usable as a part.
    """
    if not args:
        raise TypeError("parts() needs at least one argument")
    *members, last = args
    if isinstance(last, type):
        if not members:
            return last
        return Chain(*members).part(last)
    return Chain(*args)


def nil_part(*args: Part) -> type:
    """Compose parts closed with :class:`Nil`."""
    return parts(*args, Nil)


class APIOf:
    """Composition helper that always closes chains with a given base API."""

    def __init__(self, api: type) -> None:
        if not isinstance(api, type):
            raise TypeError(f"API base must be a class, got {api!r}")
        self.api = api

    def parts(self, *args: Part) -> type:
        return parts(*args, self.api)

    def __repr__(self) -> str:
        return f"APIOf({self.api.__name__})"


class CRTP(Nil):
    """Terminal giving access to the top (most derived) object of a chain."""

    has_crtp = True

    def obj(self) -> CRTP:
        return self