"""Text items decorated by stacking wrapper parts on a terminal writer."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Any, Optional

from .parts import CRTP, APIOf, Part

DEFAULT_TEXT = "default"


class Item:
    """Terminal item: writes the given text to its output stream."""

    def __init__(self, out: Optional[IO[str]] = None) -> None:
        super().__init__()
        self._out = out

    @property
    def out(self) -> IO[str]:
        """The stream written to; standard output unless one was given."""
        return self._out if self._out is not None else sys.stdout

    def write(self, text: str) -> None:
        self.out.write(text)

    def api(self, text: str) -> None:
        """Write *text*."""
        self.write(text)


class DefaultItem(Item, CRTP):
    """Terminal item whose argument-less call goes back through the whole chain."""

    def api(self, text: Optional[str] = None) -> None:
        """Write *text*, or the default text through the top object when omitted."""
        if text is None:
            self.api_default()
        else:
            super().api(text)

    def api_default(self) -> None:
        """Call the top object's ``api`` with the default text."""
        self.obj().api(DEFAULT_TEXT)


@dataclass(frozen=True)
class WrapWith(Part):
    """Part enclosing the rest of the chain's output between two characters."""

    opening: str
    closing: str

    def __post_init__(self) -> None:
        for char in (self.opening, self.closing):
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"expected a single character, got {char!r}")

    def part(self, base: type) -> type:
        if not callable(getattr(base, "api", None)) or not callable(getattr(base, "write", None)):
            raise TypeError(f"{base.__name__} is not an item")
        opening, closing = self.opening, self.closing

        class WrapWithPart(base):
            def api(self, text: Any = None) -> None:
                if text is None:
                    super().api()
                    return
                self.write(opening)
                super().api(text)
                self.write(closing)

        return WrapWithPart


PARENS = WrapWith("(", ")")
SQ_BRACKS = WrapWith("[", "]")
BRACKS = WrapWith("{", "}")
BARS = WrapWith("|", "|")
TAG = WrapWith("<", ">")


def item_def(*args: Part) -> type:
    """Item class built from the given parts, outermost first."""
    return APIOf(Item).parts(*args)


def crtp_item_def(*args: Part) -> type:
    """Item class with a default call, built from the given parts, outermost first."""
    return APIOf(DefaultItem).parts(*args)