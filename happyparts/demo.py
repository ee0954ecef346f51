"""Example runs showing item composition and data parts."""

from __future__ import annotations

import argparse
import io
from typing import Callable, Optional, Sequence

from .data import INT, FieldValue, ReflexOf, static_int, static_text
from .items import BARS, BRACKS, PARENS, SQ_BRACKS, TAG, Item, crtp_item_def, item_def
from .parts import Chain, Nil, nil_part, parts, render


def _lines(*calls: Callable[[io.StringIO], None]) -> str:
    buf = io.StringIO()
    for call in calls:
        call(buf)
        buf.write("\n")
    return buf.getvalue()


def run_flat() -> str:
    """A flat stack of wrappers around one item."""
    test_item = item_def(BARS, PARENS, SQ_BRACKS, BRACKS, TAG)
    return _lines(lambda out: test_item(out=out).api("*"))


def run_free() -> str:
    """A composition of parts used as a single part."""
    all_parts = Chain(PARENS, SQ_BRACKS, BRACKS, BARS, TAG)
    test_item = parts(all_parts, Item)
    return _lines(lambda out: test_item(out=out).api("*"))


def _divergent_items(out: io.StringIO) -> list:
    item_a = item_def(TAG, BARS)(out=out)
    item_b = item_def(BRACKS, SQ_BRACKS)(out=out)
    return [item_a, item_b]


def _run_collection(text_a: str, text_b: str) -> str:
    buf = io.StringIO()
    item_def(BARS, PARENS, SQ_BRACKS, BRACKS, TAG)(out=buf).api("*")
    buf.write("\n")
    a, b = _divergent_items(buf)
    for item, text in ((a, text_a), (b, text_b)):
        item.api(text)
        buf.write("\n")
    for position, item in enumerate(_divergent_items(buf)):
        item.api(str(position))
        buf.write("\n")
    return buf.getvalue()


def run_virt() -> str:
    """Differently composed items used through one interface."""
    return _run_collection("a", "b")


def run_std() -> str:
    """Differently composed items stored in a list."""
    return _run_collection("a", "b")


def run_crtp() -> str:
    """Items whose argument-less call goes back through the whole chain."""
    buf = io.StringIO()
    test_item = crtp_item_def(BARS, PARENS, SQ_BRACKS, BRACKS, TAG)(out=buf)
    a = crtp_item_def(TAG, BARS)(out=buf)
    b = crtp_item_def(BRACKS, SQ_BRACKS)(out=buf)
    for call in (test_item.api, lambda: a.api("0"), lambda: b.api("1"), a.api, b.api):
        call()
        buf.write("\n")
    return buf.getvalue()


def run_data() -> str:
    """Static data, a watched field and rendering of a composed value."""
    year_type = parts(static_int(1967), Nil)
    year = nil_part(static_text("label:"), ReflexOf(), FieldValue(INT))(2025)
    values = [year_type.get(), year.changed(), year.value]
    year.set(1901)
    values += [year.changed(), year.value, year]
    return "".join(render(value) + "\n" for value in values)


EXAMPLES: dict[str, Callable[[], str]] = {
    "flat": run_flat,
    "free": run_free,
    "virt": run_virt,
    "std": run_std,
    "crtp": run_crtp,
    "data": run_data,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the output of the chosen examples, all of them by default."""
    parser = argparse.ArgumentParser(description="Run the composition examples.")
    parser.add_argument("examples", nargs="*", choices=sorted(EXAMPLES), metavar="EXAMPLE",
                        help=f"one of: {', '.join(EXAMPLES)}")
    args = parser.parse_args(argv)
    for name in args.examples or EXAMPLES:
        print(EXAMPLES[name](), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())