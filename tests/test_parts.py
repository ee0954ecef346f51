from dataclasses import dataclass

import pytest

from happyparts.parts import CRTP, APIOf, Chain, Nil, Part, nil_part, parts, render


class Base:
    def api(self, text):
        return text


@dataclass(frozen=True)
class Wrap(Part):
    open: str
    close: str

    def part(self, base):
        opening, closing = self.open, self.close

        class Wrapped(base):
            def api(self, text):
                return opening + super().api(text) + closing

        return Wrapped


@dataclass(frozen=True)
class Label(Part):
    text: str

    def part(self, base):
        text = self.text

        class Labelled(base):
            def _render(self):
                return text + super()._render()

        return Labelled


PARENS = Wrap("(", ")")
SQUARE = Wrap("[", "]")
BARS = Wrap("|", "|")


def test_outer_part_wraps_first():
    item = parts(PARENS, SQUARE, Base)()
    assert item.api("*") == "([*])"


def test_result_is_subclass_of_terminal():
    cls = parts(PARENS, BARS, Base)
    assert issubclass(cls, Base)
    item = cls()
    assert isinstance(item, Base)
    assert item.api("x") == "(|x|)"


def test_open_composition_is_chain():
    chain = parts(PARENS, SQUARE)
    assert isinstance(chain, Chain)
    assert chain.members == (PARENS, SQUARE)


def test_chain_is_a_part():
    closed = parts(parts(PARENS, SQUARE, BARS), Base)()
    flat = parts(PARENS, SQUARE, BARS, Base)()
    assert closed.api("x") == flat.api("x")


def test_nested_composition_matches_flat():
    nested = parts(PARENS, parts(SQUARE, Base))()
    flat = parts(PARENS, SQUARE, Base)()
    assert nested.api("q") == flat.api("q")


def test_single_terminal_returns_it():
    assert parts(Base) is Base


def test_parts_without_arguments():
    with pytest.raises(TypeError):
        parts()


def test_class_in_middle_rejected():
    with pytest.raises(TypeError):
        parts(Base, PARENS, Base)


def test_empty_chain_rejected():
    with pytest.raises(ValueError):
        Chain()


def test_chain_rejects_non_parts():
    with pytest.raises(TypeError):
        Chain(PARENS, "nope")


def test_chain_equality():
    assert Chain(PARENS, SQUARE) == Chain(PARENS, SQUARE)
    assert Chain(PARENS, SQUARE) != Chain(SQUARE, PARENS)


def test_nil_part_terminates_with_nil():
    cls = nil_part(Label("a"))
    assert issubclass(cls, Nil)
    assert render(cls()) == "a"


def test_nil_rejects_leftover_arguments():
    with pytest.raises(TypeError):
        Nil(1)
    with pytest.raises(TypeError):
        nil_part(Label("a"))(5)


def test_nil_renders_empty():
    assert render(Nil()) == ""
    assert str(Nil()) == ""


def test_render_walks_chain_in_order():
    obj = nil_part(Label("ab"), Label("cd"))()
    assert render(obj) == "abcd"
    assert str(obj) == render(obj)


def test_render_booleans_as_digits():
    assert render(True) == "1"
    assert render(False) == "0"


def test_render_plain_value():
    assert render(42) == "42"


def test_api_of_closes_with_base():
    api = APIOf(Base)
    via_api = api.parts(PARENS, BARS)()
    direct = parts(PARENS, BARS, Base)()
    assert via_api.api("v") == direct.api("v")
    assert isinstance(via_api, Base)


def test_api_of_requires_class():
    with pytest.raises(TypeError):
        APIOf(3)


def test_crtp_obj_is_top_object():
    obj = parts(Label("x"), CRTP)()
    assert obj.obj() is obj
    assert obj.has_crtp is True


def test_crtp_is_nil_terminated():
    obj = parts(Label("z"), CRTP)()
    assert render(obj) == "z"