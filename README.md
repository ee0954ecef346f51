# happyparts

Build classes by stacking small, reusable parts on top of a terminating base.
Each part is an object whose `part(base)` method returns a new class layered
over `base`. A chain of parts is itself a part until it is closed with a
terminating class.

## Building blocks

### `happyparts.parts`

- `Part`: abstract base for parts; subclasses implement `part(base)`.
- `Chain(*members)`: an open composition of parts, itself a `Part`. The first
  member ends up outermost. An empty chain raises `ValueError`; a member that is
  not a `Part` raises `TypeError`.
- `parts(*args)`: if the last argument is a class, the parts before it are
  applied to it and the resulting class is returned; otherwise a `Chain` of all
  the arguments is returned.
- `Nil`: the default end of a chain. It renders as an empty string and raises
  `TypeError` if constructor arguments reach it unused.
- `nil_part(*args)`: the parts closed with `Nil`.
- `APIOf(api)`: fixes the terminating class, so `APIOf(api).parts(...)` lists
  only the parts.
- `CRTP`: a `Nil` terminator whose `obj()` returns the fully composed object,
  so lower layers can call back up through the whole chain.
- `render(obj)`: the printed form of a value: booleans as `1`/`0`, composed
  objects through their layers, anything else with `str()`.

### `happyparts.data`

- `StaticData(value)`: adds a static `get()` returning `value`; the value is
  rendered before the rest of the chain. `static_char`, `static_int` and
  `static_text` build one after checking the value's type.
- `Data(kind)`: stores a value passed as the first constructor argument (or
  `kind()` when none is given), with `get()` and `set(value)`. `Data.watch` is
  a `Chain` of `ReflexOf()` over the data. Ready-made instances: `CHAR`, `INT`,
  `FLOAT`, `TEXT`.
- `DefaultValue(value)`: passes `value` down the chain when the object is
  constructed without arguments; `default_value()` returns it.
- `ReflexOf()`: keeps a copy of the watched value. `changed()` compares it with
  the current value, `sync()` refreshes the copy, `last()` returns it, and
  `set(value)` syncs before setting.
- `FieldValue(field)`: applies the given data part and exposes its value as a
  read/write `value` property.

### `happyparts.items`

- `Item(out=None)`: terminator whose `api(text)` writes text to `out`
  (standard output when not given).
- `DefaultItem`: like `Item`, but `api()` with no text calls `api_default()`,
  which sends `"default"` through the top object, so every wrapper applies.
- `WrapWith(opening, closing)`: a part that encloses the output of the layers
  below between two single characters. Ready-made: `PARENS`, `SQ_BRACKS`,
  `BRACKS`, `BARS`, `TAG`.
- `item_def(*args)` / `crtp_item_def(*args)`: item classes built from the given
  parts over `Item` / `DefaultItem`, outermost first.

## Example

```python
from happyparts.items import BARS, PARENS, item_def

item = item_def(BARS, PARENS)()
item.api("*")   # prints |(*)|
```

```python
from happyparts.data import INT, FieldValue, ReflexOf, static_text
from happyparts.parts import nil_part, render

year = nil_part(static_text("label:"), ReflexOf(), FieldValue(INT))(2025)
year.changed()   # False
year.set(1901)
year.changed()   # True
year.value       # 1901
render(year)     # 'label:1901'
```

## Demo

After installing, run the bundled examples:

```
happyparts-demo
```

Pass one or more of `flat`, `free`, `virt`, `std`, `crtp`, `data` to run only
those. The `happyparts.demo` module provides `run_flat`, `run_free`,
`run_virt`, `run_std`, `run_crtp` and `run_data`, each returning its example's
output as a string.

## Tests

```
pip install -e .[test]
pytest
```