# rustdrills

A library of small, worked drills on everyday programming ideas:
conversions, error handling, iterators, enums, structs, collections,
optional values, threads and more. It also has a tiny helper for printing
coloured status lines in the terminal.

## Requirements

- Python 3.11 or later
- `rich` (installed automatically)

## Installation

```
pip install .
```

## The drills

Everything lives in the `rustdrills.drills` sub-package, one module per
topic:

| Module | What it covers |
| --- | --- |
| `basics` | apple pricing, doubling, even numbers, sale prices, `bigger`, `fizz_if_foo`, character kinds, colour words |
| `macros` | `my_macro`, `hello_macro`, `make_sausage`, `favorite_snacks`, `seconds_since_epoch` |
| `sequences` | `fill_vec`, `describe_vec`, `add_through_references`, `favorite_fruits` |
| `generics` | `Wrapper`, `ReportCard`, `shopping_list`, `append_bar` for strings and lists |
| `structs` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitStruct`, `Order`, `Package` |
| `enums` | `Quit`, `Echo`, `Move`, `ChangeColor` messages and a `State` that processes them |
| `baskets` | fruit baskets in dictionaries, `Fruit`, `array_and_vec`, `vec_loop` |
| `lints` | `floats_differ`, `add_optional` |
| `concurrency` | `offset_sums` over a thread pool, `JobStatus`, `run_jobs` |
| `conslist` | a recursive cons list built from `Cons` and `Nil` |
| `errors` | strict `parse_int` / `parse_float`, `generate_nametag_text`, `total_cost`, `spend_tokens`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `advanced_errors` | `positive_nonzero_from_str`, `Climate` and `parse_climate` with wrapped errors |
| `option` | `print_number`, `computed_numbers`, `describe_word`, `drain_integers`, `describe_point` |
| `conversions` | `person_from` with a fallback `Person`, `parse_person`, `color_from` |
| `iterators` | `capitalize_first`, `divide`, `result_with_list`, `list_of_results`, `factorial`, progress counting |

A few examples:

```python
from rustdrills.drills.conversions import parse_person, person_from, color_from
from rustdrills.drills.errors import total_cost
from rustdrills.drills.iterators import divide, list_of_results

parse_person("Mark,20")      # Person(name='Mark', age=20)
person_from("Mark,twenty")   # Person(name='John', age=30), the fallback person
color_from((183, 65, 14))    # Color(red=183, green=65, blue=14)
total_cost("34")             # 171
divide(81, 9)                # 9
divide(81, 0)                # raises DivideByZero
list_of_results()            # [1, 11, 1426, 3]
```

Failures are raised as exceptions. Where an error wraps a lower-level
one, such as `ParseClimateError` around a `ParseIntError`, the wrapped
error is kept on the exception and its message is part of the outer one.

## Status messages

`rustdrills.ui` prints one-line coloured messages:

```python
from rustdrills.ui import warn, success

warn("Ran example with errors")     # red line with a warning mark
success("Successfully ran example") # green line with a tick
```

When the `NO_EMOJI` environment variable is set, `!` and `✓` are used
instead of emoji; `no_emoji()` reports whether it is set.

## What this package does not do

There is no command-line program. The package does not compile, test,
lint, run or watch exercise files, does not read an exercise list, and
does not keep track of which exercises are done. It is a library of
drills and a status-message helper only.

## Running the tests

```
pip install ".[test]"
pytest
```