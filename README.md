# drillrunner

drillrunner is a library built around a set of small programming drills. It
holds worked solutions to many of the drills in plain Python, helpers for
printing styled warning and success messages in a terminal, and a builder for
the `rust-project.json` file that lets an editor analyse a folder of drill
source files.

## Installing

```
pip install drillrunner
```

The package has no runtime dependencies. `RustAnalyzerProject.get_sysroot_src`
runs `rustc`, so that one method needs `rustc` on your `PATH`.

## Terminal messages: `drillrunner.ui`

```python
from drillrunner import ui

ui.warn("Compiling of intro1 failed!")
ui.success("Successfully ran intro1!")
print(ui.bold("important"), ui.blue("|"))
```

- `warn(message)` prints a red line starting with a warning sign.
- `success(message)` prints a green line starting with a check mark.
- `bold(text)` and `blue(text)` return the text wrapped in ANSI styling.
- `no_emoji()` tells whether the `NO_EMOJI` environment variable is set; when
  it is, `warn` uses `!` and `success` uses `✓` instead of emoji.

Styling is applied only when standard output is a terminal. Set
`CLICOLOR_FORCE` to a value other than `0` to force it on, or `CLICOLOR=0` to
turn it off.

## Editor support: `drillrunner.project`

`RustAnalyzerProject` collects every `.rs` file under a folder as a `Crate`
(edition 2021, no dependencies, `cfg` set to `["test"]`) and writes them out as
`rust-project.json`:

```python
from drillrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # asks `rustc --print sysroot`
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk("rust-project.json")
```

- `add_path(path)` adds a crate when the text after the first dot of the path
  is exactly `rs`.
- `exercises_to_json(root="exercises")` adds every matching file below `root`,
  in sorted order.
- `to_json()` returns the compact JSON text; `write_to_disk(path="rust-project.json")`
  writes it.

## Worked solutions: `drillrunner.drills`

One module per topic:

- `quizzes`: `calculate_price_of_apples`, `transformer` with `Command` and
  `Append`, and `ReportCard`.
- `errors`: `generate_nametag_text`, `total_cost`, `remaining_tokens`,
  `PositiveNonzeroInteger` (raising `NegativeError` or `ZeroError`, both
  `CreationError`s) and `parse_pos_nonzero` (raising `ParsePosNonzeroError`).
- `basics`: `bigger`, `foo_if_fizz`, `maybe_icecream`, `sale_price`,
  `is_even`, `square`.
- `conversions`: `byte_counter`, `char_counter`, `num_sq`, `average`,
  `Person` with `default`, `from_text` and `parse` (raising
  `ParsePersonError` with a `ParsePersonErrorKind`), and `Color.try_from`
  (raising `IntoColorError`).
- `messages`: a `State` driven by `ChangeColor`, `Quit`, `Echo` and `Move`
  messages through `State.process`.
- `containers`: `fruit_basket`, `fill_fruit_basket` with `Fruit`,
  `build_scores_table` returning `Team` records, `array_and_vec`, `vec_loop`,
  `vec_map`.
- `text`: `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`,
  `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`.
- `structs`: `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`,
  `Order` with `create_order_template`, `Package`, `Wrapper`.
- `traits`: `append_bar`, `Licensed` with `SomeSoftware` and `OtherSoftware`,
  `compare_license_types`, `SomeTrait`, `OtherTrait`, `SomeStruct`,
  `OtherStruct`, `some_func`.
- `iterators`: `divide` (raising `NotDivisibleError` or `DivideByZeroError`,
  both `DivisionError`s), `result_with_list`, `list_of_results`, `factorial`,
  and the `Progress` counters `count_for`, `count_iterator`,
  `count_collection_for`, `count_collection_iterator`.
- `pointers`: the cons list `Cons` / `Nil` with `create_empty_list` and
  `create_non_empty_list`, and `abs_all`.
- `threads`: `offset_sums`, `run_sleepers`, `run_jobs` with `JobStatus`, and
  `send_tx` / `receive_all` with `Queue`.

```python
from drillrunner.drills.conversions import Person, Color

Person.parse("Mark,20")          # Person(name='Mark', age=20)
Person.from_text("Mark,twenty")  # Person(name='John', age=30)
Color.try_from((183, 65, 14))    # Color(red=183, green=65, blue=14)
```

## What this package does not do

drillrunner has no command-line program. It does not read an `info.toml`
list of drills, compile or run drill files, verify them in order, watch files
for changes, show hints, list progress or reset drills.

## Running the tests

```
pip install drillrunner[test]
pytest
```