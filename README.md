# dynamis

Building blocks for computing independent sets of axis-parallel rectangles,
such as map labels, that change over time.

## Modules

- `dynamis.geometry`
  - Value types: `Point`, `Interval`, `LabelPoint` and `LabelSize`.
    `LabelSize` has the `half_width` and `half_height` properties.
  - Conflict tests between label boxes: `boxes_conflict`, `points_conflict`,
    `intervals_conflict` and `label_points_conflict`.
  - Solution checks: `conflicting_point`, `extendible`,
    `extendible_ordered_points`, `extendible_ordered_intervals`,
    `independent_points` and `independent_intervals`.
  - Linear-scan range queries: `range_search`, `range_search_neighbor`,
    `range_search_label` and `points_in_box`.
  - Grid and index helpers: `grid_cell`, `get_grid`, `get_index` and
    `get_kmal`. `get_kmal` undoes `get_index`.
  - Other helpers: `fractional_less`, `get_file_name` and `comp_len_less`.
- `dynamis.solver_grid`
  - `GridSolver` is an abstract base class. It sorts points into grid cells of
    label size and keeps one row of counters for each grid row, with
    `param_k + 1` entries per row.
  - `init()` marks the largest counter of each row, adds up the marked values
    of the even rows and of the odd rows, and chooses the larger half.
  - `add_point` and `delete_point` keep the grid up to date. They raise
    `ValueError` for a point outside the grid.
  - `check()` raises `AssertionError` when the grid, the marks or the sums are
    inconsistent.
  - Subclasses implement `set_solution()`.
- `dynamis.solver_line`
  - `LineSolver` is an abstract base class for solvers that keep a solution
    set for each horizontal line.
  - `init()` compares the total size of the solutions on even lines with the
    total on odd lines.
  - `check()` checks these sums and the choice between even and odd lines.
  - Subclasses implement `get_mis_line()`, `continue_mis_line()` and
    `set_solution()`.
- `dynamis.jsonm`
  - `JsonRecord` collects measurements. Adding a value under a key that
    already exists turns that key into a list.
  - `add_element()` adds a value at the top level and `add_nested()` adds a
    value one level down.
  - `dumps()` returns compact JSON with sorted keys.
  - `print()` writes that JSON to a stream.
  - `output()` writes it to `<out_folder>/RESULT/<out_file><appendix>`. The
    `RESULT` folder must already exist.
- `dynamis.rng`
  - `RandomSource` is a seeded 32-bit Mersenne Twister (MT19937). Calling the
    source returns the next raw output.
  - `f_rand(low, high)` returns a float, `b_rand()` a coin flip and
    `rand(low, high)` an integer.
- `dynamis.config`
  - `parse_init_options()` reads command-line options into a `Settings`
    object and records them in a `JsonRecord` under `"info"`.
  - `format_init_options()` and `usage_text()` build the text that the
    command prints.
  - `output_measure()` writes the measurements to the result folder.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dynamis.geometry import LabelSize, Point, extendible, points_conflict

size = LabelSize(width=2.0, height=1.0)
a = Point(0.0, 0.0)
b = Point(1.5, 0.5)
print(points_conflict(a, b, size))                 # True: the boxes overlap
print(extendible([a], Point(3.0, 0.0), 2.0, 1.0))  # True
```

Collecting measurements:

```python
from dynamis.jsonm import JsonRecord

record = JsonRecord()
record.add_nested("info", "file", "points.txt")
record.add_element("time", "12")
record.add_element("time", "15")
print(record.dumps())  # {"info":{"file":"points.txt"},"time":["12","15"]}
```

## Command line

```
dynamis -f data/points.txt -a grid -m random -r 0.1 -w 2 -l 1 -k 4
```

Options:

- `-f, --filename` input file (required)
- `-a, --algorithm` algorithm name
- `-m, --modification` kind of modification
- `-r, --changeRatio` change ratio
- `-w, --width` label width
- `-l, --height` label height
- `-k` group parameter (default 4). Decimal or `0x` hexadecimal.
- `-g, --greedy`, `-p, --problem`, `-x, --xspecial`, `-c, --recomputation`
  are on/off switches
- `-d` result folder
- `-t` temporary folder
- `-s` seed (default 0)
- `-h, --help` print usage

Unknown options are ignored.

The command prints the options it has read. Without `-f`, or with `-h`, it
prints the usage text instead.

## What the package does not do

The package contains no concrete solvers. `GridSolver` and `LineSolver` are
bases that you subclass. The package does not read input point files and does
not run simulations. The `dynamis` command only parses and shows options.
Range queries scan a plain list of points; there is no spatial index.