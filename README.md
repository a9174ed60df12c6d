# stripcut

stripcut lays rectangular parts out on a strip of sheet material that has a
fixed width. It reports how much of the strip's length each layout uses.

Every layout is worked out with three variants of the *First Fit Decreasing
Height* heuristic. In each variant the parts are sorted tallest first, and
each part goes on the first level that still has room for it:

- **FFDH**: parts are placed as given.
- **FFDHV**: each part is turned so that its long side runs along the strip.
- **FFDHH**: each part is turned so that its long side runs across the strip,
  but only where it then fits the sheet width.

The variant whose layout is shortest is chosen. When two variants tie, the
later one in that list is chosen.

## Installation

```
pip install .
```

## Command line

```
stripcut --help
```

The command keeps its files in a directory, which is the current one unless
`-d/--dir` names another:

- `met.xml` holds the sheet size: width in millimetres and length in metres.
  The default is 286 × 15. The file is created with these defaults when it is
  missing.
- `rects.xml` holds the list of parts. Parts already in it are loaded when the
  command starts, and the list is saved again after every change.

Options, applied in this order:

| Option | Effect |
| --- | --- |
| `--clear` | remove every part |
| `--sheet WIDTH LENGTH` | set the sheet size (width 1–700, length 1–1000000) |
| `--load FILE` | add the parts from another XML file |
| `--add WIDTH HEIGHT` | add one part; may be given several times |
| `--generate N` | add N random parts |

Example:

```
stripcut --clear --sheet 300 20 --add 120 80 --add 60 200 --generate 5
```

The command prints three things:

1. A summary line with the maximum consumption and each variant's length.
2. The name of the chosen variant.
3. One line per part of the chosen layout: `x`, `y`, `width` and `height`,
   separated by tabs.

A size that is out of range makes the command print `error: ...` and exit
with status 1. With `--sheet`, an out-of-range value is first replaced by its
default, and the sheet is still saved.

## Library use

```python
from stripcut.packing import Rect, pack, best_algorithm, max_consumption
from stripcut.storage import save_rects

rects = [Rect(100, 40), Rect(60, 120), Rect(200, 30)]
layouts = pack(rects, sheet_width=286)
for algorithm, layout in layouts.items():
    print(algorithm.name, layout.height)

print("best:", best_algorithm(layouts, max_consumption(rects)).title)
save_rects("rects.xml", rects)
```

`stripcut.packing` provides the following:

- `Rect`, `Placement` and `Layout`.
- `Algorithm`, which lists the variants.
- `first_fit_decreasing_height`, which runs one layout.
- `pack`, which runs all three variants.
- `max_consumption`, the length used if every part were laid end to end on
  its longer side.
- `best_algorithm`.
- `generate_rects` and `random_color`, for random test parts.
- `parse_size`, which raises `InvalidSizeError` for anything that is not a
  positive whole number within its limit.

`stripcut.storage` reads and writes the two XML files. It provides `Sheet`,
`load_sheet`, `save_sheet`, `load_rects` and `save_rects`.

`stripcut.app.Workspace` keeps the sheet, the parts list and the files together
in one directory. It lays the parts out again whenever the parts or the sheet
change. `Workspace.summary()` gives the same summary line that the command
prints.

## What it does not do

stripcut does not draw the layouts. It has no window or picture output, and
gives the placements only as numbers.

## Tests

```
pip install .[test]
pytest
```