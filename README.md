# debugfire

A small set of teaching exercises:

- **Storytelling**: a story assembled from a chain of scrambled values,
  seeded by your name.
- **Stack Overflows**: a chase through a shuffled lookup table that
  recurses until Python's recursion limit is reached.
- **Fire**: a cellular fire simulation in which heat rises, shifts
  sideways at random and cools as it goes. It is used as a library.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
debugfire --name "Your Name"
```

The command waits for ENTER and then shows a menu with two demos,
**Storytelling** and **Stack Overflows**, plus **Quit**. You pick an
entry by its number. After each demo you are asked whether to pick again.

- Storytelling prints the story that belongs to the given name.
- Stack Overflows asks for confirmation and then recurses without end.
  The command reports the stack overflow and exits with status 1.

If `--name` is not given, the placeholder name is used. Both demos then
refuse to run: the command prints an error and exits with status 1.

## Using the library

You can drive the fire simulation directly:

```python
import random
from debugfire.fire import FireSimulation, update_fire

sim = FireSimulation(80, 150, random.Random(0))
sim.toggle()          # start heating the bottom row toward MAX_TEMP
for _ in range(100):
    sim.step()
pixels = sim.colors() # rows of Color values, one per cell

grid = [[0, 0, 0], [0, 0, 3]]
update_fire(grid, random.Random(1))  # updates in place; the bottom row is unchanged
```

`validate_fire` raises `ValueError` if a cell lies outside
`0..MAX_TEMP`. `temperature_color` maps a temperature to its palette
colour.

Other modules:

- `debugfire.story`:
  - `scramble` is a 32-bit xorshift step.
  - `name_hash` hashes a name.
  - `story_fragments` and `tell_story` build the story.
  - `ScrambleRandom` and `shuffle_values` shuffle a permutation until it
    has a cycle of a given length.
  - `initiate_stack_overflow` starts the endless recursion.
- `debugfire.stats`:
  - `chi_squared_is_close` checks a random experiment's outcome counts
    against expected probabilities. It supports up to 30 outcomes.
  - `poisson_is_close` does the same with a Poisson-distributed number
    of samples.
  - `poisson_sample` draws a single Poisson-distributed value.
- `debugfire.color.Color` is an immutable RGB colour. It can be built
  from components, `from_hex`, `from_hsv` or `random`, and renders with
  `to_html`.
- `debugfire.font` provides `Font`, `FontFamily` and `FontStyle`, with
  platform-dependent family names and `Font.font_string`.
- `debugfire.styled_console.StyledConsole` collects text written in
  different styles. It has a `styled` context manager for temporary style
  changes, and `to_html` renders the contents as an HTML document.
- `debugfire.menu`:
  - `make_selection_from` prompts on the console until the user picks
    an option.
  - `make_file_selection` asks the user to pick a file with a given
    suffix from a directory.
- `debugfire.registry`:
  - `Registry` keeps demos registered by file and line.
  - `menu_options` orders the demos by `DemoConfig.menu_order`.
  - A demo whose file has a test barrier runs only if the
    `failing_tests` callable given to the registry reports no failures.

## What it does not do

- There is no graphical window. The fire simulation is not in the
  console menu and does not animate on screen. `FireSimulation.colors`
  returns the colours, and drawing them is up to the caller.
- The package has no test runner of its own for test barriers. A
  barrier only takes effect when the caller passes a `failing_tests`
  function to `Registry`.