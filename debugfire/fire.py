"""A cellular-automaton fire: heat rises, drifts sideways and cools."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .color import Color

MAX_TEMP = 36
"""Maximum temperature of a cell in the fire."""

NUM_ROWS = 80
NUM_COLS = 150
UPDATE_DELAY = 2
"""Frames to wait between nudges of the heat source toward its target."""

ON_TEXT = "Ignite Fire"
OFF_TEXT = "Extinguish Fire"

_COOLING_CHANCE = 2.0 / 3.0
_FRAME_LIMIT = 0x7FFFFFFF

_PALETTE = tuple(
    Color.from_hex(value)
    for value in (
        0x000000, 0x1F0707, 0x2F0F07, 0x470F07, 0x571707, 0x671F07, 0x771F07,
        0x8F2707, 0x9F2F07, 0xAF3F07, 0xBF4707, 0xC74707, 0xDF4F07, 0xDF5707,
        0xDF5707, 0xD75F07, 0xD75F07, 0xD7670F, 0xCF6F0F, 0xCF770F, 0xCF7F0F,
        0xCF8717, 0xC78717, 0xC78F17, 0xC7971F, 0xBF9F1F, 0xBF9F1F, 0xBFA727,
        0xBFA727, 0xBFAF2F, 0xB7AF2F, 0xB7B72F, 0xB7B737, 0xCFCF6F, 0xDFDF9F,
        0xEFEFC7, 0xFFFFFF,
    )
)

Grid = list[list[int]]


def _destination(col: int, cols: int, rng: random.Random) -> int:
    """The column in the row above that a cell's heat is carried to."""
    if cols == 1:
        return col
    if col == 0:
        return col + rng.randint(0, 1)
    if col == cols - 1:
        return col - rng.randint(0, 1)
    return col + rng.randint(-1, 1)


def update_fire(fire: Grid, rng: random.Random | None = None) -> None:
    """Advance the fire one step in place; the bottom row is left untouched."""
    source = random if rng is None else rng
    for below, above in zip(fire[1:], fire):
        cols = len(below)
        for col, value in enumerate(below):
            target = _destination(col, cols, source)
            if value != 0 and source.random() < _COOLING_CHANCE:
                value -= 1
            above[target] = value


def validate_fire(fire: Sequence[Sequence[int]]) -> None:
    """Raise ValueError if any cell lies outside 0..MAX_TEMP."""
    for row in fire:
        for value in row:
            if value < 0:
                raise ValueError("Negative temperature occurred in the fire.")
            if value > MAX_TEMP:
                raise ValueError("Fire temperature exceeds MAX_TEMP.")


def temperature_color(temperature: int) -> Color:
    """The display colour for a temperature between 0 and MAX_TEMP."""
    if not 0 <= temperature <= MAX_TEMP:
        raise ValueError("Temperature out of range.")
    return _PALETTE[temperature]


class FireSimulation:
    """A fire world whose bottom row is nudged toward a target temperature."""

    def __init__(
        self,
        rows: int = NUM_ROWS,
        cols: int = NUM_COLS,
        rng: random.Random | None = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("Fire dimensions must be positive.")
        self.world: Grid = [[0] * cols for _ in range(rows)]
        self.target_temp = 0
        self.frame = 0
        self._rng = rng if rng is not None else random.Random()

    @property
    def label(self) -> str:
        """Text for the control that toggles the fire."""
        return ON_TEXT if self.target_temp == 0 else OFF_TEXT

    def toggle(self) -> str:
        """Ignite or extinguish the fire; returns the new control label."""
        self.target_temp = MAX_TEMP if self.target_temp == 0 else 0
        return self.label

    def step(self) -> None:
        """Advance one animation frame."""
        self.frame += 1
        if self.frame == _FRAME_LIMIT:
            self.frame = 0

        update_fire(self.world, self._rng)
        validate_fire(self.world)

        if self.frame % UPDATE_DELAY == 0:
            bottom = self.world[-1]
            for col, temp in enumerate(bottom):
                if temp < self.target_temp:
                    bottom[col] = temp + 1
                elif temp > self.target_temp:
                    bottom[col] = temp - 1

    def colors(self) -> list[list[Color]]:
        """The world as a grid of display colours."""
        return [[temperature_color(value) for value in row] for row in self.world]