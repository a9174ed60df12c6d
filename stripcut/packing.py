"""Strip packing of rectangular parts onto a sheet of fixed width."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Mapping

SHEET_WIDTH = 286
SHEET_HEIGHT = 15
MAX_SHEET_WIDTH = 700
MAX_SHEET_HEIGHT = 1_000_000
SIZE_MULTIPLIER = 0.5
MIN_GENERATED_SIZE = 10
OPAQUE = 0xFF000000

_UINT32 = 1 << 32
_NUMBER = re.compile(r"\+?[0-9]+")


class InvalidSizeError(ValueError):
    """A size is not a whole number between 1 and its limit."""

    def __init__(self, text: str, limit: int) -> None:
        super().__init__(
            f"invalid size {text!r}: expected a whole number from 1 to {limit}"
        )
        self.text = text
        self.limit = limit


class Algorithm(Enum):
    """Packing strategies, in the order they are compared."""

    FFDH = 0
    FFDHV = 1
    FFDHH = 2

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    Algorithm.FFDH: "FFDH (First Fit Decreasing High)",
    Algorithm.FFDHV: "FFDHV (First Fit Decreasing High Vert)",
    Algorithm.FFDHH: "FFDHH (First Fit Decreasing High Hor)",
}


@dataclass(frozen=True)
class Rect:
    """A part to cut: width across the sheet, height along it, and an RGBA colour."""

    width: int
    height: int
    color: int = 0

    def vertical(self) -> Rect:
        """The part turned so that its height is the longer side."""
        if self.height >= self.width:
            return self
        return replace(self, width=self.height, height=self.width)

    def horizontal(self, sheet_width: int) -> Rect:
        """The part turned so that its width is the longer side, if it then fits the sheet."""
        if self.width >= self.height or self.height > sheet_width:
            return self
        return replace(self, width=self.height, height=self.width)


@dataclass(frozen=True)
class Placement:
    """Where a part lies on the sheet."""

    x: int
    y: int
    width: int
    height: int
    color: int


@dataclass(frozen=True)
class Layout:
    """The placements made by one algorithm and the sheet length they use."""

    placements: tuple[Placement, ...]
    height: int


@dataclass
class _Floor:
    used: int
    bottom: int
    top: int


def parse_size(text: str, limit: int) -> int:
    """Read a positive whole size no larger than ``limit``."""
    stripped = str(text).strip()
    if _NUMBER.fullmatch(stripped):
        value = int(stripped)
        if 0 < value <= limit and value < _UINT32:
            return value
    raise InvalidSizeError(text, limit)


def random_color(rng: random.Random | None = None) -> int:
    """An opaque colour that is neither too dark nor too light."""
    rng = rng or random.Random()
    while True:
        r, g, b = (rng.randrange(255) for _ in range(3))
        if 300 <= r + g + b <= 650:
            return OPAQUE | (r << 16) | (g << 8) | b


def generate_rects(
    sheet_width: int, count: int = 10, rng: random.Random | None = None
) -> list[Rect]:
    """Random parts, each side at least 10 and under half the sheet width."""
    rng = rng or random.Random()
    span = int(sheet_width * SIZE_MULTIPLIER - MIN_GENERATED_SIZE)
    if span <= 0:
        raise ValueError(f"sheet width {sheet_width} is too small to generate parts")
    rects = []
    for _ in range(count):
        width = rng.randrange(span) + MIN_GENERATED_SIZE
        height = rng.randrange(span) + MIN_GENERATED_SIZE
        rects.append(Rect(width, height, random_color(rng)))
    return rects


def max_consumption(rects: Iterable[Rect]) -> int:
    """Sheet length used if every part were laid end to end on its longer side."""
    return sum(max(rect.width, rect.height) for rect in rects)


def first_fit_decreasing_height(rects: Iterable[Rect], sheet_width: int) -> Layout:
    """Place parts tallest first, each on the first level that has room."""
    ordered = sorted(rects, key=lambda rect: rect.height, reverse=True)
    if not ordered:
        return Layout((), 0)
    floors = [_Floor(0, 0, ordered[0].height)]
    placements = []
    for rect in ordered:
        # Free width wraps like an unsigned counter when a level is overfilled.
        floor = next(
            (f for f in floors if rect.width <= (sheet_width - f.used) % _UINT32),
            None,
        )
        if floor is None:
            top = floors[-1].top
            floor = _Floor(0, top, top + rect.height)
            floors.append(floor)
        placements.append(
            Placement(floor.used, floor.bottom, rect.width, rect.height, rect.color)
        )
        floor.used += rect.width
    return Layout(tuple(placements), floors[-1].top)


def pack(rects: Iterable[Rect], sheet_width: int) -> dict[Algorithm, Layout]:
    """Run every algorithm on the parts."""
    parts = list(rects)
    return {
        Algorithm.FFDH: first_fit_decreasing_height(parts, sheet_width),
        Algorithm.FFDHV: first_fit_decreasing_height(
            [rect.vertical() for rect in parts], sheet_width
        ),
        Algorithm.FFDHH: first_fit_decreasing_height(
            [rect.horizontal(sheet_width) for rect in parts], sheet_width
        ),
    }


def best_algorithm(layouts: Mapping[Algorithm, Layout], max_height: int) -> Algorithm:
    """The algorithm with the shortest layout; a later one wins a tie."""
    best = Algorithm.FFDH
    lowest = max_height
    for algorithm in Algorithm:
        layout = layouts.get(algorithm)
        if layout is not None and lowest >= layout.height:
            lowest = layout.height
            best = algorithm
    return best