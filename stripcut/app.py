"""A workspace that keeps the sheet and the parts list on disk and lays the parts out."""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from pathlib import Path

from stripcut.packing import (
    MAX_SHEET_HEIGHT,
    MAX_SHEET_WIDTH,
    SHEET_HEIGHT,
    SHEET_WIDTH,
    Algorithm,
    InvalidSizeError,
    Layout,
    Rect,
    best_algorithm,
    generate_rects,
    max_consumption,
    pack,
    parse_size,
    random_color,
)
from stripcut.storage import Sheet, load_rects, load_sheet, save_rects, save_sheet

logger = logging.getLogger(__name__)

SHEET_FILE = "met.xml"
RECTS_FILE = "rects.xml"


class Workspace:
    """The sheet, the parts and their layouts, saved in one directory."""

    def __init__(
        self,
        directory: str | os.PathLike = ".",
        rng: random.Random | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.rng = rng or random.Random()
        self.sheet_path = self.directory / SHEET_FILE
        self.rects_path = self.directory / RECTS_FILE
        self.sheet = load_sheet(self.sheet_path)
        self.rects: list[Rect] = []
        self.layouts: dict[Algorithm, Layout] = {}
        self.max_height = 0
        self.algorithm = Algorithm.FFDH
        self.load(self.rects_path)

    def set_sheet(self, width: int | str, height: int | str) -> Sheet:
        """Change the sheet size, save it and lay the parts out again.

        A size that is out of range is replaced by its default; the sheet is
        still saved and the parts placed, and then the first error is raised.
        """
        errors: list[InvalidSizeError] = []
        try:
            new_width = parse_size(str(width), MAX_SHEET_WIDTH)
        except InvalidSizeError as error:
            errors.append(error)
            new_width = SHEET_WIDTH
        try:
            new_height = parse_size(str(height), MAX_SHEET_HEIGHT)
        except InvalidSizeError as error:
            errors.append(error)
            new_height = SHEET_HEIGHT
        self.sheet = Sheet(new_width, new_height)
        logger.info("sheet width %d mm, length %d m", new_width, new_height)
        save_sheet(self.sheet_path, self.sheet)
        self.place()
        if errors:
            raise errors[0]
        return self.sheet

    def add_rect(self, width: int | str, height: int | str) -> Rect:
        """Add one part, save the list and lay the parts out again."""
        rect_width = parse_size(str(width), self.sheet.width)
        rect_height = parse_size(str(height), self.sheet.width * 1000)
        rect = Rect(rect_width, rect_height, random_color(self.rng))
        self.rects.append(rect)
        save_rects(self.rects_path, self.rects)
        self.place()
        return rect

    def load(self, path: str | os.PathLike) -> list[Rect]:
        """Add the parts from a file, save the list and lay them out."""
        loaded = load_rects(path, self.sheet)
        self.rects.extend(loaded)
        save_rects(self.rects_path, self.rects)
        if self.rects:
            self.place()
        return loaded

    def generate(self, count: int = 10) -> list[Rect]:
        """Add random parts, save the list and lay them out."""
        generated = generate_rects(self.sheet.width, count, self.rng)
        self.rects.extend(generated)
        save_rects(self.rects_path, self.rects)
        self.place()
        return generated

    def clear(self) -> None:
        """Remove every part and save the empty list."""
        self.rects.clear()
        self.layouts = {}
        self.max_height = 0
        save_rects(self.rects_path, self.rects)

    def place(self) -> dict[Algorithm, Layout]:
        """Lay the parts out with every algorithm and pick the shortest layout."""
        self.max_height = max_consumption(self.rects)
        self.rects.sort(key=lambda rect: rect.height, reverse=True)
        self.layouts = pack(self.rects, self.sheet.width)
        self.algorithm = best_algorithm(self.layouts, self.max_height)
        return self.layouts

    @property
    def layout(self) -> Layout:
        """The layout of the chosen algorithm."""
        return self.layouts.get(self.algorithm, Layout((), 0))

    def summary(self) -> str:
        """One line with the maximum consumption and each algorithm's length."""
        parts = [f"Max consumption: {self.max_height} mm"]
        for algorithm in Algorithm:
            layout = self.layouts.get(algorithm)
            parts.append(f"{algorithm.name}: {layout.height if layout else 0}")
        parts.append(f"best: {self.algorithm.name}")
        return "  ".join(parts)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stripcut", description="Lay rectangular parts out on a sheet."
    )
    parser.add_argument("-d", "--dir", default=".", help="directory holding the XML files")
    parser.add_argument("--clear", action="store_true", help="remove every part first")
    parser.add_argument("--sheet", nargs=2, metavar=("WIDTH", "LENGTH"), help="set the sheet size")
    parser.add_argument("--load", metavar="FILE", help="add the parts from an XML file")
    parser.add_argument(
        "--add", nargs=2, action="append", default=[], metavar=("WIDTH", "HEIGHT"),
        help="add a part (repeatable)",
    )
    parser.add_argument("--generate", type=int, metavar="N", help="add N random parts")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and print the resulting layout."""
    args = _parser().parse_args(argv)
    try:
        workspace = Workspace(args.dir)
        if args.clear:
            workspace.clear()
        if args.sheet:
            workspace.set_sheet(*args.sheet)
        if args.load:
            workspace.load(args.load)
        for width, height in args.add:
            workspace.add_rect(width, height)
        if args.generate:
            workspace.generate(args.generate)
    except (InvalidSizeError, ValueError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(workspace.summary())
    print(workspace.algorithm.title)
    for placement in workspace.layout.placements:
        print(f"{placement.x}\t{placement.y}\t{placement.width}\t{placement.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())