"""Reading and writing the sheet size and the parts list as XML files."""

from __future__ import annotations

import logging
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from stripcut.packing import (
    MAX_SHEET_HEIGHT,
    MAX_SHEET_WIDTH,
    SHEET_HEIGHT,
    SHEET_WIDTH,
    InvalidSizeError,
    Rect,
    parse_size,
)

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


@dataclass(frozen=True)
class Sheet:
    """Sheet width in millimetres and length in metres."""

    width: int = SHEET_WIDTH
    height: int = SHEET_HEIGHT


def _read_root(path: str | os.PathLike) -> ET.Element | None:
    try:
        data = Path(path).read_bytes()
    except OSError:
        return None
    try:
        return ET.fromstring(data)
    except ET.ParseError as error:
        logger.warning("cannot parse %s: %s", path, error)
        return ET.Element("invalid")


def _text(element: ET.Element) -> str:
    return "".join(element.itertext())


def _parse_color(text: str) -> int:
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        return 0
    value = int(stripped)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value % (1 << 32)


def save_sheet(path: str | os.PathLike, sheet: Sheet) -> None:
    """Write the sheet size."""
    Path(path).write_text(
        "<!DOCTYPE met>\n"
        "<geometry>\n"
        f" <metW>{sheet.width}</metW>\n"
        f" <metH>{sheet.height}</metH>\n"
        "</geometry>\n",
        encoding="utf-8",
    )


def load_sheet(path: str | os.PathLike) -> Sheet:
    """Read the sheet size; a missing file is created with the defaults."""
    root = _read_root(path)
    if root is None:
        sheet = Sheet()
        try:
            save_sheet(path, sheet)
        except OSError as error:
            logger.warning("cannot write %s: %s", path, error)
        return sheet
    width, height = SHEET_WIDTH, SHEET_HEIGHT
    fields = list(root)
    if fields:
        try:
            width = parse_size(_text(fields[0]), MAX_SHEET_WIDTH)
        except InvalidSizeError as error:
            logger.warning("%s", error)
    if len(fields) > 1:
        try:
            height = parse_size(_text(fields[1]), MAX_SHEET_HEIGHT)
        except InvalidSizeError as error:
            logger.warning("%s", error)
    return Sheet(width, height)


def save_rects(path: str | os.PathLike, rects: list[Rect]) -> None:
    """Write the parts list."""
    if not rects:
        body = "<rects/>\n"
    else:
        items = "".join(
            f' <rect number="{number}">\n'
            f"  <rectW>{rect.width}</rectW>\n"
            f"  <rectH>{rect.height}</rectH>\n"
            f"  <rectC>{rect.color}</rectC>\n"
            " </rect>\n"
            for number, rect in enumerate(rects)
        )
        body = f"<rects>\n{items}</rects>\n"
    Path(path).write_text("<!DOCTYPE rects>\n" + body, encoding="utf-8")


def load_rects(path: str | os.PathLike, sheet: Sheet) -> list[Rect]:
    """Read the parts list, checking sizes against the sheet.

    A size that fails the check keeps the value of the part before it; a part
    with no valid size to fall back on is skipped.
    """
    root = _read_root(path)
    if root is None:
        return []
    rects = []
    width: int | None = None
    height: int | None = None
    color = 0
    for node in root:
        fields = list(node)
        if fields:
            try:
                width = parse_size(_text(fields[0]), sheet.width)
            except InvalidSizeError as error:
                logger.warning("%s", error)
        if len(fields) > 1:
            try:
                height = parse_size(_text(fields[1]), sheet.height * 1000)
            except InvalidSizeError as error:
                logger.warning("%s", error)
        if len(fields) > 2:
            color = _parse_color(_text(fields[2]))
        if width is None or height is None:
            logger.warning("skipping a part without a valid size")
            continue
        rects.append(Rect(width, height, color))
    return rects