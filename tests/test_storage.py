import pytest

from stripcut.packing import Rect
from stripcut.storage import Sheet, load_rects, load_sheet, save_rects, save_sheet


def test_missing_sheet_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "met.xml"
    sheet = load_sheet(path)
    assert sheet == Sheet(286, 15)
    text = path.read_text(encoding="utf-8")
    assert "<metW>286</metW>" in text
    assert "<metH>15</metH>" in text


@pytest.mark.parametrize("sheet", [Sheet(500, 20), Sheet(700, 1_000_000), Sheet(1, 1)])
def test_sheet_round_trip(tmp_path, sheet):
    path = tmp_path / "met.xml"
    save_sheet(path, sheet)
    assert load_sheet(path) == sheet


def test_sheet_invalid_width_keeps_default(tmp_path):
    path = tmp_path / "met.xml"
    path.write_text("<geometry><metW>701</metW><metH>30</metH></geometry>", encoding="utf-8")
    assert load_sheet(path) == Sheet(286, 30)


def test_sheet_malformed_file_gives_defaults(tmp_path):
    path = tmp_path / "met.xml"
    path.write_text("<geometry><metW>", encoding="utf-8")
    assert load_sheet(path) == Sheet()
    assert path.read_text(encoding="utf-8") == "<geometry><metW>"


def test_rects_round_trip(tmp_path):
    path = tmp_path / "rects.xml"
    rects = [Rect(10, 20, 0xFF102030), Rect(286, 5, 0xFFFFFFFF), Rect(1, 15000, 0)]
    save_rects(path, rects)
    assert load_rects(path, Sheet()) == rects


def test_rects_file_layout(tmp_path):
    path = tmp_path / "rects.xml"
    save_rects(path, [Rect(10, 20, 5)])
    text = path.read_text(encoding="utf-8")
    assert '<rect number="0">' in text
    assert "<rectW>10</rectW>" in text
    assert "<rectC>5</rectC>" in text


def test_empty_rects_file(tmp_path):
    path = tmp_path / "rects.xml"
    save_rects(path, [])
    assert path.read_text(encoding="utf-8") == "<!DOCTYPE rects>\n<rects/>\n"
    assert load_rects(path, Sheet()) == []


def test_missing_rects_file(tmp_path):
    assert load_rects(tmp_path / "absent.xml", Sheet()) == []


def test_malformed_rects_file(tmp_path):
    path = tmp_path / "rects.xml"
    path.write_text("<rects><rect>", encoding="utf-8")
    assert load_rects(path, Sheet()) == []


def test_invalid_size_keeps_previous_value(tmp_path):
    path = tmp_path / "rects.xml"
    save_rects(path, [Rect(10, 20, 1), Rect(400, 30, 2)])
    loaded = load_rects(path, Sheet(300, 15))
    assert loaded == [Rect(10, 20, 1), Rect(10, 30, 2)]


def test_first_part_without_valid_size_is_skipped(tmp_path):
    path = tmp_path / "rects.xml"
    save_rects(path, [Rect(0, 20, 1), Rect(12, 30, 2)])
    assert load_rects(path, Sheet()) == [Rect(12, 30, 2)]


def test_height_limit_scales_with_sheet_length(tmp_path):
    path = tmp_path / "rects.xml"
    save_rects(path, [Rect(5, 2000, 1), Rect(5, 2001, 2)])
    assert load_rects(path, Sheet(286, 2)) == [Rect(5, 2000, 1), Rect(5, 2000, 2)]


def test_color_wraps_to_unsigned(tmp_path):
    path = tmp_path / "rects.xml"
    path.write_text(
        "<rects><rect><rectW>5</rectW><rectH>6</rectH><rectC>-1</rectC></rect>"
        "<rect><rectW>5</rectW><rectH>6</rectH><rectC>blue</rectC></rect></rects>",
        encoding="utf-8",
    )
    assert [rect.color for rect in load_rects(path, Sheet())] == [0xFFFFFFFF, 0]