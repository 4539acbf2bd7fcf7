"""Tests for table formatting and SVG / DXF / CSV / JSON output."""
import csv
import json
import xml.etree.ElementTree as ET
from fretboard_gen import (
    SVG_FILENAME, SVG_MIME, DXF_FILENAME, DXF_MIME,
    LayoutParams, FretboardParams,
    compute_fret_positions, build_fretboard_model,
    format_fret_table, make_markdown_table,
    model_to_svg, model_to_dxf, export_svg, export_dxf,
    write_csv_file, write_json_file,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


# --- tables ---

def test_table_skips_nut_and_wraps_at_four(positions_648_24):
    rows = format_fret_table(positions_648_24)
    assert len(rows) == 6
    assert all(len(r) == 4 for r in rows)
    assert rows[0][0] == "1: 36.369"
    assert rows[2][3] == "12: 324.000"
    assert rows[-1][-1] == "24: 486.000"


def test_table_in_inches():
    pos = compute_fret_positions(25.5 * 25.4, 12)
    rows = format_fret_table(pos, unit="in")
    assert rows[2][3] == "12: 12.750"


def test_table_short_last_row():
    rows = format_fret_table(compute_fret_positions(650.0, 22), decimals=2, columns=4)
    assert [len(r) for r in rows] == [4, 4, 4, 4, 4, 2]
    assert rows[-1][-1].startswith("22: ")
    assert len(rows[-1][-1].split(".")[1]) == 2


def test_markdown_table():
    rows = format_fret_table(compute_fret_positions(650.0, 5))
    md = make_markdown_table(rows, "mm", "Nut-to-Fret Distances").splitlines()
    assert md[0] == "## Nut-to-Fret Distances"
    assert md[1].count("Fret: distance (mm)") == 4
    assert md[-1].startswith("| 5: ")
    assert md[-1].count("|") == 5


# --- SVG ---

def test_svg_structure(model_648_24):
    root = ET.fromstring(model_to_svg(model_648_24))
    assert root.tag == SVG_NS + "svg"
    assert root.get("width").endswith("mm")
    groups = {g.get("id"): g for g in root.iter(SVG_NS + "g")}
    assert len(groups["SLOTS"].findall(SVG_NS + "line")) == 26
    assert len(groups["INLAYS"].findall(SVG_NS + "circle")) == 12
    assert len(groups["ALIGNMENT"]) == 0


def test_svg_viewbox_covers_board(model_648_24):
    root = ET.fromstring(model_to_svg(model_648_24, pad=5.0))
    x, y, w, h = (float(v) for v in root.get("viewBox").split())
    assert abs(x - (-8.0)) < 1e-6
    assert abs(y - (-5.0)) < 1e-6
    assert abs(h - 85.0) < 1e-6
    assert abs(w - (486.0 + 3.0 + 10.0)) < 1e-6


def test_svg_rectangles_and_crosshairs():
    pos = compute_fret_positions(648.0, 12)
    model = build_fretboard_model(pos, LayoutParams(slot_style="rectangle", inlay_style="crosshair"))
    root = ET.fromstring(model_to_svg(model))
    groups = {g.get("id"): g for g in root.iter(SVG_NS + "g")}
    assert len(groups["SLOTS"].findall(SVG_NS + "rect")) == 14
    assert len(groups["INLAYS"].findall(SVG_NS + "line")) == 12


def test_export_svg_default_name(tmp_path, monkeypatch, model_648_24):
    monkeypatch.chdir(tmp_path)
    path = export_svg(model_648_24)
    assert path == SVG_FILENAME == "fretboard.svg"
    assert SVG_MIME == "image/svg+xml"
    assert (tmp_path / "fretboard.svg").read_text(encoding="utf-8").startswith("<?xml")


# --- DXF ---

def _dxf_pairs(text):
    lines = text.splitlines()
    return list(zip(lines[0::2], lines[1::2]))


def test_dxf_entities(model_648_24):
    pairs = _dxf_pairs(model_to_dxf(model_648_24))
    assert pairs[0] == ("0", "SECTION")
    assert ("9", "$INSUNITS") in pairs
    assert pairs[pairs.index(("9", "$INSUNITS")) + 1] == ("70", "4")
    assert pairs.count(("0", "LINE")) == 26
    assert pairs.count(("0", "CIRCLE")) == 12
    assert pairs[-1] == ("0", "EOF")


def test_dxf_layers_and_rectangles():
    pos = compute_fret_positions(648.0, 12)
    model = build_fretboard_model(pos, LayoutParams(
        slot_style="rectangle", inlay_style="crosshair", alignment_markers=True))
    pairs = _dxf_pairs(model_to_dxf(model))
    layers = [v for k, v in pairs if k == "8"]
    assert layers.count("SLOTS") == 14 * 4
    assert layers.count("INLAYS") == 6 * 2
    assert layers.count("ALIGNMENT") == 4
    assert pairs.count(("0", "CIRCLE")) == 0


def test_export_dxf(tmp_path, model_648_24):
    out = tmp_path / DXF_FILENAME
    assert export_dxf(model_648_24, str(out)) == str(out)
    assert DXF_MIME == "application/dxf"
    assert out.read_text(encoding="utf-8").endswith("0\nEOF\n")


# --- CSV / JSON ---

def test_csv(tmp_path, positions_648_24):
    out = tmp_path / "board.csv"
    write_csv_file(str(out), positions_648_24, "mm", 3)
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Nut-to-Fret Positions (mm)"]
    assert rows[1] == ["Fret", "Position", "Spacing"]
    assert rows[2] == ["0", "0.000", "0.000"]
    assert rows[14] == ["12", "324.000", rows[14][2]]
    assert len(rows) == 2 + 25


def test_json(tmp_path, positions_648_24, model_648_24, layout_default):
    out = tmp_path / "board.json"
    params = FretboardParams(648.0, 24, False, layout_default)
    write_json_file(str(out), params, positions_648_24, model_648_24)
    data = json.loads(out.read_text())
    assert data["unit"] == "mm"
    assert data["frets"] == 24
    assert data["layout"]["slot_style"] == "line"
    assert len(data["fret_positions"]) == 25
    assert len(data["slots"]) == 26
    assert data["inlays"][0]["type"] == "circle"
    assert data["alignment"] == []
