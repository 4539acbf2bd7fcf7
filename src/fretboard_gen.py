#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
fretboard_gen.py
================

Fretboard layout generator & CAD exporter
-----------------------------------------
This module computes 12-TET fret locations for a single-scale fretboard and
builds a 2-D geometry model of the board ready for fabrication:
  • nut + fret slots (thin lines, or fixed-width slot rectangles),
  • inlay markers (dots or crosshairs) at the usual 3/5/7/9/12 positions,
  • optional alignment ticks above/below the board at every octave,
and emits:
  • Markdown (fret table to stdout),
  • CSV (positions + spacings),
  • JSON (parameters + full primitive list),
  • SVG or DXF drawings (fixed names fretboard.svg / fretboard.dxf by default).

COORDINATES & CONVENTIONS
-------------------------
• Everything is computed in millimetres. Inch input is multiplied by 25.4
  before it reaches the core; inch tables divide by 25.4 on the way out.

• Along-string distance from the nut to fret n uses the closed form:
    pos(n) = L - L / (2 ** (n/12))

• Landscape layout: nut at x=0, bridge towards +x, board spans y=0..75.
  The far side of the nut sits at x = -nut_width.

• Portrait orientation rotates the finished model by -90° around the origin.

USAGE EXAMPLES
--------------
# 25.5" scale, 24 frets → Markdown table
python fretboard_gen.py --scale 25.5in --frets 24

# 648 mm, crosshair inlays, slot rectangles → SVG + DXF with default names
python fretboard_gen.py --scale 648 --frets 24 --inlay-style crosshair \
    --slot-style rectangle --alignment-markers --svg --dxf
"""

from __future__ import annotations

import argparse
import csv
import json
import math
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

MM_PER_IN = 25.4

SLOT_WIDTH = 0.5
BOARD_HEIGHT = 75.0
ALIGN_GAP = 2.0
ALIGN_LENGTH = 5.0

SLOT_LINE = "line"
SLOT_RECTANGLE = "rectangle"
INLAY_DOT = "dot"
INLAY_CROSSHAIR = "crosshair"
LANDSCAPE = "landscape"
PORTRAIT = "portrait"

SLOT_STYLES = (SLOT_LINE, SLOT_RECTANGLE)
INLAY_STYLES = (INLAY_DOT, INLAY_CROSSHAIR)
ORIENTATIONS = (LANDSCAPE, PORTRAIT)

SINGLE_INLAY_FRETS = (3, 5, 7, 9)

SVG_FILENAME = "fretboard.svg"
SVG_MIME = "image/svg+xml"
DXF_FILENAME = "fretboard.dxf"
DXF_MIME = "application/dxf"

_UNIT_ALIASES = {
    "in": "in",
    "inch": "in",
    "inches": "in",
    "mm": "mm",
    "millimeter": "mm",
    "millimeters": "mm",
}


# -------------------------------------------------------------------------------------------------
# Units
# -------------------------------------------------------------------------------------------------


def parse_length_with_unit(text: str, default_unit: str) -> Tuple[float, str]:
    t = text.strip().lower()
    inch_suffixes = ("inches", "inch", "in", '"')
    mm_suffixes = ("mm",)
    for suf in inch_suffixes:
        if t.endswith(suf):
            return float(t[: -len(suf)].strip()), "in"
    for suf in mm_suffixes:
        if t.endswith(suf):
            return float(t[: -len(suf)].strip()), "mm"
    return float(t), default_unit


def to_unit(value: float, from_unit: str, to_unit_: str) -> float:
    if from_unit == to_unit_:
        return value
    if from_unit == "in" and to_unit_ == "mm":
        return value * MM_PER_IN
    if from_unit == "mm" and to_unit_ == "in":
        return value / MM_PER_IN
    raise ValueError(f"Unsupported unit conversion: {from_unit} -> {to_unit_}")


def to_mm(value: float, unit: str) -> float:
    return to_unit(value, unit, "mm")


def from_mm(value: float, unit: str) -> float:
    return to_unit(value, "mm", unit)


# -------------------------------------------------------------------------------------------------
# Fret positions
# -------------------------------------------------------------------------------------------------


def compute_fret_positions(
    scale_length: float, fret_count: int, include_bridge: bool = False
) -> List[float]:
    """
    Distances from the nut to every fret, nut (index 0) included.

    With include_bridge the scale length itself is appended as one extra
    entry; it marks the saddle, not a real fret. No validation happens here.
    """
    positions = [scale_length - scale_length / (2.0 ** (n / 12.0)) for n in range(fret_count + 1)]
    if include_bridge:
        positions.append(scale_length)
    return positions


def fret_spacings(positions: List[float]) -> List[float]:
    out = [0.0]
    for i in range(1, len(positions)):
        out.append(positions[i] - positions[i - 1])
    return out


# -------------------------------------------------------------------------------------------------
# Geometry primitives
# -------------------------------------------------------------------------------------------------

Point = Tuple[float, float]


def _cos_sin(degrees: float) -> Tuple[float, float]:
    # Quarter turns are snapped so rotated slots stay exactly axis-aligned.
    quarter, rem = divmod(degrees, 90.0)
    if rem == 0.0:
        return ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))[int(quarter) % 4]
    theta = math.radians(degrees)
    return math.cos(theta), math.sin(theta)


def rotate_point(x: float, y: float, degrees: float) -> Point:
    cos_t, sin_t = _cos_sin(degrees)
    X = x * cos_t - y * sin_t
    Y = x * sin_t + y * cos_t
    return X, Y


class Line(NamedTuple):
    p1: Point
    p2: Point

    def rotated(self, degrees: float) -> Line:
        return Line(rotate_point(*self.p1, degrees), rotate_point(*self.p2, degrees))


class Rectangle(NamedTuple):
    origin: Point
    width: float
    height: float

    def rotated(self, degrees: float) -> Rectangle:
        if degrees % 90.0 != 0.0:
            raise ValueError(f"Rectangles only rotate by multiples of 90°, got {degrees}")
        ox, oy = self.origin
        x1, y1 = rotate_point(ox, oy, degrees)
        x2, y2 = rotate_point(ox + self.width, oy + self.height, degrees)
        return Rectangle((min(x1, x2), min(y1, y2)), abs(x2 - x1), abs(y2 - y1))


class Circle(NamedTuple):
    center: Point
    radius: float

    def rotated(self, degrees: float) -> Circle:
        return Circle(rotate_point(*self.center, degrees), self.radius)


class Crosshair(NamedTuple):
    """Two perpendicular strokes of half-length `radius`, axis-aligned, crossing at `center`."""

    center: Point
    radius: float

    def rotated(self, degrees: float) -> Crosshair:
        return Crosshair(rotate_point(*self.center, degrees), self.radius)

    def lines(self) -> Tuple[Line, Line]:
        cx, cy = self.center
        r = self.radius
        return Line((cx - r, cy), (cx + r, cy)), Line((cx, cy - r), (cx, cy + r))


Primitive = Union[Line, Rectangle, Circle, Crosshair]


def primitive_extent(p: Primitive) -> Tuple[float, float, float, float]:
    if isinstance(p, Line):
        (x1, y1), (x2, y2) = p
        return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)
    if isinstance(p, Rectangle):
        (ox, oy), w, h = p
        return min(ox, ox + w), min(oy, oy + h), max(ox, ox + w), max(oy, oy + h)
    (cx, cy), r = p
    r = abs(r)
    return cx - r, cy - r, cx + r, cy + r


def primitive_to_dict(p: Primitive) -> Dict[str, object]:
    if isinstance(p, Line):
        return {"type": "line", "p1": list(p.p1), "p2": list(p.p2)}
    if isinstance(p, Rectangle):
        return {"type": "rectangle", "origin": list(p.origin), "width": p.width, "height": p.height}
    kind = "circle" if isinstance(p, Circle) else "crosshair"
    return {"type": kind, "center": list(p.center), "radius": p.radius}


# -------------------------------------------------------------------------------------------------
# Fretboard model
# -------------------------------------------------------------------------------------------------


class LayoutParams(NamedTuple):
    nut_width: float = 3.0
    inlay_width: float = 6.0
    slot_style: str = SLOT_LINE
    inlay_style: str = INLAY_DOT
    alignment_markers: bool = False
    orientation: str = LANDSCAPE


class FretboardParams(NamedTuple):
    scale_length: float
    fret_count: int
    include_bridge: bool = False
    layout: LayoutParams = LayoutParams()


class FretboardModel(NamedTuple):
    slots: Tuple[Primitive, ...]
    inlays: Tuple[Primitive, ...]
    alignment: Tuple[Line, ...]
    unit: str = "mm"

    @property
    def markers(self) -> Tuple[Primitive, ...]:
        return self.inlays + self.alignment

    def primitives(self) -> Tuple[Primitive, ...]:
        return self.slots + self.inlays + self.alignment


def _slot(x: float, slot_style: str) -> Primitive:
    if slot_style == SLOT_RECTANGLE:
        return Rectangle((x - SLOT_WIDTH / 2.0, 0.0), SLOT_WIDTH, BOARD_HEIGHT)
    return Line((x, 0.0), (x, BOARD_HEIGHT))


def _inlay(x: float, y: float, inlay_width: float, inlay_style: str) -> Primitive:
    if inlay_style == INLAY_CROSSHAIR:
        return Crosshair((x, y), inlay_width / 2.0)
    return Circle((x, y), inlay_width / 2.0)


def _alignment_ticks(x: float) -> Tuple[Line, Line]:
    above = Line((x, -ALIGN_GAP), (x, -ALIGN_GAP - ALIGN_LENGTH))
    below_y = BOARD_HEIGHT + ALIGN_GAP
    below = Line((x, below_y), (x, below_y + ALIGN_LENGTH))
    return above, below


def build_fretboard_model(positions: List[float], layout: LayoutParams) -> FretboardModel:
    """
    Lay out nut, fret slots, inlays and alignment ticks for the given positions.

    Inlays sit halfway into the fret space *before* fret i (pos[i] - Δ/2).
    Double dots go on every 12th index, single dots on 3/5/7/9 modulo 12.
    The rule runs over every entry, including a trailing bridge entry.
    """
    slots: List[Primitive] = [_slot(-layout.nut_width, layout.slot_style)]
    slots.extend(_slot(pos, layout.slot_style) for pos in positions)

    alignment: List[Line] = []
    if layout.alignment_markers:
        for i, pos in enumerate(positions):
            if i % 12 == 0:
                alignment.extend(_alignment_ticks(pos))

    inlays: List[Primitive] = []
    for i in range(1, len(positions)):
        fret_number = i % 12
        x = positions[i] - (positions[i] - positions[i - 1]) / 2.0
        if fret_number in SINGLE_INLAY_FRETS:
            ys = [BOARD_HEIGHT / 2.0]
        elif fret_number == 0:
            ys = [BOARD_HEIGHT / 4.0, BOARD_HEIGHT * 3.0 / 4.0]
        else:
            continue
        inlays.extend(_inlay(x, y, layout.inlay_width, layout.inlay_style) for y in ys)

    model = FretboardModel(tuple(slots), tuple(inlays), tuple(alignment), "mm")
    if layout.orientation == PORTRAIT:
        model = rotate_model(model, -90.0)
    return model


def rotate_model(model: FretboardModel, degrees: float) -> FretboardModel:
    return FretboardModel(
        tuple(p.rotated(degrees) for p in model.slots),
        tuple(p.rotated(degrees) for p in model.inlays),
        tuple(p.rotated(degrees) for p in model.alignment),
        model.unit,
    )


def model_bounds(model: FretboardModel) -> Tuple[float, float, float, float]:
    extents = [primitive_extent(p) for p in model.primitives()]
    if not extents:
        return 0.0, 0.0, 1.0, 1.0
    return (
        min(e[0] for e in extents),
        min(e[1] for e in extents),
        max(e[2] for e in extents),
        max(e[3] for e in extents),
    )


def generate(params: FretboardParams) -> Tuple[List[float], FretboardModel]:
    positions = compute_fret_positions(params.scale_length, params.fret_count, params.include_bridge)
    return positions, build_fretboard_model(positions, params.layout)


# -------------------------------------------------------------------------------------------------
# Input normalization
# -------------------------------------------------------------------------------------------------


class ValidationError(ValueError):
    """A user-supplied field is missing, non-numeric, non-positive or out of range."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def _required_text(raw: Mapping[str, object], key: str) -> str:
    value = raw.get(key)
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValidationError(key, "is required")
    return text


def _unit(raw: Mapping[str, object], key: str) -> str:
    name = str(raw.get(key) or "mm").strip().lower()
    if name not in _UNIT_ALIASES:
        raise ValidationError(key, f"unknown unit {name!r}")
    return _UNIT_ALIASES[name]


def _positive_length(raw: Mapping[str, object], key: str, unit_key: str) -> float:
    text = _required_text(raw, key)
    default_unit = _unit(raw, unit_key)
    try:
        value, unit = parse_length_with_unit(text, default_unit)
    except ValueError:
        raise ValidationError(key, f"not a number: {text!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(key, f"must be positive, got {text!r}")
    return to_mm(value, unit)


def _flag(raw: Mapping[str, object], key: str) -> bool:
    value = raw.get(key, False)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _choice(raw: Mapping[str, object], key: str, choices: Tuple[str, ...]) -> str:
    value = str(raw.get(key) or choices[0]).strip().lower()
    if value not in choices:
        raise ValidationError(key, f"must be one of {', '.join(choices)}, got {value!r}")
    return value


def normalize_params(raw: Mapping[str, object]) -> FretboardParams:
    """
    Turn raw form/CLI values into a validated, millimetre-normalized record.

    Length fields (scale, nut, inlay) accept an explicit unit suffix such as
    "25.5in"; otherwise the matching *_units key applies (default mm).
    """
    scale = _positive_length(raw, "scale", "scale_units")
    frets_text = _required_text(raw, "frets")
    try:
        frets = int(frets_text)
    except ValueError:
        raise ValidationError("frets", f"not a whole number: {frets_text!r}") from None
    if frets < 1:
        raise ValidationError("frets", f"must be at least 1, got {frets}")
    layout = LayoutParams(
        nut_width=_positive_length(raw, "nut", "nut_units"),
        inlay_width=_positive_length(raw, "inlay", "inlay_units"),
        slot_style=_choice(raw, "slot_style", SLOT_STYLES),
        inlay_style=_choice(raw, "inlay_style", INLAY_STYLES),
        alignment_markers=_flag(raw, "alignment_markers"),
        orientation=_choice(raw, "orientation", ORIENTATIONS),
    )
    return FretboardParams(scale, frets, _flag(raw, "bridge"), layout)


# -------------------------------------------------------------------------------------------------
# Tables
# -------------------------------------------------------------------------------------------------


def format_fret_table(
    positions: List[float], unit: str = "mm", decimals: int = 3, columns: int = 4
) -> List[List[str]]:
    """Row-major cells of "<fret>: <distance>", nut skipped, `columns` per row."""
    cells = [
        f"{n}: {from_mm(pos, unit):.{decimals}f}" for n, pos in enumerate(positions) if n > 0
    ]
    return [cells[i : i + columns] for i in range(0, len(cells), columns)]


def make_markdown_table(rows: List[List[str]], unit: str, title: str) -> str:
    width = max((len(r) for r in rows), default=1)
    header = [f"Fret: distance ({unit})"] * width
    sep = ["---"] * width
    lines = [
        f"## {title}",
        "| " + " | ".join(header) + " |",
        "| " + " | ".join(sep) + " |",
    ]
    for row in rows:
        padded = row + [""] * (width - len(row))
        lines.append("| " + " | ".join(padded) + " |")
    return "\n".join(lines)


def write_csv_file(filename: str, positions: List[float], unit: str, decimals: int):
    spacings = fret_spacings(positions)
    with open(filename, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow([f"Nut-to-Fret Positions ({unit})"])
        w.writerow(["Fret", "Position", "Spacing"])
        for n, (pos, gap) in enumerate(zip(positions, spacings)):
            w.writerow(
                [n, f"{from_mm(pos, unit):.{decimals}f}", f"{from_mm(gap, unit):.{decimals}f}"]
            )


def write_json_file(
    filename: str, params: FretboardParams, positions: List[float], model: FretboardModel
):
    data = {
        "unit": model.unit,
        "scale_length": params.scale_length,
        "frets": params.fret_count,
        "include_bridge": params.include_bridge,
        "layout": params.layout._asdict(),
        "fret_positions": positions,
        "fret_spacings": fret_spacings(positions),
        "slots": [primitive_to_dict(p) for p in model.slots],
        "inlays": [primitive_to_dict(p) for p in model.inlays],
        "alignment": [primitive_to_dict(p) for p in model.alignment],
    }
    with open(filename, "w") as f:
        json.dump(data, f, indent=2)


# -------------------------------------------------------------------------------------------------
# SVG / DXF
# -------------------------------------------------------------------------------------------------


def _svg_elements(p: Primitive) -> List[str]:
    if isinstance(p, Line):
        (x1, y1), (x2, y2) = p
        return [f'<line x1="{x1:.6f}" y1="{y1:.6f}" x2="{x2:.6f}" y2="{y2:.6f}" />']
    if isinstance(p, Rectangle):
        (x, y), w, h = p
        return [f'<rect x="{x:.6f}" y="{y:.6f}" width="{w:.6f}" height="{h:.6f}" />']
    if isinstance(p, Circle):
        (cx, cy), r = p
        return [f'<circle cx="{cx:.6f}" cy="{cy:.6f}" r="{r:.6f}" />']
    out = []
    for seg in p.lines():
        out.extend(_svg_elements(seg))
    return out


def model_to_svg(model: FretboardModel, stroke_width: float = 0.25, pad: float = 5.0) -> str:
    xmin, ymin, xmax, ymax = model_bounds(model)
    xmin, ymin, xmax, ymax = xmin - pad, ymin - pad, xmax + pad, ymax + pad
    width, height = (xmax - xmin), (ymax - ymin)
    stroke_width = max(stroke_width, 0.001)

    out = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:.6f}{model.unit}" '
        f'height="{height:.6f}{model.unit}" viewBox="{xmin:.6f} {ymin:.6f} {width:.6f} {height:.6f}">',
        f"  <desc>Units: {model.unit}.</desc>",
        "  <style>",
        f"    .SLOTS     {{ stroke:black; fill:none; stroke-width:{stroke_width:.6f}; }}",
        f"    .INLAYS    {{ stroke:#07c;  fill:none; stroke-width:{stroke_width:.6f}; }}",
        f"    .ALIGNMENT {{ stroke:#c07;  fill:none; stroke-width:{stroke_width:.6f}; }}",
        "  </style>",
    ]

    def group(gid: str, prims: Iterable[Primitive], indent: str = "  "):
        out.append(f'{indent}<g id="{gid}" class="{gid}">')
        for p in prims:
            out.extend(f"{indent}  {el}" for el in _svg_elements(p))
        out.append(f"{indent}</g>")

    group("SLOTS", model.slots)
    out.append('  <g id="MARKERS">')
    group("INLAYS", model.inlays, "    ")
    group("ALIGNMENT", model.alignment, "    ")
    out.append("  </g>")
    out.append("</svg>")
    return "\n".join(out) + "\n"


def _dxf_line(p1: Point, p2: Point, layer: str) -> str:
    return (
        "0\nLINE\n"
        f"8\n{layer}\n"
        f"10\n{p1[0]:.6f}\n20\n{p1[1]:.6f}\n11\n{p2[0]:.6f}\n21\n{p2[1]:.6f}\n"
    )


def _dxf_entities(p: Primitive, layer: str) -> List[str]:
    if isinstance(p, Line):
        return [_dxf_line(p.p1, p.p2, layer)]
    if isinstance(p, Rectangle):
        (x, y), w, h = p
        corners = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
        return [_dxf_line(corners[i], corners[(i + 1) % 4], layer) for i in range(4)]
    if isinstance(p, Circle):
        (cx, cy), r = p
        return [f"0\nCIRCLE\n8\n{layer}\n10\n{cx:.6f}\n20\n{cy:.6f}\n40\n{r:.6f}\n"]
    return [_dxf_line(seg.p1, seg.p2, layer) for seg in p.lines()]


def model_to_dxf(model: FretboardModel) -> str:
    # $INSUNITS 4 = millimetres
    parts = ["0\nSECTION\n2\nHEADER\n9\n$INSUNITS\n70\n4\n9\n$MEASUREMENT\n70\n1\n0\nENDSEC\n"]
    parts.append("0\nSECTION\n2\nENTITIES\n")
    for layer, prims in (
        ("SLOTS", model.slots),
        ("INLAYS", model.inlays),
        ("ALIGNMENT", model.alignment),
    ):
        for p in prims:
            parts.extend(_dxf_entities(p, layer))
    parts.append("0\nENDSEC\n0\nEOF\n")
    return "".join(parts)


def export_svg(
    model: FretboardModel, path: str = SVG_FILENAME, stroke_width: float = 0.25, pad: float = 5.0
) -> str:
    with open(path, "w", encoding="utf-8") as f:
        f.write(model_to_svg(model, stroke_width, pad))
    return path


def export_dxf(model: FretboardModel, path: str = DXF_FILENAME) -> str:
    with open(path, "w", encoding="utf-8") as f:
        f.write(model_to_dxf(model))
    return path


# -------------------------------------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------------------------------------


def build_arg_parser():
    p = argparse.ArgumentParser(
        description="Fretboard layout generator + CAD (SVG/DXF) exporter"
    )
    p.add_argument(
        "--scale",
        type=str,
        required=True,
        help='Scale length, e.g. "25.5in" or "648mm" (bare numbers use --unit).',
    )
    p.add_argument("--frets", type=str, required=True, help="Number of frets (>=1).")
    p.add_argument(
        "--unit",
        choices=["in", "mm"],
        default="mm",
        help="Unit for length arguments given without a suffix.",
    )
    p.add_argument(
        "--nut-width",
        type=str,
        default="3mm",
        help='Distance from the zero line to the far side of the nut, e.g. "3mm".',
    )
    p.add_argument(
        "--inlay-width", type=str, default="6mm", help='Inlay diameter, e.g. "0.25in".'
    )
    p.add_argument(
        "--slot-style",
        choices=list(SLOT_STYLES),
        default=SLOT_LINE,
        help="Draw slots as single lines or as 0.5 mm wide rectangles.",
    )
    p.add_argument(
        "--inlay-style",
        choices=list(INLAY_STYLES),
        default=INLAY_DOT,
        help="Draw inlays as circles or crosshairs.",
    )
    p.add_argument(
        "--alignment-markers",
        action="store_true",
        help="Add alignment ticks above/below the board at every 12th position.",
    )
    p.add_argument(
        "--bridge",
        action="store_true",
        help="Append the bridge location as an extra slot at the full scale length.",
    )
    p.add_argument(
        "--orientation",
        choices=list(ORIENTATIONS),
        default=LANDSCAPE,
        help="Portrait rotates the drawing by -90°.",
    )
    p.add_argument(
        "--table-unit", choices=["in", "mm"], default=None, help="Unit for tables (defaults to --unit)."
    )
    p.add_argument("--decimals", type=int, default=3, help="Decimal places for tables.")
    p.add_argument("--markdown", action="store_true", help="Force Markdown to stdout.")
    p.add_argument("--csv", type=str, help="Write CSV file.")
    p.add_argument("--json", type=str, help="Write JSON file.")
    p.add_argument(
        "--svg",
        nargs="?",
        const=SVG_FILENAME,
        default=None,
        help=f"Write SVG drawing (default name {SVG_FILENAME}).",
    )
    p.add_argument(
        "--dxf",
        nargs="?",
        const=DXF_FILENAME,
        default=None,
        help=f"Write DXF drawing (default name {DXF_FILENAME}).",
    )
    p.add_argument("--stroke", type=float, default=0.25, help="SVG stroke width in mm.")
    return p


def main(argv: Optional[List[str]] = None):
    args = build_arg_parser().parse_args(argv)
    try:
        params = normalize_params(
            {
                "scale": args.scale,
                "scale_units": args.unit,
                "frets": args.frets,
                "nut": args.nut_width,
                "nut_units": args.unit,
                "inlay": args.inlay_width,
                "inlay_units": args.unit,
                "slot_style": args.slot_style,
                "inlay_style": args.inlay_style,
                "alignment_markers": args.alignment_markers,
                "bridge": args.bridge,
                "orientation": args.orientation,
            }
        )
    except ValidationError as e:
        raise SystemExit(f"Invalid input: {e}")

    table_unit = args.table_unit or args.unit
    positions, model = generate(params)

    if args.csv:
        write_csv_file(args.csv, positions, table_unit, args.decimals)
        print(f"✅ CSV written to {args.csv}")
    if args.json:
        write_json_file(args.json, params, positions, model)
        print(f"✅ JSON written to {args.json}")
    if args.markdown or not (args.csv or args.json or args.svg or args.dxf):
        layout = params.layout
        print("# Fretboard Table")
        print(
            f"**Scale:** {from_mm(params.scale_length, table_unit):.{args.decimals}f} {table_unit}"
            f"  |  **Frets:** {params.fret_count}  |  **Bridge:** {'yes' if params.include_bridge else 'no'}"
        )
        print(
            f"**Slots:** {layout.slot_style}  |  **Inlays:** {layout.inlay_style}"
            f"  |  **Orientation:** {layout.orientation}\n"
        )
        rows = format_fret_table(positions, table_unit, args.decimals)
        print(make_markdown_table(rows, table_unit, "Nut-to-Fret Distances"))
    if args.svg:
        export_svg(model, args.svg, stroke_width=args.stroke)
        print(f"✅ SVG written to {args.svg}")
    if args.dxf:
        export_dxf(model, args.dxf)
        print(f"✅ DXF written to {args.dxf}")


if __name__ == "__main__":
    main()
