"""Tests for fret position calculation and unit helpers."""
import pytest
from fretboard_gen import (
    compute_fret_positions, fret_spacings,
    parse_length_with_unit, to_unit, to_mm, from_mm,
)


# --- compute_fret_positions ---

@pytest.mark.parametrize("scale,frets", [(648.0, 24), (650.0, 19), (863.6, 1), (100.0, 36)])
def test_positions_strictly_increasing_below_scale(scale, frets):
    pos = compute_fret_positions(scale, frets)
    assert len(pos) == frets + 1
    assert pos[0] == 0.0
    assert all(b > a for a, b in zip(pos, pos[1:]))
    assert pos[-1] < scale


def test_octave_is_half_scale():
    pos = compute_fret_positions(650.0, 12)
    assert abs(pos[12] - 325.0) < 1e-6


def test_648_example():
    pos = compute_fret_positions(648.0, 24)
    assert abs(pos[1] - 36.37) < 0.01
    assert abs(pos[12] - 324.0) < 1e-9
    assert abs(pos[24] - 486.0) < 1e-9


def test_bridge_appended_exactly():
    pos = compute_fret_positions(650.0, 20, include_bridge=True)
    assert len(pos) == 22
    assert pos[-1] == 650.0
    assert pos[-2] < 650.0


def test_zero_frets_is_just_the_nut():
    assert compute_fret_positions(650.0, 0) == [0.0]


def test_deterministic():
    assert compute_fret_positions(628.65, 22, True) == compute_fret_positions(628.65, 22, True)


# --- fret_spacings ---

def test_spacings_sum_to_last_position():
    pos = compute_fret_positions(648.0, 24)
    gaps = fret_spacings(pos)
    assert gaps[0] == 0.0
    assert len(gaps) == len(pos)
    assert abs(sum(gaps) - pos[-1]) < 1e-9
    assert all(b < a for a, b in zip(gaps[1:], gaps[2:]))


# --- units ---

def test_parse_length_suffixes():
    assert parse_length_with_unit("25.5in", "mm") == (25.5, "in")
    assert parse_length_with_unit("25.5 inches", "mm") == (25.5, "in")
    assert parse_length_with_unit("648mm", "in") == (648.0, "mm")
    assert parse_length_with_unit(" 648 ", "mm") == (648.0, "mm")


def test_parse_length_rejects_text():
    with pytest.raises(ValueError):
        parse_length_with_unit("abc", "mm")


def test_inch_mm_round_trip():
    for value in (25.5, 24.75, 34.0, 0.25):
        assert abs(from_mm(to_mm(value, "in"), "in") - value) < 1e-12


def test_to_unit_conversions():
    assert to_unit(1.0, "in", "mm") == 25.4
    assert abs(to_unit(25.4, "mm", "in") - 1.0) < 1e-12
    assert to_unit(3.0, "mm", "mm") == 3.0


def test_to_unit_unknown():
    with pytest.raises(ValueError, match="Unsupported"):
        to_unit(1.0, "cm", "mm")
