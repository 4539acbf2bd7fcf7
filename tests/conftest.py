"""Shared fixtures for the fretboard generator tests."""
import pytest
from fretboard_gen import (
    LayoutParams, compute_fret_positions, build_fretboard_model,
)


@pytest.fixture(scope="session")
def positions_648_24():
    """25.5" (648 mm) scale, 24 frets, no bridge."""
    return compute_fret_positions(648.0, 24)


@pytest.fixture(scope="session")
def layout_default():
    return LayoutParams(nut_width=3.0, inlay_width=6.0)


@pytest.fixture(scope="session")
def model_648_24(positions_648_24, layout_default):
    return build_fretboard_model(positions_648_24, layout_default)


@pytest.fixture
def raw_form():
    """Form values as the GUI/CLI hand them over (strings, per-field units)."""
    return {
        "scale": "25.5",
        "scale_units": "in",
        "frets": "24",
        "nut": "3",
        "nut_units": "mm",
        "inlay": "0.25",
        "inlay_units": "in",
        "slot_style": "line",
        "inlay_style": "dot",
        "alignment_markers": "0",
        "bridge": "0",
        "orientation": "landscape",
    }
