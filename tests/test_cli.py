"""Tests for the argparse entry point."""
import pytest
from fretboard_gen import main


def test_markdown_by_default(capsys):
    main(["--scale", "25.5in", "--frets", "12"])
    out = capsys.readouterr().out
    assert "# Fretboard Table" in out
    assert "## Nut-to-Fret Distances" in out
    assert "12: 323.850" in out


def test_table_unit_inches(capsys):
    main(["--scale", "25.5", "--unit", "in", "--frets", "12", "--table-unit", "in"])
    out = capsys.readouterr().out
    assert "12: 12.750" in out
    assert "**Scale:** 25.500 in" in out


def test_default_file_names(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["--scale", "648", "--frets", "24", "--svg", "--dxf", "--alignment-markers",
          "--slot-style", "rectangle", "--inlay-style", "crosshair", "--orientation", "portrait"])
    out = capsys.readouterr().out
    assert "✅ SVG written to fretboard.svg" in out
    assert "✅ DXF written to fretboard.dxf" in out
    assert "# Fretboard Table" not in out
    assert (tmp_path / "fretboard.svg").exists()
    assert (tmp_path / "fretboard.dxf").exists()


def test_explicit_paths(tmp_path, capsys):
    svg = tmp_path / "a.svg"
    csv_path = tmp_path / "a.csv"
    json_path = tmp_path / "a.json"
    main(["--scale", "650", "--frets", "19", "--bridge", "--svg", str(svg),
          "--csv", str(csv_path), "--json", str(json_path), "--markdown"])
    out = capsys.readouterr().out
    assert svg.exists() and csv_path.exists() and json_path.exists()
    assert "20: 650.000" in out


@pytest.mark.parametrize("argv,field", [
    (["--scale", "abc", "--frets", "12"], "scale"),
    (["--scale", "650", "--frets", "0"], "frets"),
    (["--scale", "650", "--frets", "12", "--nut-width", "-3"], "nut"),
])
def test_invalid_input_exits(argv, field):
    with pytest.raises(SystemExit, match=f"Invalid input: {field}:"):
        main(argv)
