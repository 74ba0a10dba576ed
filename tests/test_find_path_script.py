# tests/test_find_path_script.py
import argparse

import matplotlib
matplotlib.use("Agg")  # headless

import pytest

from scripts.find_path import main, parse_coord

WALL_GAP = """\
S......
.......
###.###
.......
......G
"""


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "wall_gap.txt"
    path.write_text(WALL_GAP)
    return path


def test_parse_coord():
    assert parse_coord("3,4") == (3, 4)
    assert parse_coord(" 0, 12") == (0, 12)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord("3")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord("a,b")


def test_main_uses_markers_and_prints_path(map_file, capsys):
    assert main([str(map_file)]) == 0
    out = capsys.readouterr().out
    assert "Status:     found" in out
    assert "Steps:      10" in out
    assert "S" in out and "G" in out


def test_main_explicit_endpoints_no_path(tmp_path, capsys):
    path = tmp_path / "walled.txt"
    path.write_text("....\n####\n....\n")
    assert main([str(path), "--start", "0,0", "--goal", "2,3"]) == 0
    out = capsys.readouterr().out
    assert "Status:     unreachable" in out
    assert "No path found." in out


def test_main_reports_invalid_input(map_file, capsys):
    assert main([str(map_file), "--start=-1,0"]) == 1
    assert "❌ Error:" in capsys.readouterr().out


def test_main_missing_markers(tmp_path, capsys):
    path = tmp_path / "plain.txt"
    path.write_text("...\n...\n")
    assert main([str(path)]) == 1
    assert "Start and goal must be given" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "Map file not found" in capsys.readouterr().out


def test_main_expansion_limit(map_file, capsys):
    assert main([str(map_file), "--max-expansions", "2"]) == 0
    assert "Status:     expansion_limit" in capsys.readouterr().out


def test_main_saves_plot(map_file, tmp_path, capsys):
    out_png = tmp_path / "route.png"
    assert main([str(map_file), "--save", str(out_png)]) == 0
    assert out_png.exists()
    assert "Plot saved to:" in capsys.readouterr().out
