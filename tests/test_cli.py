"""Tests for the `python -m linepoints` command line."""

from __future__ import annotations

import json

import pytest

from linepoints import __version__
from linepoints.__main__ import main


class TestRasterizeCommand:
    def test_prints_points(self, capsys):
        assert main(["rasterize", "3", "1", "3", "4"]) == 0
        assert capsys.readouterr().out == "3,1\n3,2\n3,3\n3,4\n"

    def test_diagonal_prints_nothing(self, capsys):
        assert main(["rasterize", "0", "0", "3", "4"]) == 0
        assert capsys.readouterr().out == ""

    def test_strict_diagonal_fails(self, capsys):
        assert main(["rasterize", "0", "0", "3", "4", "--strict"]) == 1
        assert "unsupported: non-axis-aligned segment" in capsys.readouterr().err


class TestDrawCommand:
    def test_default_scene(self, capsys):
        assert main(["draw"]) == 0
        lines = capsys.readouterr().out.splitlines()

        assert lines[0] == "." * 72
        assert lines[1] == "." * 72
        assert lines[2] == (
            "144 point(s) drawn in 2 pass(es); "
            "8 line(s) rasterized, 8 cache hit(s), 0 unsupported"
        )

    def test_passes_option(self, capsys):
        assert main(["draw", "--passes", "3"]) == 0
        summary = capsys.readouterr().out.splitlines()[-1]
        assert summary.startswith("216 point(s) drawn in 3 pass(es)")
        assert "16 cache hit(s)" in summary

    def test_grid_option(self, tmp_path, capsys):
        path = tmp_path / "scene.json"
        path.write_text(
            json.dumps(
                {
                    "passes": 1,
                    "objects": [
                        {"kind": "rectangle", "x": 0, "y": 0, "width": 2, "height": 2}
                    ],
                }
            )
        )
        assert main(["draw", str(path), "--grid"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[:3] == ["###", "# #", "###"]

    def test_scene_with_diagonal_line(self, tmp_path, capsys):
        path = tmp_path / "scene.yaml"
        path.write_text(
            "passes: 1\n"
            "objects:\n"
            "  - kind: line\n"
            "    start: [0, 0]\n"
            "    end: [3, 4]\n"
        )
        assert main(["draw", str(path)]) == 0
        assert capsys.readouterr().out.splitlines()[-1].endswith("1 unsupported")

    def test_strict_scene_fails(self, tmp_path, capsys):
        path = tmp_path / "scene.yaml"
        path.write_text(
            "strict: true\n"
            "objects:\n"
            "  - kind: line\n"
            "    start: [0, 0]\n"
            "    end: [3, 4]\n"
        )
        assert main(["draw", str(path)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_scene_file(self, tmp_path, capsys):
        path = tmp_path / "scene.txt"
        path.write_text("")
        assert main(["draw", str(path)]) == 1
        assert "SceneFileEngine" in capsys.readouterr().err

    def test_missing_scene_file(self, tmp_path, capsys):
        path = tmp_path / "absent.yaml"
        assert main(["draw", str(path)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Cannot read scene file")
        assert "Traceback" not in err

    @pytest.mark.parametrize(
        "name, content",
        [
            ("scene.json", "{not json"),
            ("scene.yaml", "objects: ["),
            ("scene.toml", "passes = = 2"),
        ],
    )
    def test_malformed_scene_file(self, tmp_path, capsys, name, content):
        path = tmp_path / name
        path.write_text(content)
        assert main(["draw", str(path)]) == 1
        assert capsys.readouterr().err.startswith("Error: Cannot read scene file")

    @pytest.mark.parametrize("passes", ["-3", "0", "two"])
    def test_passes_must_be_positive(self, capsys, passes):
        with pytest.raises(SystemExit) as excinfo:
            main(["draw", "--passes", passes])
        assert excinfo.value.code == 2
        assert "--passes" in capsys.readouterr().err


class TestInfoAndVersion:
    def test_info(self, capsys):
        assert main(["info"]) == 0
        out = capsys.readouterr().out
        assert out.startswith(f"line-points: {__version__}")
        assert "Dependencies:" in out
        assert "pydantic" in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out
