"""
Tests for the command-line interface.
"""

import json

import pytest

from fnloc import __version__, cli
from fnloc.cli import create_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args([])
        assert args.directory is None
        assert args.format is None
        assert args.sort is None
        assert not args.verbose

    def test_rejects_unknown_sort(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["-s", "size"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """End-to-end runs over the fixture project."""

    def test_table(self, project_src, capsys):
        assert main([project_src, "--no-qualify", "-s", "name"]) == 0
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0] == "Analyzing 2 Rust files..."
        assert lines[1] == ""
        assert lines[2] == "  - fn Describe::describe: total=3 lines, code=3, comment=0, empty=0, complexity=1, nesting=0"
        assert len(lines) == 2 + 9

    def test_qualified_names_by_default(self, project_src, capsys):
        assert main([project_src, "-f", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert all("::" in item["name"] and item["name"].startswith(project_src) for item in data)

    def test_json_sort_and_limit(self, project_src, capsys):
        assert main([project_src, "--no-qualify", "-f", "json", "-s", "complexity", "-l", "1"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [
            {
                "name": "quadrant",
                "total": 11,
                "code": 11,
                "comment": 0,
                "empty": 0,
                "complexity": 6,
                "nesting": 3,
            }
        ]

    def test_csv_min_lines(self, project_src, capsys):
        assert main([project_src, "--no-qualify", "-f", "csv", "-m", "10"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("Function,Total Lines")
        assert [line.split(",")[0] for line in lines[1:]] == ["quadrant", "parse_all", "Stack::pop"]

    def test_output_file(self, project_src, tmp_path, capsys):
        out_file = tmp_path / "report.json"
        assert main([project_src, "-f", "json", "-o", str(out_file)]) == 0
        assert capsys.readouterr().out == ""
        assert len(json.loads(out_file.read_text())) == 9

    def test_config_file(self, project_src, tmp_path, capsys):
        config = tmp_path / "fnloc.yaml"
        config.write_text("report:\n  format: csv\n  qualify_names: false\n  limit: 2\n")
        assert main([project_src, "-c", str(config)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        # Flags win over the file.
        assert main([project_src, "-c", str(config), "-f", "json"]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_verbose_goes_to_stderr(self, project_src, capsys):
        assert main([project_src, "-v", "-f", "json"]) == 0
        captured = capsys.readouterr()
        json.loads(captured.out)
        assert "9 functions in 2 files" in captured.err

    def test_missing_directory(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope")]) == 1
        assert "Error: Directory not accessible" in capsys.readouterr().err

    def test_no_rust_files(self, tmp_path, capsys):
        assert main([str(tmp_path)]) == 1
        assert "No Rust files found" in capsys.readouterr().err

    def test_missing_config_file(self, project_src, tmp_path, capsys):
        assert main([project_src, "-c", str(tmp_path / "missing.yaml")]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_malformed_config_file(self, project_src, tmp_path, capsys):
        config = tmp_path / "fnloc.yaml"
        config.write_text("report: [unclosed\n")
        assert main([project_src, "-c", str(config)]) == 1
        assert "Invalid config file" in capsys.readouterr().err

    def test_malformed_thresholds(self, project_src, tmp_path, monkeypatch, capsys):
        config = tmp_path / "fnloc.yaml"
        config.write_text("thresholds:\n  complexity: 5\n")
        monkeypatch.setattr(cli, "supports_color", lambda: True)
        assert main([project_src, "-c", str(config)]) == 1
        assert "thresholds.complexity" in capsys.readouterr().err

    def test_interrupt(self, project_src, monkeypatch, capsys):
        def interrupted(args):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "cmd_analyze", interrupted)
        assert main([project_src]) == 130

    def test_debug_reraises(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DEBUG", "1")
        with pytest.raises(Exception):
            main([str(tmp_path / "nope")])
