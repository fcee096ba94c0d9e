"""Tests for the command line interface."""

import io
import json

import pytest

from safeargs import cli
from safeargs.cli import create_parser, main


def test_parser_subcommands():
    args = create_parser().parse_args(
        ["generate", "graph.json", "--app-id", "com.app", "-o", "out", "--indent-size", "2"]
    )
    assert args.command == "generate"
    assert args.file == "graph.json"
    assert args.application_id == "com.app"
    assert args.output_dir == "out"
    assert args.indent_size == 2
    assert not args.dry_run


def test_no_command_prints_help():
    assert main([]) == 1


def test_generate_writes_sources(graph_file, tmp_path):
    out = tmp_path / "out"
    code = main(["generate", str(graph_file), "--application-id", "com.app", "-o", str(out)])

    assert code == 0
    written = out / "com" / "app" / "MainFragmentDirections.java"
    assert written.exists()
    source = written.read_text(encoding="utf-8")
    assert "public class MainFragmentDirections {" in source
    assert "return com.app.R.id.details;" in source


def test_generate_honours_config_file(graph_file, tmp_path):
    config = tmp_path / "safeargs.json"
    config.write_text(
        json.dumps(
            {
                "application_id": "com.app",
                "output_dir": str(tmp_path / "gen"),
                "navigation_package": "androidx.navigation",
            }
        ),
        encoding="utf-8",
    )

    assert main(["generate", str(graph_file), "--config", str(config), "--no-comments"]) == 0

    source = (tmp_path / "gen" / "com" / "app" / "MainFragmentDirections.java").read_text(
        encoding="utf-8"
    )
    assert source.startswith("package com.app;")
    assert "import androidx.navigation.NavDirections;" in source


def test_generate_dry_run_writes_nothing(graph_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    before = sorted(p.name for p in tmp_path.iterdir())

    assert main(["generate", str(graph_file), "--app-id", "com.app", "--dry-run", "--verbose"]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == before


def test_generate_requires_output_dir(graph_file):
    assert main(["generate", str(graph_file), "--app-id", "com.app"]) == 1


def test_generate_from_stdin(monkeypatch, graph_json, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(graph_json)))
    out = tmp_path / "out"

    assert main(["generate", "--stdin", "--app-id", "com.app", "-o", str(out)]) == 0
    assert (out / "com" / "app" / "MainFragmentDirections.java").exists()


def test_generate_reports_invalid_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("{"))
    assert main(["generate", "--stdin", "--dry-run"]) == 1


def test_generate_reports_generation_failure(tmp_path):
    graph = tmp_path / "graph.json"
    graph.write_text(
        json.dumps(
            [
                {"name": ".Foo", "actions": [{"id": {"name": "a"}}]},
                {"name": ".Foo", "actions": [{"id": {"name": "b"}}]},
            ]
        ),
        encoding="utf-8",
    )
    assert main(["generate", str(graph), "--app-id", "com.app", "--dry-run"]) == 1


def test_missing_input(tmp_path):
    assert main(["generate", "--dry-run"]) == 1
    assert main(["generate", str(tmp_path / "missing.json"), "--dry-run"]) == 1


def test_inspect(graph_file, monkeypatch):
    printed = []
    monkeypatch.setattr(cli.console, "print", lambda *a, **k: printed.append(a))

    assert main(["inspect", str(graph_file), "--app-id", "com.app"]) == 0

    table = printed[-1][0]
    assert table.row_count == 1
    assert [c._cells for c in table.columns] == [
        ["com.app.MainFragmentDirections"],
        ["next(int itemId)"],
        ["com.app.R.id.details"],
    ]


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "safeargs 0.1.0" in capsys.readouterr().out


def test_generate_escapes_lone_surrogates(tmp_path):
    graph = tmp_path / "graph.json"
    graph.write_text(
        json.dumps(
            [
                {
                    "name": ".Main",
                    "actions": [
                        {
                            "id": {"name": "next"},
                            "arguments": [
                                {"name": "s", "type": "string", "default": "\ud800"}
                            ],
                        }
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )
    out = tmp_path / "out"

    assert main(["generate", str(graph), "--app-id", "com.app", "-o", str(out)]) == 0
    source = (out / "com" / "app" / "MainDirections.java").read_text(encoding="utf-8")
    assert 'private String s = "\\ud800";' in source


def test_generate_reports_unwritable_output(graph_file, tmp_path):
    blocker = tmp_path / "out"
    blocker.write_text("not a directory", encoding="utf-8")
    assert main(["generate", str(graph_file), "--app-id", "com.app", "-o", str(blocker)]) == 1
