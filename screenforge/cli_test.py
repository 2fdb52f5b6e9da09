"""Tests for the command-line interface."""

import json

import pytest

from screenforge.cli import COMMANDS, main
from screenforge.ir import dump_screens


@pytest.fixture
def design_file(tmp_path, sample_screens):
    """Write the sample design to a JSON file."""
    path = tmp_path / "design.json"
    path.write_text(json.dumps({"screens": dump_screens(sample_screens)}))
    return path


class TestMain:
    """Tests for command dispatch."""

    @pytest.mark.unit
    def test_no_arguments_shows_help(self, capsys):
        assert main([]) == 1
        assert "Usage: python . {command}" in capsys.readouterr().out

    @pytest.mark.unit
    def test_help(self, capsys):
        assert main(["--help"]) == 0
        out = capsys.readouterr().out
        for command in COMMANDS:
            assert command in out

    @pytest.mark.unit
    def test_unknown_command(self):
        assert main(["explode"]) == 1


class TestSchemaCommand:
    """Tests for the schema command."""

    @pytest.mark.unit
    def test_catalog(self, capsys):
        assert main(["schema"]) == 0
        catalog = json.loads(capsys.readouterr().out)
        assert "dynamicTable" in catalog

    @pytest.mark.unit
    def test_single_type(self, capsys):
        assert main(["schema", "button"]) == 0
        entry = json.loads(capsys.readouterr().out)
        assert entry["defaultWidth"] == 120

    @pytest.mark.unit
    def test_unknown_type(self):
        assert main(["schema", "slider"]) == 1

    @pytest.mark.unit
    def test_json_schema(self, capsys):
        assert main(["schema", "--json-schema"]) == 0
        schema = json.loads(capsys.readouterr().out)
        assert "properties" in schema


class TestFileCommands:
    """Tests for commands reading design files."""

    @pytest.mark.integration
    def test_generate_to_stdout(self, design_file, capsys):
        assert main(["generate", str(design_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("import 'package:flutter/material.dart';")
        assert "class LoginScreen extends StatefulWidget" in out

    @pytest.mark.integration
    def test_generate_to_file(self, design_file, tmp_path):
        output = tmp_path / "lib" / "main.dart"
        assert main(["generate", str(design_file), "--dark", "-o", str(output)]) == 0
        assert "Color(0xFF121212)" in output.read_text()

    @pytest.mark.integration
    def test_preview_single_screen(self, design_file, capsys):
        assert main(["preview", str(design_file), "--screen", "home"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("canvas {id=home, name=Home}")

    @pytest.mark.integration
    def test_preview_missing_screen(self, design_file):
        assert main(["preview", str(design_file), "--screen", "nope"]) == 1

    @pytest.mark.integration
    def test_preview_json(self, design_file, capsys):
        assert main(["preview", str(design_file), "--json"]) == 0
        previews = json.loads(capsys.readouterr().out)
        assert previews["login"]["submit"]["tag"] == "positioned"

    @pytest.mark.integration
    def test_validate_valid(self, design_file):
        assert main(["validate", str(design_file)]) == 0

    @pytest.mark.integration
    def test_validate_reports_errors(self, tmp_path, capsys):
        path = tmp_path / "dupes.json"
        path.write_text(
            json.dumps([{"id": "a", "name": "A"}, {"id": "a", "name": "B"}])
        )
        assert main(["validate", str(path)]) == 1
        assert "duplicate_screen_id" in capsys.readouterr().out

    @pytest.mark.integration
    def test_sanitize(self, tmp_path, generated_elements, capsys):
        path = tmp_path / "batch.json"
        path.write_text(json.dumps(generated_elements))
        assert main(["sanitize", str(path), "--screen", "chat"]) == 0
        screens = json.loads(capsys.readouterr().out)
        elements = screens[0]["elements"]
        assert [e["id"] for e in elements] == [f"element-{i}" for i in range(4)]
        assert elements[3]["type"] == "container"

    @pytest.mark.integration
    def test_bad_json_fails(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        assert main(["generate", str(path)]) == 1
