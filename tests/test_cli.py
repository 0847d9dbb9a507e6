import io
import json

import pytest

from json_to_class.cli import create_parser, main


@pytest.fixture
def sample_file(write_json):
    return write_json(json.dumps({"user_name": "x", "address": {"city": "y"}}))


class TestParser:
    def test_defaults(self):
        args = create_parser().parse_args(["-i", "data.json"])

        assert args.input == "data.json"
        assert args.name is None
        assert args.naming_rule is None
        assert args.language == "dart"
        assert not args.verbose

    def test_invalid_naming_rule(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["-i", "data.json", "-r", "upper"])
        assert exc_info.value.code == 2


class TestMain:
    def test_generates_to_stdout(self, sample_file, capsys):
        exit_code = main(["-i", str(sample_file), "-n", "Person"])
        captured = capsys.readouterr()

        assert exit_code == 0
        assert captured.out.startswith(
            "import 'package:json_annotation/json_annotation.dart';\n"
        )
        assert "part 'person.g.dart';" in captured.out
        assert "class Person {" in captured.out
        assert "class Address {" in captured.out
        assert '@JsonKey(name: "user_name")' in captured.out

    def test_naming_rule(self, sample_file, capsys):
        assert main(["-i", str(sample_file), "-r", "snake"]) == 0
        out = capsys.readouterr().out

        assert "@JsonSerializable(fieldRename: FieldRename.snake)" in out
        assert '@JsonKey(name: "user_name")' in out
        assert "class Untitled {" in out

    def test_output_file(self, sample_file, tmp_path, capsys):
        output = tmp_path / "person.dart"

        assert main(["-i", str(sample_file), "-n", "Person", "-o", str(output)]) == 0
        captured = capsys.readouterr()

        assert captured.out == ""
        assert "class Person {" in output.read_text(encoding="utf-8")

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"a": 1}'))

        assert main(["-i", "-", "-n", "Foo"]) == 0
        assert "final int a;" in capsys.readouterr().out

    def test_config_file(self, sample_file, write_json, capsys):
        config = write_json(json.dumps({"root_name": "FromConfig"}), name="cfg.json")

        assert main(["-i", str(sample_file), "--config", str(config)]) == 0
        assert "class FromConfig {" in capsys.readouterr().out

    def test_name_overrides_config_file(self, sample_file, write_json, capsys):
        config = write_json(json.dumps({"root_name": "FromConfig"}), name="cfg.json")

        assert main(["-i", str(sample_file), "--config", str(config), "-n", "Cli"]) == 0
        assert "class Cli {" in capsys.readouterr().out

    def test_missing_input(self, capsys):
        assert main([]) == 1
        captured = capsys.readouterr()

        assert captured.out == ""
        assert "--input" in captured.err

    def test_nonexistent_file(self, tmp_path, capsys):
        assert main(["-i", str(tmp_path / "missing.json")]) == 1
        assert "Failed to load input" in capsys.readouterr().err

    def test_invalid_json(self, write_json, capsys):
        path = write_json("{broken")

        assert main(["-i", str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_too_deeply_nested_input(self, write_json, capsys):
        path = write_json("[" * 200000 + "]" * 200000)

        assert main(["-i", str(path)]) == 1
        assert "Failed to load input" in capsys.readouterr().err

    def test_root_not_object(self, write_json, capsys):
        path = write_json("[1, 2, 3]")

        assert main(["-i", str(path)]) == 1
        assert "Code generation failed" in capsys.readouterr().err

    def test_unsupported_language(self, sample_file, capsys):
        assert main(["-i", str(sample_file), "-l", "cobol"]) == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_bad_config_file(self, sample_file, tmp_path, capsys):
        missing = tmp_path / "nope.json"

        assert main(["-i", str(sample_file), "--config", str(missing)]) == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_warnings_go_to_stderr(self, write_json, capsys):
        path = write_json('{"n": null}')

        assert main(["-i", str(path), "-n", "Foo"]) == 0
        captured = capsys.readouterr()

        assert "Untyped field Foo.n" in captured.err
        assert "Warnings" not in captured.out

    def test_verbose_shows_metadata(self, sample_file, capsys):
        assert main(["-i", str(sample_file), "--verbose"]) == 0
        assert "Class Count" in capsys.readouterr().err

    def test_list_languages(self, capsys):
        assert main(["--list-languages"]) == 0
        assert "dart" in capsys.readouterr().err
