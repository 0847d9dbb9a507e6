import pytest

from json_to_class.utils import JSONLoaderError, load_json_from_file, load_json_from_text


class TestLoadJsonFromFile:
    def test_loads_object(self, write_json):
        path = write_json('{"a": [1, 2]}')
        source, data = load_json_from_file(path)

        assert data == {"a": [1, 2]}
        assert str(path) in source

    def test_accepts_string_path(self, write_json):
        path = write_json('{"a": 1}')
        assert load_json_from_file(str(path))[1] == {"a": 1}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json_from_file(tmp_path / "missing.json")

    def test_invalid_json(self, write_json):
        path = write_json('{"a": ')
        with pytest.raises(JSONLoaderError, match="Invalid JSON"):
            load_json_from_file(path)

    def test_other_extension_still_loads(self, write_json):
        path = write_json('{"a": 1}', name="data.txt")
        assert load_json_from_file(path)[1] == {"a": 1}

    def test_too_deeply_nested(self, write_json):
        path = write_json("[" * 200000 + "]" * 200000)
        with pytest.raises(JSONLoaderError, match="nested too deeply"):
            load_json_from_file(path)


class TestLoadJsonFromText:
    def test_loads(self):
        assert load_json_from_text('{"a": null}') == ("<text>", {"a": None})

    def test_invalid(self):
        with pytest.raises(JSONLoaderError, match="<stdin>"):
            load_json_from_text("nope", "<stdin>")

    def test_too_deeply_nested(self):
        with pytest.raises(JSONLoaderError, match="nested too deeply"):
            load_json_from_text("[" * 200000 + "]" * 200000)

