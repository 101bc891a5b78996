import json

import pytest

from wayfinder.errors import SettingsError
from wayfinder.settings import DEFAULTS, load_settings, save_settings


def test_missing_home_file_is_created_with_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / ".config" / "wayfinder" / "config.json"

    settings = load_settings()

    assert settings == DEFAULTS
    assert json.loads(path.read_text()) == DEFAULTS
    settings["router"]["schemes"] = ["changed"]
    assert DEFAULTS["router"]["schemes"] is None


def test_partial_file_is_merged(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"router": {"schemes": ["myapp"]}}))

    settings = load_settings(path)

    assert settings["router"] == {
        "schemes": ["myapp"],
        "decode_plus": False,
        "keep_encoded_slashes": False,
    }
    assert settings["logging"] == {"level": "WARNING"}


def test_save_then_load(tmp_path):
    path = tmp_path / "config.json"
    data = {
        "router": {"schemes": None, "decode_plus": True, "keep_encoded_slashes": True},
        "logging": {"level": "DEBUG"},
    }

    save_settings(data, path)

    assert load_settings(path) == data


def test_explicit_missing_path_raises(tmp_path):
    path = tmp_path / "typo.json"

    with pytest.raises(SettingsError):
        load_settings(path)

    assert not path.exists()


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(SettingsError):
        load_settings(path)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"router": "myapp"},
        {"router": {"schemes": "myapp"}},
        {"router": {"schemes": [1, 2]}},
        {"router": {"decode_plus": "yes"}},
        {"router": {"keep_encoded_slashes": 1}},
        {"logging": {"level": 10}},
    ],
)
def test_wrong_shapes_raise(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))

    with pytest.raises(SettingsError):
        load_settings(path)
