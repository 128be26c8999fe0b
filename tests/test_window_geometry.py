import pytest

from gridfront.geometry import Dimensions
from gridfront.window_geometry import (
    DEFAULT_WINDOW_GEOMETRY,
    GeometryError,
    maybe_save_window_size,
    parse_window_geometry,
    settings_path,
    try_to_load_last_window_size,
)


@pytest.fixture
def store(tmp_path):
    return tmp_path / "window.json"


def test_default_geometry_is_fixed():
    assert DEFAULT_WINDOW_GEOMETRY == Dimensions(100, 50)


def test_settings_path_is_under_home(tmp_path):
    path = settings_path(tmp_path)
    assert path.is_relative_to(tmp_path)
    assert path.name.endswith("settings.json")


def test_save_and_load_round_trip(store):
    maybe_save_window_size(Dimensions(132, 41), True, store)
    assert try_to_load_last_window_size(store) == Dimensions(132, 41)


def test_save_without_remember_writes_default(store):
    maybe_save_window_size(Dimensions(132, 41), False, store)
    assert try_to_load_last_window_size(store) == DEFAULT_WINDOW_GEOMETRY


def test_save_without_size_writes_default(store):
    maybe_save_window_size(None, True, store)
    assert try_to_load_last_window_size(store) == DEFAULT_WINDOW_GEOMETRY


def test_saved_file_is_json(store):
    maybe_save_window_size(None, True, store)
    assert Dimensions.from_json(store.read_text()) == DEFAULT_WINDOW_GEOMETRY


def test_zero_saved_size_reverts_to_default(store):
    store.write_text(Dimensions(0, 30).to_json())
    assert try_to_load_last_window_size(store) == DEFAULT_WINDOW_GEOMETRY


def test_load_missing_file_raises(store):
    with pytest.raises(GeometryError):
        try_to_load_last_window_size(store)


def test_load_malformed_file_raises(store):
    store.write_text("not json")
    with pytest.raises(GeometryError):
        try_to_load_last_window_size(store)


def test_parse_none_uses_saved_size(store):
    maybe_save_window_size(Dimensions(90, 30), True, store)
    assert parse_window_geometry(None, store) == Dimensions(90, 30)


def test_parse_none_without_file_uses_default(store):
    assert parse_window_geometry(None, store) == DEFAULT_WINDOW_GEOMETRY


def test_parse_valid_geometry(store):
    assert parse_window_geometry("120x40", store) == Dimensions(120, 40)


def test_parse_zero_dimension(store):
    with pytest.raises(GeometryError) as info:
        parse_window_geometry("0x10", store)
    assert str(info.value) == "Invalid geometry: Window dimensions should be greater than 0."


@pytest.mark.parametrize("text", ["abc", "10x", "1x2x3", "10", "-1x5", "1.5x3"])
def test_parse_invalid_format(store, text):
    with pytest.raises(GeometryError) as info:
        parse_window_geometry(text, store)
    assert str(info.value) == f"Invalid geometry: {text}\nValid format: <width>x<height>"


def test_first_error_wins(store):
    with pytest.raises(GeometryError) as info:
        parse_window_geometry("abcx0", store)
    assert "Valid format" in str(info.value)