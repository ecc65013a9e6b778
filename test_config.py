"""
Test script for configuration system.
"""
import json

from reversi.config import Config, get_default_config


def test_config_defaults():
    config = get_default_config()
    assert config.project_name == "Reversi"
    assert config.display.glyphs == ("X", "O")
    assert config.display.player_names == ["Player 1", "Player 2"]
    assert config.input.quit_command == "sext"
    assert config.input.one_based
    assert config.logging.log_level == "WARNING"
    assert not config.logging.log_to_file


def test_config_save_and_load(tmp_path):
    """Test saving and loading a config."""
    config = get_default_config()
    config.display.first_glyph = "B"
    config.input.quit_command = "quit"

    path = tmp_path / "nested" / "config.json"
    config.save(str(path))
    loaded = Config.load(str(path))

    assert loaded.to_dict() == config.to_dict()
    assert json.loads(path.read_text())["display"]["first_glyph"] == "B"


def test_config_from_partial_dict():
    config = Config.from_dict({"display": {"show_hints": False}})
    assert not config.display.show_hints
    assert config.display.first_glyph == "X"
    assert config.input.separator == ","


def test_config_rejects_unknown_keys():
    try:
        Config.from_dict({"input": {"bogus": 1}})
    except TypeError:
        pass
    else:
        assert False, "Unknown config keys should be rejected"


def test_config_requires_two_player_names():
    for names in (["Solo"], [], ["A", "B", "C"]):
        try:
            Config.from_dict({"display": {"player_names": names}})
        except ValueError:
            pass
        else:
            assert False, f"{names!r} should be rejected"
