import json
import os
from unittest.mock import patch

import pytest
from jsonschema.exceptions import ValidationError

from worley.config import NoiseConfig, load_config, setup_logging


def test_defaults_without_environment():
    assert load_config() == NoiseConfig()


def test_load_settings_from_env():
    with patch.dict(os.environ, {
        'WORLEY_SIZE': '32',
        'WORLEY_GRID_SIZE': '8',
        'WORLEY_SEED': '7',
        'WORLEY_CLAMP': 'false',
        'WORLEY_WORKERS': '2',
    }):
        config = load_config()
    assert config == NoiseConfig(size=32, grid_size=8, seed=7, clamp=False, workers=2)


def test_env_seed_none():
    with patch.dict(os.environ, {'WORLEY_SEED': 'none'}):
        assert load_config().seed is None


def test_invalid_env_value():
    with patch.dict(os.environ, {'WORLEY_SIZE': 'large'}):
        with pytest.raises(ValueError):
            load_config()


def test_config_file_overrides_env(tmp_path):
    config_file = tmp_path / "worley.json"
    config_file.write_text(json.dumps({"size": 16, "grid_size": 2, "seed": 3}))

    with patch.dict(os.environ, {'WORLEY_SIZE': '32', 'WORLEY_WORKERS': '4'}):
        config = load_config(str(config_file))
    assert config.size == 16
    assert config.grid_size == 2
    assert config.seed == 3
    assert config.workers == 4


@pytest.mark.parametrize("settings", [
    {"grid_size": 0},
    {"size": -4},
    {"workers": 0},
    {"clamp": "yes"},
    {"octaves": 3},
])
def test_schema_validation(tmp_path, settings):
    config_file = tmp_path / "worley.json"
    config_file.write_text(json.dumps(settings))
    with pytest.raises(ValidationError):
        load_config(str(config_file))


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


def test_malformed_config_file(tmp_path):
    config_file = tmp_path / "worley.json"
    config_file.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(config_file))


def test_setup_logging_returns_package_logger():
    logger = setup_logging(verbose=True)
    assert logger.name == "worley"


def test_whole_number_floats_become_integers(tmp_path):
    config_file = tmp_path / "worley.json"
    config_file.write_text(json.dumps({"size": 4.0, "grid_size": 2.0, "seed": 3.0, "workers": 2.0}))

    config = load_config(str(config_file))
    assert config == NoiseConfig(size=4, grid_size=2, seed=3, workers=2)
    assert all(isinstance(value, int) for value in (config.size, config.grid_size, config.seed, config.workers))
