# config.py

import os
import json
import logging
from dataclasses import dataclass, asdict
from typing import Optional

from dotenv import load_dotenv
from jsonschema import validate, ValidationError, SchemaError
from rich.logging import RichHandler

logger = logging.getLogger(__name__)

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "size": {"type": "integer", "minimum": 0},
        "grid_size": {"type": "integer", "minimum": 1},
        "seed": {"type": ["integer", "null"], "minimum": 0},
        "clamp": {"type": "boolean"},
        "workers": {"type": "integer", "minimum": 1},
    },
    "required": ["size", "grid_size"],
    "additionalProperties": False,
}

INTEGER_SETTINGS = ("size", "grid_size", "seed", "workers")

ENV_VARIABLES = {
    "size": "WORLEY_SIZE",
    "grid_size": "WORLEY_GRID_SIZE",
    "seed": "WORLEY_SEED",
    "clamp": "WORLEY_CLAMP",
    "workers": "WORLEY_WORKERS",
}


@dataclass
class NoiseConfig:
    size: int = 64
    grid_size: int = 4
    seed: Optional[int] = None
    clamp: bool = True
    workers: int = 1


def setup_logging(verbose: bool):
    """
    Sets up logging configuration with RichHandler.
    If verbose is True, set log level to DEBUG, else INFO.
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )
    return logging.getLogger("worley")


def _settings_from_env() -> dict:
    settings = {}
    for key, variable in ENV_VARIABLES.items():
        raw = os.getenv(variable)
        if raw is None:
            continue
        if key == "clamp":
            settings[key] = raw.lower() in ['true', '1', 't']
        elif key == "seed" and raw.lower() in ['', 'none']:
            settings[key] = None
        else:
            settings[key] = int(raw)
    return settings


def load_config(config_file: Optional[str] = None) -> NoiseConfig:
    """
    Build a NoiseConfig from defaults, WORLEY_* environment variables
    (a .env file is honoured) and an optional JSON file, in that order
    of increasing precedence. The merged settings are validated against
    CONFIG_SCHEMA.
    """
    load_dotenv()

    settings = asdict(NoiseConfig())
    try:
        settings.update(_settings_from_env())
        logger.debug("Loaded settings from environment variables.")
    except ValueError as ve:
        logger.error(f"Type conversion error: {ve}")
        raise

    if config_file:
        try:
            with open(config_file, "r") as f:
                settings.update(json.load(f))
            logger.debug(f"Loaded settings from {config_file}")
        except FileNotFoundError:
            logger.error(f"Config file not found: {config_file}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON format in config file {config_file}: {e}")
            raise

    try:
        validate(instance=settings, schema=CONFIG_SCHEMA)
    except ValidationError as ve:
        logger.error(f"Configuration validation error: {ve.message}")
        raise
    except SchemaError as se:
        logger.error(f"Invalid JSON Schema: {se.message}")
        raise

    # draft-07 accepts whole floats such as 4.0 as integers
    for key in INTEGER_SETTINGS:
        if settings.get(key) is not None:
            settings[key] = int(settings[key])

    return NoiseConfig(**settings)
