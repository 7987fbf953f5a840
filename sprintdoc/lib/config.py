"""
Configuration loader for sprintdoc.

Loads sprintdoc.yaml. Every key is optional:

    templates_dir: templates      # directory with sprint.md, story.md, subtask.md
    output_dir: output            # where generated files are written
    file_prefix: "PRJ-"           # prepended to every generated file name
    log_level: INFO               # DEBUG, INFO, WARNING or ERROR

Relative paths resolve against the directory holding the file. If no
file exists, defaults are returned.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from . import validate

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "sprintdoc.yaml"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class GeneratorConfig:
    """Settings from sprintdoc.yaml."""
    templates_dir: Optional[Path] = None       # None means the bundled templates
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    file_prefix: str = ""
    log_level: str = DEFAULT_LOG_LEVEL


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else base_dir / path


def load_config(config_path: Optional[Path] = None) -> GeneratorConfig:
    """Load sprintdoc.yaml and return GeneratorConfig.

    Args:
        config_path: Explicit config file. None looks for sprintdoc.yaml
            in the current directory.

    Malformed YAML logs a warning and returns defaults.

    Raises:
        FileNotFoundError: if an explicit config_path doesn't exist
        ValidationError: if the file parses but has unknown keys or bad values
    """
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
        if not config_path.exists():
            return GeneratorConfig()
    elif not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse {config_path}: {e}")
        return GeneratorConfig()

    if not data:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise validate.ValidationError("config", f"Expected a mapping in {config_path}")

    validate.validate(data, "config")

    base_dir = config_path.resolve().parent
    config = GeneratorConfig()
    if "templates_dir" in data:
        config.templates_dir = _resolve(base_dir, data["templates_dir"])
    if "output_dir" in data:
        config.output_dir = _resolve(base_dir, data["output_dir"])
    config.file_prefix = data.get("file_prefix", "")
    config.log_level = data.get("log_level", DEFAULT_LOG_LEVEL)

    logger.debug(f"Loaded config from {config_path}")
    return config
