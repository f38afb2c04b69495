"""Load the YAML application config into pydantic models."""

import os
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from src.constants import DATA_DIR_ENV_VAR
from src.utils.logging import get_logger

if TYPE_CHECKING:
    from src.models.config import AppConfig

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def load_yaml_config(file_path: Path | str, model_class: type[T]) -> T:
    """
    Parse a YAML file into ``model_class``. An empty file validates as ``{}``.

    Raises:
        FileNotFoundError: If the file is missing
        yaml.YAMLError: If the file is not valid YAML
        ValidationError: If the values do not fit the model
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("Configuration file not found", path=str(path))
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}

        config = model_class.model_validate(raw_config)
        logger.info("Configuration loaded", path=str(path), model=model_class.__name__)
        return config

    except yaml.YAMLError as e:
        logger.error("Invalid YAML syntax", path=str(path), error=str(e))
        raise

    except ValidationError as e:
        logger.error("Configuration validation failed", path=str(path), error=str(e))
        raise


def load_app_config(file_path: Path | str = "config/app.yaml") -> "AppConfig":
    """
    Load application configuration.

    A missing file yields the defaults. The data directory can be overridden
    with the ``BOOKSHELF_DATA_DIR`` environment variable.

    Args:
        file_path: Path to app.yaml file

    Returns:
        AppConfig instance
    """
    from src.models.config import AppConfig

    path = Path(file_path)
    if path.exists():
        config = load_yaml_config(path, AppConfig)
    else:
        logger.warning("Config file not found, using defaults", path=str(path))
        config = AppConfig()

    data_dir = os.getenv(DATA_DIR_ENV_VAR)
    if data_dir:
        config.store.data_dir = data_dir
        logger.debug("Data directory overridden from environment", data_dir=data_dir)

    return config
