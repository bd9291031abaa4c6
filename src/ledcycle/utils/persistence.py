"""JSON files backing Pydantic models such as the app configuration.

Saving keeps the previous file as ``<name>.bak`` and replaces the target
through a temp file. Loading turns parse and validation failures into
configuration errors carrying a recovery hint.
"""

import logging
import shutil
from pathlib import Path

from pydantic import BaseModel, ValidationError

from ledcycle.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)


def load_model[M: BaseModel](path: Path, model_type: type[M]) -> M:
    """
    Read and validate a model from a JSON file.

    A missing file yields the model's defaults; nothing is written back.

    Args:
        path: JSON file to read
        model_type: Model class to validate against

    Raises:
        ConfigFileInvalidError: If the file is empty, unreadable or not JSON
        ConfigValidationError: If a value fails validation
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info(f"No file at {path}, using default {model_type.__name__}")
        return model_type()
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        raise ConfigFileInvalidError(str(path), f"Cannot read file: {e}") from e

    if not text.strip():
        raise ConfigFileInvalidError(str(path), "File is empty")

    try:
        model = model_type.model_validate_json(text)
    except ValidationError as e:
        logger.error(f"Invalid {model_type.__name__} in {path}: {e}")
        raise wrap_pydantic_error(e, str(path)) from e

    logger.debug(f"Loaded {model_type.__name__} from {path}")
    return model


def save_model(model: BaseModel, path: Path) -> None:
    """
    Write a model as indented JSON, creating parent directories as needed.

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists():
        backup_path = path.with_suffix(path.suffix + ".bak")
        shutil.copy2(path, backup_path)
        logger.debug(f"Backed up {path} to {backup_path}")

    temp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        temp_path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
        temp_path.replace(path)
    finally:
        temp_path.unlink(missing_ok=True)

    logger.debug(f"Saved {type(model).__name__} to {path}")
