from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Union

from farm import SAVE_FILE, Farm
from game_errors import SaveFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def save(farm: Farm, path: PathLike = SAVE_FILE) -> None:
    """
    Write the farm to `path`. The previous save stays intact until the new
    one is completely written.
    """
    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=".save-", suffix=".tmp", dir=directory
        )
        with os.fdopen(fd, "w") as f:
            json.dump(farm.to_dict(), f)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        logger.error("Failed to save game to %s: %s", path, e)
        raise SaveFileError(f"could not write save file {path}: {e}") from e
    logger.info("Saved %s's farm to %s", farm.name, path)


def load(path: PathLike = SAVE_FILE, **kwargs) -> Farm:
    """
    Read a farm written by `save`.

    Keyword arguments (clock, max_fields) are passed on to the Farm.
    """
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except OSError as e:
        logger.error("Failed to load game from %s: %s", path, e)
        raise SaveFileError(f"could not read save file {path}: {e}") from e
    except ValueError as e:
        logger.error("Save file %s is not valid JSON: %s", path, e)
        raise SaveFileError(f"save file {path} is corrupt: {e}") from e

    try:
        farm = Farm.from_dict(data, **kwargs)
    except (KeyError, TypeError, ValueError) as e:
        logger.error("Save file %s has invalid content: %s", path, e)
        raise SaveFileError(f"save file {path} has invalid content: {e}") from e

    logger.info("Loaded %s's farm with %d fields", farm.name, len(farm.fields))
    return farm
