"""Reading and parsing a located models file."""

from pathlib import Path

from ..core.exceptions import ModelsFileError
from ..models.resolution import ModelMapping
from .parser import parse_models


def read_models_file(path: Path) -> str:
    """Read a models file as UTF-8 text."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModelsFileError(f"Failed to read models file {path}: {e}", path)


def load_models_file(path: Path) -> ModelMapping:
    """Read and parse a models file.

    A file that yields no sector at all is rejected, so callers never end up
    with an empty mapping in place of the defaults.
    """
    models = parse_models(read_models_file(path))
    if not models:
        raise ModelsFileError(f"No sectors found in models file {path}", path)
    return models
