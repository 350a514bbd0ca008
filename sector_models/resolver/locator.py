"""Discovery of the optional models.yml file."""

from pathlib import Path
from typing import List, Optional

from ..config.logging import get_module_logger
from ..config.settings import Settings

logger = get_module_logger("resolver.locator")

# locator.py -> resolver/ -> sector_models/ -> project root
_INSTALL_ROOT = Path(__file__).resolve().parents[2]


def candidate_paths(settings: Optional[Settings] = None) -> List[Path]:
    """Return models file locations in the order they are checked.

    An explicit ``MODELS_FILE`` comes first when set, followed by the file next
    to the installation, the deployment path and the current directory.
    """
    if settings is None:
        settings = Settings()

    paths: List[Path] = []
    if settings.MODELS_FILE is not None:
        paths.append(Path(settings.MODELS_FILE))

    paths.extend([
        _INSTALL_ROOT / settings.MODELS_FILENAME,
        Path(settings.MODELS_DEPLOYMENT_PATH),
    ])
    try:
        paths.append(Path.cwd() / settings.MODELS_FILENAME)
    except OSError as e:
        logger.debug("Current directory unavailable", error=str(e))
    return paths


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError as e:
        logger.debug("Models file check failed", path=str(path), error=str(e))
        return False


def locate_models_file(settings: Optional[Settings] = None) -> Optional[Path]:
    """Return the first existing models file, or None if there is none."""
    for path in candidate_paths(settings):
        if _exists(path):
            return path
    return None
