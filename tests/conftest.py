"""Pytest configuration and shared fixtures for Sector Models tests."""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import structlog

from sector_models.config.settings import Settings
from sector_models.resolver import locator
from sector_models.resolver.core import ModelResolver
from sector_models.resolver.shared import reset_resolver
from tests.utils import SAMPLE_MODELS_YML


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir).resolve()


@pytest.fixture(autouse=True)
def isolated_paths(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the install-relative and cwd candidates at empty temp directories."""
    install_root = temp_dir / "install"
    workdir = temp_dir / "cwd"
    install_root.mkdir()
    workdir.mkdir()
    monkeypatch.setattr(locator, "_INSTALL_ROOT", install_root)
    monkeypatch.chdir(workdir)
    return temp_dir


@pytest.fixture
def install_root(isolated_paths: Path) -> Path:
    """Directory treated as the installation root by the locator."""
    return isolated_paths / "install"


@pytest.fixture
def workdir(isolated_paths: Path) -> Path:
    """Current working directory during the test."""
    return isolated_paths / "cwd"


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Create test settings whose candidate paths all live under a temp dir."""
    return Settings(
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        MODELS_FILE=None,
        MODELS_DEPLOYMENT_PATH=temp_dir / "app" / "models.yml",
    )


@pytest.fixture
def write_models_file(temp_dir: Path):
    """Write a models file and return its path."""

    def _write(content: str, name: str = "models.yml") -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_models_file(write_models_file) -> Path:
    """A models file holding the sample two-sector document."""
    return write_models_file(SAMPLE_MODELS_YML)


@pytest.fixture
def resolver(test_settings: Settings) -> ModelResolver:
    """A resolver that finds no models file."""
    return ModelResolver(test_settings)


@pytest.fixture
def file_resolver(test_settings: Settings, sample_models_file: Path) -> ModelResolver:
    """A resolver configured with the sample models file."""
    test_settings.MODELS_FILE = sample_models_file
    return ModelResolver(test_settings)


@pytest.fixture(autouse=True)
def reset_shared_state() -> Generator[None, None, None]:
    """Reset the shared resolver and structlog configuration between tests."""
    reset_resolver()
    yield
    reset_resolver()
    structlog.reset_defaults()


# Environment cleanup
@pytest.fixture(autouse=True)
def cleanup_env():
    """Clean up environment variables before/after tests."""
    # Store original env vars
    original_env = dict(os.environ)

    for key in list(os.environ):
        if key.upper().startswith("SECTOR_MODELS_"):
            os.environ.pop(key)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)
