"""Static JSON content loaded from the public directory."""

import json
from pathlib import Path
from typing import Any

from content_hub.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"

# Data collections served by /api/content/{category}
CONTENT_CATEGORIES: tuple[str, ...] = (
    "achievements",
    "caseStudies",
    "experience",
    "projects",
    "skills",
)

FOLDERS: tuple[str, ...] = ("config", "data")


class ContentUnavailableError(Exception):
    """A static resource is missing or is not valid JSON."""


class ContentProvider:
    """Loads JSON documents from a public directory laid out as::

        config/languages.json
        collections/<lang>/config/*.json
        collections/<lang>/data/*.json
        image/*
        files/*
    """

    def __init__(self, public_dir: Path) -> None:
        self.public_dir = Path(public_dir)

    @property
    def collections_dir(self) -> Path:
        return self.public_dir / "collections"

    @property
    def languages_config_path(self) -> Path:
        return self.public_dir / "config" / "languages.json"

    def _read_json(self, path: Path) -> Any:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("content_load_failed", path=str(path), error=str(e))
            raise ContentUnavailableError(f"Cannot load {path.name}") from e

    def load_languages_config(self) -> Any:
        """Load ``config/languages.json``.

        Raises:
            ContentUnavailableError: If the file is missing or invalid
        """
        return self._read_json(self.languages_config_path)

    def load_collection(
        self, name: str, lang: str = DEFAULT_LANGUAGE, folder: str = "data"
    ) -> Any:
        """Load ``collections/<lang>/<folder>/<name>.json``.

        Raises:
            ContentUnavailableError: If the file is missing or invalid
        """
        return self._read_json(self.collections_dir / lang / folder / f"{name}.json")

    def load_config(self, name: str) -> Any:
        """Load a root config document ``config/<name>.json``."""
        return self._read_json(self.public_dir / "config" / f"{name}.json")

    def list_files(self, lang: str = DEFAULT_LANGUAGE, folder: str = "data") -> list[str]:
        """Names (without ``.json``) of the documents in a collection folder."""
        folder_path = self.collections_dir / lang / folder
        if not folder_path.is_dir():
            return []
        return sorted(path.stem for path in folder_path.glob("*.json"))

    def list_config_files(self) -> list[str]:
        config_dir = self.public_dir / "config"
        if not config_dir.is_dir():
            return []
        return sorted(path.stem for path in config_dir.glob("*.json"))

    def language_exists(self, lang: str) -> bool:
        return (self.collections_dir / lang).is_dir()

