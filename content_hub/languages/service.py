"""Language configuration lookups and the new-language checklist."""

from typing import Any

from content_hub.content.provider import ContentProvider
from content_hub.models import ChecklistItem

BASE_LANGUAGE = "en"


class LanguageService:
    """Answers questions about configured and existing languages.

    Configuration comes from ``languages.json``; existence is decided by
    the presence of ``collections/<code>`` in the public directory.
    """

    def __init__(self, provider: ContentProvider) -> None:
        self.provider = provider

    def configured_languages(self) -> dict[str, dict[str, Any]]:
        """Map language code to its ``languages.json`` entry.

        Raises:
            ContentUnavailableError: If the configuration cannot be loaded
        """
        config = self.provider.load_languages_config()
        entries = config.get("languages", []) if isinstance(config, dict) else []
        return {
            entry["code"]: entry
            for entry in entries
            if isinstance(entry, dict) and entry.get("code")
        }

    def is_configured(self, code: str) -> bool:
        return code in self.configured_languages()

    def translation_model(self, code: str) -> str | None:
        entry = self.configured_languages().get(code)
        if not entry:
            return None
        return entry.get("translationModel") or None

    def has_translation_support(self, code: str) -> bool:
        return self.translation_model(code) is not None

    def create_checklist(self, code: str) -> list[ChecklistItem]:
        """Build the checklist for adding a new language.

        A single ``error`` item is returned for the first failed
        precondition: configured in ``languages.json``, has a translation
        model, not already present, and the base language exists. Otherwise
        the full list of pending steps is returned.
        """
        if not self.is_configured(code):
            return [
                ChecklistItem(
                    id="configured",
                    name="Language Configuration",
                    status="error",
                    message=(
                        f"Language '{code}' not found in languages.json. "
                        "Add language configuration first."
                    ),
                )
            ]

        if not self.has_translation_support(code):
            return [
                ChecklistItem(
                    id="translation",
                    name="Translation Support",
                    status="error",
                    message=(
                        f"No translation model available for '{code}'. "
                        "Language configured but translation not supported."
                    ),
                )
            ]

        if self.provider.language_exists(code):
            return [
                ChecklistItem(
                    id="exists",
                    name="Language Exists",
                    status="error",
                    message=f"Language '{code}' already exists in collections",
                )
            ]

        if not self.provider.language_exists(BASE_LANGUAGE):
            return [
                ChecklistItem(
                    id="base",
                    name="Base Language",
                    status="error",
                    message=f"Base language '{BASE_LANGUAGE}' not found in collections",
                )
            ]

        config_files = self.provider.list_files(BASE_LANGUAGE, "config")
        data_files = self.provider.list_files(BASE_LANGUAGE, "data")

        steps = [
            ("folder", f"Create {code} Folder", f"Create collections/{code}"),
            ("config-folder", "Create Config Folder", f"Create collections/{code}/config"),
            ("data-folder", "Create Data Folder", f"Create collections/{code}/data"),
            (
                "copy-config",
                f"Copy Config Files ({len(config_files)} files)",
                ", ".join(f"{name}.json" for name in config_files),
            ),
            (
                "translate-data",
                f"Translate Data Files ({len(data_files)} files)",
                "Translate: " + ", ".join(f"{name}.json" for name in data_files),
            ),
            ("update-config", "Update languages.json", "Add language to configuration"),
            ("sync", "Sync Changes", "Push changes to system"),
        ]
        return [
            ChecklistItem(id=step_id, name=name, status="pending", message=message)
            for step_id, name, message in steps
        ]
