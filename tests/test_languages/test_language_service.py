"""Tests for language configuration and the new-language checklist."""

import shutil
from pathlib import Path

import pytest

from content_hub.content.provider import ContentProvider
from content_hub.languages.service import LanguageService


@pytest.fixture
def language_service(content_provider: ContentProvider) -> LanguageService:
    return LanguageService(content_provider)


def test_configured_languages(language_service: LanguageService) -> None:
    assert sorted(language_service.configured_languages()) == ["en", "es", "xx"]
    assert language_service.is_configured("es")
    assert not language_service.is_configured("fr")


def test_translation_model(language_service: LanguageService) -> None:
    assert language_service.translation_model("es") == "Helsinki-NLP/opus-mt-en-es"
    assert language_service.translation_model("xx") is None
    assert language_service.translation_model("fr") is None
    assert language_service.has_translation_support("es")
    assert not language_service.has_translation_support("en")


def test_checklist_unconfigured_language(language_service: LanguageService) -> None:
    checklist = language_service.create_checklist("fr")

    assert len(checklist) == 1
    assert checklist[0].id == "configured"
    assert checklist[0].status == "error"
    assert "'fr' not found in languages.json" in checklist[0].message


def test_checklist_without_translation(language_service: LanguageService) -> None:
    checklist = language_service.create_checklist("xx")

    assert [item.id for item in checklist] == ["translation"]
    assert checklist[0].status == "error"


def test_checklist_existing_language(
    language_service: LanguageService, public_dir: Path
) -> None:
    (public_dir / "collections" / "es").mkdir()

    checklist = language_service.create_checklist("es")

    assert [item.id for item in checklist] == ["exists"]
    assert checklist[0].message == "Language 'es' already exists in collections"


def test_checklist_missing_base_language(
    language_service: LanguageService, public_dir: Path
) -> None:
    shutil.rmtree(public_dir / "collections" / "en")

    checklist = language_service.create_checklist("es")

    assert [item.id for item in checklist] == ["base"]
    assert checklist[0].message == "Base language 'en' not found in collections"


def test_checklist_pending_steps(language_service: LanguageService) -> None:
    """A supported new language gets the full list of pending steps."""
    checklist = language_service.create_checklist("es")

    assert [item.id for item in checklist] == [
        "folder",
        "config-folder",
        "data-folder",
        "copy-config",
        "translate-data",
        "update-config",
        "sync",
    ]
    assert all(item.status == "pending" for item in checklist)
    by_id = {item.id: item for item in checklist}
    assert by_id["folder"].name == "Create es Folder"
    assert by_id["copy-config"].name == "Copy Config Files (1 files)"
    assert by_id["copy-config"].message == "contentLabels.json"
    assert by_id["translate-data"].name == "Translate Data Files (5 files)"
    assert by_id["translate-data"].message.startswith("Translate: achievements.json")
