"""
Tests for the on-disk template registry
"""
import warnings
from datetime import datetime

import pytest

from app.core.exceptions import TemplateProcessingError
from app.schemas.template import TemplateManifest
from app.services import template_registry


def manifest(template_id="dev-folio", **overrides):
    data = {
        "id": template_id,
        "name": "Dev Folio",
        "version": "1.0.0",
        "category": "developer",
        "entryFile": "index.html",
    }
    data.update(overrides)
    return TemplateManifest(**data)


def test_missing_registry_is_empty(tmp_path):
    registry = template_registry.load_registry(tmp_path)

    assert registry.templates == []
    assert not (tmp_path / "registry.json").exists()


def test_add_and_get_template(tmp_path):
    entry = template_registry.add_template_to_registry(manifest(features=["blog"]), tmp_path)

    assert entry.manifestPath == "dev-folio/manifest.json"
    assert entry.entryPath == "dev-folio/index.html"
    assert (tmp_path / "registry.json").exists()

    loaded = template_registry.get_template_by_id("dev-folio", tmp_path)
    assert loaded.features == ["blog"]
    assert loaded.isActive is True


def test_re_adding_keeps_upload_time_and_active_flag(tmp_path):
    first = template_registry.add_template_to_registry(manifest(), tmp_path)
    template_registry.set_template_active("dev-folio", False, tmp_path)

    second = template_registry.add_template_to_registry(manifest(version="1.1.0"), tmp_path)

    assert second.uploadedAt == first.uploadedAt
    assert second.version == "1.1.0"
    assert second.isActive is False
    assert len(template_registry.load_registry(tmp_path).templates) == 1


def test_active_templates_excludes_inactive(tmp_path):
    template_registry.add_template_to_registry(manifest("one"), tmp_path)
    template_registry.add_template_to_registry(manifest("two"), tmp_path)
    template_registry.set_template_active("two", False, tmp_path)

    active = template_registry.get_active_templates(tmp_path)

    assert [t.id for t in active] == ["one"]


def test_set_active_on_unknown_id_returns_none(tmp_path):
    assert template_registry.set_template_active("ghost", True, tmp_path) is None


def test_remove_template(tmp_path):
    template_registry.add_template_to_registry(manifest(), tmp_path)

    assert template_registry.remove_template_from_registry("dev-folio", tmp_path) is True
    assert template_registry.remove_template_from_registry("dev-folio", tmp_path) is False
    assert template_registry.get_template_by_id("dev-folio", tmp_path) is None


def test_corrupt_registry_raises_processing_error(tmp_path):
    (tmp_path / "registry.json").write_text("{broken")

    with pytest.raises(TemplateProcessingError, match="Failed to load template registry"):
        template_registry.load_registry(tmp_path)


def test_timestamps_use_local_naive_time(tmp_path):
    before = datetime.now()
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        template_registry.add_template_to_registry(manifest(), tmp_path)
        entry = template_registry.set_template_active("dev-folio", False, tmp_path)

    assert entry.updatedAt.tzinfo is None
    assert before <= entry.uploadedAt <= entry.updatedAt <= datetime.now()
