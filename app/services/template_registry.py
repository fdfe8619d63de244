"""JSON registry of installed templates, stored as ``registry.json`` in the templates root."""
from datetime import datetime
from pathlib import Path
from typing import List, Optional
import logging

from app.core.config import settings
from app.core.exceptions import TemplateProcessingError
from app.schemas.template import TemplateManifest, TemplateRegistry, TemplateRegistryEntry

logger = logging.getLogger(__name__)

REGISTRY_FILENAME = "registry.json"


def registry_path(templates_dir: Optional[Path] = None) -> Path:
    return Path(templates_dir or settings.TEMPLATES_DIR) / REGISTRY_FILENAME


def load_registry(templates_dir: Optional[Path] = None) -> TemplateRegistry:
    """Read the registry; a missing file is an empty registry."""
    path = registry_path(templates_dir)
    if not path.exists():
        return TemplateRegistry()
    try:
        return TemplateRegistry.model_validate_json(path.read_text(encoding="utf-8"))
    except Exception as e:
        logger.error("Unreadable template registry at %s: %s", path, e)
        raise TemplateProcessingError(f"Failed to load template registry: {str(e)}") from e


def save_registry(registry: TemplateRegistry, templates_dir: Optional[Path] = None) -> None:
    path = registry_path(templates_dir)
    registry.lastUpdated = datetime.now()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(registry.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        logger.error("Could not write template registry at %s: %s", path, e)
        raise TemplateProcessingError(f"Failed to save template registry: {str(e)}") from e


def add_template_to_registry(
    manifest: TemplateManifest,
    templates_dir: Optional[Path] = None,
) -> TemplateRegistryEntry:
    """Insert or replace the entry for ``manifest.id``.

    Re-registering keeps the original upload time and active flag.
    """
    registry = load_registry(templates_dir)
    now = datetime.now()
    existing = next((t for t in registry.templates if t.id == manifest.id), None)

    entry = TemplateRegistryEntry(
        id=manifest.id,
        name=manifest.name,
        version=manifest.version,
        description=manifest.description,
        category=manifest.category,
        thumbnail=manifest.thumbnail,
        manifestPath=f"{manifest.id}/manifest.json",
        entryPath=f"{manifest.id}/{manifest.entryFile}",
        features=manifest.features,
        isPremium=manifest.isPremium,
        isActive=existing.isActive if existing else True,
        uploadedAt=existing.uploadedAt if existing else now,
        updatedAt=now,
    )
    registry.templates = [t for t in registry.templates if t.id != manifest.id] + [entry]
    save_registry(registry, templates_dir)
    logger.info("Registered template %s v%s", manifest.id, manifest.version)
    return entry


def remove_template_from_registry(template_id: str, templates_dir: Optional[Path] = None) -> bool:
    """Drop an entry. Returns False if the id was not registered."""
    registry = load_registry(templates_dir)
    remaining = [t for t in registry.templates if t.id != template_id]
    if len(remaining) == len(registry.templates):
        return False
    registry.templates = remaining
    save_registry(registry, templates_dir)
    logger.info("Unregistered template %s", template_id)
    return True


def get_active_templates(templates_dir: Optional[Path] = None) -> List[TemplateRegistryEntry]:
    return [t for t in load_registry(templates_dir).templates if t.isActive]


def get_template_by_id(template_id: str, templates_dir: Optional[Path] = None) -> Optional[TemplateRegistryEntry]:
    return next((t for t in load_registry(templates_dir).templates if t.id == template_id), None)


def set_template_active(
    template_id: str,
    is_active: bool,
    templates_dir: Optional[Path] = None,
) -> Optional[TemplateRegistryEntry]:
    registry = load_registry(templates_dir)
    for entry in registry.templates:
        if entry.id == template_id:
            entry.isActive = is_active
            entry.updatedAt = datetime.now()
            save_registry(registry, templates_dir)
            return entry
    return None
