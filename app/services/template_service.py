"""Validate, install and delete uploaded portfolio template archives.

A template archive is a zip with ``manifest.json`` at its root. Installing
extracts it to ``<templates root>/<manifest id>/`` and records it in the
registry.
"""
from pathlib import Path, PurePosixPath
from typing import List, Optional
import json
import logging
import shutil
import zipfile

import pydantic

from app.core.config import settings
from app.core.exceptions import TemplateProcessingError, TemplateValidationError
from app.schemas.template import TemplateManifest
from app.services import template_registry

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.json"
REQUIRED_MANIFEST_FIELDS = ("id", "name", "version", "category", "entryFile")


def safe_member_path(name: str) -> Optional[PurePosixPath]:
    """Normalized relative path of an archive entry, or None if it would escape the root."""
    if "\x00" in name:
        return None
    normalized = name.replace("\\", "/")
    path = PurePosixPath(normalized)
    if path.is_absolute() or (path.parts and path.parts[0].endswith(":")):
        return None
    parts: List[str] = []
    for part in path.parts:
        if part in ("", "."):
            continue
        if part == "..":
            if not parts:
                return None
            parts.pop()
            continue
        parts.append(part)
    return PurePosixPath(*parts) if parts else PurePosixPath(".")


def _check_limits(archive_path: Path, zf: zipfile.ZipFile) -> None:
    infos = zf.infolist()
    max_bytes = settings.MAX_TEMPLATE_ARCHIVE_BYTES
    if archive_path.stat().st_size > max_bytes:
        raise TemplateValidationError(f"Template archive exceeds the {max_bytes} byte limit")
    if len(infos) > settings.MAX_TEMPLATE_ENTRIES:
        raise TemplateValidationError(
            f"Template archive has {len(infos)} entries; at most {settings.MAX_TEMPLATE_ENTRIES} are allowed"
        )
    if sum(info.file_size for info in infos) > max_bytes:
        raise TemplateValidationError(f"Template archive expands beyond the {max_bytes} byte limit")


def _check_member_paths(zf: zipfile.ZipFile) -> None:
    unsafe = [name for name in zf.namelist() if safe_member_path(name) is None]
    if unsafe:
        raise TemplateValidationError(f"Template archive contains unsafe paths: {', '.join(unsafe[:5])}")


def extract_template(archive_path) -> TemplateManifest:
    """Validate a template archive and return its manifest.

    Raises TemplateValidationError with a specific message for every kind of
    bad archive; nothing is written to disk.
    """
    archive_path = Path(archive_path)
    if not zipfile.is_zipfile(archive_path):
        raise TemplateValidationError("Uploaded file is not a valid zip archive")

    try:
        with zipfile.ZipFile(archive_path) as zf:
            _check_limits(archive_path, zf)
            _check_member_paths(zf)

            names = set(zf.namelist())
            if MANIFEST_NAME not in names:
                raise TemplateValidationError("manifest.json not found in template archive root")
            try:
                raw = json.loads(zf.read(MANIFEST_NAME).decode("utf-8"))
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                raise TemplateValidationError(f"manifest.json is not valid JSON: {str(e)}")
    except zipfile.BadZipFile as e:
        raise TemplateValidationError(f"Corrupt template archive: {str(e)}")

    if not isinstance(raw, dict):
        raise TemplateValidationError("manifest.json must contain a JSON object")

    missing = [f for f in REQUIRED_MANIFEST_FIELDS if not raw.get(f)]
    if missing:
        raise TemplateValidationError(f"Invalid manifest.json: missing required fields: {', '.join(missing)}")

    try:
        manifest = TemplateManifest.model_validate(raw)
    except pydantic.ValidationError as e:
        raise TemplateValidationError(f"Invalid manifest.json: {str(e)}")

    entry = safe_member_path(manifest.entryFile)
    if entry is None or str(entry) not in names:
        raise TemplateValidationError(f"Entry file '{manifest.entryFile}' not found in template archive")

    return manifest


def install_template(archive_path, manifest: TemplateManifest, templates_dir: Optional[Path] = None) -> Path:
    """Extract the archive into ``<root>/<manifest.id>``, replacing any previous install."""
    root = Path(templates_dir or settings.TEMPLATES_DIR)
    target = root / manifest.id

    try:
        if target.exists():
            shutil.rmtree(target)
        target.mkdir(parents=True)
        resolved_target = target.resolve()

        with zipfile.ZipFile(archive_path) as zf:
            for info in zf.infolist():
                rel = safe_member_path(info.filename)
                if rel is None:
                    raise TemplateValidationError(f"Template archive contains unsafe path: {info.filename}")
                dest = (target / rel).resolve()
                if dest != resolved_target and resolved_target not in dest.parents:
                    raise TemplateValidationError(f"Template archive contains unsafe path: {info.filename}")
                if info.is_dir():
                    dest.mkdir(parents=True, exist_ok=True)
                    continue
                dest.parent.mkdir(parents=True, exist_ok=True)
                with zf.open(info) as src, open(dest, "wb") as out:
                    shutil.copyfileobj(src, out)

        template_registry.add_template_to_registry(manifest, root)
    except TemplateValidationError:
        shutil.rmtree(target, ignore_errors=True)
        raise
    except Exception as e:
        logger.error("Installing template %s failed: %s", manifest.id, e)
        raise TemplateProcessingError(f"Failed to install template: {str(e)}") from e

    logger.info("Installed template %s at %s", manifest.id, target)
    return target


def delete_template(template_id: str, templates_dir: Optional[Path] = None) -> None:
    """Remove an installed template's files and registry entry. Unknown ids are a no-op."""
    root = Path(templates_dir or settings.TEMPLATES_DIR)
    if safe_member_path(template_id) in (None, PurePosixPath(".")) or len(PurePosixPath(template_id).parts) != 1:
        raise TemplateValidationError(f"Invalid template id: {template_id!r}")

    try:
        shutil.rmtree(root / template_id)
        logger.info("Deleted template files for %s", template_id)
    except FileNotFoundError:
        logger.info("Template %s has no installed files", template_id)
    except Exception as e:
        logger.error("Deleting template %s failed: %s", template_id, e)
        raise TemplateProcessingError(f"Failed to delete template files: {str(e)}") from e

    template_registry.remove_template_from_registry(template_id, root)
