from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime

from app.models.portfolio import Template
from app.schemas.template import TemplateManifest


def get_templates(db: Session, skip: int = 0, limit: int = 100) -> List[Template]:
    return db.query(Template).order_by(Template.createdAt.desc()).offset(skip).limit(limit).all()


def get_active_templates(db: Session) -> List[Template]:
    return db.query(Template).filter(Template.isActive.is_(True)).order_by(Template.name).all()


def get_template(db: Session, template_id: str) -> Optional[Template]:
    return db.query(Template).filter(Template.templateId == template_id).first()


def upsert_template(db: Session, manifest: TemplateManifest, uploaded_by: Optional[int] = None) -> Template:
    """
    Create the row for an installed template, or refresh it on re-upload.
    """
    row = get_template(db, manifest.id)
    if row is None:
        row = Template(templateId=manifest.id, uploadedBy=uploaded_by)
        db.add(row)

    row.name = manifest.name
    row.description = manifest.description
    row.version = manifest.version
    row.category = manifest.category
    row.thumbnailUrl = manifest.thumbnail
    row.manifestPath = f"{manifest.id}/manifest.json"
    row.entryFile = manifest.entryFile
    row.features = list(manifest.features)
    row.isPremium = manifest.isPremium
    row.updatedAt = datetime.now()

    db.commit()
    db.refresh(row)
    return row


def set_template_active(db: Session, template_id: str, is_active: bool) -> Optional[Template]:
    row = get_template(db, template_id)
    if row is None:
        return None
    row.isActive = is_active
    row.updatedAt = datetime.now()
    db.commit()
    db.refresh(row)
    return row


def delete_template(db: Session, template_id: str) -> bool:
    row = get_template(db, template_id)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    return True
