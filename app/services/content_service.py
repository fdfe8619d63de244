"""Persist generated content as regular rows.

Generated payloads go through the same create schemas as hand-written content,
so a model response that does not fit a table is rejected before it is stored.
"""
from typing import Any, Dict
import logging

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.models import Article, DsaCompany, DsaProblem, DsaSheet, DsaTopic, Job, Roadmap, Scholarship
from app.schemas.content import (
    ArticleCreate,
    DsaCompanyCreate,
    DsaProblemCreate,
    DsaSheetCreate,
    DsaTopicCreate,
    JobCreate,
    RoadmapCreate,
    ScholarshipCreate,
)

logger = logging.getLogger(__name__)

PERSISTABLE_TYPES = {
    "job": (JobCreate, Job),
    "internship": (JobCreate, Job),
    "article": (ArticleCreate, Article),
    "roadmap": (RoadmapCreate, Roadmap),
    "dsa-problem": (DsaProblemCreate, DsaProblem),
    "dsa-topic": (DsaTopicCreate, DsaTopic),
    "dsa-company": (DsaCompanyCreate, DsaCompany),
    "dsa-sheet": (DsaSheetCreate, DsaSheet),
    "scholarship": (ScholarshipCreate, Scholarship),
}

# Used only when the model left the field empty
FIELD_DEFAULTS = {
    "job": {"experienceLevel": "fresher", "category": "technology"},
    "internship": {"experienceLevel": "fresher", "category": "technology"},
    "article": {"author": "Talentd Editorial"},
}


def _prepare(content_type: str, generated: BaseModel) -> Dict[str, Any]:
    data = generated.model_dump()
    for field, default in FIELD_DEFAULTS.get(content_type, {}).items():
        if not data.get(field):
            data[field] = default
    if content_type in ("job", "internship"):
        data["jobType"] = content_type
        data["isAIGenerated"] = True
    return data


def persist_generated_content(db: Session, content_type: str, generated: BaseModel):
    """Validate generated content against its create schema and insert it.

    Raises ValueError for content types without a table and for payloads the
    create schema rejects (pydantic.ValidationError is a ValueError).
    """
    if content_type not in PERSISTABLE_TYPES:
        raise ValueError(f"Content type '{content_type}' cannot be saved")

    schema, model = PERSISTABLE_TYPES[content_type]
    validated = schema.model_validate(_prepare(content_type, generated))

    row = model(**validated.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("Saved generated %s as row %s", content_type, row.id)
    return row
