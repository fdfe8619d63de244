import pydantic
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime


class TemplateManifest(BaseModel):
    """Contents of the ``manifest.json`` at the root of a template archive."""
    id: str
    name: str
    version: str
    category: str
    entryFile: str
    description: Optional[str] = None
    author: Optional[str] = None
    thumbnail: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    isPremium: bool = False
    dependencies: Optional[Dict[str, str]] = None

    model_config = pydantic.ConfigDict(extra="allow")

    @pydantic.field_validator("id")
    @classmethod
    def _id_is_single_path_segment(cls, v: str) -> str:
        # The id names the install directory under the templates root
        if v in (".", "..") or "/" in v or "\\" in v or "\x00" in v:
            raise ValueError(f"template id {v!r} is not a valid directory name")
        return v


class TemplateRegistryEntry(BaseModel):
    id: str
    name: str
    version: str
    description: Optional[str] = None
    category: str
    thumbnail: Optional[str] = None
    manifestPath: str
    entryPath: str
    features: List[str] = Field(default_factory=list)
    isPremium: bool = False
    isActive: bool = True
    uploadedAt: datetime
    updatedAt: datetime


class TemplateRegistry(BaseModel):
    version: str = "1.0.0"
    lastUpdated: datetime = Field(default_factory=datetime.now)
    templates: List[TemplateRegistryEntry] = Field(default_factory=list)
