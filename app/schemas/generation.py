"""Request models for AI content generation.

Each content type carries its own ``details`` record holding only the flags
that type's prompt actually reads. Unknown flags are rejected instead of being
silently ignored.
"""
from typing import Annotated, Any, Dict, Literal, Optional, Union

import pydantic
from pydantic import BaseModel, Field, TypeAdapter


class _Details(BaseModel):
    model_config = pydantic.ConfigDict(extra="forbid")


class JobDetails(_Details):
    company: Optional[str] = None
    role: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = None
    fetchFromWeb: bool = False
    includeCompanyLogo: bool = False
    generateImages: bool = False
    generateWorkflows: bool = False
    generateMindmap: bool = False
    includeAnimations: bool = False


class ArticleDetails(_Details):
    category: Optional[str] = None
    fetchFromWeb: bool = False


class RoadmapDetails(_Details):
    difficulty: Optional[str] = None
    educationLevel: Optional[str] = None
    fetchFromWeb: bool = False


class DsaProblemDetails(_Details):
    difficulty: Optional[str] = None
    category: Optional[str] = None
    fetchFromWeb: bool = False


class DsaTopicDetails(_Details):
    pass


class DsaListingDetails(_Details):
    """Shared by dsa-company and dsa-sheet requests."""
    difficulty: Optional[str] = None
    category: Optional[str] = None


class PortfolioWebsiteDetails(_Details):
    portfolioData: Optional[Dict[str, Any]] = None
    fetchFromWeb: bool = False
    generateImages: bool = False
    generateAnimations: bool = False
    generateLogos: bool = False
    customStyling: bool = False
    generateWorkflows: bool = False
    generateMindmap: bool = False


class AdvertisingTemplateDetails(_Details):
    templateType: Optional[str] = None
    contentData: Optional[Dict[str, Any]] = None
    generateLogos: bool = False
    colorGrading: bool = False


class ScholarshipDetails(_Details):
    educationLevel: Optional[str] = None
    category: Optional[str] = None
    fetchFromWeb: bool = False


class JobRequest(BaseModel):
    type: Literal["job"] = "job"
    prompt: str = ""
    details: JobDetails = Field(default_factory=JobDetails)


class InternshipRequest(BaseModel):
    type: Literal["internship"] = "internship"
    prompt: str = ""
    details: JobDetails = Field(default_factory=JobDetails)


class ArticleRequest(BaseModel):
    type: Literal["article"] = "article"
    prompt: str = ""
    details: ArticleDetails = Field(default_factory=ArticleDetails)


class RoadmapRequest(BaseModel):
    type: Literal["roadmap"] = "roadmap"
    prompt: str = ""
    details: RoadmapDetails = Field(default_factory=RoadmapDetails)


class DsaProblemRequest(BaseModel):
    type: Literal["dsa-problem"] = "dsa-problem"
    prompt: str = ""
    details: DsaProblemDetails = Field(default_factory=DsaProblemDetails)


class DsaTopicRequest(BaseModel):
    type: Literal["dsa-topic"] = "dsa-topic"
    prompt: str = ""
    details: DsaTopicDetails = Field(default_factory=DsaTopicDetails)


class DsaCompanyRequest(BaseModel):
    type: Literal["dsa-company"] = "dsa-company"
    prompt: str = ""
    details: DsaListingDetails = Field(default_factory=DsaListingDetails)


class DsaSheetRequest(BaseModel):
    type: Literal["dsa-sheet"] = "dsa-sheet"
    prompt: str = ""
    details: DsaListingDetails = Field(default_factory=DsaListingDetails)


class PortfolioWebsiteRequest(BaseModel):
    type: Literal["portfolio-website"] = "portfolio-website"
    prompt: str = ""
    details: PortfolioWebsiteDetails = Field(default_factory=PortfolioWebsiteDetails)


class AdvertisingTemplateRequest(BaseModel):
    type: Literal["advertising-template"] = "advertising-template"
    prompt: str = ""
    details: AdvertisingTemplateDetails = Field(default_factory=AdvertisingTemplateDetails)


class ScholarshipRequest(BaseModel):
    type: Literal["scholarship"] = "scholarship"
    prompt: str = ""
    details: ScholarshipDetails = Field(default_factory=ScholarshipDetails)


ContentGenerationRequest = Annotated[
    Union[
        JobRequest,
        InternshipRequest,
        ArticleRequest,
        RoadmapRequest,
        DsaProblemRequest,
        DsaTopicRequest,
        DsaCompanyRequest,
        DsaSheetRequest,
        PortfolioWebsiteRequest,
        AdvertisingTemplateRequest,
        ScholarshipRequest,
    ],
    Field(discriminator="type"),
]

CONTENT_TYPES = (
    "job",
    "internship",
    "article",
    "roadmap",
    "dsa-problem",
    "dsa-topic",
    "dsa-company",
    "dsa-sheet",
    "portfolio-website",
    "advertising-template",
    "scholarship",
)

_request_adapter = TypeAdapter(ContentGenerationRequest)


def parse_generation_request(data: Dict[str, Any]):
    """Validate a raw dict into the matching request variant.

    Raises pydantic.ValidationError on an unknown type or an unexpected flag.
    """
    return _request_adapter.validate_python(data)


class FlowchartRequest(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    technologies: list[str] = Field(default_factory=list)
    difficulty: str = "beginner"


class ImproveResumeRequest(BaseModel):
    originalText: str = Field(min_length=1)
    suggestions: list[str] = Field(default_factory=list)
    keywordMatches: list[str] = Field(default_factory=list)
