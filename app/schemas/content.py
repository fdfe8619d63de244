"""Validation schemas mirroring the persistent tables.

These sit at the API boundary: anything written to the database passes
through one of them first.
"""
import pydantic
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional
from datetime import date, datetime


class JobCreate(BaseModel):
    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: Optional[str] = None
    salaryRange: Optional[str] = None
    jobType: Literal["job", "internship"]
    experienceLevel: str = "fresher"
    description: str = Field(min_length=1)
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    benefits: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    companyLogo: Optional[str] = None
    companyWebsite: Optional[str] = None
    applicationUrl: Optional[str] = None
    isAIGenerated: bool = False
    isActive: bool = True
    category: str = Field(min_length=1)
    expiresAt: Optional[datetime] = None


class ArticleCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = None
    author: str = Field(min_length=1)
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    featuredImage: Optional[str] = None
    isPublished: bool = True
    readTime: Optional[int] = None
    expiresAt: Optional[datetime] = None


class RoadmapStepSchema(BaseModel):
    title: str
    description: str
    resources: List[str] = Field(default_factory=list)


class RoadmapCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    content: str = Field(min_length=1)
    difficulty: Literal["beginner", "intermediate", "advanced"]
    estimatedTime: Optional[str] = None
    educationLevel: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    steps: List[RoadmapStepSchema] = Field(default_factory=list)
    flowchartData: Optional[Dict[str, Any]] = None
    image: Optional[str] = None
    isPublished: bool = True

    @pydantic.field_validator("difficulty", mode="before")
    @classmethod
    def _lower_difficulty(cls, v: Any):
        return v.strip().lower() if isinstance(v, str) else v


class DsaProblemCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    difficulty: Literal["easy", "medium", "hard"]
    category: str = Field(min_length=1)
    solution: Optional[str] = None
    hints: List[str] = Field(default_factory=list)
    timeComplexity: Optional[str] = None
    spaceComplexity: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    companies: List[str] = Field(default_factory=list)
    isPublished: bool = True

    @pydantic.field_validator("difficulty", mode="before")
    @classmethod
    def _lower_difficulty(cls, v: Any):
        return v.strip().lower() if isinstance(v, str) else v


class DsaTopicCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    difficulty: Optional[str] = None
    problemCount: int = 0
    concepts: List[str] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)


class DsaCompanyCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    logo: Optional[str] = None
    problemCount: int = 0
    difficulty: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)


class DsaSheetCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    creator: Optional[str] = None
    type: Literal["official", "public", "community"] = "public"
    problemCount: int = 0
    difficulty: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    learningPath: Optional[str] = None


class ScholarshipCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    provider: str = Field(min_length=1)
    amount: Optional[str] = None
    educationLevel: Optional[str] = None
    eligibility: Optional[str] = None
    deadline: Optional[date] = None
    applicationUrl: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    benefits: Optional[str] = None
    requirements: Optional[str] = None
    howToApply: Optional[str] = None
    isActive: bool = True
    featured: bool = False


class ResumeAnalysisCreate(BaseModel):
    userId: Optional[int] = None
    fileName: str = Field(min_length=1)
    fileUrl: str = Field(min_length=1)
    atsScore: Optional[int] = Field(default=None, ge=0, le=100)
    keywordMatches: Dict[str, Any] = Field(default_factory=dict)
    suggestions: List[str] = Field(default_factory=list)
    formatScore: Optional[str] = None
    readabilityScore: Optional[str] = None
    analysis: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class ApiResponse(BaseModel):
    status: int
    message: str
    data: Optional[Any] = None
