"""Typed shapes of model-generated content.

Every JSON document returned by the model is validated against one of these
before it reaches a caller. Fields mirror the JSON the prompts ask for, so
names stay camelCase. Extra keys the model adds are kept.
"""
from datetime import date
from typing import Any, Dict, List, Optional

import pydantic
from pydantic import BaseModel, Field


class _Generated(BaseModel):
    model_config = pydantic.ConfigDict(extra="allow")


# --- Flowchart graph -------------------------------------------------------

class NodePosition(BaseModel):
    x: float = 0
    y: float = 0


class FlowchartNodeData(_Generated):
    label: str = ""
    description: str = ""
    content: str = ""
    resources: List[str] = Field(default_factory=list)
    redirectUrl: Optional[str] = None
    color: Optional[str] = None


class FlowchartNode(_Generated):
    id: str
    type: str = "default"
    position: NodePosition = Field(default_factory=NodePosition)
    data: FlowchartNodeData = Field(default_factory=FlowchartNodeData)


class FlowchartEdge(_Generated):
    id: str
    source: str
    target: str
    type: str = "smoothstep"
    animated: bool = True
    style: Optional[Dict[str, Any]] = None


class FlowchartGraph(_Generated):
    nodes: List[FlowchartNode] = Field(default_factory=list)
    edges: List[FlowchartEdge] = Field(default_factory=list)

    @pydantic.model_validator(mode="after")
    def _edges_reference_known_nodes(self):
        node_ids = [node.id for node in self.nodes]
        if len(node_ids) != len(set(node_ids)):
            raise ValueError("flowchart contains duplicate node ids")
        known = set(node_ids)
        dangling = [
            edge.id for edge in self.edges
            if edge.source not in known or edge.target not in known
        ]
        if dangling:
            raise ValueError(f"flowchart edges reference unknown nodes: {dangling}")
        return self


# --- Per content type ------------------------------------------------------

class GeneratedJob(_Generated):
    title: str = ""
    company: str = ""
    location: str = ""
    salaryRange: str = ""
    jobType: str = ""
    experienceLevel: str = ""
    description: str = ""
    requirements: str = ""
    responsibilities: str = ""
    benefits: str = ""
    skills: List[str] = Field(default_factory=list)
    companyWebsite: Optional[str] = None
    applicationUrl: Optional[str] = None
    companyLogo: Optional[str] = None
    generatedImages: List[str] = Field(default_factory=list)
    workflowImages: List[str] = Field(default_factory=list)
    mindmapImages: List[str] = Field(default_factory=list)
    isAIGenerated: bool = True


class GeneratedArticle(_Generated):
    title: str = ""
    content: str = ""
    excerpt: str = ""
    author: str = ""
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    readTime: Optional[int] = None
    featuredImage: Optional[str] = None


class RoadmapStep(_Generated):
    title: str = ""
    description: str = ""
    resources: List[str] = Field(default_factory=list)


class GeneratedRoadmap(_Generated):
    title: str = ""
    description: str = ""
    content: str = ""
    difficulty: str = ""
    estimatedTime: str = ""
    educationLevel: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    steps: List[RoadmapStep] = Field(default_factory=list)
    image: Optional[str] = None
    flowchartData: FlowchartGraph = Field(default_factory=FlowchartGraph)


class GeneratedDsaProblem(_Generated):
    title: str = ""
    description: str = ""
    difficulty: str = ""
    category: str = ""
    solution: str = ""
    hints: List[str] = Field(default_factory=list)
    timeComplexity: str = ""
    spaceComplexity: str = ""
    tags: List[str] = Field(default_factory=list)
    companies: List[str] = Field(default_factory=list)


class GeneratedDsaTopic(_Generated):
    name: str = ""
    description: str = ""
    difficulty: str = ""
    problemCount: int = 0
    concepts: List[str] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)


class GeneratedDsaCompany(_Generated):
    name: str = ""
    description: str = ""
    logo: Optional[str] = None
    problemCount: int = 0
    difficulty: str = ""
    categories: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)


class GeneratedDsaSheet(_Generated):
    name: str = ""
    description: str = ""
    creator: str = ""
    type: str = "public"
    problemCount: int = 0
    difficulty: str = ""
    topics: List[str] = Field(default_factory=list)
    learningPath: str = ""


class PortfolioCode(_Generated):
    html: str = ""
    css: str = ""
    js: str = ""


class GeneratedAssets(_Generated):
    profileImage: Optional[str] = None
    projectImages: List[str] = Field(default_factory=list)
    companyLogos: List[str] = Field(default_factory=list)
    skillIcons: List[str] = Field(default_factory=list)
    backgroundImages: List[str] = Field(default_factory=list)


class PortfolioAnimations(_Generated):
    heroAnimations: str = ""
    scrollAnimations: str = ""
    hoverEffects: str = ""
    transitionEffects: str = ""


class EnhancedFeatures(_Generated):
    contactForm: str = ""
    skillsVisualization: str = ""
    projectGallery: str = ""
    resumeDownload: str = ""


class GeneratedPortfolioWebsite(_Generated):
    portfolioData: Dict[str, Any] = Field(default_factory=dict)
    portfolioCode: PortfolioCode = Field(default_factory=PortfolioCode)
    generatedAssets: GeneratedAssets = Field(default_factory=GeneratedAssets)
    animations: PortfolioAnimations = Field(default_factory=PortfolioAnimations)
    enhancedFeatures: EnhancedFeatures = Field(default_factory=EnhancedFeatures)


class ColorScheme(_Generated):
    primary: str = ""
    secondary: str = ""
    accent: str = ""
    background: str = ""


class Typography(_Generated):
    headingFont: str = ""
    bodyFont: str = ""


class AdvertisingAssets(_Generated):
    logoUrl: Optional[str] = None
    backgroundImage: Optional[str] = None
    iconSet: List[str] = Field(default_factory=list)


class GeneratedAdvertisingTemplate(_Generated):
    templateName: str = ""
    templateType: str = ""
    htmlCode: str = ""
    cssCode: str = ""
    copyText: str = ""
    colorScheme: ColorScheme = Field(default_factory=ColorScheme)
    typography: Typography = Field(default_factory=Typography)
    assets: AdvertisingAssets = Field(default_factory=AdvertisingAssets)
    brandGuidelines: str = ""
    downloadFiles: List[str] = Field(default_factory=list)


class GeneratedScholarship(_Generated):
    title: str = ""
    description: str = ""
    provider: str = ""
    amount: str = ""
    educationLevel: str = ""
    eligibility: str = ""
    deadline: Optional[date] = None
    applicationUrl: Optional[str] = None
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    benefits: str = ""
    requirements: str = ""
    howToApply: str = ""
    isActive: bool = True
    featured: bool = False


GENERATED_MODELS = {
    "job": GeneratedJob,
    "internship": GeneratedJob,
    "article": GeneratedArticle,
    "roadmap": GeneratedRoadmap,
    "dsa-problem": GeneratedDsaProblem,
    "dsa-topic": GeneratedDsaTopic,
    "dsa-company": GeneratedDsaCompany,
    "dsa-sheet": GeneratedDsaSheet,
    "portfolio-website": GeneratedPortfolioWebsite,
    "advertising-template": GeneratedAdvertisingTemplate,
    "scholarship": GeneratedScholarship,
}


# --- Resume analysis -------------------------------------------------------
# Also sent to the model as the response schema, so these models stay free of
# constraints and free-form dicts.

class KeywordMatches(BaseModel):
    matched: List[str]
    missing: List[str]
    total: int


class IndustryInsights(BaseModel):
    detectedIndustry: str
    industrySpecificTips: List[str]
    salaryInsights: str


class SkillsAnalysis(BaseModel):
    technicalSkills: List[str]
    softSkills: List[str]
    missingSkills: List[str]


class ExperienceAnalysis(BaseModel):
    totalYears: float
    careerProgression: str
    gapAnalysis: List[str]


class ImprovementPriority(BaseModel):
    critical: List[str]
    important: List[str]
    nice_to_have: List[str]


class ResumeAnalysisResult(BaseModel):
    atsScore: int
    keywordMatches: KeywordMatches
    suggestions: List[str]
    formatScore: str
    readabilityScore: str
    analysis: str
    industryInsights: IndustryInsights
    skillsAnalysis: SkillsAnalysis
    experienceAnalysis: ExperienceAnalysis
    improvementPriority: ImprovementPriority

    @pydantic.field_validator("atsScore", mode="before")
    @classmethod
    def _clamp_ats_score(cls, v: Any) -> int:
        try:
            score = round(float(v))
        except (TypeError, ValueError):
            raise ValueError(f"atsScore must be a number, got {v!r}")
        return max(0, min(100, score))


class ParsedResumeProject(_Generated):
    title: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    demoUrl: Optional[str] = None
    githubUrl: Optional[str] = None


class ParsedResumeExperience(_Generated):
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class ParsedResumeEducation(_Generated):
    degree: str = ""
    institution: str = ""
    year: str = ""
    grade: Optional[str] = None


class ParsedResume(_Generated):
    """Flat portfolio fields pulled out of resume text."""
    name: str = ""
    title: str = ""
    bio: str = ""
    email: str = ""
    phone: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    projects: List[ParsedResumeProject] = Field(default_factory=list)
    experience: List[ParsedResumeExperience] = Field(default_factory=list)
    education: List[ParsedResumeEducation] = Field(default_factory=list)
