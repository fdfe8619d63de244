from pydantic import BaseModel, Field
from typing import List, Optional

from app.schemas.generated import ParsedResume


class PersonalInfo(BaseModel):
    name: str
    title: str = ""
    bio: Optional[str] = None
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    profileImage: Optional[str] = None


class PortfolioProject(BaseModel):
    title: str
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    githubUrl: Optional[str] = None
    liveUrl: Optional[str] = None
    imageUrl: Optional[str] = None


class PortfolioExperience(BaseModel):
    title: str
    company: str = ""
    duration: str = ""
    description: str = ""


class PortfolioEducation(BaseModel):
    degree: str
    institution: str = ""
    year: str = ""


class SocialLinks(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None


class PortfolioData(BaseModel):
    """Everything a generated portfolio project renders."""
    personal: PersonalInfo
    skills: List[str] = Field(default_factory=list)
    projects: List[PortfolioProject] = Field(default_factory=list)
    experience: List[PortfolioExperience] = Field(default_factory=list)
    education: List[PortfolioEducation] = Field(default_factory=list)
    social: SocialLinks = Field(default_factory=SocialLinks)

    @classmethod
    def from_parsed_resume(cls, parsed: ParsedResume) -> "PortfolioData":
        """Reshape flat resume-parser output into portfolio data."""
        return cls(
            personal=PersonalInfo(
                name=parsed.name or "Your Name",
                title=parsed.title,
                bio=parsed.bio or None,
                email=parsed.email,
                phone=parsed.phone,
                website=parsed.website,
            ),
            skills=parsed.skills,
            projects=[
                PortfolioProject(
                    title=p.title,
                    description=p.description,
                    technologies=p.technologies,
                    githubUrl=p.githubUrl,
                    liveUrl=p.demoUrl,
                )
                for p in parsed.projects
            ],
            experience=[
                PortfolioExperience(
                    title=e.title, company=e.company, duration=e.duration, description=e.description
                )
                for e in parsed.experience
            ],
            education=[
                PortfolioEducation(degree=e.degree, institution=e.institution, year=e.year)
                for e in parsed.education
            ],
            social=SocialLinks(github=parsed.github, linkedin=parsed.linkedin),
        )


class PortfolioDownloadRequest(BaseModel):
    portfolioData: PortfolioData
    templateId: str = Field(min_length=1)
