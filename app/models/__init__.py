from .user import User, SolvedProblem
from .content import Job, Article, Roadmap, RoadmapReview, Scholarship
from .dsa import DsaProblem, DsaTopic, DsaCompany, DsaSheet
from .portfolio import Portfolio, PortfolioShare, Template
from .resume import ResumeAnalysis

__all__ = [
    "User",
    "SolvedProblem",
    "Job",
    "Article",
    "Roadmap",
    "RoadmapReview",
    "Scholarship",
    "DsaProblem",
    "DsaTopic",
    "DsaCompany",
    "DsaSheet",
    "Portfolio",
    "PortfolioShare",
    "Template",
    "ResumeAnalysis",
]
