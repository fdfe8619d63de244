from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, ForeignKey
from app.db.session import Base
from datetime import datetime


class ResumeAnalysis(Base):
    __tablename__ = "resume_analyses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    userId = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    fileName = Column(Text, nullable=False)
    fileUrl = Column(Text, nullable=False)
    atsScore = Column(Integer)
    keywordMatches = Column(JSON, default=dict)
    suggestions = Column(JSON, default=list)
    formatScore = Column(String(50))
    readabilityScore = Column(String(50))
    analysis = Column(Text)
    # industryInsights, skillsAnalysis, experienceAnalysis, improvementPriority
    details = Column(JSON, nullable=True)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)
