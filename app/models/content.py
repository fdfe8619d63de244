from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, JSON, ForeignKey
from app.db.session import Base
from datetime import datetime


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text)
    salaryRange = Column(Text)
    # "job" or "internship"
    jobType = Column(String(50), nullable=False)
    experienceLevel = Column(String(50), nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(Text)
    responsibilities = Column(Text)
    benefits = Column(Text)
    skills = Column(JSON, default=list)
    companyLogo = Column(Text)
    companyWebsite = Column(Text)
    applicationUrl = Column(Text)
    isAIGenerated = Column(Boolean, default=False)
    isActive = Column(Boolean, default=True)
    category = Column(String(50), nullable=False)
    expiresAt = Column(DateTime, nullable=True, index=True)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text)
    author = Column(Text, nullable=False)
    category = Column(String(100))
    tags = Column(JSON, default=list)
    featuredImage = Column(Text)
    isPublished = Column(Boolean, default=True)
    readTime = Column(Integer)
    expiresAt = Column(DateTime, nullable=True, index=True)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class Roadmap(Base):
    __tablename__ = "roadmaps"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    difficulty = Column(String(50), nullable=False)
    estimatedTime = Column(Text)
    educationLevel = Column(String(50))
    technologies = Column(JSON, default=list)
    steps = Column(JSON, default=list)
    flowchartData = Column(JSON, nullable=True)
    image = Column(Text)
    isPublished = Column(Boolean, default=True)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class RoadmapReview(Base):
    __tablename__ = "roadmap_reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    roadmapId = Column(Integer, ForeignKey("roadmaps.id", ondelete="CASCADE"), nullable=False, index=True)
    userId = Column(Integer, ForeignKey("users.id"), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class Scholarship(Base):
    __tablename__ = "scholarships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    provider = Column(Text, nullable=False)
    amount = Column(Text)
    educationLevel = Column(String(50))
    eligibility = Column(Text)
    deadline = Column(Date, nullable=True)
    applicationUrl = Column(Text)
    category = Column(String(50))
    tags = Column(JSON, default=list)
    benefits = Column(Text)
    requirements = Column(Text)
    howToApply = Column(Text)
    isActive = Column(Boolean, default=True)
    featured = Column(Boolean, default=False)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)
